"""Test configuration for the product code verifier."""

import os
from pathlib import Path

# Must be set before code_verifier loads its configuration
os.environ.setdefault("CONFIG_FILE", str(Path(__file__).parent / "config.test.yaml"))
os.environ.setdefault("APP_ENVIRONMENT", "test")

from tests.fixtures.core import (  # noqa: E402, F401
    client,
    database_service,
    product_repo,
    product_service,
    session,
    test_config,
    widget,
)
