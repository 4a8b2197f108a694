"""Entity: Product."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

CODE_MAX_LENGTH = 50
NAME_MAX_LENGTH = 100
# Largest id a 64-bit INTEGER primary key can hold
MAX_ID = 2**63 - 1


def normalize_code(raw: str) -> str:
    """Trim surrounding whitespace and upper-case a product code."""
    return raw.strip().upper()


class Product(BaseModel):
    """Product entity representing a verifiable product code.

    This is the domain model handed between the service and the API. The
    numeric identifier is assigned by the database; identity is the code.
    """

    id: int | None = Field(default=None, description="Database-assigned identifier")
    code: str = Field(description="Unique product code")
    name: str = Field(description="Product display name")
    created_at: datetime | None = Field(
        default=None, description="Set once when the product is first stored"
    )

    def __eq__(self, other: Any) -> bool:
        """Compare products by code, ignoring id and timestamps."""
        if not isinstance(other, Product):
            return False

        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)
