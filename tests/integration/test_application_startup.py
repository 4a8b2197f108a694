"""Integration tests for application lifecycle and startup behavior."""

from fastapi.testclient import TestClient

import code_verifier.api.http.app as application
from code_verifier.api.http.app_data import ApplicationDependencies
from code_verifier.runtime.config.config_data import ConfigData, DatabaseConfig
from code_verifier.runtime.context import with_context


class TestApplicationStartup:
    """Test application startup and shutdown hooks."""

    def test_lifespan_wires_database(self):
        with TestClient(application.app) as client:
            deps = application.app.state.app_dependencies
            assert isinstance(deps, ApplicationDependencies)

            response = client.get("/health/ready")
            assert response.status_code == 200
            assert response.json()["status"] == "ready"

    def test_full_flow_through_the_running_app(self):
        with TestClient(application.app) as client:
            created = client.post(
                "/api/products/", json={"code": "flow1", "name": "Flow product"}
            )
            assert created.status_code == 201

            page = client.post("/verify-code", data={"code": " FLOW1 "})
            assert page.status_code == 200
            assert "Flow product" in page.text

    def test_startup_skips_table_creation_when_disabled(self, monkeypatch):
        calls = []
        monkeypatch.setattr(
            application.DbSessionService, "create_all", lambda self: calls.append(self)
        )

        override = ConfigData(database=DatabaseConfig(url="sqlite://", create_tables=False))
        with with_context(override):
            application.startup(application.app)
        try:
            assert calls == []
        finally:
            application.shutdown(application.app)

    def test_shutdown_without_startup_is_safe(self):
        class _State:
            pass

        class _App:
            state = _State()

        application.shutdown(_App())
