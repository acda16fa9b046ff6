"""Pytest configuration and fixtures for authz tests."""

from typing import List, Optional

import pytest
from fastapi import Depends, FastAPI, Request
from fastapi.testclient import TestClient

from authz import AuthZ, AuthZSettings, Role, RoleContext


TEST_SECRET = "test-secret-with-enough-length-for-hs256"


@pytest.fixture
def global_roles() -> List[Role]:
    """Administrator role granting everything globally."""
    return [
        Role(
            id="ADMIN",
            name="Administrator",
            description="Administrator role",
            context=RoleContext.GLOBAL,
            permissions=["User.ReadWrite.All", "Report.ReadWrite.All"],
        )
    ]


@pytest.fixture
def local_roles() -> List[Role]:
    """Local role with mixed resource grants."""
    return [
        Role(
            id="LOCAL",
            name="Local role",
            description="Local role",
            context=RoleContext.LOCAL,
            permissions=["User.ReadWrite.All", "Report.Read.All", "Report.ReadWrite.someReport"],
        )
    ]


@pytest.fixture
def mixed_roles(global_roles, local_roles) -> List[Role]:
    """Roles spanning both contexts."""
    return [
        *global_roles,
        *local_roles,
        Role(
            id="AUDITOR",
            name="Auditor",
            context=RoleContext.LOCAL,
            permissions=["Audit.Read", "Ledger.Read.2024", "Ledger.Read.2025"],
        ),
    ]


@pytest.fixture
def settings() -> AuthZSettings:
    """Settings with a fixed secret and default endpoints."""
    return AuthZSettings(secret=TEST_SECRET, exempt_paths=["/health"])


@pytest.fixture
def roles_by_user(global_roles, local_roles, mixed_roles):
    return {
        "global": global_roles,
        "local": local_roles,
        "mixed": mixed_roles,
    }


@pytest.fixture
def authz(settings, roles_by_user) -> AuthZ:
    """AuthZ identifying users by the ``x-user`` header."""

    def user_identifier(request: Request) -> Optional[str]:
        user = request.headers.get("x-user")
        if user == "broken":
            raise RuntimeError("identity backend unavailable")
        return user

    async def roles_provider(user_id: str) -> List[Role]:
        return roles_by_user.get(user_id, [])

    return AuthZ(user_identifier=user_identifier, roles_provider=roles_provider, settings=settings)


@pytest.fixture
def app(authz) -> FastAPI:
    """Application with one route per guard kind."""
    app = FastAPI()
    authz.install(app)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.get("/me")
    async def me(authorization=Depends(authz.get_authorization)):
        return {"user": authorization.get_user_identifier()}

    @app.get("/users", dependencies=[Depends(authz.with_permissions("User.Read"))])
    async def list_users():
        return {"ok": True}

    @app.get("/reports/global", dependencies=[Depends(authz.with_global_permissions("Report.ReadWrite.All"))])
    async def global_reports():
        return {"ok": True}

    @app.get("/reports/local", dependencies=[Depends(authz.with_local_permissions("Report.Read.quarterly"))])
    async def local_reports():
        return {"ok": True}

    @app.get("/reports/any", dependencies=[Depends(authz.with_actions("Report.Write"))])
    async def any_report():
        return {"ok": True}

    @app.get("/reports/any-local", dependencies=[Depends(authz.with_local_actions("Report.ReadWrite"))])
    async def any_local_report():
        return {"ok": True}

    @app.get("/reports/any-global", dependencies=[Depends(authz.with_global_actions("Report.Write"))])
    async def any_global_report():
        return {"ok": True}

    return app


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def login(client):
    """Authenticate a user and return bearer headers."""

    def _login(user: str) -> dict:
        response = client.post("/authenticate", headers={"x-user": user})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _login
