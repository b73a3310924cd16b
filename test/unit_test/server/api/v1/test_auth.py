"""
Tests for the login, logout and session-user endpoints.
"""

import pytest
from httpx import AsyncClient

from swat_manager.server.api.v1.auth import PREMIUM_REQUIRED
from test.unit_test.server.conftest import auth_headers

pytestmark = pytest.mark.asyncio


class TestLogin:
    async def test_login_returns_token_and_user(self, client: AsyncClient, admin_user, test_config):
        response = await client.post(
            "/api/v1/login",
            json={"email": test_config.accounts.admin_email, "password": test_config.accounts.password},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["token_type"] == "bearer"
        assert data["access_token"]
        assert data["user"]["id"] == admin_user.id
        assert "password_hash" not in data["user"]

    async def test_login_token_authenticates_requests(self, client: AsyncClient, agency_user, test_config):
        login = await client.post(
            "/api/v1/login",
            json={"email": test_config.accounts.agency_email, "password": test_config.accounts.password},
        )
        token = login.json()["access_token"]

        response = await client.get("/api/v1/users/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200
        assert response.json()["email"] == test_config.accounts.agency_email

    async def test_login_email_is_case_insensitive(self, client: AsyncClient, admin_user, test_config):
        response = await client.post(
            "/api/v1/login",
            json={"email": test_config.accounts.admin_email.upper(), "password": test_config.accounts.password},
        )
        assert response.status_code == 200

    async def test_login_wrong_password(self, client: AsyncClient, admin_user, test_config):
        response = await client.post(
            "/api/v1/login", json={"email": test_config.accounts.admin_email, "password": "wrong-password"}
        )
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid email or password"

    async def test_login_unknown_email(self, client: AsyncClient):
        response = await client.post("/api/v1/login", json={"email": "nobody@swatplatform.org", "password": "whatever1"})
        assert response.status_code == 401

    async def test_tracking_refused_for_unpaid_agency(self, client: AsyncClient, agency_user, test_config):
        response = await client.post(
            "/api/v1/login",
            json={
                "email": test_config.accounts.agency_email,
                "password": test_config.accounts.password,
                "interface_type": "tracking",
            },
        )
        assert response.status_code == 403
        assert response.json()["detail"] == PREMIUM_REQUIRED

    async def test_tracking_granted_for_paid_agency(self, client: AsyncClient, repos, agency, agency_user, test_config):
        agency.paid_status = True
        await repos.agencies.update(agency)

        response = await client.post(
            "/api/v1/login",
            json={
                "email": test_config.accounts.agency_email,
                "password": test_config.accounts.password,
                "interface_type": "tracking",
            },
        )

        assert response.status_code == 200
        user = response.json()["user"]
        assert user["interface_type"] == "tracking"
        assert user["premium_access"] is True

    async def test_admin_always_gets_tracking(self, client: AsyncClient, admin_user, test_config):
        response = await client.post(
            "/api/v1/login",
            json={
                "email": test_config.accounts.admin_email,
                "password": test_config.accounts.password,
                "interface_type": "tracking",
            },
        )
        assert response.status_code == 200
        assert response.json()["user"]["premium_access"] is True

    async def test_assessment_interface_clears_premium_flag(self, client: AsyncClient, admin_user, test_config):
        response = await client.post(
            "/api/v1/login",
            json={
                "email": test_config.accounts.admin_email,
                "password": test_config.accounts.password,
                "interface_type": "assessment",
            },
        )
        assert response.json()["user"]["interface_type"] == "assessment"
        assert response.json()["user"]["premium_access"] is False

    async def test_login_rejects_unknown_interface(self, client: AsyncClient, admin_user, test_config):
        response = await client.post(
            "/api/v1/login",
            json={
                "email": test_config.accounts.admin_email,
                "password": test_config.accounts.password,
                "interface_type": "dashboard",
            },
        )
        assert response.status_code == 422


class TestSession:
    async def test_logout_without_token(self, client: AsyncClient):
        response = await client.post("/api/v1/logout")
        assert response.status_code == 200
        assert response.json() == {"message": "Logged out successfully"}

    async def test_logout_with_token(self, client: AsyncClient, admin_user):
        response = await client.post("/api/v1/logout", headers=auth_headers(admin_user))
        assert response.status_code == 200

    async def test_session_user_anonymous(self, client: AsyncClient):
        response = await client.get("/api/v1/user")
        assert response.status_code == 200
        assert response.json() is None

    async def test_session_user_authenticated(self, client: AsyncClient, agency_user, agency_headers):
        response = await client.get("/api/v1/user", headers=agency_headers)
        assert response.status_code == 200
        assert response.json()["id"] == agency_user.id

    async def test_invalid_token_is_unauthenticated(self, client: AsyncClient):
        response = await client.get("/api/v1/users/me", headers={"Authorization": "Bearer not-a-token"})
        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    async def test_missing_token_is_unauthenticated(self, client: AsyncClient):
        response = await client.get("/api/v1/users/me")
        assert response.status_code == 401
        assert response.json()["detail"] == "Not authenticated"
