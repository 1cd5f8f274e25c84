"""
Tests for onboarding, login and session endpoints.
"""
from httpx import AsyncClient

from horeca.core.config import settings
from horeca.core.security import verify_password, DUMMY_PASSWORD_HASH
from horeca.models.business import Business, Session
from conftest import TEST_PASSWORD

ONBOARDING = {
    "manager_first_name": "Jan",
    "manager_last_name": "Janssens",
    "horeca_name": "De Kroon",
    "address": "Markt 1, Brugge",
    "phonenumber": "+3250123456",
    "email": "kroon@example.com",
    "password": "s3cret-pass",
}


class TestOnboarding:
    """Tests for POST /api/complete-onboarding."""

    async def test_onboarding_success(self, client: AsyncClient):
        response = await client.post("/api/complete-onboarding", json=ONBOARDING)

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True

        business = await Business.get(id=data["insertedId"])
        assert business.horeca_name == "De Kroon"
        assert business.phone_number == "+3250123456"
        assert business.password_hash != "s3cret-pass"
        assert verify_password("s3cret-pass", business.password_hash)

    async def test_missing_field(self, client: AsyncClient):
        payload = {k: v for k, v in ONBOARDING.items() if k != "address"}

        response = await client.post("/api/complete-onboarding", json=payload)

        assert response.status_code == 400
        assert response.json()["detail"] == "Missing required fields"
        assert await Business.all().count() == 0

    async def test_empty_field_counts_as_missing(self, client: AsyncClient):
        response = await client.post("/api/complete-onboarding", json={**ONBOARDING, "password": ""})

        assert response.status_code == 400
        assert response.json()["detail"] == "Missing required fields"

    async def test_duplicate_email(self, client: AsyncClient, business: Business):
        response = await client.post(
            "/api/complete-onboarding",
            json={**ONBOARDING, "email": business.email}
        )

        assert response.status_code == 409


class TestLogin:
    """Tests for POST /api/login."""

    async def test_login_success(self, client: AsyncClient, business: Business):
        response = await client.post(
            "/api/login",
            json={"email": business.email, "password": TEST_PASSWORD}
        )

        assert response.status_code == 200
        data = response.json()
        assert data == {
            "success": True,
            "business_id": str(business.id),
            "horeca_name": "Cafe Central",
        }
        assert settings.SESSION_COOKIE_NAME in response.cookies
        assert await Session.filter(business_id=business.id).count() == 1

    async def test_wrong_password_does_not_reveal_email(self, client: AsyncClient, business: Business):
        wrong_password = await client.post(
            "/api/login",
            json={"email": business.email, "password": "not-it"}
        )
        unknown_email = await client.post(
            "/api/login",
            json={"email": "nobody@example.com", "password": "not-it"}
        )

        assert wrong_password.status_code == 401
        assert unknown_email.status_code == 401
        assert wrong_password.json() == unknown_email.json()
        assert settings.SESSION_COOKIE_NAME not in wrong_password.cookies
        assert await Session.all().count() == 0

    async def test_unknown_email_still_checks_a_password_hash(self, client: AsyncClient, monkeypatch):
        checked = []

        def recording_verify(password: str, password_hash: str) -> bool:
            checked.append(password_hash)
            return verify_password(password, password_hash)

        monkeypatch.setattr("horeca.services.auth_service.verify_password", recording_verify)

        response = await client.post(
            "/api/login",
            json={"email": "nobody@example.com", "password": "not-it"}
        )

        assert response.status_code == 401
        assert checked == [DUMMY_PASSWORD_HASH]


class TestSession:
    """Tests for GET /api/user and POST /api/logout."""

    async def test_user_requires_session(self, client: AsyncClient):
        response = await client.get("/api/user")

        assert response.status_code == 401

    async def test_unknown_session_token(self, client: AsyncClient, db):
        client.cookies.set(settings.SESSION_COOKIE_NAME, "f" * 64)

        response = await client.get("/api/user")

        assert response.status_code == 401

    async def test_user_returns_session_data(self, auth_client: AsyncClient, business: Business):
        response = await auth_client.get("/api/user")

        assert response.status_code == 200
        assert response.json() == {
            "user": {
                "id": str(business.id),
                "email": "cafe@example.com",
                "horeca_name": "Cafe Central",
                "manager_first_name": "Anna",
                "manager_last_name": "Peeters",
            }
        }

    async def test_logout_invalidates_session(self, auth_client: AsyncClient):
        token = auth_client.cookies.get(settings.SESSION_COOKIE_NAME)

        response = await auth_client.post("/api/logout")
        assert response.status_code == 204

        auth_client.cookies.clear()
        auth_client.cookies.set(settings.SESSION_COOKIE_NAME, token)
        assert (await auth_client.get("/api/user")).status_code == 401
