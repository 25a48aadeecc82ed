"""
Unit tests for user account API endpoints.

Tests cover:
- Account creation with role and contact validation
- Duplicate email handling
- Lookup by id and email
- Onboarding flag updates with keep-on-null semantics
"""

import uuid

import pytest
from httpx import AsyncClient
from sqlmodel import select

from tempo_gig_manager.core.database.entities import User
from tempo_gig_manager.core.security import verify_password

pytestmark = pytest.mark.asyncio


class TestCreateUser:
    async def test_create_user_success(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/users", json={"email": "new@tempo.test", "password": "pw12345", "role": "artist"}
        )
        assert response.status_code == 201
        user = response.json()["user"]
        assert user["email"] == "new@tempo.test"
        assert user["role"] == "artist"
        assert user["two_factor_enabled"] is False
        assert user["face_verified"] is False
        assert user["profile_completed"] is False
        assert "password" not in user
        assert "password_hash" not in user

    async def test_password_is_stored_hashed(self, client: AsyncClient, session):
        await client.post("/api/v1/users", json={"email": "hash@tempo.test", "password": "pw12345", "role": "band"})

        result = await session.execute(select(User).where(User.email == "hash@tempo.test"))
        stored = result.scalar_one()
        assert stored.password_hash != "pw12345"
        assert verify_password("pw12345", stored.password_hash)

    async def test_create_user_with_phone_only(self, client: AsyncClient):
        response = await client.post("/api/v1/users", json={"phone": "+15125550100", "role": "venue"})
        assert response.status_code == 201
        user = response.json()["user"]
        assert user["phone"] == "+15125550100"
        assert user["email"] is None

    @pytest.mark.parametrize("role", [None, "", "promoter"])
    async def test_invalid_role(self, client: AsyncClient, role):
        response = await client.post("/api/v1/users", json={"email": "x@tempo.test", "role": role})
        assert response.status_code == 400
        assert response.json() == {"error": "Valid role required (venue, artist, band)"}

    async def test_email_or_phone_required(self, client: AsyncClient):
        response = await client.post("/api/v1/users", json={"role": "band", "email": ""})
        assert response.status_code == 400
        assert response.json() == {"error": "Email or phone required"}

    async def test_duplicate_email_conflict(self, client: AsyncClient, venue_user):
        response = await client.post("/api/v1/users", json={"email": venue_user["email"], "role": "artist"})
        assert response.status_code == 409
        assert response.json() == {"error": "An account with this email already exists"}

    async def test_non_json_body(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/users", content=b"not json", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert "error" in response.json()


class TestGetUser:
    async def test_get_by_id(self, client: AsyncClient, venue_user):
        response = await client.get("/api/v1/users", params={"id": venue_user["id"]})
        assert response.status_code == 200
        assert response.json()["user"]["id"] == venue_user["id"]

    async def test_get_by_email(self, client: AsyncClient, venue_user):
        response = await client.get("/api/v1/users", params={"email": venue_user["email"]})
        assert response.status_code == 200
        assert response.json()["user"]["id"] == venue_user["id"]

    async def test_missing_parameters(self, client: AsyncClient):
        response = await client.get("/api/v1/users")
        assert response.status_code == 400
        assert response.json() == {"error": "id or email parameter required"}

    async def test_unknown_user(self, client: AsyncClient):
        response = await client.get("/api/v1/users", params={"id": str(uuid.uuid4())})
        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}

    async def test_malformed_id(self, client: AsyncClient):
        response = await client.get("/api/v1/users", params={"id": "not-a-uuid"})
        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Invalid request"
        assert body["details"][0].startswith("id:")


class TestUpdateUser:
    async def test_update_flags(self, client: AsyncClient, venue_user):
        response = await client.patch(
            "/api/v1/users", json={"id": venue_user["id"], "two_factor_enabled": True, "profile_completed": True}
        )
        assert response.status_code == 200
        user = response.json()["user"]
        assert user["two_factor_enabled"] is True
        assert user["profile_completed"] is True
        assert user["face_verified"] is False

    async def test_null_keeps_current_value(self, client: AsyncClient, venue_user):
        await client.patch("/api/v1/users", json={"id": venue_user["id"], "face_verified": True})

        response = await client.patch("/api/v1/users", json={"id": venue_user["id"], "face_verified": None})
        assert response.status_code == 200
        assert response.json()["user"]["face_verified"] is True

    async def test_id_required(self, client: AsyncClient):
        response = await client.patch("/api/v1/users", json={"face_verified": True})
        assert response.status_code == 400
        assert response.json() == {"error": "User id required"}

    async def test_unknown_user(self, client: AsyncClient):
        response = await client.patch("/api/v1/users", json={"id": str(uuid.uuid4()), "face_verified": True})
        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}
