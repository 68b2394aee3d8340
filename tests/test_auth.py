"""
Login, registration and session gating.
"""

import pytest

from bakery_crm.core.security import hash_password, verify_password


@pytest.mark.asyncio
async def test_login_seeds_default_admin(test_client):
    response = await test_client.post("/api/v1/auth/login", json={"username": "admin", "password": "admin"})
    
    assert response.status_code == 200
    data = response.json()
    assert data["token"]
    assert data["token_type"] == "bearer"
    assert data["user"]["username"] == "admin"
    assert data["user"]["role"] == "admin"


@pytest.mark.asyncio
async def test_login_rejects_wrong_password(test_client):
    response = await test_client.post("/api/v1/auth/login", json={"username": "admin", "password": "nope"})
    
    assert response.status_code == 401
    assert response.json()["error"]["message"] == "Invalid username or password"


@pytest.mark.asyncio
async def test_protected_routes_require_session(test_client):
    response = await test_client.get("/api/v1/clients")
    assert response.status_code == 401
    
    response = await test_client.get("/api/v1/clients", headers={"Authorization": "Bearer not-a-session"})
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_me_returns_session_user(test_client, auth_headers):
    response = await test_client.get("/api/v1/auth/me", headers=auth_headers)
    
    assert response.status_code == 200
    assert response.json()["username"] == "admin"


@pytest.mark.asyncio
async def test_logout_removes_session(test_client, auth_headers):
    response = await test_client.post("/api/v1/auth/logout", headers=auth_headers)
    assert response.status_code == 204
    
    response = await test_client.get("/api/v1/auth/me", headers=auth_headers)
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_register_staff_and_login(test_client):
    response = await test_client.post(
        "/api/v1/auth/register",
        json={"username": "baker", "password": "flour", "confirm_password": "flour"},
    )
    assert response.status_code == 201
    assert response.json()["role"] == "staff"
    
    response = await test_client.post("/api/v1/auth/login", json={"username": "baker", "password": "flour"})
    assert response.status_code == 200
    assert response.json()["user"]["role"] == "staff"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload, message",
    [
        ({"username": "baker", "password": "flour", "confirm_password": "sugar"}, "Passwords do not match"),
        ({"username": "baker", "password": "abc", "confirm_password": "abc"}, "at least 4 characters"),
        ({"username": "admin", "password": "flour", "confirm_password": "flour"}, "Username already exists"),
        ({"username": "baker", "password": "x" * 73, "confirm_password": "x" * 73}, "at most 72 bytes"),
    ],
)
async def test_register_validation(test_client, payload, message):
    response = await test_client.post("/api/v1/auth/register", json=payload)
    
    assert response.status_code == 400
    assert message in response.json()["error"]["message"]


def test_password_hash_is_bcrypt():
    password_hash = hash_password("flour")
    
    assert password_hash.startswith("$2b$")
    assert password_hash != hash_password("flour")
    assert verify_password("flour", password_hash)
    assert not verify_password("sugar", password_hash)
    assert not verify_password("flour", "not-a-hash")
