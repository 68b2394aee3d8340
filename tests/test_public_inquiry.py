"""
Public inquiry form: validation and lead creation.
"""

from decimal import Decimal

import pytest


@pytest.mark.asyncio
async def test_inquiry_creates_new_lead(test_client, auth_headers):
    response = await test_client.post(
        "/api/v1/public/inquiries",
        json={"name": "Jane", "email": "jane@x.com", "message": "need a cake"},
    )
    
    assert response.status_code == 201
    receipt = response.json()
    assert receipt["status"] == "new"
    assert receipt["name"] == "Jane"
    assert "Thank you" in receipt["message"]
    
    response = await test_client.get(f"/api/v1/leads/{receipt['id']}", headers=auth_headers)
    assert response.status_code == 200
    lead = response.json()
    assert lead["status"] == "new"
    assert Decimal(lead["estimated_value"]) == Decimal("0")
    assert lead["email"] == "jane@x.com"
    assert lead["is_existing_client"] is False


@pytest.mark.asyncio
async def test_inquiry_does_not_require_session(test_client):
    response = await test_client.post(
        "/api/v1/public/inquiries",
        json={"name": "Sam", "email": "sam@example.com", "message": "cupcakes for 12"},
    )
    assert response.status_code == 201


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"name": "", "email": "jane@x.com", "message": "need a cake"},
        {"name": "   ", "email": "jane@x.com", "message": "need a cake"},
        {"name": "Jane", "email": "not-an-email", "message": "need a cake"},
        {"name": "Jane", "email": "jane@x.com", "message": ""},
        {"name": "Jane", "email": "jane@x.com"},
    ],
)
async def test_inquiry_validation(test_client, auth_headers, payload):
    response = await test_client.post("/api/v1/public/inquiries", json=payload)
    
    assert response.status_code == 422
    assert response.json()["error"]["message"] == "Validation error"
    
    response = await test_client.get("/api/v1/leads", headers=auth_headers)
    assert response.json()["total"] == 0


@pytest.mark.asyncio
async def test_inquiries_append_to_new_column(test_client, auth_headers):
    for name in ("First", "Second", "Third"):
        await test_client.post(
            "/api/v1/public/inquiries",
            json={"name": name, "email": f"{name.lower()}@example.com", "message": "hello"},
        )
    
    response = await test_client.get("/api/v1/leads/board", headers=auth_headers)
    new_column = response.json()["columns"][0]
    assert new_column["status"] == "new"
    assert [lead["name"] for lead in new_column["leads"]] == ["First", "Second", "Third"]
    assert [lead["position"] for lead in new_column["leads"]] == [0, 1, 2]
