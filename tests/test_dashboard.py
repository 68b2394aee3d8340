"""
Dashboard aggregates.
"""

from decimal import Decimal

import pytest


@pytest.mark.asyncio
async def test_dashboard_empty(test_client, auth_headers):
    response = await test_client.get("/api/v1/dashboard", headers=auth_headers)
    
    assert response.status_code == 200
    data = response.json()
    assert data["leads"]["total"] == 0
    assert data["total_clients"] == 0
    assert data["top_clients"] == []
    assert data["orders"]["total_orders"] == 0
    assert data["invoices"]["total_invoices"] == 0
    assert data["sales"]["sales_count"] == 0


@pytest.mark.asyncio
async def test_dashboard_combines_metrics(test_client, auth_headers):
    await test_client.post(
        "/api/v1/public/inquiries",
        json={"name": "Jane", "email": "jane@x.com", "message": "need a cake"},
    )
    customer = (await test_client.post("/api/v1/clients", json={"name": "Mary"}, headers=auth_headers)).json()
    await test_client.post(
        "/api/v1/sales",
        json={"client_id": customer["id"], "category": "Bento Cakes", "quantity": "2", "price_per_unit": "1200"},
        headers=auth_headers,
    )
    await test_client.post(
        "/api/v1/sales-orders",
        json={"items": [{"product_name": "Cake", "category": "Simple Cakes", "quantity": "1", "unit_price": "2500"}]},
        headers=auth_headers,
    )
    
    data = (await test_client.get("/api/v1/dashboard", headers=auth_headers)).json()
    assert data["leads"]["total"] == 1
    assert data["total_clients"] == 1
    assert Decimal(data["total_client_spend"]) == Decimal("2400")
    assert [c["name"] for c in data["top_clients"]] == ["Mary"]
    assert data["orders"]["pending_orders"] == 1
    assert Decimal(data["orders"]["total_value"]) == Decimal("2900")
    assert Decimal(data["sales"]["total_revenue"]) == Decimal("2400")
