"""
Invoices generated from completed sales orders.
"""

import re
from datetime import date, timedelta
from decimal import Decimal

import pytest


ITEMS = [
    {"product_name": "Vanilla Sponge", "category": "Simple Cakes", "quantity": "2", "unit": "kg", "unit_price": "500", "notes": "No nuts"},
    {"product_name": "Red Velvet", "category": "Classic Cakes", "quantity": "1", "unit": "kg", "unit_price": "1000"},
]


async def completed_order(client, headers, **fields):
    order = (await client.post(
        "/api/v1/sales-orders",
        json={"client_name": "Mary", "client_email": "mary@example.com", "items": ITEMS, **fields},
        headers=headers,
    )).json()
    response = await client.patch(
        f"/api/v1/sales-orders/{order['id']}/status",
        json={"status": "completed"},
        headers=headers,
    )
    return response.json()


@pytest.mark.asyncio
async def test_invoice_copies_order(test_client, auth_headers):
    order = await completed_order(test_client, auth_headers, notes="Birthday")
    
    response = await test_client.post("/api/v1/invoices", json={"sales_order_id": order["id"]}, headers=auth_headers)
    
    assert response.status_code == 201
    invoice = response.json()
    assert re.fullmatch(r"INV\d{6}-\d{3}", invoice["invoice_number"])
    assert invoice["status"] == "draft"
    assert invoice["sales_order_id"] == order["id"]
    assert invoice["sales_order_number"] == order["order_number"]
    assert invoice["client_name"] == "Mary"
    assert invoice["notes"] == "Birthday"
    for field in ("subtotal", "tax", "total"):
        assert Decimal(invoice[field]) == Decimal(order[field])
    
    copied = [
        (i["product_name"], i["category"], Decimal(i["quantity"]), i["unit"], Decimal(i["unit_price"]), Decimal(i["total_price"]), i["notes"])
        for i in invoice["items"]
    ]
    original = [
        (i["product_name"], i["category"], Decimal(i["quantity"]), i["unit"], Decimal(i["unit_price"]), Decimal(i["total_price"]), i["notes"])
        for i in order["items"]
    ]
    assert copied == original
    
    invoice_date = date.fromisoformat(invoice["invoice_date"])
    assert invoice_date == date.today()
    assert date.fromisoformat(invoice["due_date"]) == invoice_date + timedelta(days=30)


@pytest.mark.asyncio
async def test_invoicing_does_not_change_order(test_client, auth_headers):
    order = await completed_order(test_client, auth_headers)
    await test_client.post("/api/v1/invoices", json={"sales_order_id": order["id"]}, headers=auth_headers)
    
    response = await test_client.get(f"/api/v1/sales-orders/{order['id']}", headers=auth_headers)
    assert response.json()["status"] == "completed"


@pytest.mark.asyncio
@pytest.mark.parametrize("status", ["draft", "confirmed", "in_production", "delivered", "cancelled"])
async def test_only_completed_orders_can_be_invoiced(test_client, auth_headers, status):
    order = (await test_client.post("/api/v1/sales-orders", json={"items": ITEMS}, headers=auth_headers)).json()
    await test_client.patch(f"/api/v1/sales-orders/{order['id']}/status", json={"status": status}, headers=auth_headers)
    
    response = await test_client.post("/api/v1/invoices", json={"sales_order_id": order["id"]}, headers=auth_headers)
    
    assert response.status_code == 400
    assert "completed" in response.json()["error"]["message"]


@pytest.mark.asyncio
async def test_invoice_for_missing_order_returns_404(test_client, auth_headers):
    response = await test_client.post(
        "/api/v1/invoices",
        json={"sales_order_id": "00000000-0000-0000-0000-000000000000"},
        headers=auth_headers,
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_second_invoice_for_same_order_is_rejected(test_client, auth_headers):
    order = await completed_order(test_client, auth_headers)
    
    first = await test_client.post("/api/v1/invoices", json={"sales_order_id": order["id"]}, headers=auth_headers)
    second = await test_client.post("/api/v1/invoices", json={"sales_order_id": order["id"]}, headers=auth_headers)
    
    assert first.status_code == 201
    assert second.status_code == 400
    assert first.json()["invoice_number"] in second.json()["error"]["message"]


@pytest.mark.asyncio
async def test_invoice_status_and_stats(test_client, auth_headers):
    paid_order = await completed_order(test_client, auth_headers)
    open_order = await completed_order(test_client, auth_headers, client_name="Peter")
    paid = (await test_client.post("/api/v1/invoices", json={"sales_order_id": paid_order["id"]}, headers=auth_headers)).json()
    await test_client.post("/api/v1/invoices", json={"sales_order_id": open_order["id"]}, headers=auth_headers)
    
    response = await test_client.patch(f"/api/v1/invoices/{paid['id']}/status", json={"status": "paid"}, headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["status"] == "paid"
    
    stats = (await test_client.get("/api/v1/invoices/stats", headers=auth_headers)).json()
    assert stats["total_invoices"] == 2
    assert Decimal(stats["total_invoiced"]) == Decimal("4640")
    assert Decimal(stats["paid_amount"]) == Decimal("2320")
    assert Decimal(stats["outstanding_amount"]) == Decimal("2320")
    
    paid_list = (await test_client.get("/api/v1/invoices", params={"status": "paid"}, headers=auth_headers)).json()
    assert [i["id"] for i in paid_list["items"]] == [paid["id"]]
    
    by_client = (await test_client.get("/api/v1/invoices", params={"search": "peter"}, headers=auth_headers)).json()
    assert by_client["total"] == 1


@pytest.mark.asyncio
async def test_invoice_status_rejects_unknown_label(test_client, auth_headers):
    order = await completed_order(test_client, auth_headers)
    invoice = (await test_client.post("/api/v1/invoices", json={"sales_order_id": order["id"]}, headers=auth_headers)).json()
    
    response = await test_client.patch(f"/api/v1/invoices/{invoice['id']}/status", json={"status": "void"}, headers=auth_headers)
    assert response.status_code == 422
