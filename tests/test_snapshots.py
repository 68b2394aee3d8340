"""
Whole-store export and import.
"""

from decimal import Decimal
from uuid import uuid4

import pytest

from bakery_crm.services.snapshot_service import SnapshotService


async def seed(client, headers):
    await client.post(
        "/api/v1/public/inquiries",
        json={"name": "Jane", "email": "jane@x.com", "message": "need a cake"},
    )
    customer = (await client.post("/api/v1/clients", json={"name": "Mary"}, headers=headers)).json()
    order = (await client.post(
        "/api/v1/sales-orders",
        json={
            "client_id": customer["id"],
            "items": [{"product_name": "Cake", "category": "Simple Cakes", "quantity": "2", "unit_price": "500"}],
        },
        headers=headers,
    )).json()
    await client.patch(f"/api/v1/sales-orders/{order['id']}/status", json={"status": "completed"}, headers=headers)
    await client.post("/api/v1/invoices", json={"sales_order_id": order["id"]}, headers=headers)


@pytest.mark.asyncio
async def test_export_contains_every_collection(test_client, auth_headers):
    await seed(test_client, auth_headers)
    
    snapshot = (await test_client.get("/api/v1/snapshots/export", headers=auth_headers)).json()
    
    assert set(snapshot) == {"leads", "clients", "salesOrders", "invoices", "products", "sales"}
    assert len(snapshot["leads"]) == 1
    assert len(snapshot["clients"]) == 1
    assert len(snapshot["salesOrders"]) == 1
    assert len(snapshot["salesOrders"][0]["items"]) == 1
    assert len(snapshot["invoices"]) == 1


@pytest.mark.asyncio
async def test_import_restores_exported_snapshot(test_client, auth_headers):
    await seed(test_client, auth_headers)
    snapshot = (await test_client.get("/api/v1/snapshots/export", headers=auth_headers)).json()
    
    response = await test_client.post("/api/v1/snapshots/import", json=snapshot, headers=auth_headers)
    
    assert response.status_code == 200
    result = response.json()
    assert result["reset"] == []
    assert result["imported"]["salesOrders"] == 1
    assert result["imported"]["invoices"] == 1
    
    order = snapshot["salesOrders"][0]
    restored = (await test_client.get(f"/api/v1/sales-orders/{order['id']}", headers=auth_headers)).json()
    assert restored["order_number"] == order["order_number"]
    assert Decimal(restored["total"]) == Decimal("1160")
    
    # Numbers already in the store are not handed out again
    fresh = (await test_client.post("/api/v1/sales-orders", json={}, headers=auth_headers)).json()
    assert fresh["order_number"] != order["order_number"]


@pytest.mark.asyncio
async def test_malformed_collection_is_reset(test_client, auth_headers):
    await seed(test_client, auth_headers)
    snapshot = (await test_client.get("/api/v1/snapshots/export", headers=auth_headers)).json()
    snapshot["clients"] = [{"name": "No id or dates"}]
    snapshot["leads"] = "not a list"
    
    response = await test_client.post("/api/v1/snapshots/import", json=snapshot, headers=auth_headers)
    
    assert response.status_code == 200
    result = response.json()
    assert sorted(result["reset"]) == ["clients", "leads"]
    assert result["imported"]["clients"] == 0
    assert result["imported"]["salesOrders"] == 1
    
    assert (await test_client.get("/api/v1/clients", headers=auth_headers)).json()["total"] == 0
    assert (await test_client.get("/api/v1/leads", headers=auth_headers)).json()["total"] == 0
    assert (await test_client.get("/api/v1/sales-orders", headers=auth_headers)).json()["total"] == 1


@pytest.mark.asyncio
async def test_duplicate_ids_reset_collection(test_client, auth_headers):
    await seed(test_client, auth_headers)
    snapshot = (await test_client.get("/api/v1/snapshots/export", headers=auth_headers)).json()
    snapshot["leads"] = snapshot["leads"] * 2
    
    result = (await test_client.post("/api/v1/snapshots/import", json=snapshot, headers=auth_headers)).json()
    
    assert result["reset"] == ["leads"]


@pytest.mark.asyncio
async def test_missing_collections_are_left_alone(test_client, auth_headers):
    await seed(test_client, auth_headers)
    
    result = (await test_client.post("/api/v1/snapshots/import", json={"products": []}, headers=auth_headers)).json()
    
    assert result["imported"] == {"products": 0}
    assert (await test_client.get("/api/v1/clients", headers=auth_headers)).json()["total"] == 1


def second_order_reusing_items(snapshot):
    """A copy of the first order under a new id and number that keeps the same item ids."""
    copy = dict(snapshot["salesOrders"][0])
    copy["id"] = str(uuid4())
    copy["order_number"] = copy["order_number"] + "9"
    return copy


@pytest.mark.asyncio
async def test_item_ids_repeated_across_orders_reset_collection(test_client, auth_headers):
    await seed(test_client, auth_headers)
    snapshot = (await test_client.get("/api/v1/snapshots/export", headers=auth_headers)).json()
    snapshot["salesOrders"].append(second_order_reusing_items(snapshot))
    
    response = await test_client.post("/api/v1/snapshots/import", json=snapshot, headers=auth_headers)
    
    assert response.status_code == 200
    result = response.json()
    assert result["reset"] == ["salesOrders"]
    assert result["imported"]["invoices"] == 1
    assert (await test_client.get("/api/v1/sales-orders", headers=auth_headers)).json()["total"] == 0


@pytest.mark.asyncio
async def test_rows_rejected_by_database_reset_only_their_collection(test_client, auth_headers, monkeypatch):
    await seed(test_client, auth_headers)
    snapshot = (await test_client.get("/api/v1/snapshots/export", headers=auth_headers)).json()
    snapshot["salesOrders"].append(second_order_reusing_items(snapshot))
    # Only per-record validation, so the repeated item ids reach the database
    monkeypatch.setattr(
        SnapshotService,
        "_validate",
        staticmethod(lambda collection, raw: [collection.schema.model_validate(item) for item in raw]),
    )
    
    response = await test_client.post("/api/v1/snapshots/import", json=snapshot, headers=auth_headers)
    
    assert response.status_code == 200
    result = response.json()
    assert result["reset"] == ["salesOrders"]
    assert result["imported"]["clients"] == 1
    assert result["imported"]["invoices"] == 1
    assert (await test_client.get("/api/v1/sales-orders", headers=auth_headers)).json()["total"] == 0
    assert (await test_client.get("/api/v1/clients", headers=auth_headers)).json()["total"] == 1
