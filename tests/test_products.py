"""
Product catalog CRUD and filters.
"""

from decimal import Decimal

import pytest


CUPCAKES = {
    "name": "Cupcakes",
    "category": "Cupcakes",
    "base_price": "150",
    "unit": "piece",
    "description": "Box of cupcakes",
    "options": ["Simple/Classic", "Specialty"],
    "pricing_tiers": [{"label": "Box of 6", "price": "900"}, {"label": "Box of 12", "price": "1700"}],
    "min_quantity": 6,
}


@pytest.mark.asyncio
async def test_create_product_with_tiers(test_client, auth_headers):
    response = await test_client.post("/api/v1/products", json=CUPCAKES, headers=auth_headers)
    
    assert response.status_code == 201
    product = response.json()
    assert product["status"] == "active"
    assert product["options"] == ["Simple/Classic", "Specialty"]
    assert [tier["label"] for tier in product["pricing_tiers"]] == ["Box of 6", "Box of 12"]
    assert Decimal(product["pricing_tiers"][1]["price"]) == Decimal("1700")
    
    response = await test_client.get(f"/api/v1/products/{product['id']}", headers=auth_headers)
    assert response.json()["min_quantity"] == 6


@pytest.mark.asyncio
async def test_update_product(test_client, auth_headers):
    product = (await test_client.post("/api/v1/products", json=CUPCAKES, headers=auth_headers)).json()
    
    response = await test_client.put(
        f"/api/v1/products/{product['id']}",
        json={"base_price": "175", "status": "inactive", "pricing_tiers": []},
        headers=auth_headers,
    )
    assert response.status_code == 200
    updated = response.json()
    assert Decimal(updated["base_price"]) == Decimal("175")
    assert updated["status"] == "inactive"
    assert updated["pricing_tiers"] == []
    assert updated["name"] == "Cupcakes"


@pytest.mark.asyncio
async def test_list_products_filters(test_client, auth_headers):
    await test_client.post("/api/v1/products", json=CUPCAKES, headers=auth_headers)
    await test_client.post(
        "/api/v1/products",
        json={"name": "Red Velvet", "category": "Classic Cakes", "base_price": "2800", "unit": "kg"},
        headers=auth_headers,
    )
    
    by_category = (await test_client.get("/api/v1/products", params={"category": "Classic Cakes"}, headers=auth_headers)).json()
    assert [p["name"] for p in by_category["items"]] == ["Red Velvet"]
    
    by_search = (await test_client.get("/api/v1/products", params={"search": "box of"}, headers=auth_headers)).json()
    assert [p["name"] for p in by_search["items"]] == ["Cupcakes"]
    
    everything = (await test_client.get("/api/v1/products", params={"category": "all"}, headers=auth_headers)).json()
    assert everything["total"] == 2


@pytest.mark.asyncio
async def test_product_validation(test_client, auth_headers):
    response = await test_client.post(
        "/api/v1/products",
        json={"name": "Mystery", "base_price": "-1"},
        headers=auth_headers,
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_delete_product(test_client, auth_headers):
    product = (await test_client.post("/api/v1/products", json=CUPCAKES, headers=auth_headers)).json()
    
    assert (await test_client.delete(f"/api/v1/products/{product['id']}", headers=auth_headers)).status_code == 204
    assert (await test_client.get(f"/api/v1/products/{product['id']}", headers=auth_headers)).status_code == 404
