"""
Lead pipeline: board moves, edits, conversion and deletion.
"""

from decimal import Decimal

import pytest

from bakery_crm.core.events import LeadEventType


async def submit_inquiry(client, name="Jane", email="jane@x.com", **extra):
    response = await client.post(
        "/api/v1/public/inquiries",
        json={"name": name, "email": email, "message": "need a cake", **extra},
    )
    assert response.status_code == 201
    return response.json()["id"]


@pytest.mark.asyncio
@pytest.mark.parametrize("target", ["contacted", "quoted", "converted", "lost", "new"])
async def test_move_lead_to_any_stage(test_client, auth_headers, target):
    lead_id = await submit_inquiry(test_client)
    
    response = await test_client.post(
        f"/api/v1/leads/{lead_id}/move",
        json={"status": target},
        headers=auth_headers,
    )
    assert response.status_code == 200
    
    response = await test_client.get(f"/api/v1/leads/{lead_id}", headers=auth_headers)
    assert response.json()["status"] == target


@pytest.mark.asyncio
async def test_move_lead_to_position_renumbers_columns(test_client, auth_headers):
    first = await submit_inquiry(test_client, name="First", email="a@example.com")
    second = await submit_inquiry(test_client, name="Second", email="b@example.com")
    third = await submit_inquiry(test_client, name="Third", email="c@example.com")
    
    for lead_id in (first, second):
        await test_client.post(f"/api/v1/leads/{lead_id}/move", json={"status": "contacted"}, headers=auth_headers)
    response = await test_client.post(
        f"/api/v1/leads/{third}/move",
        json={"status": "contacted", "position": 0},
        headers=auth_headers,
    )
    assert response.status_code == 200
    
    board = (await test_client.get("/api/v1/leads/board", headers=auth_headers)).json()
    columns = {column["status"]: column for column in board["columns"]}
    assert [column["status"] for column in board["columns"]] == ["new", "contacted", "quoted", "converted", "lost"]
    assert columns["new"]["count"] == 0
    contacted = columns["contacted"]["leads"]
    assert [lead["name"] for lead in contacted] == ["Third", "First", "Second"]
    assert [lead["position"] for lead in contacted] == [0, 1, 2]


@pytest.mark.asyncio
async def test_move_missing_lead_returns_404(test_client, auth_headers):
    response = await test_client.post(
        "/api/v1/leads/00000000-0000-0000-0000-000000000000/move",
        json={"status": "contacted"},
        headers=auth_headers,
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_move_rejects_unknown_stage(test_client, auth_headers):
    lead_id = await submit_inquiry(test_client)
    response = await test_client.post(
        f"/api/v1/leads/{lead_id}/move",
        json={"status": "archived"},
        headers=auth_headers,
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_update_lead_note_and_value(test_client, auth_headers):
    lead_id = await submit_inquiry(test_client)
    
    response = await test_client.put(
        f"/api/v1/leads/{lead_id}",
        json={"note": "Wants a 3-tier cake", "estimated_value": "7500", "status": "quoted"},
        headers=auth_headers,
    )
    assert response.status_code == 200
    lead = response.json()
    assert lead["note"] == "Wants a 3-tier cake"
    assert Decimal(lead["estimated_value"]) == Decimal("7500")
    assert lead["status"] == "quoted"


@pytest.mark.asyncio
async def test_list_leads_search_and_status_filter(test_client, auth_headers):
    await submit_inquiry(test_client, name="Jane Doe", email="jane@x.com", product_type="Wedding Cake")
    other = await submit_inquiry(test_client, name="Bob", email="bob@y.com", product_type="Cupcakes")
    await test_client.post(f"/api/v1/leads/{other}/move", json={"status": "lost"}, headers=auth_headers)
    
    response = await test_client.get("/api/v1/leads", params={"search": "WEDDING"}, headers=auth_headers)
    assert [lead["name"] for lead in response.json()["items"]] == ["Jane Doe"]
    
    response = await test_client.get("/api/v1/leads", params={"search": "y.com"}, headers=auth_headers)
    assert [lead["name"] for lead in response.json()["items"]] == ["Bob"]
    
    response = await test_client.get("/api/v1/leads", params={"status": "lost"}, headers=auth_headers)
    assert [lead["name"] for lead in response.json()["items"]] == ["Bob"]
    
    response = await test_client.get("/api/v1/leads", params={"status": "all"}, headers=auth_headers)
    assert response.json()["total"] == 2


@pytest.mark.asyncio
async def test_lead_search_treats_wildcards_literally(test_client, auth_headers):
    await submit_inquiry(test_client, name="Jane", email="jane@x.com", product_type="Cake_Pops")
    await submit_inquiry(test_client, name="Bob", email="bob@y.com", product_type="CakeXPops")
    
    response = await test_client.get("/api/v1/leads", params={"search": "cake_pops"}, headers=auth_headers)
    assert [lead["name"] for lead in response.json()["items"]] == ["Jane"]


@pytest.mark.asyncio
async def test_convert_creates_client_once(test_client, auth_headers):
    lead_id = await submit_inquiry(test_client, phone="0712345678")
    
    first = await test_client.post(f"/api/v1/leads/{lead_id}/convert", headers=auth_headers)
    assert first.status_code == 200
    data = first.json()
    assert data["created"] is True
    assert data["lead"]["status"] == "converted"
    assert data["lead"]["is_existing_client"] is True
    assert data["lead"]["client_id"] == data["client"]["id"]
    assert data["client"]["phone"] == "0712345678"
    
    second = await test_client.post(f"/api/v1/leads/{lead_id}/convert", headers=auth_headers)
    assert second.status_code == 200
    assert second.json()["created"] is False
    assert second.json()["client"]["id"] == data["client"]["id"]
    
    clients = (await test_client.get("/api/v1/clients", headers=auth_headers)).json()
    assert clients["total"] == 1


@pytest.mark.asyncio
async def test_convert_links_existing_client_by_email_ignoring_case(test_client, auth_headers):
    response = await test_client.post(
        "/api/v1/clients",
        json={"name": "Jane Existing", "email": "Jane@X.com"},
        headers=auth_headers,
    )
    existing_id = response.json()["id"]
    lead_id = await submit_inquiry(test_client, email="jane@x.com")
    
    response = await test_client.post(f"/api/v1/leads/{lead_id}/convert", headers=auth_headers)
    data = response.json()
    assert data["created"] is False
    assert data["client"]["id"] == existing_id
    
    clients = (await test_client.get("/api/v1/clients", headers=auth_headers)).json()
    assert clients["total"] == 1


@pytest.mark.asyncio
async def test_sales_order_from_lead_requires_conversion(test_client, auth_headers):
    lead_id = await submit_inquiry(test_client, product_type="Birthday Cake", category="Classic Cakes")
    
    response = await test_client.post(f"/api/v1/leads/{lead_id}/sales-order", headers=auth_headers)
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_sales_order_from_converted_lead(test_client, auth_headers):
    lead_id = await submit_inquiry(test_client, product_type="Birthday Cake", category="Classic Cakes")
    await test_client.put(f"/api/v1/leads/{lead_id}", json={"estimated_value": "2800"}, headers=auth_headers)
    conversion = (await test_client.post(f"/api/v1/leads/{lead_id}/convert", headers=auth_headers)).json()
    
    response = await test_client.post(f"/api/v1/leads/{lead_id}/sales-order", headers=auth_headers)
    assert response.status_code == 201
    order = response.json()
    assert order["lead_id"] == lead_id
    assert order["client_id"] == conversion["client"]["id"]
    assert order["client_name"] == "Jane"
    assert order["status"] == "draft"
    assert len(order["items"]) == 1
    item = order["items"][0]
    assert item["product_name"] == "Birthday Cake"
    assert item["category"] == "Classic Cakes"
    assert item["unit"] == "piece"
    assert Decimal(item["quantity"]) == Decimal("1")
    assert Decimal(item["unit_price"]) == Decimal("2800")
    assert Decimal(order["total"]) == Decimal("3248.00")


@pytest.mark.asyncio
async def test_delete_lead_leaves_client_and_orders(test_client, auth_headers):
    lead_id = await submit_inquiry(test_client, product_type="Cupcakes")
    client_id = (await test_client.post(f"/api/v1/leads/{lead_id}/convert", headers=auth_headers)).json()["client"]["id"]
    order_id = (await test_client.post(f"/api/v1/leads/{lead_id}/sales-order", headers=auth_headers)).json()["id"]
    
    response = await test_client.delete(f"/api/v1/leads/{lead_id}", headers=auth_headers)
    assert response.status_code == 204
    
    assert (await test_client.get(f"/api/v1/leads/{lead_id}", headers=auth_headers)).status_code == 404
    assert (await test_client.get(f"/api/v1/clients/{client_id}", headers=auth_headers)).status_code == 200
    assert (await test_client.get(f"/api/v1/sales-orders/{order_id}", headers=auth_headers)).status_code == 200


@pytest.mark.asyncio
async def test_delete_lead_renumbers_its_column(test_client, auth_headers):
    first = await submit_inquiry(test_client, name="First", email="a@example.com")
    second = await submit_inquiry(test_client, name="Second", email="b@example.com")
    await submit_inquiry(test_client, name="Third", email="c@example.com")
    
    await test_client.delete(f"/api/v1/leads/{second}", headers=auth_headers)
    await test_client.delete(f"/api/v1/leads/{first}", headers=auth_headers)
    
    board = (await test_client.get("/api/v1/leads/board", headers=auth_headers)).json()
    new_column = board["columns"][0]
    assert new_column["status"] == "new"
    assert [(lead["name"], lead["position"]) for lead in new_column["leads"]] == [("Third", 0)]


@pytest.mark.asyncio
async def test_lead_stats(test_client, auth_headers):
    ids = [await submit_inquiry(test_client, name=f"Lead {i}", email=f"lead{i}@example.com") for i in range(4)]
    await test_client.put(f"/api/v1/leads/{ids[0]}", json={"estimated_value": "1000"}, headers=auth_headers)
    await test_client.put(f"/api/v1/leads/{ids[1]}", json={"estimated_value": "500", "status": "quoted"}, headers=auth_headers)
    await test_client.post(f"/api/v1/leads/{ids[2]}/convert", headers=auth_headers)
    await test_client.post(f"/api/v1/leads/{ids[3]}/move", json={"status": "lost"}, headers=auth_headers)
    
    stats = (await test_client.get("/api/v1/leads/stats", headers=auth_headers)).json()
    assert stats["total"] == 4
    assert stats["active"] == 2
    assert stats["converted"] == 1
    assert stats["lost"] == 1
    assert stats["by_status"] == {"new": 1, "contacted": 0, "quoted": 1, "converted": 1, "lost": 1}
    assert stats["conversion_rate"] == 25.0
    assert Decimal(stats["pipeline_value"]) == Decimal("1500")


@pytest.mark.asyncio
async def test_lead_stats_empty(test_client, auth_headers):
    stats = (await test_client.get("/api/v1/leads/stats", headers=auth_headers)).json()
    assert stats["total"] == 0
    assert stats["conversion_rate"] == 0.0


@pytest.mark.asyncio
async def test_lead_changes_are_published(test_client, auth_headers, lead_event_bus):
    queue = lead_event_bus.subscribe()
    
    lead_id = await submit_inquiry(test_client)
    await test_client.post(f"/api/v1/leads/{lead_id}/move", json={"status": "contacted"}, headers=auth_headers)
    await test_client.post(f"/api/v1/leads/{lead_id}/convert", headers=auth_headers)
    await test_client.delete(f"/api/v1/leads/{lead_id}", headers=auth_headers)
    
    events = []
    while not queue.empty():
        events.append(queue.get_nowait())
    assert [event.type for event in events] == [
        LeadEventType.CREATED,
        LeadEventType.MOVED,
        LeadEventType.CONVERTED,
        LeadEventType.DELETED,
    ]
    assert all(str(event.lead_id) == lead_id for event in events)
    assert events[1].status == "contacted"
