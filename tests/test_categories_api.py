from __future__ import annotations

from httpx import AsyncClient

from tasktracker.app.models import User


async def test_category_crud(client: AsyncClient, admin: User, headers_for) -> None:
    headers = headers_for(admin)
    created = await client.post(
        "/api/categories", json={"name": "IT", "description": "Hardware"}, headers=headers
    )
    assert created.status_code == 201
    category_id = created.json()["id"]

    listing = await client.get("/api/categories")
    assert [item["name"] for item in listing.json()] == ["IT"]

    updated = await client.put(
        f"/api/categories/{category_id}", json={"description": "Hardware and software"}, headers=headers
    )
    assert updated.status_code == 200
    assert updated.json()["name"] == "IT"
    assert updated.json()["description"] == "Hardware and software"

    fetched = await client.get(f"/api/categories/{category_id}")
    assert fetched.json()["description"] == "Hardware and software"

    deleted = await client.delete(f"/api/categories/{category_id}", headers=headers)
    assert deleted.json() == {"message": "Category deleted"}
    missing = await client.get(f"/api/categories/{category_id}")
    assert missing.status_code == 404
    assert missing.json()["error"] == "Category not found"


async def test_category_writes_are_admin_only(client: AsyncClient, alice: User, headers_for) -> None:
    assert (await client.post("/api/categories", json={"name": "X"})).status_code == 401
    response = await client.post("/api/categories", json={"name": "X"}, headers=headers_for(alice))
    assert response.status_code == 403


async def test_category_invalid_id(client: AsyncClient, database: None) -> None:
    response = await client.get("/api/categories/nope")
    assert response.status_code == 400
    assert response.json()["code"] == "invalid_id"


async def test_dangling_category_resolves_to_null(
    client: AsyncClient, admin: User, headers_for
) -> None:
    headers = headers_for(admin)
    category = (await client.post("/api/categories", json={"name": "Temp"}, headers=headers)).json()
    task = await client.post(
        "/api/tasks",
        json={
            "title": "Tagged",
            "description": "d",
            "assignedTo": "crew@example.com",
            "priority": "low",
            "category": category["id"],
        },
        headers=headers,
    )
    await client.delete(f"/api/categories/{category['id']}", headers=headers)

    response = await client.get(f"/api/tasks/{task.json()['id']}")
    assert response.status_code == 200
    assert response.json()["category"] is None


async def test_category_keeps_free_form_fields(client: AsyncClient, admin: User, headers_for) -> None:
    headers = headers_for(admin)
    created = await client.post(
        "/api/categories", json={"name": "IT", "color": "#f00", "icon": "laptop"}, headers=headers
    )
    assert created.status_code == 201
    body = created.json()
    assert body["color"] == "#f00"
    assert body["icon"] == "laptop"

    updated = await client.put(
        f"/api/categories/{body['id']}", json={"color": "#0f0", "owner": "ops"}, headers=headers
    )
    assert updated.status_code == 200
    assert updated.json()["color"] == "#0f0"
    assert updated.json()["owner"] == "ops"
    assert updated.json()["name"] == "IT"

    fetched = (await client.get(f"/api/categories/{body['id']}")).json()
    assert fetched["color"] == "#0f0"
    assert fetched["icon"] == "laptop"
    assert fetched["owner"] == "ops"


async def test_task_embeds_free_form_category_fields(
    client: AsyncClient, admin: User, headers_for
) -> None:
    headers = headers_for(admin)
    category = (
        await client.post("/api/categories", json={"name": "Ops", "color": "#00f"}, headers=headers)
    ).json()
    task = await client.post(
        "/api/tasks",
        json={
            "title": "Rack servers",
            "description": "d",
            "assignedTo": "crew@example.com",
            "priority": "low",
            "category": category["id"],
        },
        headers=headers,
    )
    assert task.status_code == 201
    assert task.json()["category"]["color"] == "#00f"
