from __future__ import annotations

from beanie import PydanticObjectId
from httpx import AsyncClient

from tasktracker.app.models import Report, User


async def _file_report(client: AsyncClient, headers: dict[str, str], **overrides: object) -> dict:
    payload = {"title": "Broken chair", "description": "Leg snapped", "category": "complaint"}
    payload.update(overrides)
    response = await client.post("/api/reports", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


async def test_create_report_resolves_creator_and_task(
    client: AsyncClient, admin: User, alice: User, make_task, headers_for
) -> None:
    task = await make_task(creator=admin, assigned_to=alice.email, title="Fix chair")
    report = await _file_report(client, headers_for(alice), relatedTask=str(task.id), category="work")

    assert report["createdBy"] == {"id": str(alice.id), "email": alice.email}
    assert report["relatedTask"] == {"id": str(task.id), "title": "Fix chair"}
    assert report["category"] == "work"


async def test_create_report_defaults_related_task_to_null(
    client: AsyncClient, alice: User, headers_for
) -> None:
    report = await _file_report(client, headers_for(alice))
    assert report["relatedTask"] is None


async def test_create_report_validation(client: AsyncClient, alice: User, headers_for) -> None:
    headers = headers_for(alice)
    missing = await client.post("/api/reports", json={"title": "Only"}, headers=headers)
    assert missing.status_code == 400
    bad_category = await client.post(
        "/api/reports",
        json={"title": "t", "description": "d", "category": "praise"},
        headers=headers,
    )
    assert bad_category.status_code == 400
    anonymous = await client.post(
        "/api/reports", json={"title": "t", "description": "d", "category": "work"}
    )
    assert anonymous.status_code == 401


async def test_reports_are_private_to_creator(
    client: AsyncClient, admin: User, alice: User, bob: User, headers_for
) -> None:
    await _file_report(client, headers_for(alice), title="From alice")
    await _file_report(client, headers_for(bob), title="From bob")

    alice_view = await client.get("/api/reports", headers=headers_for(alice))
    assert [report["title"] for report in alice_view.json()] == ["From alice"]

    admin_view = await client.get("/api/reports", headers=headers_for(admin))
    assert [report["title"] for report in admin_view.json()] == ["From bob", "From alice"]


async def test_non_admin_cannot_delete_report(
    client: AsyncClient, alice: User, headers_for
) -> None:
    report = await _file_report(client, headers_for(alice))

    response = await client.delete(f"/api/reports/{report['id']}", headers=headers_for(alice))
    assert response.status_code == 403
    assert response.json()["code"] == "forbidden"
    assert await Report.get(PydanticObjectId(report["id"])) is not None


async def test_admin_deletes_report(client: AsyncClient, admin: User, alice: User, headers_for) -> None:
    report = await _file_report(client, headers_for(alice))
    headers = headers_for(admin)

    response = await client.delete(f"/api/reports/{report['id']}", headers=headers)
    assert response.status_code == 200
    assert response.json() == {"message": "Report deleted successfully"}

    again = await client.delete(f"/api/reports/{report['id']}", headers=headers)
    assert again.status_code == 404
    malformed = await client.delete("/api/reports/123", headers=headers)
    assert malformed.status_code == 400
