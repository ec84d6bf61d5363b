from __future__ import annotations

from httpx import AsyncClient

from tasktracker.app.models import User


async def test_admin_lists_users_without_hashes(
    client: AsyncClient, admin: User, alice: User, headers_for
) -> None:
    response = await client.get("/api/users", headers=headers_for(admin))
    assert response.status_code == 200
    body = response.json()
    assert [user["email"] for user in body] == [admin.email, alice.email]
    assert all("hashedPassword" not in user for user in body)


async def test_user_listing_is_admin_only(client: AsyncClient, alice: User, headers_for) -> None:
    assert (await client.get("/api/users")).status_code == 401
    assert (await client.get("/api/users", headers=headers_for(alice))).status_code == 403
