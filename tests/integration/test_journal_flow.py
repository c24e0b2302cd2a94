"""
End-to-end journal flow over the ASGI app
"""
import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_trip_memory_places_to_visit_flow(async_client: AsyncClient):
    r = await async_client.post(
        "/auth/register", json={"email": "marie@example.com", "password": "Passw0rd!", "display_name": "Marie"}
    )
    assert r.status_code == 200, r.text
    headers = {"Authorization": f"Bearer {r.json()['data']['token']['access_token']}"}

    r = await async_client.get("/trips", headers=headers)
    assert r.json()["data"]["empty_message"] == "No trips yet. Start your travel journal!"

    r = await async_client.post(
        "/trips", json={"location": "Paris, France", "date": "2024-05-01", "category": "City"}, headers=headers
    )
    assert r.status_code == 201
    trip_id = r.json()["data"]["id"]

    r = await async_client.post(
        f"/trips/{trip_id}/memories",
        data={"title": "Eiffel Tower", "date": "2024-05-02", "tags": "sunset, future visit"},
        files={"photo": ("eiffel.png", b"\x89PNG fake", "image/png")},
        headers=headers,
    )
    assert r.status_code == 201, r.text
    memory = r.json()["data"]
    assert memory["photo_url"].endswith(".png")

    r = await async_client.get("/trips", params={"category": "City", "q": "paris"}, headers=headers)
    listing = r.json()["data"]
    assert [g["location"] for g in listing["groups"]] == ["Paris, France"]

    r = await async_client.get("/trips", params={"category": "All"}, headers=headers)
    assert r.json()["data"]["groups"][0]["trips"][0]["id"] == trip_id

    r = await async_client.get("/memories/places-to-visit", params={"q": "eiffel"}, headers=headers)
    assert [m["id"] for m in r.json()["data"]["memories"]] == [memory["id"]]

    r = await async_client.get("/memories/places-to-visit", params={"q": "Rome"}, headers=headers)
    assert r.json()["data"]["memories"] == []

    r = await async_client.delete(f"/trips/{trip_id}", headers=headers)
    assert r.status_code == 200

    # Memories of a deleted trip stay in the journal
    r = await async_client.get("/memories/places-to-visit", headers=headers)
    assert r.json()["data"]["total"] == 1
