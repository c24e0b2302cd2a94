"""
Integration tests for the trip endpoints
"""


def _create_trip(client, headers, location, date, category):
    r = client.post("/trips", json={"location": location, "date": date, "category": category}, headers=headers)
    assert r.status_code == 201, r.text
    return r.json()["data"]


def test_create_and_get_trip(client, authenticated_headers, test_user):
    trip = _create_trip(client, authenticated_headers, "  Paris, France ", "2024-05-01", "City")
    assert trip["location"] == "Paris, France"
    assert trip["category"] == "City"
    assert trip["user_id"] == test_user.id

    r = client.get(f"/trips/{trip['id']}", headers=authenticated_headers)
    assert r.status_code == 200
    detail = r.json()["data"]
    assert detail["trip"]["id"] == trip["id"]
    assert detail["memories"] == []


def test_create_trip_rejects_unknown_category(client, authenticated_headers):
    r = client.post(
        "/trips", json={"location": "Mars", "date": "2024-05-01", "category": "Space"}, headers=authenticated_headers
    )
    assert r.status_code == 422


def test_create_trip_rejects_blank_location(client, authenticated_headers):
    r = client.post(
        "/trips", json={"location": "   ", "date": "2024-05-01", "category": "City"}, headers=authenticated_headers
    )
    assert r.status_code == 422


def test_list_trips_grouped_and_filtered(client, authenticated_headers):
    _create_trip(client, authenticated_headers, "Paris, France", "2024-05-01", "City")
    _create_trip(client, authenticated_headers, "Bali", "2024-06-01", "Beach")
    _create_trip(client, authenticated_headers, "Paris, France", "2023-09-10", "Cultural")

    r = client.get("/trips", headers=authenticated_headers)
    assert r.status_code == 200
    listing = r.json()["data"]
    assert listing["total"] == 3
    assert listing["is_empty"] is False
    assert [g["location"] for g in listing["groups"]] == ["Bali", "Paris, France"]
    assert [t["date"] for t in listing["groups"][1]["trips"]] == ["2024-05-01", "2023-09-10"]

    r = client.get("/trips", params={"category": "All", "q": "paris"}, headers=authenticated_headers)
    listing = r.json()["data"]
    assert listing["total"] == 2
    assert listing["query"] == "paris"

    r = client.get("/trips", params={"category": "Beach"}, headers=authenticated_headers)
    listing = r.json()["data"]
    assert listing["category"] == "Beach"
    assert [g["location"] for g in listing["groups"]] == ["Bali"]


def test_empty_states(client, authenticated_headers):
    r = client.get("/trips", headers=authenticated_headers)
    listing = r.json()["data"]
    assert listing["is_empty"] is True
    assert listing["empty_message"] == "No trips yet. Start your travel journal!"

    _create_trip(client, authenticated_headers, "Bali", "2024-06-01", "Beach")
    r = client.get("/trips", params={"category": "Mountains"}, headers=authenticated_headers)
    listing = r.json()["data"]
    assert listing["is_empty"] is True
    assert listing["empty_message"] == "No trips match your filters."


def test_update_trip(client, authenticated_headers):
    trip = _create_trip(client, authenticated_headers, "Berlin", "2024-02-02", "City")

    r = client.put(f"/trips/{trip['id']}", json={"category": "Cultural"}, headers=authenticated_headers)
    assert r.status_code == 200
    updated = r.json()["data"]
    assert updated["category"] == "Cultural"
    assert updated["location"] == "Berlin"


def test_other_users_trip_is_not_found(client, authenticated_headers, other_headers):
    trip = _create_trip(client, authenticated_headers, "Kyoto", "2024-04-04", "Cultural")

    assert client.get(f"/trips/{trip['id']}", headers=other_headers).status_code == 404
    assert client.put(f"/trips/{trip['id']}", json={"location": "x"}, headers=other_headers).status_code == 404
    assert client.delete(f"/trips/{trip['id']}", headers=other_headers).status_code == 404
    assert client.get("/trips", headers=other_headers).json()["data"]["total"] == 0


def test_delete_trip_keeps_memories(client, authenticated_headers):
    trip = _create_trip(client, authenticated_headers, "Rome", "2024-07-01", "Cultural")
    r = client.post(
        f"/trips/{trip['id']}/memories",
        data={"title": "Colosseum", "date": "2024-07-02", "tags": "history"},
        headers=authenticated_headers,
    )
    assert r.status_code == 201, r.text

    r = client.delete(f"/trips/{trip['id']}", headers=authenticated_headers)
    assert r.status_code == 200
    assert r.json()["data"]["message"] == "Trip deleted"

    assert client.get(f"/trips/{trip['id']}", headers=authenticated_headers).status_code == 404
    memories = client.get(f"/trips/{trip['id']}/memories", headers=authenticated_headers).json()["data"]
    assert [m["title"] for m in memories] == ["Colosseum"]


def test_category_filter_ignores_case(client, authenticated_headers):
    _create_trip(client, authenticated_headers, "Bali", "2024-06-01", "Beach")
    _create_trip(client, authenticated_headers, "Zermatt", "2024-01-10", "Mountains")

    r = client.get("/trips", params={"category": "beach"}, headers=authenticated_headers)
    assert r.status_code == 200
    listing = r.json()["data"]
    assert listing["category"] == "Beach"
    assert [g["location"] for g in listing["groups"]] == ["Bali"]
