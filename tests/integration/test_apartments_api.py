"""Tests for the apartment HTTP API."""

import pytest

from tests.utils import factories
from tests.utils.helpers import auth_headers, ids


@pytest.mark.integration
def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.integration
def test_browse_scenario(client, db, admin, agent, developer, compound):
    b = factories.create_apartment(db, agent, developer, compound, price=2000, is_available=False)
    a = factories.create_apartment(db, agent, developer, compound, price=1000)

    browse = client.get("/api/apartments", params={"minPrice": "500"})
    admin_view = client.get("/api/apartments/admin", headers=auth_headers(admin))
    by_compound = client.get(f"/api/compounds/{compound.id}/apartments")

    assert browse.status_code == 200
    assert ids(browse.json()["items"]) == [a.id]
    assert browse.json()["count"] == 1
    assert ids(admin_view.json()["items"]) == [a.id, b.id]
    assert ids(by_compound.json()["items"]) == [a.id]


@pytest.mark.integration
def test_listing_is_expanded(client, db, agent, developer, compound):
    amenity = factories.create_amenity(db, name="Pool")
    apartment = factories.create_apartment(
        db, agent, developer, compound, amenities=[amenity], unit_name="Loft", project="O West", price=8500
    )

    body = client.get(f"/api/apartments/{apartment.id}").json()

    assert body["developer"] == {"id": developer.id, "name": developer.name}
    assert body["compound"]["name"] == "O West"
    assert body["amenities"] == [{"id": amenity.id, "name": "Pool"}]
    assert body["agent"]["email"] == agent.email
    assert body["favorites"] == []
    assert body["title"] == "Loft - O West"
    assert body["price_formatted"] == "$8,500.00"


@pytest.mark.integration
def test_invalid_filters_are_reported_together(client):
    response = client.get("/api/apartments", params={"minPrice": "abc", "bedrooms": "12"})

    assert response.status_code == 400
    fields = {error["field"] for error in response.json()["errors"]}
    assert fields == {"minPrice", "bedrooms"}


@pytest.mark.integration
def test_unknown_apartment(client):
    response = client.get("/api/apartments/999")

    assert response.status_code == 404
    assert response.json() == {"detail": "Apartment not found"}


@pytest.mark.integration
def test_admin_view_access(client, user):
    assert client.get("/api/apartments/admin").status_code == 401
    assert client.get("/api/apartments/admin", headers=auth_headers(user)).status_code == 403


@pytest.mark.integration
def test_unknown_or_inactive_principal(client, db):
    inactive = factories.create_user(db, is_active=False)

    assert client.get("/api/apartments", headers={"X-User-Id": "nope"}).status_code == 401
    assert client.get("/api/apartments", headers={"X-User-Id": "999"}).status_code == 401
    assert client.get("/api/apartments", headers=auth_headers(inactive)).status_code == 401


@pytest.mark.integration
def test_agent_publishes_listing(client, agent, developer, compound):
    payload = factories.apartment_payload(developer.id, compound.id)

    response = client.post("/api/apartments", json=payload, headers=auth_headers(agent))

    assert response.status_code == 201
    body = response.json()
    assert body["agent"]["id"] == agent.id
    assert body["is_available"] is True

    mine = client.get("/api/apartments/my-listings", headers=auth_headers(agent)).json()
    assert ids(mine["items"]) == [body["id"]]


@pytest.mark.integration
def test_plain_user_cannot_publish(client, user, developer, compound):
    payload = factories.apartment_payload(developer.id, compound.id)

    response = client.post("/api/apartments", json=payload, headers=auth_headers(user))

    assert response.status_code == 403


@pytest.mark.integration
def test_publish_with_missing_compound(client, agent, developer):
    payload = factories.apartment_payload(developer.id, 999)

    response = client.post("/api/apartments", json=payload, headers=auth_headers(agent))

    assert response.status_code == 400
    assert response.json()["reference"] == "compound"
    assert client.get("/api/apartments/my-listings", headers=auth_headers(agent)).json()["count"] == 0


@pytest.mark.integration
def test_invalid_payload_is_422(client, agent, developer, compound):
    payload = factories.apartment_payload(developer.id, compound.id, listing_type="lease")

    assert client.post("/api/apartments", json=payload, headers=auth_headers(agent)).status_code == 422


@pytest.mark.integration
def test_only_owner_or_admin_modify(client, db, admin, agent, other_agent, developer, compound):
    apartment = factories.create_apartment(db, agent, developer, compound, price=1000)
    url = f"/api/apartments/{apartment.id}"

    assert client.put(url, json={"price": 1}, headers=auth_headers(other_agent)).status_code == 403
    assert client.put(url, json={"price": 1100}, headers=auth_headers(agent)).json()["price"] == 1100
    assert client.put(url, json={"price": 1200}, headers=auth_headers(admin)).json()["price"] == 1200

    assert client.delete(url, headers=auth_headers(other_agent)).status_code == 403
    assert client.delete(url, headers=auth_headers(agent)).status_code == 200
    assert client.get(url).status_code == 404


@pytest.mark.integration
def test_toggle_availability(client, db, agent, developer, compound):
    apartment = factories.create_apartment(db, agent, developer, compound)
    url = f"/api/apartments/{apartment.id}/toggle-availability"

    first = client.put(url, headers=auth_headers(agent)).json()
    second = client.put(url, headers=auth_headers(agent)).json()

    assert first["message"] == "Apartment marked as unavailable"
    assert first["item"]["is_available"] is False
    assert second["item"]["is_available"] is True


@pytest.mark.integration
def test_favorites_flow(client, db, agent, user, developer, compound):
    apartment = factories.create_apartment(db, agent, developer, compound)
    url = f"/api/apartments/{apartment.id}/favorite"

    assert client.post(url).status_code == 401
    client.post(url, headers=auth_headers(user))
    added = client.post(url, headers=auth_headers(user)).json()
    assert added["item"]["favorites"] == [user.id]

    favorites = client.get("/api/apartments/favorites", headers=auth_headers(user)).json()
    assert ids(favorites["items"]) == [apartment.id]

    removed = client.delete(url, headers=auth_headers(user)).json()
    assert removed["item"]["favorites"] == []
    assert client.delete(url, headers=auth_headers(user)).status_code == 200


@pytest.mark.integration
def test_favorite_unknown_apartment(client, user):
    assert client.post("/api/apartments/999/favorite", headers=auth_headers(user)).status_code == 404
