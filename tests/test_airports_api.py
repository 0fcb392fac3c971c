"""HTTP tests for the /airports routes using FastAPI's TestClient."""

from fastapi.testclient import TestClient

from airport_directory_api.app.core.config import Settings
from airport_directory_api.app.main import create_app


PATH = "/airports"

YJUK = {
    "icao": "YJUK",
    "iata": "",
    "name": "Tjukurla Airport",
    "city": "",
    "state": "Western-Australia",
    "country": "AU",
    "elevation": 0,
    "lat": -24.3707103729,
    "lon": 128.7393341064,
    "tz": "Australia/Perth",
}


# --- GET /airports ---

def test_get_page_of_airports(client):
    resp = client.get(PATH + "?page=1&pageSize=5")
    assert resp.status_code == 200
    assert len(resp.json()) == 5


def test_list_defaults_to_first_ten(client):
    resp = client.get(PATH)
    assert resp.status_code == 200
    body = resp.json()
    assert len(body) == 10
    assert body[0]["icao"] == "YABA"


def test_default_page_size_comes_from_settings(directory):
    app = create_app(settings=Settings(default_page_size=4), directory=directory)
    with TestClient(app) as c:
        assert len(c.get(PATH).json()) == 4


def test_page_out_of_range(client):
    resp = client.get(PATH + "?page=0&pageSize=5")
    assert resp.status_code == 400
    assert resp.text == "invalid search params"


def test_page_past_end(client):
    resp = client.get(PATH, params={"page": 2})
    assert resp.status_code == 400
    assert resp.text == "invalid search params"


def test_negative_page_size_is_rejected(client):
    resp = client.get(PATH, params={"page": 1, "pageSize": -1})
    assert resp.status_code == 400
    assert resp.text == "invalid search params"


def test_malformed_page_is_rejected(client):
    assert client.get(PATH + "?page=abc").status_code == 422


# --- POST /airports ---

def test_create_airport(client, martha):
    resp = client.post(PATH, json=martha)
    assert resp.status_code == 201
    body = resp.json()
    assert body["icao"] == martha["icao"]
    assert body["name"] == martha["name"]
    assert body["city"] == martha["city"]
    assert client.get(PATH + "/MLS").status_code == 200


def test_create_drops_unknown_fields(client, martha):
    resp = client.post(PATH, json={**martha, "runways": 3})
    assert resp.status_code == 201
    assert "runways" not in resp.json()


def test_create_duplicate_icao(client, martha):
    resp = client.post(PATH, json={**martha, "icao": "YJUK"})
    assert resp.status_code == 400
    assert resp.text == "airport must have unique icao"
    assert client.get(PATH + "/YJUK").json()["name"] == "Tjukurla Airport"


def test_create_without_required_data(client, martha):
    del martha["icao"]
    resp = client.post(PATH, json=martha)
    assert resp.status_code == 400
    assert resp.text == "airport must have icao, name and city"
    assert resp.headers["content-type"].startswith("text/plain")


# --- GET /airports/{icao} ---

def test_get_specific_airport(client):
    resp = client.get(PATH + "/YJUK")
    assert resp.status_code == 200
    assert resp.json() == YJUK


def test_integer_elevation_is_returned_unchanged(client):
    resp = client.get(PATH + "/YABA")
    assert resp.status_code == 200
    assert '"elevation":233,' in resp.text
    assert resp.json()["lat"] == -34.9432983398


def test_get_invalid_icao(client):
    resp = client.get(PATH + "/100GEC")
    assert resp.status_code == 400
    assert resp.text == "invalid icao"


# --- PATCH /airports/{icao} ---

def test_update_airport(client):
    resp = client.patch(PATH + "/YJUK", json={"name": "Happy Fun Airport"})
    assert resp.status_code == 202
    body = resp.json()
    assert body["name"] == "Happy Fun Airport"
    assert body["tz"] == YJUK["tz"]


def test_update_to_existing_icao(client):
    resp = client.patch(PATH + "/YJUK", json={"icao": "YJDA"})
    assert resp.status_code == 400
    assert resp.text == "airport must have unique icao"
    assert client.get(PATH + "/YJUK").json() == YJUK


def test_update_unknown_icao(client):
    resp = client.patch(PATH + "/NOPE", json={"name": "X"})
    assert resp.status_code == 400
    assert resp.text == "invalid icao"


def test_update_cannot_blank_required_field(client):
    before = client.get(PATH + "/YBBN").json()
    resp = client.patch(PATH + "/YBBN", json={"name": ""})
    assert resp.status_code == 400
    assert resp.text == "airport must have icao, name and city"
    assert client.get(PATH + "/YBBN").json() == before


def test_update_with_bad_field_type(client):
    before = client.get(PATH + "/YBBN").json()
    resp = client.patch(PATH + "/YBBN", json={"elevation": "very high"})
    assert resp.status_code == 400
    assert resp.text == "airport has invalid field values"
    assert client.get(PATH + "/YBBN").json() == before


# --- DELETE /airports/{icao} ---

def test_delete_airport(client):
    resp = client.delete(PATH + "/YJUK")
    assert resp.status_code == 202
    assert resp.text == "airport has been deleted"

    resp = client.get(PATH + "/YJUK")
    assert resp.status_code == 400
    assert resp.text == "invalid icao"


def test_delete_invalid_icao(client):
    resp = client.delete(PATH + "/:)")
    assert resp.status_code == 400
    assert resp.text == "invalid icao"


# --- wiring ---

def test_routes_honour_api_prefix(directory):
    app = create_app(settings=Settings(api_prefix="/api/v1"), directory=directory)
    with TestClient(app) as c:
        assert c.get("/api/v1/airports/YJUK").status_code == 200
        assert c.get("/airports/YJUK").status_code == 404


def test_scenario(client, martha):
    created = client.post(PATH, json=martha)
    assert created.status_code == 201
    assert created.json()["name"] == "Martha's airport"

    assert client.get(PATH + "/YJUK").json() == YJUK
    assert client.delete(PATH + "/YJUK").status_code == 202

    resp = client.get(PATH + "/YJUK")
    assert resp.status_code == 400
    assert resp.text == "invalid icao"
