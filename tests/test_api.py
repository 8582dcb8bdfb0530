"""
HTTP API tests.

Tests:
1-3.   Health, tile presets, defaults
4-8.   Stateless quote endpoints (areas, calculate, message, pdf)
9-13.  Saved quotes (snapshot, list newest first, recompute, delete)
14-17. Rate presets (upsert, load, delete)
18-20. Customers
21-22. Speech parsing
"""

import pytest

from tilequote import models


def _sample_job(room):
    return {"rooms": [room]}


def _sample_snapshot(room, name="Jane Smith"):
    return {
        "customer": {"name": name, "address": "1 High St", "phone": "07700 900123"},
        "rooms": [room],
        "rates": {"floor_rate": 45},
        "grout": {},
    }


# ============================================================
# Catalog + defaults
# ============================================================

def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "app": "tilequote"}


def test_tile_presets(client):
    response = client.get("/api/tile-presets")
    assert response.status_code == 200
    presets = response.json()
    assert len(presets) == 10
    assert presets[7] == {"label": "600×600", "length_mm": 600, "width_mm": 600}


def test_defaults(client):
    data = client.get("/api/defaults").json()
    assert data["rates"]["floor_rate"] == 45
    assert data["rates"]["labour_mode"] == "m2"
    assert data["grout"]["tile_length"] == 600
    assert data["room"]["name"] == "Room 1"
    assert data["room"]["room_height"] == 2.4


# ============================================================
# Quote endpoints
# ============================================================

def test_areas(client, sample_room_payload):
    response = client.post("/api/quotes/areas", json=_sample_job(sample_room_payload))
    assert response.status_code == 200
    assert response.json() == {"floor_area": 12.0, "wall_area": 0.0}


def test_calculate(client, sample_room_payload):
    response = client.post("/api/quotes/calculate", json=_sample_job(sample_room_payload))
    assert response.status_code == 200
    data = response.json()
    assert data["tiling_labour"] == pytest.approx(540.0)
    assert data["grand_total"] == pytest.approx(712.2)
    adhesive = next(m for m in data["materials"] if m["key"] == "adhesive")
    assert adhesive["units"] == 3


def test_calculate_rejects_unknown_option_kind(client, sample_room_payload):
    sample_room_payload["options"] = [{"kind": "wallpaper"}]
    response = client.post("/api/quotes/calculate", json=_sample_job(sample_room_payload))
    assert response.status_code == 422


def test_message(client, sample_room_payload):
    payload = {
        "rooms": [sample_room_payload],
        "customer": {"name": "Jane Smith", "email": "jane@example.com", "phone": "07700 900123"},
        "quote_date": "2026-03-05",
    }
    response = client.post("/api/quotes/message", json=payload)
    assert response.status_code == 200
    data = response.json()
    assert data["message"].startswith("TILING QUOTE — 05/03/2026")
    assert "TOTAL: £712.20" in data["message"]
    assert data["whatsapp_url"].startswith("https://wa.me/+447700900123?text=")
    assert data["email_url"].startswith("mailto:jane@example.com?subject=Tiling%20Quote")


def test_pdf(client, sample_room_payload):
    payload = {"rooms": [sample_room_payload], "customer": {"name": "Jane Smith"}}
    response = client.post("/api/quotes/pdf", json=payload)
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert "Quote-Jane-Smith.pdf" in response.headers["content-disposition"]
    assert response.content[:5] == b"%PDF-"


# ============================================================
# Saved quotes
# ============================================================

def test_save_quote_stores_snapshot(client, db, sample_room_payload):
    response = client.post("/api/saved-quotes/", json=_sample_snapshot(sample_room_payload))
    assert response.status_code == 200
    data = response.json()
    assert data["id"] > 0
    assert data["customer"]["name"] == "Jane Smith"
    assert data["rooms"][0]["tile_size_preset"] == "600×600"
    assert data["grand_total"] == pytest.approx(712.2)
    assert len(data["saved_at"]) == len("05/03/2026 14:30")

    stored = db.query(models.SavedQuote).first()
    assert stored.customer_name == "Jane Smith"
    assert stored.rooms_json[0]["floor_areas"][0]["length"] == 4.0


def test_list_saved_quotes_newest_first(client, sample_room_payload):
    client.post("/api/saved-quotes/", json=_sample_snapshot(sample_room_payload, "First"))
    client.post("/api/saved-quotes/", json=_sample_snapshot(sample_room_payload, "Second"))
    data = client.get("/api/saved-quotes/").json()
    assert [q["customer"]["name"] for q in data] == ["Second", "First"]


def test_saved_quote_result_is_recomputed(client, sample_room_payload):
    quote_id = client.post("/api/saved-quotes/", json=_sample_snapshot(sample_room_payload)).json()["id"]
    response = client.get(f"/api/saved-quotes/{quote_id}/result")
    assert response.status_code == 200
    assert response.json()["grand_total"] == pytest.approx(712.2)


def test_delete_saved_quote(client, sample_room_payload):
    quote_id = client.post("/api/saved-quotes/", json=_sample_snapshot(sample_room_payload)).json()["id"]
    assert client.delete(f"/api/saved-quotes/{quote_id}").status_code == 200
    assert client.get(f"/api/saved-quotes/{quote_id}").status_code == 404


def test_saved_quote_not_found(client):
    assert client.get("/api/saved-quotes/999").status_code == 404
    assert client.get("/api/saved-quotes/999/result").status_code == 404
    assert client.delete("/api/saved-quotes/999").status_code == 404


# ============================================================
# Rate presets
# ============================================================

def test_save_and_load_rate_preset(client):
    response = client.put("/api/rate-presets/Domestic", json={"floor_rate": 50, "vat_enabled": True})
    assert response.status_code == 200
    assert response.json()["rates"]["floor_rate"] == 50

    loaded = client.get("/api/rate-presets/Domestic").json()
    assert loaded["name"] == "Domestic"
    assert loaded["rates"]["vat_enabled"] is True
    assert loaded["rates"]["wall_rate"] == 55


def test_rate_preset_overwrite(client):
    client.put("/api/rate-presets/Domestic", json={"floor_rate": 50})
    client.put("/api/rate-presets/Domestic", json={"floor_rate": 60})
    presets = client.get("/api/rate-presets/").json()
    assert len(presets) == 1
    assert presets[0]["rates"]["floor_rate"] == 60


def test_rate_preset_blank_name_rejected(client):
    assert client.put("/api/rate-presets/%20", json={}).status_code == 400


def test_delete_rate_preset(client):
    client.put("/api/rate-presets/Commercial", json={})
    assert client.delete("/api/rate-presets/Commercial").status_code == 200
    assert client.get("/api/rate-presets/Commercial").status_code == 404


# ============================================================
# Customers
# ============================================================

def test_create_and_get_customer(client):
    created = client.post("/api/customers/", json={"name": "Jane Smith", "phone": "07700 900123"})
    assert created.status_code == 200
    customer_id = created.json()["id"]
    data = client.get(f"/api/customers/{customer_id}").json()
    assert data["name"] == "Jane Smith"
    assert data["phone"] == "07700 900123"


def test_update_customer(client):
    customer_id = client.post("/api/customers/", json={"name": "Jane"}).json()["id"]
    response = client.patch(f"/api/customers/{customer_id}", json={"address": "1 High St"})
    assert response.json()["address"] == "1 High St"
    assert response.json()["name"] == "Jane"


def test_delete_customer(client):
    customer_id = client.post("/api/customers/", json={"name": "Jane"}).json()["id"]
    assert client.delete(f"/api/customers/{customer_id}").status_code == 200
    assert client.get(f"/api/customers/{customer_id}").status_code == 404
    assert client.get("/api/customers/").json() == []


# ============================================================
# Speech
# ============================================================

def test_speech_parse_numeric(client):
    response = client.post("/api/speech/parse", json={"transcript": "two point four metres"})
    assert response.status_code == 200
    assert response.json() == {"value": "2.4"}


def test_speech_parse_unrecognized(client):
    response = client.post("/api/speech/parse", json={"transcript": "hello"})
    assert response.json() == {"value": None}
    response = client.post("/api/speech/parse", json={"transcript": " Jane ", "numeric": False})
    assert response.json() == {"value": "Jane"}
