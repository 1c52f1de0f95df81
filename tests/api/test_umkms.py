"""API contract tests for /api/umkms."""

from datetime import date


def test_create_round_trips_lists_in_order(client, umkm_payload):
    resp = client.post("/api/umkms", json=umkm_payload)
    assert resp.status_code == 201
    created = resp.json()
    assert created["id"] == 1

    fetched = client.get(f"/api/umkms/{created['id']}").json()
    assert fetched["productImages"] == umkm_payload["productImages"]
    assert fetched["reviews"] == umkm_payload["reviews"]
    for key, value in umkm_payload.items():
        assert fetched[key] == value


def test_publish_date_defaults_to_today(client, umkm_payload):
    umkm_payload.pop("publishDate")
    created = client.post("/api/umkms", json=umkm_payload).json()
    assert created["publishDate"] == date.today().isoformat()


def test_json_encoded_lists_are_accepted(client, umkm_payload):
    umkm_payload["productImages"] = '["https://example.com/a.jpg", "https://example.com/b.jpg"]'
    umkm_payload["reviews"] = ""
    created = client.post("/api/umkms", json=umkm_payload).json()
    assert created["productImages"] == ["https://example.com/a.jpg", "https://example.com/b.jpg"]
    assert created["reviews"] == []


def test_unknown_category_is_accepted(client, umkm_payload):
    umkm_payload["categoryId"] = 404
    resp = client.post("/api/umkms", json=umkm_payload)
    assert resp.status_code == 201
    assert resp.json()["categoryId"] == 404


def test_invalid_review_rating_is_rejected(client, umkm_payload):
    umkm_payload["reviews"][0]["rating"] = 6
    resp = client.post("/api/umkms", json=umkm_payload)
    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid request"


def test_missing_name_is_rejected(client, umkm_payload):
    del umkm_payload["name"]
    assert client.post("/api/umkms", json=umkm_payload).status_code == 400


def test_list_filters_by_category(seeded_client):
    all_umkms = seeded_client.get("/api/umkms").json()
    assert len(all_umkms) == 6
    assert [u["id"] for u in all_umkms] == [1, 2, 3, 4, 5, 6]

    crafts = seeded_client.get("/api/umkms", params={"categoryId": 1}).json()
    assert {u["name"] for u in crafts} == {"Yayuk Collection", "Batik Alami Desa"}


def test_invalid_category_filter_is_ignored(seeded_client):
    resp = seeded_client.get("/api/umkms", params={"categoryId": "kerajinan"})
    assert resp.status_code == 200
    assert len(resp.json()) == 6


def test_get_missing_umkm_returns_404(client):
    resp = client.get("/api/umkms/12345")
    assert resp.status_code == 404
    assert resp.json() == {"message": "UMKM not found"}


def test_invalid_umkm_id_returns_400(client):
    for bad in ("abc", "0", "-3"):
        resp = client.get(f"/api/umkms/{bad}")
        assert resp.status_code == 400
        assert resp.json() == {"message": "Invalid UMKM ID"}


def test_update_merges_fields(client, umkm_payload):
    created = client.post("/api/umkms", json=umkm_payload).json()
    resp = client.put(
        f"/api/umkms/{created['id']}",
        json={"id": 77, "currentCondition": "Tutup", "promotionText": None},
    )
    assert resp.status_code == 200
    updated = resp.json()
    assert updated["id"] == created["id"]
    assert updated["currentCondition"] == "Tutup"
    assert updated["promotionText"] == umkm_payload["promotionText"]
    assert updated["productImages"] == umkm_payload["productImages"]


def test_update_replaces_lists(client, umkm_payload):
    created = client.post("/api/umkms", json=umkm_payload).json()
    updated = client.put(
        f"/api/umkms/{created['id']}",
        json={"productImages": ["https://example.com/new.jpg"]},
    ).json()
    assert updated["productImages"] == ["https://example.com/new.jpg"]
    assert updated["reviews"] == umkm_payload["reviews"]


def test_update_missing_umkm_returns_404(client):
    assert client.put("/api/umkms/9", json={"name": "X"}).status_code == 404


def test_delete_removes_from_list(seeded_client):
    assert seeded_client.delete("/api/umkms/3").status_code == 204
    ids = [u["id"] for u in seeded_client.get("/api/umkms").json()]
    assert 3 not in ids
    assert seeded_client.get("/api/umkms/3").status_code == 404
    assert seeded_client.delete("/api/umkms/3").status_code == 404


def test_ids_are_not_reused_after_delete(client, umkm_payload):
    first = client.post("/api/umkms", json=umkm_payload).json()
    client.delete(f"/api/umkms/{first['id']}")
    second = client.post("/api/umkms", json=umkm_payload).json()
    assert second["id"] > first["id"]


def test_blank_name_update_is_rejected_and_store_stays_readable(seeded_client):
    for name in ("", "   "):
        resp = seeded_client.put("/api/umkms/1", json={"name": name})
        assert resp.status_code == 400
        assert resp.json()["message"] == "Invalid request"

    assert seeded_client.get("/api/umkms/1").json()["name"] == "Yayuk Collection"
    assert seeded_client.get("/api/umkms").status_code == 200


def test_update_name_is_stripped(seeded_client):
    resp = seeded_client.put("/api/umkms/2", json={"name": "  Yaris Cookies Baru "})
    assert resp.status_code == 200
    assert resp.json()["name"] == "Yaris Cookies Baru"


def test_oversized_ids_are_rejected(seeded_client):
    huge = "99999999999999999999"
    for method in ("get", "delete"):
        resp = getattr(seeded_client, method)(f"/api/umkms/{huge}")
        assert resp.status_code == 400
        assert resp.json() == {"message": "Invalid UMKM ID"}
    resp = seeded_client.put(f"/api/umkms/{huge}", json={"name": "X"})
    assert resp.status_code == 400


def test_largest_id_is_simply_missing(client):
    assert client.get(f"/api/umkms/{2**63 - 1}").status_code == 404


def test_oversized_category_filter_is_ignored(seeded_client):
    resp = seeded_client.get("/api/umkms", params={"categoryId": str(10**20)})
    assert resp.status_code == 200
    assert len(resp.json()) == 6


def test_oversized_category_id_in_body_is_rejected(seeded_client, umkm_payload):
    umkm_payload["categoryId"] = 10**20
    assert seeded_client.post("/api/umkms", json=umkm_payload).status_code == 400
    assert seeded_client.put("/api/umkms/1", json={"categoryId": 10**20}).status_code == 400
    assert len(seeded_client.get("/api/umkms").json()) == 6
