from tests.conftest import auth_headers


def test_create_category_status_by_role(client, seed_users):
    writer_headers = auth_headers(client, "writer@newsroom.local")
    admin_headers = auth_headers(client, "admin@newsroom.local")

    resp = client.post("/api/categories", json={"name": "문화", "description": "공연/전시"}, headers=writer_headers)
    assert resp.status_code == 201
    assert resp.json()["status"] == "pending"

    resp = client.post("/api/categories", json={"name": "사회"}, headers=admin_headers)
    assert resp.status_code == 201
    assert resp.json()["status"] == "approved"

    names = [row["name"] for row in client.get("/api/categories").json()]
    assert set(names) == {"문화", "사회"}


def test_reader_cannot_create_category(client, seed_users):
    headers = auth_headers(client, "reader@newsroom.local")
    resp = client.post("/api/categories", json={"name": "스포츠"}, headers=headers)
    assert resp.status_code == 403


def test_duplicate_and_blank_category_names(client, seed_users, seed_category):
    headers = auth_headers(client, "admin@newsroom.local")
    assert client.post("/api/categories", json={"name": "정치"}, headers=headers).status_code == 409
    assert client.post("/api/categories", json={"name": "   "}, headers=headers).status_code == 400


def test_approve_and_delete_category_admin_only(client, seed_users):
    writer_headers = auth_headers(client, "writer@newsroom.local")
    mod_headers = auth_headers(client, "mod@newsroom.local")
    admin_headers = auth_headers(client, "admin@newsroom.local")
    category_id = client.post("/api/categories", json={"name": "경제"}, headers=writer_headers).json()["category_id"]

    assert client.patch(f"/api/categories/{category_id}/approve", headers=mod_headers).status_code == 403
    resp = client.patch(f"/api/categories/{category_id}/approve", headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["status"] == "approved"

    assert client.delete(f"/api/categories/{category_id}", headers=mod_headers).status_code == 403
    assert client.delete(f"/api/categories/{category_id}", headers=admin_headers).status_code == 200
    assert client.patch(f"/api/categories/{category_id}/approve", headers=admin_headers).status_code == 404


def test_update_category_rules(client, seed_users, seed_category):
    writer_headers = auth_headers(client, "writer@newsroom.local")
    mod_headers = auth_headers(client, "mod@newsroom.local")
    admin_headers = auth_headers(client, "admin@newsroom.local")
    category_id = seed_category.category_id
    client.post("/api/categories", json={"name": "경제"}, headers=admin_headers)

    assert client.put(f"/api/categories/{category_id}", json={"name": "정치 일반"}, headers=writer_headers).status_code == 403

    resp = client.put(f"/api/categories/{category_id}", json={"name": "정치 일반"}, headers=mod_headers)
    assert resp.status_code == 200
    assert resp.json()["name"] == "정치 일반"
    assert resp.json()["description"] == "정치 뉴스"
    assert resp.json()["status"] == "pending"

    resp = client.put(f"/api/categories/{category_id}", json={"description": "국회/정당"}, headers=admin_headers)
    assert resp.json()["status"] == "approved"
    assert resp.json()["name"] == "정치 일반"

    assert client.put(f"/api/categories/{category_id}", json={"name": "경제"}, headers=admin_headers).status_code == 409
    assert client.put(f"/api/categories/{category_id}", json={"name": " "}, headers=admin_headers).status_code == 400
    assert client.put("/api/categories/9999", json={"name": "없음"}, headers=admin_headers).status_code == 404
