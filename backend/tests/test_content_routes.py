"""다섯 종류 콘텐츠 API의 생성/조회/편집/이력/되돌리기/승인/삭제 흐름을 검증합니다."""

import pytest

from app.models.content_version import ContentVersion
from tests.conftest import auth_headers

KIND_CASES = [
    ("/api/news", "news_id", "news"),
    ("/api/videos", "video_id", "video"),
    ("/api/long-videos", "long_video_id", "long_video"),
    ("/api/magazines", "magazine_id", "magazine"),
    ("/api/magazines2", "magazine_id", "magazine2"),
]


def _payload(prefix, category_id, **overrides):
    if prefix == "/api/news":
        data = {"title": "원래 제목", "description": "원래 본문", "category_id": category_id, "news_type": "state"}
    elif prefix in ("/api/videos", "/api/long-videos"):
        data = {
            "title": "원래 제목",
            "description": "원래 본문",
            "thumbnail": "/media/thumb.jpg",
            "video_url": "https://cdn.newsroom.local/v/1.mp4",
            "category_id": category_id,
            "video_duration": 60,
        }
    else:
        data = {
            "title": "원래 제목",
            "description": "원래 본문",
            "published_year": "2026",
            "published_month": "March",
            "magazine_type": "mag",
        }
    data.update(overrides)
    return data


def _create(client, prefix, category_id, headers, **overrides):
    resp = client.post(prefix, json=_payload(prefix, category_id, **overrides), headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()


@pytest.mark.parametrize("prefix, id_key, entity_type", KIND_CASES)
def test_create_permissions_and_initial_status(client, seed_users, seed_category, prefix, id_key, entity_type):
    writer_headers = auth_headers(client, "writer@newsroom.local")
    admin_headers = auth_headers(client, "admin@newsroom.local")
    reader_headers = auth_headers(client, "reader@newsroom.local")

    created = _create(client, prefix, seed_category.category_id, writer_headers)
    assert created["status"] == "pending"
    assert created["created_by"] == seed_users["writer"].user_id
    assert id_key in created

    created = _create(client, prefix, seed_category.category_id, admin_headers)
    assert created["status"] == "approved"

    resp = client.post(prefix, json=_payload(prefix, seed_category.category_id), headers=reader_headers)
    assert resp.status_code == 403

    resp = client.post(prefix, json=_payload(prefix, seed_category.category_id))
    assert resp.status_code in (401, 403)


@pytest.mark.parametrize("prefix, id_key, entity_type", KIND_CASES)
def test_public_list_count_and_detail(client, seed_users, seed_category, prefix, id_key, entity_type):
    writer_headers = auth_headers(client, "writer@newsroom.local")
    first = _create(client, prefix, seed_category.category_id, writer_headers, title="첫 번째")
    second = _create(client, prefix, seed_category.category_id, writer_headers, title="두 번째")

    resp = client.get(prefix)
    assert resp.status_code == 200
    assert [row[id_key] for row in resp.json()] == [second[id_key], first[id_key]]

    resp = client.get(f"{prefix}/count")
    assert resp.status_code == 200
    assert resp.json()["total"] == 2

    resp = client.get(f"{prefix}/{first[id_key]}")
    assert resp.status_code == 200
    assert resp.json()["title"] == "첫 번째"

    assert client.get(f"{prefix}/99999").status_code == 404


@pytest.mark.parametrize("prefix, id_key, entity_type", KIND_CASES)
def test_invalid_tag_is_rejected(client, seed_users, seed_category, prefix, id_key, entity_type):
    writer_headers = auth_headers(client, "writer@newsroom.local")

    resp = client.post(prefix, json=_payload(prefix, seed_category.category_id, news_type="national"), headers=writer_headers)
    assert resp.status_code == 400

    created = _create(client, prefix, seed_category.category_id, writer_headers)
    resp = client.put(f"{prefix}/{created[id_key]}", json={"magazine_type": "weekly"}, headers=writer_headers)
    assert resp.status_code == 400

    history = client.get(f"{prefix}/{created[id_key]}/history", headers=writer_headers)
    assert history.status_code == 404


@pytest.mark.parametrize("prefix, id_key, entity_type", KIND_CASES)
def test_edit_history_revert_and_delete_version(client, seed_users, seed_category, prefix, id_key, entity_type):
    writer_headers = auth_headers(client, "writer@newsroom.local")
    mod_headers = auth_headers(client, "mod@newsroom.local")
    admin_headers = auth_headers(client, "admin@newsroom.local")
    created = _create(client, prefix, seed_category.category_id, writer_headers)
    entity_id = created[id_key]

    resp = client.put(f"{prefix}/{entity_id}", json={"title": "작성자 수정"}, headers=writer_headers)
    assert resp.status_code == 200
    assert resp.json()["title"] == "작성자 수정"
    assert resp.json()["description"] == "원래 본문"
    assert resp.json()["status"] == "pending"

    resp = client.put(f"{prefix}/{entity_id}", json={"description": "관리자 본문"}, headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["status"] == "approved"

    resp = client.put(f"{prefix}/{entity_id}", json={"title": "세 번째"}, headers=mod_headers)
    assert resp.status_code == 200
    assert resp.json()["status"] == "pending"

    history = client.get(f"{prefix}/{entity_id}/history", headers=writer_headers)
    assert history.status_code == 200
    rows = history.json()
    assert [row["version_no"] for row in rows] == [3, 2, 1]
    assert rows[0]["entity_type"] == entity_type
    assert rows[0]["updated_by_email"] == "mod@newsroom.local"
    assert rows[2]["snapshot"]["title"] == "원래 제목"

    resp = client.post(f"{prefix}/{entity_id}/revert/3", headers=writer_headers)
    assert resp.status_code == 403

    resp = client.post(f"{prefix}/{entity_id}/revert/3", headers=mod_headers)
    assert resp.status_code == 200
    assert resp.json()["title"] == "작성자 수정"
    assert resp.json()["description"] == "원래 본문"
    assert resp.json()["status"] == "pending"
    assert resp.json()["approved_by"] is None
    rows = client.get(f"{prefix}/{entity_id}/history", headers=writer_headers).json()
    assert [row["version_no"] for row in rows] == [2, 1]

    resp = client.delete(f"{prefix}/{entity_id}/versions/1", headers=writer_headers)
    assert resp.status_code == 403

    resp = client.delete(f"{prefix}/{entity_id}/versions/1", headers=mod_headers)
    assert resp.status_code == 200
    assert resp.json()["remaining_versions"] == 1

    rows = client.get(f"{prefix}/{entity_id}/history", headers=writer_headers).json()
    assert [row["version_no"] for row in rows] == [1]
    assert rows[0]["snapshot"]["title"] == "작성자 수정"

    assert client.delete(f"{prefix}/{entity_id}/versions/7", headers=mod_headers).status_code == 404
    assert client.post(f"{prefix}/{entity_id}/revert/7", headers=mod_headers).status_code == 404
    assert client.post(f"{prefix}/{entity_id}/revert/1", headers=mod_headers).status_code == 404


@pytest.mark.parametrize("prefix, id_key, entity_type", KIND_CASES)
def test_other_writer_cannot_edit(client, seed_users, seed_category, prefix, id_key, entity_type):
    writer_headers = auth_headers(client, "writer@newsroom.local")
    other_headers = auth_headers(client, "writer2@newsroom.local")
    created = _create(client, prefix, seed_category.category_id, writer_headers)

    resp = client.put(f"{prefix}/{created[id_key]}", json={"title": "남의 글"}, headers=other_headers)
    assert resp.status_code == 403

    assert client.put(f"{prefix}/99999", json={"title": "x"}, headers=writer_headers).status_code == 404


@pytest.mark.parametrize("prefix, id_key, entity_type", KIND_CASES)
def test_approve_is_admin_only_and_idempotent(client, seed_users, seed_category, prefix, id_key, entity_type):
    writer_headers = auth_headers(client, "writer@newsroom.local")
    mod_headers = auth_headers(client, "mod@newsroom.local")
    admin_headers = auth_headers(client, "admin@newsroom.local")
    created = _create(client, prefix, seed_category.category_id, writer_headers)
    entity_id = created[id_key]

    assert client.patch(f"{prefix}/{entity_id}/approve", headers=mod_headers).status_code == 403

    resp = client.patch(f"{prefix}/{entity_id}/approve", headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["status"] == "approved"
    assert resp.json()["approved_by"] == seed_users["admin"].user_id

    again = client.patch(f"{prefix}/{entity_id}/approve", headers=admin_headers)
    assert again.status_code == 200
    assert again.json()["approved_at"] == resp.json()["approved_at"]

    assert client.patch(f"{prefix}/99999/approve", headers=admin_headers).status_code == 404


@pytest.mark.parametrize("prefix, id_key, entity_type", KIND_CASES)
def test_delete_entity_removes_ledger(client, db, seed_users, seed_category, prefix, id_key, entity_type):
    writer_headers = auth_headers(client, "writer@newsroom.local")
    mod_headers = auth_headers(client, "mod@newsroom.local")
    created = _create(client, prefix, seed_category.category_id, writer_headers)
    entity_id = created[id_key]
    client.put(f"{prefix}/{entity_id}", json={"title": "수정"}, headers=writer_headers)

    assert client.delete(f"{prefix}/{entity_id}", headers=writer_headers).status_code == 403

    resp = client.delete(f"{prefix}/{entity_id}", headers=mod_headers)
    assert resp.status_code == 200
    assert client.get(f"{prefix}/{entity_id}").status_code == 404
    remaining = (
        db.query(ContentVersion)
        .filter(ContentVersion.entity_type == entity_type, ContentVersion.entity_id == entity_id)
        .count()
    )
    assert remaining == 0


def test_news_unknown_category_rejected(client, seed_users, seed_category):
    writer_headers = auth_headers(client, "writer@newsroom.local")
    resp = client.post("/api/news", json=_payload("/api/news", 9999), headers=writer_headers)
    assert resp.status_code == 400


def test_news_list_filters(client, seed_users, seed_category):
    writer_headers = auth_headers(client, "writer@newsroom.local")
    admin_headers = auth_headers(client, "admin@newsroom.local")
    _create(client, "/api/news", seed_category.category_id, writer_headers, news_type="district")
    _create(client, "/api/news", seed_category.category_id, admin_headers, news_type="special")

    resp = client.get("/api/news", params={"news_type": "District_News"})
    assert [row["news_type"] for row in resp.json()] == ["districtnews"]

    resp = client.get("/api/news", params={"status": "approved"})
    assert [row["news_type"] for row in resp.json()] == ["specialnews"]

    assert client.get("/api/news", params={"news_type": "bogus"}).status_code == 400
    assert client.get("/api/news", params={"status": "draft"}).status_code == 400


@pytest.mark.parametrize("prefix", ["/api/magazines", "/api/magazines2"])
def test_magazines_by_year_ordered_by_month(client, seed_users, prefix):
    admin_headers = auth_headers(client, "admin@newsroom.local")
    for title, month, year in [
        ("3월호", "March", "2026"),
        ("1월호", "January", "2026"),
        ("작년 12월호", "December", "2025"),
        ("1월 특별호", "January", "2026"),
    ]:
        _create(client, prefix, None, admin_headers, title=title, published_month=month, published_year=year)

    resp = client.get(f"{prefix}/by-year/2026")
    assert resp.status_code == 200
    assert [row["title"] for row in resp.json()] == ["1월 특별호", "1월호", "3월호"]

    assert client.get(f"{prefix}/by-year/26").status_code == 400


def test_magazine_invalid_published_year(client, seed_users):
    admin_headers = auth_headers(client, "admin@newsroom.local")
    resp = client.post(
        "/api/magazines",
        json=_payload("/api/magazines", None, published_year="twenty"),
        headers=admin_headers,
    )
    assert resp.status_code == 400


def test_news_list_by_category_and_title(client, seed_users, seed_category):
    admin_headers = auth_headers(client, "admin@newsroom.local")
    other = client.post("/api/categories", json={"name": "경제"}, headers=admin_headers).json()
    _create(client, "/api/news", seed_category.category_id, admin_headers, title="국회 소식")
    _create(client, "/api/news", other["category_id"], admin_headers, title="증시 마감")

    resp = client.get("/api/news", params={"category_id": other["category_id"]})
    assert resp.status_code == 200
    assert [row["title"] for row in resp.json()] == ["증시 마감"]

    resp = client.get("/api/news", params={"q": "국회"})
    assert [row["title"] for row in resp.json()] == ["국회 소식"]

    assert client.get("/api/news", params={"category_id": 9999}).status_code == 404
    assert client.get("/api/magazines", params={"category_id": seed_category.category_id}).status_code == 400


def test_latest_news_only_live_newest_first(client, seed_users, seed_category):
    admin_headers = auth_headers(client, "admin@newsroom.local")
    _create(client, "/api/news", seed_category.category_id, admin_headers, title="첫 속보")
    _create(client, "/api/news", seed_category.category_id, admin_headers, title="종료된 방송", is_live=False)
    for i in range(11):
        _create(client, "/api/news", seed_category.category_id, admin_headers, title=f"속보 {i}")

    resp = client.get("/api/news/latest")
    assert resp.status_code == 200
    titles = [row["title"] for row in resp.json()]
    assert len(titles) == 10
    assert titles[0] == "속보 10"
    assert "종료된 방송" not in titles
    assert "첫 속보" not in titles

    assert client.get("/api/videos/latest").status_code == 422
