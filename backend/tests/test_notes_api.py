import pytest

from conftest import create_note

MISSING_ID = "00000000-0000-0000-0000-000000000000"


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}


def test_create_then_read_counts_views(client):
    r = client.post("/api/create", json={"title": "T", "content": "C", "password": "p"})
    assert r.status_code == 200
    body = r.json()
    note_id = body["id"]
    assert body["message"]

    r = client.post("/api/get", json={"id": note_id, "password": "p"})
    assert r.status_code == 200
    note = r.json()
    assert note["id"] == note_id
    assert note["title"] == "T"
    assert note["content"] == "C"
    assert note["type"] == "text"
    assert note["views"] == 1
    assert "createdAt" in note
    assert "password_hash" not in note

    r = client.post("/api/get", json={"id": note_id, "password": "p"})
    assert r.json()["views"] == 2
    assert r.json()["createdAt"] == note["createdAt"]


def test_multibyte_content_roundtrip(client):
    note_id = create_note(client, content="héllo 世界 🎉", type="markdown")
    r = client.post("/api/get", json={"id": note_id, "password": "p"})
    assert r.status_code == 200
    assert r.json()["content"] == "héllo 世界 🎉"
    assert r.json()["type"] == "markdown"


def test_wrong_password_is_403_and_not_counted(client):
    note_id = create_note(client)

    r = client.post("/api/get", json={"id": note_id, "password": "nope"})
    assert r.status_code == 403
    assert "message" in r.json()

    r = client.post("/api/get", json={"id": note_id, "password": "p"})
    assert r.json()["views"] == 1


def test_unknown_id_is_404(client):
    r = client.post("/api/get", json={"id": MISSING_ID, "password": "p"})
    assert r.status_code == 404
    r = client.post("/api/get", json={"id": "not-a-real-id", "password": "p"})
    assert r.status_code == 404


def test_update_without_new_password(client):
    note_id = create_note(client)

    r = client.post("/api/update", json={
        "id": note_id, "title": "T2", "content": "C2", "currentPassword": "p",
    })
    assert r.status_code == 200
    assert r.json()["id"] == note_id

    r = client.post("/api/get", json={"id": note_id, "password": "p"})
    assert r.status_code == 200
    assert r.json()["title"] == "T2"
    assert r.json()["content"] == "C2"

    r = client.post("/api/get", json={"id": note_id, "password": "unrelated"})
    assert r.status_code == 403


def test_update_with_new_password(client):
    note_id = create_note(client)

    r = client.post("/api/update", json={
        "id": note_id, "title": "T", "content": "C2", "type": "code",
        "currentPassword": "p", "newPassword": "q",
    })
    assert r.status_code == 200

    r = client.post("/api/get", json={"id": note_id, "password": "p"})
    assert r.status_code == 403

    r = client.post("/api/get", json={"id": note_id, "password": "q"})
    assert r.status_code == 200
    assert r.json()["content"] == "C2"
    assert r.json()["type"] == "code"


def test_update_wrong_current_password(client):
    note_id = create_note(client)
    r = client.post("/api/update", json={
        "id": note_id, "title": "X", "content": "Y", "currentPassword": "wrong", "newPassword": "q",
    })
    assert r.status_code == 403

    r = client.post("/api/get", json={"id": note_id, "password": "p"})
    assert r.json()["content"] == "C"


def test_update_unknown_id_is_404(client):
    r = client.post("/api/update", json={
        "id": MISSING_ID, "title": "T", "content": "C", "currentPassword": "p",
    })
    assert r.status_code == 404


def test_delete_then_everything_is_404(client):
    note_id = create_note(client)

    r = client.post("/api/delete", json={"id": note_id, "password": "wrong"})
    assert r.status_code == 403

    r = client.post("/api/delete", json={"id": note_id, "password": "p"})
    assert r.status_code == 200
    assert r.json()["message"]

    assert client.post("/api/get", json={"id": note_id, "password": "p"}).status_code == 404
    assert client.post("/api/update", json={
        "id": note_id, "title": "T", "content": "C", "currentPassword": "p",
    }).status_code == 404
    assert client.post("/api/delete", json={"id": note_id, "password": "p"}).status_code == 404


@pytest.mark.parametrize("path, body", [
    ("/api/create", {"content": "C", "password": "p"}),
    ("/api/create", {"title": "T", "password": "p"}),
    ("/api/create", {"title": "T", "content": "C"}),
    ("/api/create", {"title": "", "content": "C", "password": "p"}),
    ("/api/get", {"password": "p"}),
    ("/api/get", {"id": MISSING_ID}),
    ("/api/update", {"id": MISSING_ID, "title": "T", "content": "C"}),
    ("/api/update", {"title": "T", "content": "C", "currentPassword": "p"}),
    ("/api/delete", {"id": MISSING_ID}),
    ("/api/delete", {"password": "p"}),
])
def test_missing_fields_are_400(client, data_dir, path, body):
    r = client.post(path, json=body)
    assert r.status_code == 400
    assert r.json()["message"]
    assert not (data_dir / "notes").exists()


def test_missing_field_on_existing_note_changes_nothing(client):
    note_id = create_note(client)
    r = client.post("/api/update", json={"id": note_id, "title": "T2", "currentPassword": "p"})
    assert r.status_code == 400

    r = client.post("/api/get", json={"id": note_id, "password": "p"})
    assert r.json()["title"] == "T"
    assert r.json()["views"] == 1


def test_unknown_fields_are_rejected(client, data_dir):
    r = client.post("/api/create", json={"title": "T", "content": "C", "password": "p", "views": 99})
    assert r.status_code == 400
    assert not (data_dir / "notes").exists()


def test_wrong_field_types_are_rejected(client):
    r = client.post("/api/create", json={"title": "T", "content": 123, "password": "p"})
    assert r.status_code == 400


def test_cors_preflight(client):
    r = client.options(
        "/api/get",
        headers={"Origin": "https://example.com", "Access-Control-Request-Method": "POST"},
    )
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] in ("*", "https://example.com")


def test_unknown_endpoint_uses_message_body(client):
    r = client.post("/api/nope", json={})
    assert r.status_code == 404
    assert r.json() == {"message": "API endpoint does not exist"}


def test_wrong_method_uses_message_body(client):
    r = client.get("/api/get")
    assert r.status_code == 405
    assert "message" in r.json()


def test_plain_options_is_answered(client):
    r = client.options("/api/get")
    assert r.status_code == 200


@pytest.mark.parametrize("field, limit", [
    ("title", 200),
    ("content", 100_000),
    ("type", 50),
    ("password", 128),
])
def test_field_length_limits(client, data_dir, field, limit):
    body = {"title": "T", "content": "C", "password": "p"}

    body[field] = "x" * limit
    assert client.post("/api/create", json=body).status_code == 200

    body[field] = "x" * (limit + 1)
    r = client.post("/api/create", json=body)
    assert r.status_code == 400
    assert len(list((data_dir / "notes").iterdir())) == 1


def test_unknown_endpoint_with_options_elsewhere(client):
    assert client.options("/api/nope").status_code == 200
    assert client.post("/api/nope", json={}).status_code == 404
