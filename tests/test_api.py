"""Tests de l'API : inscription, connexion, utilisateurs et messages."""

from datetime import datetime

import pytest


def register(client, username, password="secret"):
    response = client.post("/api/auth/register", json={
        "username": username,
        "password": password,
        "first_name": username.capitalize(),
        "last_name": "Test",
        "phone": "555-0100",
    })
    assert response.status_code == 200, response.text
    return response.json()["token"]


def auth(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def tokens(client):
    return {name: register(client, name) for name in ("alice", "bob", "carol")}


@pytest.fixture
def message_id(client, tokens):
    response = client.post(
        "/api/messages", json={"to_username": "bob", "body": "hi bob"}, headers=auth(tokens["alice"])
    )
    assert response.status_code == 201, response.text
    return response.json()["message"]["id"]


def test_register_duplicate_is_conflict(client, tokens):
    response = client.post("/api/auth/register", json={
        "username": "alice", "password": "x", "first_name": "A", "last_name": "B", "phone": "1",
    })
    assert response.status_code == 409


def test_login_ok_and_ko(client, tokens):
    response = client.post("/api/auth/login", json={"username": "alice", "password": "secret"})
    assert response.status_code == 200
    assert response.json()["token"]

    for payload in ({"username": "alice", "password": "nope"}, {"username": "ghost", "password": "secret"}):
        response = client.post("/api/auth/login", json=payload)
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid user/password"


def test_login_updates_last_login_at(client, tokens):
    def last_login_at():
        response = client.get("/api/users/alice", headers=auth(tokens["alice"]))
        return datetime.fromisoformat(response.json()["user"]["last_login_at"])

    before = last_login_at()
    response = client.post("/api/auth/login", json={"username": "alice", "password": "secret"})
    assert response.status_code == 200

    assert last_login_at() > before


def test_register_sets_last_login_at(client, tokens):
    response = client.get("/api/users/bob", headers=auth(tokens["bob"]))

    user = response.json()["user"]
    assert user["last_login_at"] is not None
    assert datetime.fromisoformat(user["last_login_at"]) >= datetime.fromisoformat(user["join_at"])


def test_token_form_login(client, tokens):
    response = client.post("/api/auth/token", data={"username": "alice", "password": "secret"})
    assert response.status_code == 200

    body = response.json()
    assert body["token_type"] == "bearer"
    assert client.get("/api/users/alice", headers=auth(body["access_token"])).status_code == 200

    response = client.post("/api/auth/token", data={"username": "alice", "password": "nope"})
    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"


def test_users_require_a_valid_token(client, tokens):
    assert client.get("/api/users").status_code == 401
    assert client.get("/api/users", headers=auth("not-a-token")).status_code == 401


def test_list_users_hides_passwords(client, tokens):
    response = client.get("/api/users", headers=auth(tokens["alice"]))
    assert response.status_code == 200

    users = response.json()["users"]
    assert [u["username"] for u in users] == ["alice", "bob", "carol"]
    for user in users:
        assert set(user) == {"username", "first_name", "last_name", "phone"}


def test_get_own_profile(client, tokens):
    response = client.get("/api/users/alice", headers=auth(tokens["alice"]))
    assert response.status_code == 200

    user = response.json()["user"]
    assert user["username"] == "alice"
    assert user["join_at"] is not None
    assert user["last_login_at"] >= user["join_at"]
    assert "password" not in user


def test_get_other_profile_is_unauthorized(client, tokens):
    assert client.get("/api/users/bob", headers=auth(tokens["alice"])).status_code == 401
    assert client.get("/api/users/bob/to", headers=auth(tokens["alice"])).status_code == 401


def test_create_message_response_shape(client, tokens):
    response = client.post(
        "/api/messages", json={"to_username": "bob", "body": "hello"}, headers=auth(tokens["alice"])
    )
    assert response.status_code == 201

    message = response.json()["message"]
    assert set(message) == {"id", "from_username", "to_username", "body", "sent_at"}
    assert message["from_username"] == "alice"
    assert message["to_username"] == "bob"


def test_create_message_to_unknown_user(client, tokens):
    response = client.post(
        "/api/messages", json={"to_username": "ghost", "body": "boo"}, headers=auth(tokens["alice"])
    )
    assert response.status_code == 400


def test_get_message_as_sender_and_recipient(client, tokens, message_id):
    for name in ("alice", "bob"):
        response = client.get(f"/api/messages/{message_id}", headers=auth(tokens[name]))
        assert response.status_code == 200

        message = response.json()["message"]
        assert message["body"] == "hi bob"
        assert message["read_at"] is None
        assert message["from_user"]["username"] == "alice"
        assert message["to_user"]["username"] == "bob"
        assert "password" not in message["from_user"]


def test_get_message_as_third_party_is_unauthorized(client, tokens, message_id):
    response = client.get(f"/api/messages/{message_id}", headers=auth(tokens["carol"]))
    assert response.status_code == 401


def test_get_unknown_message_is_not_found(client, tokens):
    assert client.get("/api/messages/9999", headers=auth(tokens["alice"])).status_code == 404


def test_mark_read_only_by_recipient(client, tokens, message_id):
    for name in ("alice", "carol"):
        response = client.post(f"/api/messages/{message_id}/read", headers=auth(tokens[name]))
        assert response.status_code == 401

    response = client.post(f"/api/messages/{message_id}/read", headers=auth(tokens["bob"]))
    assert response.status_code == 200

    message = response.json()["message"]
    assert message["id"] == message_id
    assert message["read_at"] is not None


def test_user_message_lists(client, tokens, message_id):
    sent = client.get("/api/users/alice/from", headers=auth(tokens["alice"])).json()["messages"]
    assert [m["id"] for m in sent] == [message_id]
    assert sent[0]["to_user"]["username"] == "bob"

    received = client.get("/api/users/bob/to", headers=auth(tokens["bob"])).json()["messages"]
    assert [m["id"] for m in received] == [message_id]
    assert received[0]["from_user"]["username"] == "alice"
