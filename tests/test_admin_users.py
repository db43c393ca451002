# tests/test_admin_users.py
import uuid

from ticket_system.auth.security import verify_password
from ticket_system.user.services import UserService

USERS = "/api/v1/admin/users"


def test_requires_token(client):
    r = client.get(USERS)
    assert r.status_code == 401
    assert r.headers["www-authenticate"] == "Bearer"


def test_non_admin_is_forbidden(client, user_headers):
    r = client.get(USERS, headers=user_headers)
    assert r.status_code == 403
    assert r.json()["error"] == "Admin access required"


def test_admin_lists_users(client, admin_headers, regular_user):
    r = client.get(USERS, headers=admin_headers)
    assert r.status_code == 200
    assert {u["email"] for u in r.json()} == {"admin@example.com", "user@example.com"}


def test_create_user_hides_password(client, admin_headers, db):
    r = client.post(
        USERS,
        json={"email": "new@example.com", "password": "secret1", "role": "user"},
        headers=admin_headers,
    )
    assert r.status_code == 201
    body = r.json()
    assert body["email"] == "new@example.com"
    assert body["role"] == "user"
    assert "password" not in body

    stored = UserService(db).get_user_by_email("new@example.com")
    assert stored.password != "secret1"
    assert verify_password(stored.password, "secret1")


def test_create_user_validation(client, admin_headers):
    bad_bodies = [
        {"email": "not-an-email", "password": "secret1", "role": "user"},
        {"email": "a@example.com", "password": "short", "role": "user"},
        {"email": "a@example.com", "password": "secret1", "role": "owner"},
        {"email": "a@example.com", "role": "user"},
    ]
    for body in bad_bodies:
        r = client.post(USERS, json=body, headers=admin_headers)
        assert r.status_code == 400, body


def test_create_duplicate_email_is_500(client, admin_headers):
    r = client.post(
        USERS,
        json={"email": "admin@example.com", "password": "secret1", "role": "user"},
        headers=admin_headers,
    )
    assert r.status_code == 500
    assert "failed to create user" in r.json()["error"]


def test_create_user_overlong_password_is_500(client, admin_headers):
    r = client.post(
        USERS,
        json={"email": "long@example.com", "password": "a" * 80, "role": "user"},
        headers=admin_headers,
    )
    assert r.status_code == 500
    assert "failed to hash password" in r.json()["error"]


def test_get_user(client, admin_headers, regular_user):
    r = client.get(f"{USERS}/{regular_user.id}", headers=admin_headers)
    assert r.status_code == 200
    assert r.json()["email"] == "user@example.com"


def test_get_user_not_found(client, admin_headers):
    r = client.get(f"{USERS}/{uuid.uuid4()}", headers=admin_headers)
    assert r.status_code == 404
    assert r.json()["error"] == "User not found"


def test_invalid_user_id(client, admin_headers, metrics):
    r = client.get(f"{USERS}/nope", headers=admin_headers)
    assert r.status_code == 400
    assert r.json()["error"] == "Invalid user ID"
    assert metrics.value("error_total", {"type": "invalid_id"}) == 1


def test_invalid_user_id_without_token_is_401(client):
    r = client.get(f"{USERS}/nope")
    assert r.status_code == 401


def test_update_user(client, admin_headers, regular_user):
    r = client.put(
        f"{USERS}/{regular_user.id}",
        json={"email": "promoted@example.com", "role": "admin"},
        headers=admin_headers,
    )
    assert r.status_code == 200
    assert r.json()["email"] == "promoted@example.com"
    assert r.json()["role"] == "admin"


def test_update_missing_user_is_500(client, admin_headers):
    r = client.put(
        f"{USERS}/{uuid.uuid4()}",
        json={"email": "x@example.com", "role": "user"},
        headers=admin_headers,
    )
    assert r.status_code == 500
    assert "user not found" in r.json()["error"]


def test_delete_user(client, admin_headers, regular_user):
    r = client.delete(f"{USERS}/{regular_user.id}", headers=admin_headers)
    assert r.status_code == 200
    assert r.json() == {"message": "User deleted successfully"}

    r2 = client.get(f"{USERS}/{regular_user.id}", headers=admin_headers)
    assert r2.status_code == 404


def test_deleted_admin_token_is_rejected(client, admin, admin_headers):
    client.delete(f"{USERS}/{admin.id}", headers=admin_headers)
    r = client.get(USERS, headers=admin_headers)
    assert r.status_code == 401
    assert r.json()["error"] == "User not found"
