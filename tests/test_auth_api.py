from models.session import Session
from models.user import User
from security.csrf import CSRF_COOKIE
from conftest import CLIENT_EMAIL, PASSWORD, login


def test_register_and_login(app, client):
    resp = client.post("/auth/register", json={
        "email": "  Nova@Example.com ",
        "password": "abcd1234",
        "full_name": "Nova Cliente",
        "phone_number": "11999999999",
    })
    assert resp.status_code == 201
    user = resp.get_json()["user"]
    assert user["email"] == "nova@example.com"
    assert user["roles"] == ["CLIENT"]
    assert user["is_admin"] is False

    resp = client.post("/auth/login", json={"email": "nova@example.com", "password": "abcd1234"})
    assert resp.status_code == 200
    assert client.get_cookie(CSRF_COOKIE) is not None

    me = client.get("/auth/me").get_json()
    assert me["full_name"] == "Nova Cliente"


def test_register_defaults_name_from_email(client):
    resp = client.post("/auth/register", json={"email": "ana@example.com", "password": "abcd"})
    assert resp.get_json()["user"]["full_name"] == "ana"


def test_register_rejects_bad_input(client):
    assert client.post("/auth/register", json={"email": "nope", "password": "abcd"}).status_code == 400
    assert client.post("/auth/register", json={"email": "a@example.com", "password": "abc"}).status_code == 400
    assert client.post("/auth/register", json={
        "email": "a@example.com", "password": "abcd", "full_name": 42,
    }).status_code == 400


def test_register_duplicate_email(client, client_user):
    resp = client.post("/auth/register", json={"email": CLIENT_EMAIL, "password": "abcd"})
    assert resp.status_code == 409


def test_login_wrong_password(client, client_user):
    resp = client.post("/auth/login", json={"email": CLIENT_EMAIL, "password": "wrong"})
    assert resp.status_code == 401
    assert client.get("/auth/me").status_code == 401


def test_password_is_hashed(app, client_user):
    with app.app_context():
        user = User.query.filter_by(email=CLIENT_EMAIL).first()
        assert user.password_hash != PASSWORD
        assert user.password_hash.startswith("$2")


def test_logout_revokes_session(app, client, client_headers):
    assert client.get("/auth/me").status_code == 200
    assert client.post("/auth/logout", headers=client_headers).status_code == 200
    assert client.get("/auth/me").status_code == 401

    with app.app_context():
        assert Session.query.filter_by(revoked=False).count() == 0


def test_logout_all(app, client_user):
    first = app.test_client()
    second = app.test_client()
    headers = login(first, CLIENT_EMAIL)
    login(second, CLIENT_EMAIL)

    resp = first.post("/auth/logout_all", headers=headers)
    assert resp.status_code == 200
    assert resp.get_json()["revoked_sessions"] == 2
    assert second.get("/auth/me").status_code == 401
