from models.user import Role, User
from utils.seed import DEFAULT_ROLES
from conftest import CLIENT_EMAIL


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok"}


def test_security_headers(client):
    resp = client.get("/health")
    assert resp.headers["X-Content-Type-Options"] == "nosniff"
    assert resp.headers["X-Frame-Options"] == "DENY"


def test_roles_seeded(app):
    with app.app_context():
        assert sorted(r.name for r in Role.query.all()) == sorted(DEFAULT_ROLES)


def test_make_admin_cli(app, client_user):
    runner = app.test_cli_runner()
    result = runner.invoke(args=["make-admin", CLIENT_EMAIL])
    assert "promoted to ADMIN" in result.output

    with app.app_context():
        user = User.query.filter_by(email=CLIENT_EMAIL).first()
        assert user.is_admin

    result = runner.invoke(args=["make-admin", "ghost@example.com"])
    assert "User not found" in result.output


def test_seed_catalog_cli(app):
    runner = app.test_cli_runner()
    assert "30 new rows" in runner.invoke(args=["seed-catalog"]).output
    assert "0 new rows" in runner.invoke(args=["seed-catalog"]).output
