from sqlalchemy.exc import DataError

from models import db
from models.audit_log import AuditLog
from utils.audit import log_event
from conftest import booking_payload


def test_forwarded_chain_keeps_first_hop(app, client):
    chain = ", ".join(["203.0.113.7"] + [f"10.0.0.{i}" for i in range(20)])
    resp = client.post("/appointments", json=booking_payload(), headers={"X-Forwarded-For": chain})
    assert resp.status_code == 201

    with app.app_context():
        row = AuditLog.query.filter_by(action="APPOINTMENT_CREATE").one()
        assert row.ip == "203.0.113.7"


def test_oversized_forwarded_value_is_truncated(app):
    with app.test_request_context(headers={"X-Forwarded-For": "x" * 300}):
        log_event("APPOINTMENT_CREATE", entity="appointment", entity_id=1)
        assert len(AuditLog.query.one().ip) == 64


def test_remote_addr_without_proxy(app):
    with app.test_request_context(environ_base={"REMOTE_ADDR": "198.51.100.4"}):
        log_event("LOGIN_FAIL")
        assert AuditLog.query.one().ip == "198.51.100.4"


def test_store_failure_does_not_raise(app, monkeypatch):
    def failing_commit():
        raise DataError("INSERT INTO audit_logs", {}, Exception("value too long"))

    with app.test_request_context():
        monkeypatch.setattr(db.session, "commit", failing_commit)
        log_event("APPOINTMENT_CREATE", entity="appointment", entity_id=1)
        monkeypatch.undo()

        assert AuditLog.query.count() == 0
