import smtplib

import pytest

from models import db
from models.appointment import Appointment
from utils import emailer
from utils.notifications import build_status_message, notify_status_change
from utils.seed import seed_catalog
from conftest import insert_appointment


class FakeSMTP:
    sent = []

    def __init__(self, host, port, timeout=None):
        self.host = host
        self.port = port

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def starttls(self):
        pass

    def login(self, username, password):
        pass

    def send_message(self, msg):
        FakeSMTP.sent.append(msg)


@pytest.fixture
def ctx(app):
    with app.app_context():
        seed_catalog()
        yield


def _appointment(status):
    appt_id = insert_appointment("2025-04-10", "14:20", status=status)
    return db.session.get(Appointment, appt_id)


def test_confirmed_message(ctx):
    subject, body = build_status_message(_appointment("confirmed"))
    assert "confirmed" in subject
    assert "Corte de Cabelo" in body
    assert "2025-04-10" in body and "14:20" in body


def test_cancelled_message(ctx):
    subject, body = build_status_message(_appointment("cancelled"))
    assert "cancelled" in subject
    assert "Maria Silva" in body


def test_no_message_for_other_statuses(ctx):
    assert build_status_message(_appointment("completed")) is None
    assert notify_status_change(_appointment("pending"), "confirmed") == (False, "No notification for this status")


def test_unconfigured_smtp(ctx):
    assert notify_status_change(_appointment("confirmed"), "pending") == (False, "Email not configured")


def test_sends_through_smtp(app, ctx, monkeypatch):
    FakeSMTP.sent = []
    monkeypatch.setattr(emailer.smtplib, "SMTP", FakeSMTP)
    app.config.update(SMTP_HOST="smtp.example.com", SMTP_FROM_EMAIL="salao@example.com")

    sent, error = notify_status_change(_appointment("confirmed"), "pending")
    assert (sent, error) == (True, None)
    assert FakeSMTP.sent[0]["To"] == "maria@example.com"


def test_smtp_failure_is_reported(app, ctx, monkeypatch):
    class Broken(FakeSMTP):
        def send_message(self, msg):
            raise smtplib.SMTPException("relay denied")

    monkeypatch.setattr(emailer.smtplib, "SMTP", Broken)
    app.config.update(SMTP_HOST="smtp.example.com", SMTP_FROM_EMAIL="salao@example.com")

    assert notify_status_change(_appointment("cancelled"), "pending") == (False, "relay denied")
