from flask import current_app

from models.service import Service
from models import db
from scheduling import status as st
from utils.emailer import send_email

_CONFIRMED_BODY = """Hello {name},

Your appointment has been confirmed.

Service: {service}
Date: {date}
Time: {time}

We look forward to seeing you at {salon}.
"""

_CANCELLED_BODY = """Hello {name},

Unfortunately your appointment has been cancelled.

Service: {service}
Date: {date}
Time: {time}

Please get in touch with {salon} to book a new time.
"""


def _service_name(service_id) -> str:
    service = db.session.get(Service, service_id) if service_id is not None else None
    return service.name if service else "Service"


def build_status_message(appointment):
    """Returns (subject, body) for a customer-facing status email, or None."""
    salon = current_app.config.get("SALON_NAME", "the salon")
    fields = dict(
        name=appointment.name,
        service=_service_name(appointment.service_id),
        date=appointment.date,
        time=appointment.time,
        salon=salon,
    )
    if appointment.status == st.CONFIRMED:
        return f"Appointment confirmed - {salon}", _CONFIRMED_BODY.format(**fields)
    if appointment.status == st.CANCELLED:
        return f"Appointment cancelled - {salon}", _CANCELLED_BODY.format(**fields)
    return None


def notify_status_change(appointment, previous_status: str):
    """
    Email the customer when an appointment becomes confirmed or cancelled.
    Returns (sent, reason). Never raises on delivery problems.
    """
    if appointment.status == previous_status or appointment.status not in st.NOTIFY_STATUSES:
        return False, "No notification for this status"

    message = build_status_message(appointment)
    if message is None:
        return False, "No notification for this status"

    subject, body = message
    return send_email(appointment.email, subject, body)
