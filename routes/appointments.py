from flask import Blueprint, request, jsonify, g
from pydantic import ValidationError

from schemas import AppointmentCreate, StatusUpdate, error_details
from scheduling import ledger
from scheduling.errors import AppointmentNotFound, InvalidSlot, InvalidStatus, SlotConflict
from scheduling.slots import parse_date
from scheduling.status import NOTIFY_STATUSES
from security.rbac import require_roles
from utils.auth_context import login_required, current_user_id
from utils.audit import log_event
from utils.notifications import notify_status_change

appointments_bp = Blueprint("appointments", __name__)

SLOT_HINT = "Use a time from /appointments/available-times/<date>."


def _parse_id(raw):
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


# ---------- PUBLIC: slot availability for a day ----------
@appointments_bp.get("/appointments/available-times/<date_str>")
def available_times(date_str: str):
    try:
        parse_date(date_str)
    except ValueError:
        return jsonify(error="Invalid date. Use YYYY-MM-DD"), 400

    slots = ledger.available_slots_for(date_str)
    return jsonify([s.to_dict() for s in slots]), 200


# ---------- PUBLIC: book an appointment (DOUBLE-BOOKING SAFE) ----------
@appointments_bp.post("/appointments")
def create_appointment():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    try:
        payload = AppointmentCreate.model_validate(data)
    except ValidationError as exc:
        return jsonify(error="Invalid appointment data", details=error_details(exc)), 400

    try:
        appt = ledger.create_appointment(payload)
    except InvalidSlot as exc:
        message = f"{exc.message}. {SLOT_HINT}"
        return jsonify(error=message, details=[{"field": "time", "message": message}]), 400
    except SlotConflict as exc:
        log_event(
            "APPOINTMENT_FAIL_SLOT_TAKEN",
            user_id=current_user_id(),
            entity="appointment",
            metadata={"date": exc.date, "time": exc.time},
        )
        return jsonify(error=exc.message, conflict=True), 409

    log_event(
        "APPOINTMENT_CREATE",
        user_id=current_user_id(),
        entity="appointment",
        entity_id=appt.id,
        metadata={"date": appt.date, "time": appt.time},
    )
    return jsonify(appt.to_dict()), 201


# ---------- ADMIN: list all appointments ----------
@appointments_bp.get("/appointments")
@require_roles("ADMIN")
def list_appointments():
    status = request.args.get("status")
    date_str = request.args.get("date")  # YYYY-MM-DD

    if date_str:
        try:
            parse_date(date_str)
        except ValueError:
            return jsonify(error="Invalid date. Use YYYY-MM-DD"), 400

    try:
        rows = ledger.list_appointments(status=status, date=date_str)
    except InvalidStatus as exc:
        return jsonify(error=exc.message), 400

    return jsonify([a.to_dict() for a in rows]), 200


@appointments_bp.get("/appointments/<appointment_id>")
@require_roles("ADMIN")
def get_appointment(appointment_id: str):
    appt_id = _parse_id(appointment_id)
    if appt_id is None:
        return jsonify(error="Invalid appointment id"), 400

    try:
        appt = ledger.get_appointment(appt_id)
    except AppointmentNotFound as exc:
        return jsonify(error=exc.message), 404
    return jsonify(appt.to_dict()), 200


# ---------- CUSTOMER: my appointments ----------
@appointments_bp.get("/my-appointments")
@login_required
def my_appointments():
    rows = ledger.appointments_for_email(g.user.email)
    return jsonify([a.to_dict() for a in rows]), 200


# ---------- ADMIN: change status ----------
@appointments_bp.patch("/appointments/<appointment_id>/status")
@require_roles("ADMIN")
def update_status(appointment_id: str):
    appt_id = _parse_id(appointment_id)
    if appt_id is None:
        return jsonify(error="Invalid appointment id"), 400

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    try:
        body = StatusUpdate.model_validate(data)
    except ValidationError as exc:
        return jsonify(error="Invalid request data", details=error_details(exc)), 400

    try:
        appt, previous = ledger.update_appointment_status(appt_id, body.status)
    except InvalidStatus as exc:
        return jsonify(error=exc.message), 400
    except AppointmentNotFound as exc:
        return jsonify(error=exc.message), 404
    except SlotConflict as exc:
        log_event(
            "APPOINTMENT_STATUS_FAIL_SLOT_TAKEN",
            user_id=g.user.id,
            entity="appointment",
            entity_id=appt_id,
            metadata={"status": body.status},
        )
        return jsonify(error=exc.message, conflict=True), 409

    log_event(
        "APPOINTMENT_STATUS_UPDATE",
        user_id=g.user.id,
        entity="appointment",
        entity_id=appt.id,
        metadata={"from": previous, "to": appt.status},
    )

    if appt.status != previous and appt.status in NOTIFY_STATUSES:
        sent, reason = notify_status_change(appt, previous)
        log_event(
            "APPOINTMENT_NOTIFY" if sent else "APPOINTMENT_NOTIFY_FAIL",
            user_id=g.user.id,
            entity="appointment",
            entity_id=appt.id,
            metadata={"status": appt.status, "error": reason},
        )

    return jsonify(appt.to_dict()), 200
