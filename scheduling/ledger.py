"""
Appointment ledger.

Answers "which slots are free on a date" and records bookings without ever
holding two active (pending/confirmed) appointments on the same date and time.
Occupancy is recomputed from the appointments table on every query.

The pre-checks here give a friendly answer in the common case; the partial
unique index on appointments(date, time) is what actually holds the
invariant when two writers race, and its IntegrityError is reported as the
same SlotConflict.
"""

import logging
from datetime import datetime
from typing import List, Optional, Tuple

from flask import current_app
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError

from models import db
from models.appointment import Appointment
from scheduling import status as st
from scheduling.errors import AppointmentNotFound, InvalidSlot, SlotConflict
from scheduling.slots import (
    DEFAULT_DAY_END,
    DEFAULT_DAY_START,
    DEFAULT_STEP_MINUTES,
    TimeSlot,
    generate_time_slots,
    mark_occupancy,
)

logger = logging.getLogger(__name__)


def slot_template() -> List[str]:
    cfg = current_app.config
    return generate_time_slots(
        cfg.get("SLOT_DAY_START", DEFAULT_DAY_START),
        cfg.get("SLOT_DAY_END", DEFAULT_DAY_END),
        int(cfg.get("SLOT_STEP_MINUTES", DEFAULT_STEP_MINUTES)),
    )


def _active_on(date: str):
    return Appointment.query.filter(
        Appointment.date == date,
        Appointment.status.in_(sorted(st.ACTIVE_STATUSES)),
    )


def occupied_times(date: str) -> set:
    return {a.time for a in _active_on(date).all()}


def available_slots_for(date: str) -> List[TimeSlot]:
    """Every template slot for date, marked available or occupied. Read-only."""
    return mark_occupancy(slot_template(), occupied_times(date))


def find_active_conflict(date: str, time: str, exclude_id: Optional[int] = None) -> Optional[Appointment]:
    q = _active_on(date).filter(Appointment.time == time)
    if exclude_id is not None:
        q = q.filter(Appointment.id != exclude_id)
    return q.first()


def create_appointment(payload) -> Appointment:
    """
    Book payload (a validated schemas.AppointmentCreate) as a pending appointment.

    Raises InvalidSlot if the time is not on the slot template and
    SlotConflict if an active appointment already holds date+time.
    """
    if payload.time not in slot_template():
        raise InvalidSlot(payload.time)

    if find_active_conflict(payload.date, payload.time):
        raise SlotConflict(payload.date, payload.time)

    appt = Appointment(
        name=payload.name,
        email=payload.email,
        phone=payload.phone,
        service_id=payload.service_id,
        category_id=payload.category_id,
        date=payload.date,
        time=payload.time,
        notes=payload.notes,
        status=st.PENDING,
        created_at=datetime.utcnow(),
    )
    db.session.add(appt)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        # lost a race with a concurrent booking for the same slot
        logger.warning("slot %s %s taken by concurrent booking", payload.date, payload.time)
        raise SlotConflict(payload.date, payload.time)

    logger.info("appointment %s booked for %s %s", appt.id, appt.date, appt.time)
    return appt


def get_appointment(appointment_id: int) -> Appointment:
    appt = db.session.get(Appointment, appointment_id)
    if appt is None:
        raise AppointmentNotFound(appointment_id)
    return appt


def update_appointment_status(appointment_id: int, new_status) -> Tuple[Appointment, str]:
    """
    Set the status of an appointment. Returns (appointment, previous_status).

    Transitions are not restricted, except that moving an appointment back to
    an active status fails with SlotConflict when another active appointment
    now holds its slot.
    """
    status = st.normalize_status(new_status)
    appt = get_appointment(appointment_id)
    previous = appt.status

    if st.is_active(status) and not st.is_active(previous):
        if find_active_conflict(appt.date, appt.time, exclude_id=appt.id):
            raise SlotConflict(appt.date, appt.time)

    slot_date, slot_time = appt.date, appt.time
    appt.status = status
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise SlotConflict(slot_date, slot_time)

    logger.info("appointment %s status %s -> %s", appt.id, previous, status)
    return appt, previous


def list_appointments(status: Optional[str] = None, date: Optional[str] = None) -> List[Appointment]:
    q = Appointment.query
    if status:
        q = q.filter(Appointment.status == st.normalize_status(status))
    if date:
        q = q.filter(Appointment.date == date)
    return q.order_by(Appointment.created_at.desc(), Appointment.id.desc()).all()


def appointments_for_email(email: str) -> List[Appointment]:
    email = (email or "").strip().lower()
    if not email:
        return []
    return (
        Appointment.query
        .filter(func.lower(Appointment.email) == email)
        .order_by(Appointment.date.asc(), Appointment.time.asc())
        .all()
    )
