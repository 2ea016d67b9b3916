from scheduling.errors import InvalidStatus

PENDING = "pending"
CONFIRMED = "confirmed"
COMPLETED = "completed"
CANCELLED = "cancelled"

STATUSES = (PENDING, CONFIRMED, COMPLETED, CANCELLED)

# statuses that hold a slot
ACTIVE_STATUSES = frozenset({PENDING, CONFIRMED})

# statuses the customer is told about
NOTIFY_STATUSES = frozenset({CONFIRMED, CANCELLED})


def is_active(status: str) -> bool:
    return status in ACTIVE_STATUSES


def normalize_status(value) -> str:
    """
    Returns the canonical status for value or raises InvalidStatus.

    Any status may follow any other (an admin can reopen a completed or
    cancelled appointment by moving it back to pending).
    """
    if not isinstance(value, str):
        raise InvalidStatus(value)
    status = value.strip().lower()
    if status not in STATUSES:
        raise InvalidStatus(value)
    return status
