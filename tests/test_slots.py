"""Tests for scheduling/slots.py"""

import pytest

from scheduling.slots import TimeSlot, generate_time_slots, mark_occupancy, parse_date

DEFAULT_DAY = [
    "09:00", "09:40", "10:20", "11:00", "11:40", "12:20", "13:00",
    "13:40", "14:20", "15:00", "15:40", "16:20", "17:00",
]


def test_default_template_has_thirteen_slots():
    slots = generate_time_slots()
    assert slots == DEFAULT_DAY
    assert len(slots) == 13


def test_slots_ascending_and_zero_padded():
    slots = generate_time_slots()
    assert slots == sorted(slots)
    assert all(len(s) == 5 and s[2] == ":" for s in slots)


def test_template_is_restartable():
    assert generate_time_slots() == generate_time_slots()


def test_last_slot_must_finish_by_closing():
    # 17:40 would end at 18:20
    assert "17:40" not in generate_time_slots()
    assert generate_time_slots("09:00", "10:00", 30) == ["09:00", "09:30"]


def test_custom_window():
    assert generate_time_slots("08:00", "09:00", 15) == ["08:00", "08:15", "08:30", "08:45"]


def test_empty_when_window_shorter_than_step():
    assert generate_time_slots("09:00", "09:20", 40) == []


@pytest.mark.parametrize("step", [0, -40])
def test_rejects_non_positive_step(step):
    with pytest.raises(ValueError):
        generate_time_slots(step_minutes=step)


def test_rejects_malformed_boundary():
    with pytest.raises(ValueError):
        generate_time_slots("9am", "18:00", 40)


def test_time_slot_status_tag():
    assert TimeSlot("09:00", True).to_dict() == {"time": "09:00", "available": True, "status": "available"}
    assert TimeSlot("09:00", False).to_dict() == {"time": "09:00", "available": False, "status": "occupied"}


def test_mark_occupancy_keeps_template_order():
    marked = mark_occupancy(DEFAULT_DAY, {"14:20", "09:00", "14:00"})
    assert [s.time for s in marked] == DEFAULT_DAY
    assert [s.time for s in marked if not s.available] == ["09:00", "14:20"]


def test_parse_date():
    assert parse_date("2025-04-10").isoformat() == "2025-04-10"
    for bad in ("2025-4-10", "10/04/2025", "2025-02-30", "", None):
        with pytest.raises(ValueError):
            parse_date(bad)
