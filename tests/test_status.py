import pytest

from scheduling import status as st
from scheduling.errors import InvalidStatus


def test_active_statuses():
    assert st.is_active("pending")
    assert st.is_active("confirmed")
    assert not st.is_active("completed")
    assert not st.is_active("cancelled")


@pytest.mark.parametrize("raw,expected", [
    ("pending", "pending"),
    ("Confirmed", "confirmed"),
    ("  cancelled ", "cancelled"),
    ("COMPLETED", "completed"),
])
def test_normalize_status(raw, expected):
    assert st.normalize_status(raw) == expected


@pytest.mark.parametrize("raw", ["", "done", None, 3])
def test_normalize_status_rejects_unknown(raw):
    with pytest.raises(InvalidStatus):
        st.normalize_status(raw)
