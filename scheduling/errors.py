class BookingError(Exception):
    """Base class for errors raised by the appointment ledger."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SlotConflict(BookingError):
    """An active appointment already holds the requested date and time."""

    def __init__(self, date: str, time: str):
        super().__init__(f"Time slot {time} on {date} is already booked. Please choose another time.")
        self.date = date
        self.time = time


class AppointmentNotFound(BookingError):
    def __init__(self, appointment_id: int):
        super().__init__("Appointment not found")
        self.appointment_id = appointment_id


class InvalidStatus(BookingError):
    def __init__(self, status):
        super().__init__(f"Invalid status: {status!r}")
        self.status = status


class InvalidSlot(BookingError):
    def __init__(self, time: str):
        super().__init__(f"{time} is not a bookable time slot")
        self.time = time
