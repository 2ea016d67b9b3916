"""
Appointment scheduling core: the day's slot template, slot occupancy and the
appointment ledger (booking conflicts and status changes).
"""
