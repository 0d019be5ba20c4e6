"""
Scheduling Domain

Derives heater due dates and the overdue / upcoming windows used by the
dashboard. The rules live in scheduler.py; callers import them from here.
"""

from .scheduler import (
    UPCOMING_WINDOW_DAYS,
    calculate_next_maintenance,
    reschedule_heater,
    to_naive_utc,
    upcoming_window,
    utcnow,
)

__all__ = [
    "UPCOMING_WINDOW_DAYS",
    "calculate_next_maintenance",
    "reschedule_heater",
    "to_naive_utc",
    "upcoming_window",
    "utcnow",
]
