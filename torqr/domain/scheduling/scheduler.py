"""
Maintenance scheduling rules.

next_maintenance is always derived from (last_maintenance, maintenance_interval).
Months are added with relativedelta, which clamps to the last day of the target
month: Jan 31 + 1 month is Feb 28 (Feb 29 in leap years). Time of day is kept.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from dateutil.relativedelta import relativedelta

from ...models import Heater

UPCOMING_WINDOW_DAYS = 30


def utcnow() -> datetime:
    """Current time as naive UTC, the form datetimes are stored in"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def calculate_next_maintenance(reference_date: datetime, interval_months: int) -> datetime:
    """Advance reference_date by interval_months calendar months"""
    return to_naive_utc(reference_date) + relativedelta(months=interval_months)


def reschedule_heater(heater: Heater, now: Optional[datetime] = None) -> datetime:
    """
    Re-derive heater.next_maintenance from its current (already merged) fields.

    Falls back to now when the heater has no recorded last maintenance.
    """
    reference = heater.last_maintenance or now or utcnow()
    heater.next_maintenance = calculate_next_maintenance(reference, heater.maintenance_interval)
    return heater.next_maintenance


def upcoming_window(now: datetime) -> tuple[datetime, datetime]:
    """Inclusive [now, now + 30 days] range counted as upcoming"""
    return now, now + timedelta(days=UPCOMING_WINDOW_DAYS)
