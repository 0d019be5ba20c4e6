"""Dashboard repository - Aggregate counts scoped to one user"""

from datetime import datetime

from sqlalchemy import func
from sqlalchemy.orm import Session

from ...models import Customer, Heater


class DashboardRepository:
    """Independent count queries; each is consistent on its own"""

    @staticmethod
    def count_customers(db: Session, user_id: str) -> int:
        return (
            db.query(func.count(Customer.id)).filter(Customer.user_id == user_id).scalar() or 0
        )

    @staticmethod
    def _heater_count(db: Session, user_id: str):
        return (
            db.query(func.count(Heater.id))
            .select_from(Heater)
            .join(Heater.customer)
            .filter(Customer.user_id == user_id)
        )

    @classmethod
    def count_heaters(cls, db: Session, user_id: str) -> int:
        return cls._heater_count(db, user_id).scalar() or 0

    @classmethod
    def count_overdue(cls, db: Session, user_id: str, now: datetime) -> int:
        """Heaters whose next maintenance is strictly before now"""
        return cls._heater_count(db, user_id).filter(Heater.next_maintenance < now).scalar() or 0

    @classmethod
    def count_due_between(cls, db: Session, user_id: str, start: datetime, end: datetime) -> int:
        """Heaters due within [start, end], inclusive on both ends"""
        return (
            cls._heater_count(db, user_id)
            .filter(Heater.next_maintenance >= start, Heater.next_maintenance <= end)
            .scalar()
            or 0
        )
