"""Maintenance repository - Database operations for maintenance records"""

from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session, joinedload

from ...models import Customer, Heater, Maintenance


class MaintenanceRepository:
    """Repository for maintenance database operations"""

    @staticmethod
    def get_heater_for_user(db: Session, heater_id: str, user_id: str) -> Optional[Heater]:
        return (
            db.query(Heater)
            .join(Heater.customer)
            .filter(Heater.id == heater_id, Customer.user_id == user_id)
            .first()
        )

    @staticmethod
    def list_for_heater(db: Session, heater_id: str) -> list[Maintenance]:
        """Maintenances of a heater, most recent first"""
        return (
            db.query(Maintenance)
            .filter(Maintenance.heater_id == heater_id)
            .order_by(Maintenance.date.desc(), Maintenance.created_at.desc())
            .all()
        )

    @staticmethod
    def get_maintenance_by_id(db: Session, maintenance_id: str, user_id: str) -> Optional[Maintenance]:
        """Get a maintenance whose heater's customer belongs to the user"""
        return (
            db.query(Maintenance)
            .join(Maintenance.heater)
            .join(Heater.customer)
            .filter(Maintenance.id == maintenance_id, Customer.user_id == user_id)
            .options(joinedload(Maintenance.heater).joinedload(Heater.customer))
            .first()
        )

    @staticmethod
    def create_with_heater_dates(
        db: Session,
        heater: Heater,
        next_maintenance: datetime,
        **maintenance_data,
    ) -> Maintenance:
        """
        Insert the maintenance and move the heater's dates in one transaction.

        Both changes are flushed and committed together; on any failure the
        session is rolled back and neither is persisted.
        """
        maintenance = Maintenance(heater_id=heater.id, **maintenance_data)
        try:
            db.add(maintenance)
            heater.last_maintenance = maintenance.date
            heater.next_maintenance = next_maintenance
            db.commit()
        except Exception:
            db.rollback()
            raise
        db.refresh(maintenance)
        return maintenance

    @staticmethod
    def delete_maintenance(db: Session, maintenance: Maintenance) -> None:
        db.delete(maintenance)
        db.commit()
