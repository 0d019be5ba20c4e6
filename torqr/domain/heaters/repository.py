"""Heater repository - Database operations for heaters"""

from typing import Optional

from sqlalchemy.orm import Session, joinedload, selectinload

from ...models import Customer, Heater


class HeaterRepository:
    """Repository for heater database operations; every read joins through to the owning user"""

    @staticmethod
    def _owned(db: Session, user_id: str):
        return db.query(Heater).join(Heater.customer).filter(Customer.user_id == user_id)

    @staticmethod
    def get_customer_for_user(db: Session, customer_id: str, user_id: str) -> Optional[Customer]:
        return (
            db.query(Customer)
            .filter(Customer.id == customer_id, Customer.user_id == user_id)
            .first()
        )

    @staticmethod
    def list_heaters_for_customer(db: Session, customer_id: str) -> list[Heater]:
        """Heaters of a customer, soonest due first, with maintenances preloaded"""
        return (
            db.query(Heater)
            .filter(Heater.customer_id == customer_id)
            .options(selectinload(Heater.maintenances))
            .order_by(Heater.next_maintenance.asc(), Heater.id)
            .all()
        )

    @classmethod
    def get_heater_by_id(cls, db: Session, heater_id: str, user_id: str) -> Optional[Heater]:
        """Get a heater whose customer belongs to the user"""
        return cls._owned(db, user_id).filter(Heater.id == heater_id).first()

    @classmethod
    def get_heater_detail(cls, db: Session, heater_id: str, user_id: str) -> Optional[Heater]:
        return (
            cls._owned(db, user_id)
            .filter(Heater.id == heater_id)
            .options(joinedload(Heater.customer), selectinload(Heater.maintenances))
            .first()
        )

    @staticmethod
    def create_heater(db: Session, **heater_data) -> Heater:
        """Create a new heater"""
        heater = Heater(**heater_data)
        db.add(heater)
        db.commit()
        db.refresh(heater)
        return heater

    @staticmethod
    def save(db: Session, heater: Heater) -> Heater:
        db.commit()
        db.refresh(heater)
        return heater

    @staticmethod
    def delete_heater(db: Session, heater: Heater) -> None:
        """Delete a heater; maintenances cascade"""
        db.delete(heater)
        db.commit()
