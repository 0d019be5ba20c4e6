"""Heater service - Business logic for heaters and their maintenance schedule"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...auth import CurrentUser
from ...errors import NotFoundError, UnexpectedError
from ...models import Heater
from ...utils.photo_storage import delete_photos_best_effort
from ..scheduling import calculate_next_maintenance, reschedule_heater, to_naive_utc, utcnow
from .repository import HeaterRepository
from .schemas import HeaterCreate, HeaterUpdate

logger = logging.getLogger(__name__)

# API field name -> column name
FIELD_MAP = {
    "model": "model",
    "serialNumber": "serial_number",
    "installationDate": "installation_date",
    "maintenanceInterval": "maintenance_interval",
    "lastMaintenance": "last_maintenance",
}

# Changing either of these re-derives next_maintenance
SCHEDULE_FIELDS = {"maintenanceInterval", "lastMaintenance"}
DATE_FIELDS = {"installationDate", "lastMaintenance"}


class HeaterService:
    """Service layer for heater business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = HeaterRepository()

    def _get_owned(self, heater_id: str, user: CurrentUser) -> Heater:
        heater = self.repo.get_heater_by_id(self.db, heater_id, user.id)
        if not heater:
            logger.warning(f"⚠️ Heater {heater_id} not found for user {user.id}")
            raise NotFoundError("Heater not found")
        return heater

    def list_heaters(self, customer_id: str, user: CurrentUser) -> list[Heater]:
        """List heaters of a customer owned by the user"""
        customer = self.repo.get_customer_for_user(self.db, customer_id, user.id)
        if not customer:
            raise NotFoundError("Customer not found")
        return self.repo.list_heaters_for_customer(self.db, customer.id)

    def get_heater(self, heater_id: str, user: CurrentUser) -> Heater:
        """Get a heater with its customer and maintenance history"""
        heater = self.repo.get_heater_detail(self.db, heater_id, user.id)
        if not heater:
            logger.warning(f"⚠️ Heater {heater_id} not found for user {user.id}")
            raise NotFoundError("Heater not found")
        return heater

    def create_heater(self, data: HeaterCreate, user: CurrentUser) -> Heater:
        """
        Create a heater for one of the user's customers.

        Without lastMaintenance the heater counts as serviced now, so the first
        due date is one interval from creation.
        """
        customer_id = str(data.customerId)
        customer = self.repo.get_customer_for_user(self.db, customer_id, user.id)
        if not customer:
            logger.warning(f"⚠️ Customer {customer_id} not found for user {user.id}")
            raise NotFoundError("Customer not found")

        last_maintenance = to_naive_utc(data.lastMaintenance) or utcnow()
        heater_data = {
            "customer_id": customer.id,
            "model": data.model,
            "serial_number": data.serialNumber or None,
            "installation_date": to_naive_utc(data.installationDate),
            "maintenance_interval": data.maintenanceInterval,
            "last_maintenance": last_maintenance,
            "next_maintenance": calculate_next_maintenance(
                last_maintenance, data.maintenanceInterval
            ),
        }

        try:
            heater = self.repo.create_heater(self.db, **heater_data)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Failed to create heater for customer {customer_id}: {e}")
            raise UnexpectedError("Failed to create heater") from e

        logger.info(
            f"✅ Heater {heater.id} created for customer {customer_id}, next maintenance {heater.next_maintenance}"
        )
        return heater

    def update_heater(self, heater_id: str, data: HeaterUpdate, user: CurrentUser) -> Heater:
        """Merge the supplied fields, then re-derive the due date if the schedule changed"""
        heater = self._get_owned(heater_id, user)

        patch = data.model_dump(exclude_unset=True)
        for field, value in patch.items():
            if field in DATE_FIELDS:
                value = to_naive_utc(value)
            elif field == "serialNumber":
                value = value or None
            setattr(heater, FIELD_MAP[field], value)

        if SCHEDULE_FIELDS & patch.keys():
            reschedule_heater(heater)
            logger.info(f"📅 Heater {heater_id} rescheduled to {heater.next_maintenance}")

        try:
            heater = self.repo.save(self.db, heater)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Failed to update heater {heater_id}: {e}")
            raise UnexpectedError("Failed to update heater") from e

        return heater

    def delete_heater(self, heater_id: str, user: CurrentUser) -> None:
        """Delete a heater and its maintenances"""
        heater = self._get_owned(heater_id, user)
        photo_urls = [url for m in heater.maintenances for url in (m.photos or [])]

        try:
            self.repo.delete_heater(self.db, heater)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Failed to delete heater {heater_id}: {e}")
            raise UnexpectedError("Failed to delete heater") from e

        logger.info(f"🗑️ Heater {heater_id} deleted by user {user.id}")

        if photo_urls:
            delete_photos_best_effort(photo_urls)
