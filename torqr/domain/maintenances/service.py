"""Maintenance service - Recording visits and keeping heater schedules current"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...auth import CurrentUser
from ...errors import NotFoundError, UnexpectedError
from ...models import Heater, Maintenance
from ...utils.photo_storage import delete_photos_best_effort
from ..scheduling import calculate_next_maintenance, to_naive_utc
from .repository import MaintenanceRepository
from .schemas import MaintenanceCreate

logger = logging.getLogger(__name__)


class MaintenanceService:
    """Service layer for maintenance business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = MaintenanceRepository()

    def _get_owned_heater(self, heater_id: str, user: CurrentUser) -> Heater:
        heater = self.repo.get_heater_for_user(self.db, heater_id, user.id)
        if not heater:
            logger.warning(f"⚠️ Heater {heater_id} not found for user {user.id}")
            raise NotFoundError("Heater not found")
        return heater

    def list_maintenances(self, heater_id: str, user: CurrentUser) -> list[Maintenance]:
        heater = self._get_owned_heater(heater_id, user)
        return self.repo.list_for_heater(self.db, heater.id)

    def get_maintenance(self, maintenance_id: str, user: CurrentUser) -> Maintenance:
        maintenance = self.repo.get_maintenance_by_id(self.db, maintenance_id, user.id)
        if not maintenance:
            logger.warning(f"⚠️ Maintenance {maintenance_id} not found for user {user.id}")
            raise NotFoundError("Maintenance not found")
        return maintenance

    def create_maintenance(self, data: MaintenanceCreate, user: CurrentUser) -> Maintenance:
        """
        Record a maintenance visit.

        The heater's last_maintenance becomes the visit date and its
        next_maintenance is re-derived with the heater's current interval,
        atomically with the insert.
        """
        heater = self._get_owned_heater(str(data.heaterId), user)

        maintenance_date = to_naive_utc(data.date)
        next_maintenance = calculate_next_maintenance(maintenance_date, heater.maintenance_interval)

        try:
            maintenance = self.repo.create_with_heater_dates(
                self.db,
                heater,
                next_maintenance,
                user_id=user.id,
                date=maintenance_date,
                notes=data.notes or None,
                photos=[str(url) for url in data.photos],
            )
        except SQLAlchemyError as e:
            logger.error(f"❌ Failed to create maintenance for heater {heater.id}: {e}")
            raise UnexpectedError("Failed to create maintenance") from e

        logger.info(
            f"✅ Maintenance {maintenance.id} recorded for heater {heater.id}, next due {next_maintenance}"
        )
        return maintenance

    def delete_maintenance(self, maintenance_id: str, user: CurrentUser) -> None:
        """
        Delete a maintenance record and its photos.

        Photos are removed only after the record is gone, best-effort: failures
        are logged and never undo the deletion. The heater's dates are left as
        they are.
        """
        maintenance = self.get_maintenance(maintenance_id, user)
        photos = list(maintenance.photos or [])

        try:
            self.repo.delete_maintenance(self.db, maintenance)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Failed to delete maintenance {maintenance_id}: {e}")
            raise UnexpectedError("Failed to delete maintenance") from e

        logger.info(f"🗑️ Maintenance {maintenance_id} deleted by user {user.id}")

        if photos:
            deleted = delete_photos_best_effort(photos)
            if deleted < len(photos):
                logger.warning(
                    f"⚠️ {len(photos) - deleted} photo(s) of maintenance {maintenance_id} could not be deleted"
                )
