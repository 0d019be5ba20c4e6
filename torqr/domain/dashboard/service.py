"""Dashboard service - Maintenance overview statistics"""

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from ...auth import CurrentUser
from ..scheduling import upcoming_window, utcnow
from .repository import DashboardRepository

logger = logging.getLogger(__name__)


class DashboardService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = DashboardRepository()

    def get_stats(self, user: CurrentUser, now: Optional[datetime] = None) -> dict:
        """Recomputed on every request; nothing is cached"""
        now = now or utcnow()
        window_start, window_end = upcoming_window(now)

        return {
            "totalCustomers": self.repo.count_customers(self.db, user.id),
            "totalHeaters": self.repo.count_heaters(self.db, user.id),
            "overdueMaintenances": self.repo.count_overdue(self.db, user.id, now),
            "upcomingMaintenances": self.repo.count_due_between(
                self.db, user.id, window_start, window_end
            ),
        }
