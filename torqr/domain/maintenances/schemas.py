"""Maintenance domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, HttpUrl

from ...shared.schemas import MaintenanceResponse
from ..heaters.schemas import HeaterWithCustomer


class MaintenanceCreate(BaseModel):
    """Schema for recording a maintenance visit"""

    heaterId: UUID
    date: datetime
    notes: Optional[str] = Field(None, max_length=1000)
    photos: list[HttpUrl] = []


class MaintenanceDetailResponse(MaintenanceResponse):
    heater: HeaterWithCustomer
