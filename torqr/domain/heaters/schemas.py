"""Heater domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...shared.enums import MAINTENANCE_INTERVALS
from ...shared.schemas import CustomerSummary, HeaterResponse, MaintenanceResponse
from ...shared.validators import reject_null

INTERVAL_MESSAGE = "Maintenance interval must be 1, 3, 6, 12 or 24 months"


def _parse_interval(v) -> int:
    """Accept an allowed interval as an integer or a digit string; nothing else is coerced"""
    if isinstance(v, str) and v.strip().isdigit():
        v = int(v.strip())
    # bool is an int subclass, so true would otherwise pass as 1
    if isinstance(v, bool) or not isinstance(v, int) or v not in MAINTENANCE_INTERVALS:
        raise ValueError(INTERVAL_MESSAGE)
    return v


class HeaterCreate(BaseModel):
    """Schema for creating a heater; nextMaintenance is always derived"""

    model_config = ConfigDict(str_strip_whitespace=True)

    customerId: UUID
    model: str = Field(..., min_length=1, max_length=100)
    serialNumber: Optional[str] = Field(None, max_length=100)
    installationDate: Optional[datetime] = None
    maintenanceInterval: int
    lastMaintenance: Optional[datetime] = None

    @field_validator("maintenanceInterval", mode="before")
    @classmethod
    def validate_interval(cls, v):
        return _parse_interval(v)


class HeaterUpdate(BaseModel):
    """Schema for partially updating a heater"""

    model_config = ConfigDict(str_strip_whitespace=True)

    model: Optional[str] = Field(None, min_length=1, max_length=100)
    serialNumber: Optional[str] = Field(None, max_length=100)
    installationDate: Optional[datetime] = None
    maintenanceInterval: Optional[int] = None
    lastMaintenance: Optional[datetime] = None

    @field_validator("model", mode="before")
    @classmethod
    def not_null(cls, v, info):
        return reject_null(v, info.field_name)

    @field_validator("maintenanceInterval", mode="before")
    @classmethod
    def validate_interval(cls, v, info):
        return _parse_interval(reject_null(v, info.field_name))


class HeaterWithCustomer(HeaterResponse):
    customer: CustomerSummary


class HeaterDetailResponse(HeaterResponse):
    """Heater with its customer and full maintenance history (newest first)"""

    customer: CustomerSummary
    maintenances: list[MaintenanceResponse] = []
