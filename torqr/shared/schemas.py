"""Response models shared across domains (serialized with camelCase keys)"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

# Number of most recent maintenances embedded in customer / heater listings
RECENT_MAINTENANCE_LIMIT = 5


class ResponseModel(BaseModel):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class CustomerSummary(ResponseModel):
    id: str
    name: str
    street: str
    city: str


class MaintenanceResponse(ResponseModel):
    id: str
    heater_id: str
    user_id: str
    date: datetime
    notes: Optional[str] = None
    photos: list[str] = []
    created_at: Optional[datetime] = None


class HeaterSummary(ResponseModel):
    id: str
    model: str
    next_maintenance: datetime


class HeaterResponse(ResponseModel):
    id: str
    customer_id: str
    model: str
    serial_number: Optional[str] = None
    installation_date: Optional[datetime] = None
    maintenance_interval: int
    last_maintenance: Optional[datetime] = None
    next_maintenance: datetime
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class HeaterWithRecentMaintenances(HeaterResponse):
    maintenances: list[MaintenanceResponse] = []

    @field_validator("maintenances", mode="before")
    @classmethod
    def keep_recent(cls, v):
        # Relationship is ordered newest first
        return list(v or [])[:RECENT_MAINTENANCE_LIMIT]
