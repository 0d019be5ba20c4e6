"""Customer domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...shared.enums import AdditionalEnergySource, EnergyStorageSystem, HeatingType
from ...shared.schemas import HeaterSummary, HeaterWithRecentMaintenances, ResponseModel
from ...shared.validators import normalize_optional_email, reject_null

CustomerSortField = Literal["name", "city", "zipCode", "createdAt", "updatedAt"]
SortOrder = Literal["asc", "desc"]


def _dedupe(values):
    seen = []
    for value in values:
        if value not in seen:
            seen.append(value)
    return seen


class CustomerCreate(BaseModel):
    """Schema for creating a new customer"""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=100)
    street: str = Field(..., min_length=1, max_length=100)
    zipCode: str = Field(..., min_length=4, max_length=10)
    city: str = Field(..., min_length=1, max_length=100)
    phone: str = Field(..., min_length=1, max_length=20)
    email: Optional[str] = None
    heatingType: HeatingType
    additionalEnergySources: list[AdditionalEnergySource] = []
    energyStorageSystems: list[EnergyStorageSystem] = []
    notes: Optional[str] = Field(None, max_length=1000)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v):
        return normalize_optional_email(v)

    @field_validator("additionalEnergySources", "energyStorageSystems")
    @classmethod
    def unique_values(cls, v):
        return _dedupe(v)


class CustomerUpdate(BaseModel):
    """Schema for partially updating a customer; only supplied fields are applied"""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    street: Optional[str] = Field(None, min_length=1, max_length=100)
    zipCode: Optional[str] = Field(None, min_length=4, max_length=10)
    city: Optional[str] = Field(None, min_length=1, max_length=100)
    phone: Optional[str] = Field(None, min_length=1, max_length=20)
    email: Optional[str] = None
    heatingType: Optional[HeatingType] = None
    additionalEnergySources: Optional[list[AdditionalEnergySource]] = None
    energyStorageSystems: Optional[list[EnergyStorageSystem]] = None
    notes: Optional[str] = Field(None, max_length=1000)

    @field_validator(
        "name",
        "street",
        "zipCode",
        "city",
        "phone",
        "heatingType",
        "additionalEnergySources",
        "energyStorageSystems",
        mode="before",
    )
    @classmethod
    def not_null(cls, v, info):
        return reject_null(v, info.field_name)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v):
        return normalize_optional_email(v)

    @field_validator("additionalEnergySources", "energyStorageSystems")
    @classmethod
    def unique_values(cls, v):
        return _dedupe(v) if v is not None else v


class CustomerResponse(ResponseModel):
    """Schema for customer response"""

    id: str
    user_id: str
    name: str
    street: str
    zip_code: str
    city: str
    phone: str
    email: Optional[str] = None
    heating_type: HeatingType
    additional_energy_sources: list[AdditionalEnergySource] = []
    energy_storage_systems: list[EnergyStorageSystem] = []
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CustomerListItem(CustomerResponse):
    heaters: list[HeaterSummary] = []


class CustomerDetailResponse(CustomerResponse):
    heaters: list[HeaterWithRecentMaintenances] = []
