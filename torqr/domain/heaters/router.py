"""Heater router - FastAPI endpoints for heater operations"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...auth import CurrentUser, get_current_user
from ...database import get_db
from ...errors import ValidationError
from ...shared.responses import success_response
from ...shared.schemas import HeaterResponse, HeaterWithRecentMaintenances
from .schemas import HeaterCreate, HeaterDetailResponse, HeaterUpdate, HeaterWithCustomer
from .service import HeaterService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/heaters", tags=["Heaters"])


def get_heater_service(db: Session = Depends(get_db)) -> HeaterService:
    """Dependency injection for HeaterService"""
    return HeaterService(db)


@router.get("")
async def list_heaters(
    customer_id: Optional[str] = Query(None, alias="customerId"),
    current_user: CurrentUser = Depends(get_current_user),
    service: HeaterService = Depends(get_heater_service),
):
    """List a customer's heaters with their last 5 maintenances"""
    if not customer_id:
        raise ValidationError.for_field("customerId", "Customer ID is required")

    heaters = service.list_heaters(customer_id, current_user)
    return success_response(
        [HeaterWithRecentMaintenances.model_validate(h) for h in heaters], count=len(heaters)
    )


@router.post("")
async def create_heater(
    data: HeaterCreate,
    current_user: CurrentUser = Depends(get_current_user),
    service: HeaterService = Depends(get_heater_service),
):
    """Create a heater; nextMaintenance is derived from lastMaintenance (or now)"""
    heater = service.create_heater(data, current_user)
    return success_response(HeaterWithCustomer.model_validate(heater), status_code=201)


@router.get("/{heater_id}")
async def get_heater(
    heater_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    service: HeaterService = Depends(get_heater_service),
):
    """Get a heater with its customer and full maintenance history"""
    heater = service.get_heater(heater_id, current_user)
    return success_response(HeaterDetailResponse.model_validate(heater))


@router.patch("/{heater_id}")
async def update_heater(
    heater_id: str,
    data: HeaterUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    service: HeaterService = Depends(get_heater_service),
):
    """Partially update a heater"""
    heater = service.update_heater(heater_id, data, current_user)
    return success_response(HeaterResponse.model_validate(heater))


@router.delete("/{heater_id}")
async def delete_heater(
    heater_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    service: HeaterService = Depends(get_heater_service),
):
    """Delete a heater (maintenances cascade)"""
    service.delete_heater(heater_id, current_user)
    return success_response(message="Heater deleted successfully")
