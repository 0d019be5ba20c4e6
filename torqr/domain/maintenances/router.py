"""Maintenance router - FastAPI endpoints for maintenance records"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...auth import CurrentUser, get_current_user
from ...database import get_db
from ...errors import ValidationError
from ...shared.responses import success_response
from ...shared.schemas import MaintenanceResponse
from .schemas import MaintenanceCreate, MaintenanceDetailResponse
from .service import MaintenanceService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/maintenances", tags=["Maintenances"])


def get_maintenance_service(db: Session = Depends(get_db)) -> MaintenanceService:
    """Dependency injection for MaintenanceService"""
    return MaintenanceService(db)


@router.get("")
async def list_maintenances(
    heater_id: Optional[str] = Query(None, alias="heaterId"),
    current_user: CurrentUser = Depends(get_current_user),
    service: MaintenanceService = Depends(get_maintenance_service),
):
    """List a heater's maintenances, most recent first"""
    if not heater_id:
        raise ValidationError.for_field("heaterId", "Heater ID is required")

    maintenances = service.list_maintenances(heater_id, current_user)
    return success_response(
        [MaintenanceResponse.model_validate(m) for m in maintenances], count=len(maintenances)
    )


@router.post("")
async def create_maintenance(
    data: MaintenanceCreate,
    current_user: CurrentUser = Depends(get_current_user),
    service: MaintenanceService = Depends(get_maintenance_service),
):
    """Record a maintenance and reschedule the heater"""
    maintenance = service.create_maintenance(data, current_user)
    return success_response(MaintenanceDetailResponse.model_validate(maintenance), status_code=201)


@router.get("/{maintenance_id}")
async def get_maintenance(
    maintenance_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    service: MaintenanceService = Depends(get_maintenance_service),
):
    maintenance = service.get_maintenance(maintenance_id, current_user)
    return success_response(MaintenanceDetailResponse.model_validate(maintenance))


@router.delete("/{maintenance_id}")
async def delete_maintenance(
    maintenance_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    service: MaintenanceService = Depends(get_maintenance_service),
):
    """Delete a maintenance record and, best-effort, its photos"""
    service.delete_maintenance(maintenance_id, current_user)
    return success_response(message="Maintenance deleted successfully")
