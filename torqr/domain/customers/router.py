"""Customer router - FastAPI endpoints for customer operations"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...auth import CurrentUser, get_current_user
from ...database import get_db
from ...shared.responses import success_response
from .schemas import (
    CustomerCreate,
    CustomerDetailResponse,
    CustomerListItem,
    CustomerResponse,
    CustomerSortField,
    CustomerUpdate,
    SortOrder,
)
from .service import CustomerService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/customers", tags=["Customers"])


def get_customer_service(db: Session = Depends(get_db)) -> CustomerService:
    """Dependency injection for CustomerService"""
    return CustomerService(db)


@router.get("")
async def list_customers(
    search: Optional[str] = Query(None, max_length=100),
    sort_by: CustomerSortField = Query("name", alias="sortBy"),
    sort_order: SortOrder = Query("asc", alias="sortOrder"),
    current_user: CurrentUser = Depends(get_current_user),
    service: CustomerService = Depends(get_customer_service),
):
    """List the current user's customers, each with its heaters (soonest due first)"""
    customers = service.list_customers(current_user, search, sort_by, sort_order)
    return success_response(
        [CustomerListItem.model_validate(c) for c in customers], count=len(customers)
    )


@router.post("")
async def create_customer(
    data: CustomerCreate,
    current_user: CurrentUser = Depends(get_current_user),
    service: CustomerService = Depends(get_customer_service),
):
    """Create a new customer"""
    customer = service.create_customer(data, current_user)
    return success_response(CustomerResponse.model_validate(customer), status_code=201)


@router.get("/{customer_id}")
async def get_customer(
    customer_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    service: CustomerService = Depends(get_customer_service),
):
    """Get a customer with heaters and their last 5 maintenances"""
    customer = service.get_customer(customer_id, current_user)
    return success_response(CustomerDetailResponse.model_validate(customer))


@router.patch("/{customer_id}")
async def update_customer(
    customer_id: str,
    data: CustomerUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    service: CustomerService = Depends(get_customer_service),
):
    """Partially update a customer"""
    customer = service.update_customer(customer_id, data, current_user)
    return success_response(CustomerResponse.model_validate(customer))


@router.delete("/{customer_id}")
async def delete_customer(
    customer_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    service: CustomerService = Depends(get_customer_service),
):
    """Delete a customer (heaters and maintenances cascade)"""
    service.delete_customer(customer_id, current_user)
    return success_response(message="Customer deleted successfully")
