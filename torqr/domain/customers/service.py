"""Customer service - Business logic for customer operations"""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...auth import CurrentUser
from ...errors import NotFoundError, UnexpectedError
from ...models import Customer
from ...utils.photo_storage import delete_photos_best_effort
from .repository import CustomerRepository
from .schemas import CustomerCreate, CustomerUpdate

logger = logging.getLogger(__name__)

# API field name -> column name
FIELD_MAP = {
    "name": "name",
    "street": "street",
    "zipCode": "zip_code",
    "city": "city",
    "phone": "phone",
    "email": "email",
    "heatingType": "heating_type",
    "additionalEnergySources": "additional_energy_sources",
    "energyStorageSystems": "energy_storage_systems",
    "notes": "notes",
}


def _to_column_value(value):
    if isinstance(value, list):
        return [getattr(item, "value", item) for item in value]
    return getattr(value, "value", value)


class CustomerService:
    """Service layer for customer business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = CustomerRepository()

    def list_customers(
        self,
        user: CurrentUser,
        search: Optional[str] = None,
        sort_by: str = "name",
        sort_order: str = "asc",
    ) -> list[Customer]:
        """List customers for a user"""
        search = search.strip() if search else None
        return self.repo.list_customers(self.db, user.id, search, sort_by, sort_order)

    def get_customer(self, customer_id: str, user: CurrentUser) -> Customer:
        """Get a specific customer with heaters and recent maintenances"""
        customer = self.repo.get_customer_with_heaters(self.db, customer_id, user.id)
        if not customer:
            logger.warning(f"⚠️ Customer {customer_id} not found for user {user.id}")
            raise NotFoundError("Customer not found")
        return customer

    def _get_owned(self, customer_id: str, user: CurrentUser) -> Customer:
        customer = self.repo.get_customer_by_id(self.db, customer_id, user.id)
        if not customer:
            logger.warning(f"⚠️ Customer {customer_id} not found for user {user.id}")
            raise NotFoundError("Customer not found")
        return customer

    def create_customer(self, data: CustomerCreate, user: CurrentUser) -> Customer:
        """Create a new customer owned by the current user"""
        customer_data = {
            column: _to_column_value(getattr(data, field)) for field, column in FIELD_MAP.items()
        }
        try:
            customer = self.repo.create_customer(self.db, user.id, **customer_data)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Failed to create customer for user {user.id}: {e}")
            raise UnexpectedError("Failed to create customer") from e

        logger.info(f"✅ Customer {customer.id} created for user {user.id}")
        return customer

    def update_customer(self, customer_id: str, data: CustomerUpdate, user: CurrentUser) -> Customer:
        """Apply only the fields present in the request"""
        customer = self._get_owned(customer_id, user)

        patch = data.model_dump(exclude_unset=True)
        updates = {FIELD_MAP[field]: _to_column_value(value) for field, value in patch.items()}
        if not updates:
            return customer

        try:
            customer = self.repo.update_customer(self.db, customer, **updates)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Failed to update customer {customer_id}: {e}")
            raise UnexpectedError("Failed to update customer") from e

        logger.info(f"✏️ Customer {customer_id} updated: {sorted(updates)}")
        return customer

    def delete_customer(self, customer_id: str, user: CurrentUser) -> None:
        """Delete a customer together with its heaters and maintenances"""
        customer = self.get_customer(customer_id, user)
        photo_urls = self.repo.collect_photo_urls(customer)

        try:
            self.repo.delete_customer(self.db, customer)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Failed to delete customer {customer_id}: {e}")
            raise UnexpectedError("Failed to delete customer") from e

        logger.info(f"🗑️ Customer {customer_id} deleted by user {user.id}")

        if photo_urls:
            deleted = delete_photos_best_effort(photo_urls)
            logger.info(f"🗑️ Removed {deleted}/{len(photo_urls)} photos of customer {customer_id}")
