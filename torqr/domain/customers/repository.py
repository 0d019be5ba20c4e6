"""Customer repository - Database operations for customers"""

from typing import Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session, selectinload

from ...models import Customer, Heater

SORT_COLUMNS = {
    "name": Customer.name,
    "city": Customer.city,
    "zipCode": Customer.zip_code,
    "createdAt": Customer.created_at,
    "updatedAt": Customer.updated_at,
}


def _like_pattern(search: str) -> str:
    escaped = search.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class CustomerRepository:
    """Repository for customer database operations"""

    @staticmethod
    def list_customers(
        db: Session,
        user_id: str,
        search: Optional[str] = None,
        sort_by: str = "name",
        sort_order: str = "asc",
    ) -> list[Customer]:
        """List a user's customers with optional case-insensitive search"""
        query = (
            db.query(Customer)
            .filter(Customer.user_id == user_id)
            .options(selectinload(Customer.heaters))
        )

        if search:
            pattern = _like_pattern(search)
            query = query.filter(
                or_(
                    Customer.name.ilike(pattern, escape="\\"),
                    Customer.street.ilike(pattern, escape="\\"),
                    Customer.city.ilike(pattern, escape="\\"),
                    Customer.phone.ilike(pattern, escape="\\"),
                )
            )

        column = SORT_COLUMNS.get(sort_by, Customer.name)
        ordering = column.desc() if sort_order == "desc" else column.asc()
        return query.order_by(ordering, Customer.id).all()

    @staticmethod
    def get_customer_by_id(db: Session, customer_id: str, user_id: str) -> Optional[Customer]:
        """Get a customer owned by the given user"""
        return (
            db.query(Customer)
            .filter(Customer.id == customer_id, Customer.user_id == user_id)
            .first()
        )

    @staticmethod
    def get_customer_with_heaters(db: Session, customer_id: str, user_id: str) -> Optional[Customer]:
        return (
            db.query(Customer)
            .filter(Customer.id == customer_id, Customer.user_id == user_id)
            .options(selectinload(Customer.heaters).selectinload(Heater.maintenances))
            .first()
        )

    @staticmethod
    def create_customer(db: Session, user_id: str, **customer_data) -> Customer:
        """Create a new customer"""
        customer = Customer(user_id=user_id, **customer_data)
        db.add(customer)
        db.commit()
        db.refresh(customer)
        return customer

    @staticmethod
    def update_customer(db: Session, customer: Customer, **updates) -> Customer:
        """Apply a patch; every supplied key is written, including explicit None"""
        for key, value in updates.items():
            if hasattr(customer, key):
                setattr(customer, key, value)

        db.commit()
        db.refresh(customer)
        return customer

    @staticmethod
    def collect_photo_urls(customer: Customer) -> list[str]:
        """Photo URLs of every maintenance under the customer's heaters"""
        return [
            url
            for heater in customer.heaters
            for maintenance in heater.maintenances
            for url in (maintenance.photos or [])
        ]

    @staticmethod
    def delete_customer(db: Session, customer: Customer) -> None:
        """Delete a customer; heaters and maintenances cascade"""
        db.delete(customer)
        db.commit()
