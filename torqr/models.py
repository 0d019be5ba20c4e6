import uuid

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from .database import Base


def generate_id():
    """Generate a UUID primary key"""
    return str(uuid.uuid4())


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=generate_id)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    customers = relationship(
        "Customer", back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )


class Customer(Base):
    __tablename__ = "customers"

    id = Column(String(36), primary_key=True, default=generate_id)
    user_id = Column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(100), nullable=False)
    street = Column(String(100), nullable=False)
    zip_code = Column(String(10), nullable=False)
    city = Column(String(100), nullable=False)
    phone = Column(String(20), nullable=False)
    email = Column(String(255), nullable=True)
    heating_type = Column(String(32), nullable=False)  # HeatingType value
    additional_energy_sources = Column(JSON, default=list, nullable=False)  # AdditionalEnergySource values
    energy_storage_systems = Column(JSON, default=list, nullable=False)  # EnergyStorageSystem values
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="customers")
    heaters = relationship(
        "Heater",
        back_populates="customer",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Heater.next_maintenance",
    )


class Heater(Base):
    __tablename__ = "heaters"

    id = Column(String(36), primary_key=True, default=generate_id)
    customer_id = Column(
        String(36), ForeignKey("customers.id", ondelete="CASCADE"), nullable=False, index=True
    )
    model = Column(String(100), nullable=False)
    serial_number = Column(String(100), nullable=True)
    installation_date = Column(DateTime, nullable=True)
    maintenance_interval = Column(Integer, nullable=False)  # Months: 1, 3, 6, 12 or 24
    last_maintenance = Column(DateTime, nullable=True)
    # Derived from last_maintenance + maintenance_interval, never written by callers
    next_maintenance = Column(DateTime, nullable=False, index=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    customer = relationship("Customer", back_populates="heaters")
    maintenances = relationship(
        "Maintenance",
        back_populates="heater",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Maintenance.date.desc()",
    )


class Maintenance(Base):
    __tablename__ = "maintenances"

    id = Column(String(36), primary_key=True, default=generate_id)
    heater_id = Column(
        String(36), ForeignKey("heaters.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False)  # Technician
    date = Column(DateTime, nullable=False)
    notes = Column(Text, nullable=True)
    photos = Column(JSON, default=list, nullable=False)  # Public photo URLs, in upload order
    created_at = Column(DateTime, server_default=func.now())

    heater = relationship("Heater", back_populates="maintenances")
