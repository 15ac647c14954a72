"""
Service model for database.
"""
from sqlalchemy import Column, Integer, String, Numeric, DateTime, ForeignKey, Enum as SQLEnum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base
import enum


class ServiceStatus(str, enum.Enum):
    """Service status enumeration."""
    PENDING = "pending"
    COMPLETED = "completed"


class Service(Base):
    """Service record database model."""

    __tablename__ = "services"

    id = Column(Integer, primary_key=True, index=True)
    customer_id = Column(Integer, ForeignKey("customers.id", ondelete="CASCADE"), nullable=False, index=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id", ondelete="CASCADE"), nullable=False, index=True)
    description = Column(String, nullable=True)
    submission_date = Column(DateTime(timezone=True), nullable=False)
    collection_date = Column(DateTime(timezone=True), nullable=True)
    amount_paid = Column(Numeric(10, 2), nullable=True)
    status = Column(
        SQLEnum(ServiceStatus, values_callable=lambda e: [m.value for m in e]),
        default=ServiceStatus.PENDING,
        nullable=False,
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    customer = relationship("Customer", back_populates="services")
    vehicle = relationship("Vehicle", back_populates="services")
