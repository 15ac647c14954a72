"""
Pydantic schemas for Service.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import datetime
from decimal import Decimal
from typing import Optional

from app.models.service import ServiceStatus
from app.schemas.common import blank_to_none, to_utc
from app.schemas.customer import CustomerRef
from app.schemas.vehicle import VehicleRef


class ServiceBase(BaseModel):
    """Base service schema with common fields."""
    customer_id: int
    vehicle_id: int
    description: Optional[str] = None
    submission_date: datetime
    collection_date: Optional[datetime] = None
    amount_paid: Optional[Decimal] = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    status: ServiceStatus = ServiceStatus.PENDING

    @field_validator("description", "collection_date", "amount_paid", mode="before")
    @classmethod
    def blank_optional_fields(cls, value):
        return blank_to_none(value)

    @field_validator("submission_date", "collection_date")
    @classmethod
    def dates_in_utc(cls, value):
        return to_utc(value)


class ServiceCreate(ServiceBase):
    """Schema for creating a service."""
    pass


class ServiceUpdate(BaseModel):
    """Schema for updating a service."""
    customer_id: Optional[int] = None
    vehicle_id: Optional[int] = None
    description: Optional[str] = None
    submission_date: Optional[datetime] = None
    collection_date: Optional[datetime] = None
    amount_paid: Optional[Decimal] = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    status: Optional[ServiceStatus] = None

    @field_validator("description", "collection_date", "amount_paid", mode="before")
    @classmethod
    def blank_optional_fields(cls, value):
        return blank_to_none(value)

    @field_validator("submission_date", "collection_date")
    @classmethod
    def dates_in_utc(cls, value):
        return to_utc(value)


class Service(ServiceBase):
    """Schema for service responses."""
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ServiceWithRelations(Service):
    """Service listing entry with customer and vehicle embedded."""
    customer: CustomerRef
    vehicle: VehicleRef
