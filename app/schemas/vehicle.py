"""
Pydantic schemas for Vehicle.
"""
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Optional

from app.schemas.customer import CustomerRef


class VehicleBase(BaseModel):
    """Base vehicle schema with common fields."""
    customer_id: int
    model: str = Field(min_length=1)
    plate_number: str = Field(min_length=1)


class VehicleCreate(VehicleBase):
    """Schema for creating a vehicle."""
    pass


class VehicleUpdate(BaseModel):
    """Schema for updating a vehicle."""
    customer_id: Optional[int] = None
    model: Optional[str] = Field(default=None, min_length=1)
    plate_number: Optional[str] = Field(default=None, min_length=1)


class Vehicle(VehicleBase):
    """Schema for vehicle responses."""
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class VehicleWithCustomer(Vehicle):
    """Vehicle listing entry with its owning customer."""
    customer: CustomerRef


class VehicleRef(BaseModel):
    """Vehicle fields embedded in service listings."""
    id: int
    model: str
    plate_number: str

    model_config = ConfigDict(from_attributes=True)
