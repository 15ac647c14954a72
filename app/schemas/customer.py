"""
Pydantic schemas for Customer.
"""
from pydantic import BaseModel, EmailStr, ConfigDict, Field, field_validator
from datetime import datetime
from typing import Optional

from app.schemas.common import blank_to_none


class CustomerBase(BaseModel):
    """Base customer schema with common fields."""
    name: str = Field(min_length=1)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None

    @field_validator("email", "phone", mode="before")
    @classmethod
    def blank_optional_fields(cls, value):
        return blank_to_none(value)


class CustomerCreate(CustomerBase):
    """Schema for creating a customer."""
    pass


class CustomerUpdate(BaseModel):
    """Schema for updating a customer."""
    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None

    @field_validator("email", "phone", mode="before")
    @classmethod
    def blank_optional_fields(cls, value):
        return blank_to_none(value)


class Customer(CustomerBase):
    """Schema for customer responses."""
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class CustomerSummary(Customer):
    """Customer list entry with related row counts."""
    vehicle_count: int = 0
    service_count: int = 0


class CustomerRef(BaseModel):
    """Customer fields embedded in vehicle and service listings."""
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)
