"""
Pydantic schemas for request/response validation.
"""
from app.schemas.customer import (
    CustomerBase, CustomerCreate, CustomerUpdate, Customer, CustomerSummary, CustomerRef,
)
from app.schemas.vehicle import (
    VehicleBase, VehicleCreate, VehicleUpdate, Vehicle, VehicleWithCustomer, VehicleRef,
)
from app.schemas.service import (
    ServiceBase, ServiceCreate, ServiceUpdate, Service, ServiceWithRelations,
)
from app.schemas.user import UserBase, UserCreate, User, Token, LoginRequest
from app.schemas.common import DeleteResult
from app.schemas.stats import DashboardStats, format_currency

__all__ = [
    "CustomerBase", "CustomerCreate", "CustomerUpdate", "Customer", "CustomerSummary", "CustomerRef",
    "VehicleBase", "VehicleCreate", "VehicleUpdate", "Vehicle", "VehicleWithCustomer", "VehicleRef",
    "ServiceBase", "ServiceCreate", "ServiceUpdate", "Service", "ServiceWithRelations",
    "UserBase", "UserCreate", "User", "Token", "LoginRequest",
    "DashboardStats", "DeleteResult", "format_currency",
]
