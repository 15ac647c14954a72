"""
SQLAlchemy database models.
"""
from app.models.customer import Customer
from app.models.vehicle import Vehicle
from app.models.service import Service, ServiceStatus
from app.models.user import User, RevokedToken

__all__ = ["Customer", "Vehicle", "Service", "ServiceStatus", "User", "RevokedToken"]
