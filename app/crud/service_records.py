"""
Service record queries. Services are owned through their customer, and a
service's vehicle must belong to that same customer.
"""
import logging
from typing import Optional

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.crud.customers import get_customer
from app.crud.vehicles import get_vehicle
from app.exceptions import GarageError, NotFoundError
from app.models.customer import Customer
from app.models.service import Service, ServiceStatus
from app.models.vehicle import Vehicle
from app.schemas.service import ServiceCreate, ServiceUpdate

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("customer_id", "vehicle_id", "submission_date", "status")


async def _check_vehicle_owner(
    db: AsyncSession, user_id: int, customer_id: int, vehicle_id: int
) -> None:
    await get_customer(db, user_id, customer_id)
    vehicle = await get_vehicle(db, user_id, vehicle_id)
    if vehicle.customer_id != customer_id:
        raise GarageError("Vehicle does not belong to this customer")


async def list_services(
    db: AsyncSession,
    user_id: int,
    customer_id: Optional[int] = None,
    vehicle_id: Optional[int] = None,
    status: Optional[ServiceStatus] = None,
    search: Optional[str] = None,
) -> list[Service]:
    """
    List the user's service records, latest submission first, with customer
    and vehicle loaded.

    ``search`` matches customer name, plate number or vehicle model.
    """
    query = (
        select(Service)
        .join(Customer, Service.customer_id == Customer.id)
        .join(Vehicle, Service.vehicle_id == Vehicle.id)
        .where(Customer.user_id == user_id)
        .options(selectinload(Service.customer), selectinload(Service.vehicle))
    )

    if customer_id is not None:
        query = query.where(Service.customer_id == customer_id)
    if vehicle_id is not None:
        query = query.where(Service.vehicle_id == vehicle_id)
    if status:
        query = query.where(Service.status == status)

    if search:
        pattern = f"%{search}%"
        query = query.where(
            or_(
                Customer.name.ilike(pattern),
                Vehicle.plate_number.ilike(pattern),
                Vehicle.model.ilike(pattern),
            )
        )

    result = await db.execute(
        query.order_by(Service.submission_date.desc(), Service.id.desc())
    )
    return list(result.scalars().all())


async def get_service(db: AsyncSession, user_id: int, service_id: int) -> Service:
    result = await db.execute(
        select(Service)
        .join(Customer, Service.customer_id == Customer.id)
        .where(Service.id == service_id, Customer.user_id == user_id)
    )
    service = result.scalar_one_or_none()

    if not service:
        raise NotFoundError("Service not found")

    return service


async def create_service(db: AsyncSession, user_id: int, service: ServiceCreate) -> Service:
    await _check_vehicle_owner(db, user_id, service.customer_id, service.vehicle_id)

    db_service = Service(**service.model_dump())
    db.add(db_service)
    await db.commit()
    await db.refresh(db_service)

    logger.info("Created service %s for vehicle %s", db_service.id, db_service.vehicle_id)
    return db_service


async def update_service(
    db: AsyncSession, user_id: int, service_id: int, service_update: ServiceUpdate
) -> Service:
    db_service = await get_service(db, user_id, service_id)

    update_data = {
        field: value
        for field, value in service_update.model_dump(exclude_unset=True).items()
        if not (field in _REQUIRED_FIELDS and value is None)
    }

    if "customer_id" in update_data or "vehicle_id" in update_data:
        await _check_vehicle_owner(
            db,
            user_id,
            update_data.get("customer_id", db_service.customer_id),
            update_data.get("vehicle_id", db_service.vehicle_id),
        )

    for field, value in update_data.items():
        setattr(db_service, field, value)

    await db.commit()
    await db.refresh(db_service)

    return db_service


async def delete_service(db: AsyncSession, user_id: int, service_id: int) -> None:
    db_service = await get_service(db, user_id, service_id)

    await db.delete(db_service)
    await db.commit()

    logger.info("Deleted service %s for user %s", service_id, user_id)
