"""
Vehicle queries. Vehicles are owned through their customer.
"""
import logging
from typing import Optional

from sqlalchemy import or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.crud.customers import get_customer
from app.exceptions import ConflictError, NotFoundError
from app.models.customer import Customer
from app.models.service import Service
from app.models.vehicle import Vehicle
from app.schemas.vehicle import VehicleCreate, VehicleUpdate

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("customer_id", "model", "plate_number")


async def _ensure_plate_available(
    db: AsyncSession, plate_number: str, vehicle_id: Optional[int] = None
) -> None:
    query = select(Vehicle.id).where(Vehicle.plate_number == plate_number)
    if vehicle_id is not None:
        query = query.where(Vehicle.id != vehicle_id)
    result = await db.execute(query)
    if result.first() is not None:
        raise ConflictError("Plate number already registered")


async def _commit_vehicle(db: AsyncSession, db_vehicle: Vehicle) -> Vehicle:
    # The unique index still guards against a concurrent insert of the same plate
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise ConflictError("Plate number already registered")
    await db.refresh(db_vehicle)
    return db_vehicle


async def list_vehicles(
    db: AsyncSession,
    user_id: int,
    customer_id: Optional[int] = None,
    search: Optional[str] = None,
) -> list[Vehicle]:
    """
    List the user's vehicles, newest first, with the owning customer loaded.

    ``search`` matches model, plate number or customer name.
    """
    query = (
        select(Vehicle)
        .join(Customer, Vehicle.customer_id == Customer.id)
        .where(Customer.user_id == user_id)
        .options(selectinload(Vehicle.customer))
    )

    if customer_id is not None:
        query = query.where(Vehicle.customer_id == customer_id)

    if search:
        pattern = f"%{search}%"
        query = query.where(
            or_(
                Vehicle.model.ilike(pattern),
                Vehicle.plate_number.ilike(pattern),
                Customer.name.ilike(pattern),
            )
        )

    result = await db.execute(query.order_by(Vehicle.created_at.desc(), Vehicle.id.desc()))
    return list(result.scalars().all())


async def get_vehicle(db: AsyncSession, user_id: int, vehicle_id: int) -> Vehicle:
    result = await db.execute(
        select(Vehicle)
        .join(Customer, Vehicle.customer_id == Customer.id)
        .where(Vehicle.id == vehicle_id, Customer.user_id == user_id)
    )
    vehicle = result.scalar_one_or_none()

    if not vehicle:
        raise NotFoundError("Vehicle not found")

    return vehicle


async def create_vehicle(db: AsyncSession, user_id: int, vehicle: VehicleCreate) -> Vehicle:
    await get_customer(db, user_id, vehicle.customer_id)
    await _ensure_plate_available(db, vehicle.plate_number)

    db_vehicle = Vehicle(**vehicle.model_dump())
    db.add(db_vehicle)
    db_vehicle = await _commit_vehicle(db, db_vehicle)

    logger.info("Created vehicle %s for customer %s", db_vehicle.id, db_vehicle.customer_id)
    return db_vehicle


async def update_vehicle(
    db: AsyncSession, user_id: int, vehicle_id: int, vehicle_update: VehicleUpdate
) -> Vehicle:
    db_vehicle = await get_vehicle(db, user_id, vehicle_id)

    update_data = {
        field: value
        for field, value in vehicle_update.model_dump(exclude_unset=True).items()
        if not (field in _REQUIRED_FIELDS and value is None)
    }

    if "customer_id" in update_data:
        await get_customer(db, user_id, update_data["customer_id"])
    if "plate_number" in update_data:
        await _ensure_plate_available(db, update_data["plate_number"], vehicle_id)

    new_owner = update_data.get("customer_id", db_vehicle.customer_id)
    if new_owner != db_vehicle.customer_id:
        # Service records follow their vehicle to the new customer
        await db.execute(
            update(Service)
            .where(Service.vehicle_id == vehicle_id)
            .values(customer_id=new_owner)
            .execution_options(synchronize_session=False)
        )
        logger.info(
            "Moved vehicle %s from customer %s to %s", vehicle_id, db_vehicle.customer_id, new_owner
        )

    for field, value in update_data.items():
        setattr(db_vehicle, field, value)

    return await _commit_vehicle(db, db_vehicle)


async def delete_vehicle(db: AsyncSession, user_id: int, vehicle_id: int) -> None:
    """Delete a vehicle; the database cascades to its services."""
    db_vehicle = await get_vehicle(db, user_id, vehicle_id)

    await db.delete(db_vehicle)
    await db.commit()

    logger.info("Deleted vehicle %s for user %s", vehicle_id, user_id)
