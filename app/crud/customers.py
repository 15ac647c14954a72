"""
Customer queries.
"""
import logging
from typing import Optional

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import NotFoundError
from app.models.customer import Customer
from app.models.service import Service
from app.models.vehicle import Vehicle
from app.schemas.customer import CustomerCreate, CustomerSummary, CustomerUpdate

logger = logging.getLogger(__name__)


async def list_customers(
    db: AsyncSession, user_id: int, search: Optional[str] = None
) -> list[CustomerSummary]:
    """
    List the user's customers, newest first, with vehicle and service counts.

    ``search`` matches name, email or phone, case-insensitively.
    """
    vehicle_count = (
        select(func.count(Vehicle.id))
        .where(Vehicle.customer_id == Customer.id)
        .correlate(Customer)
        .scalar_subquery()
    )
    service_count = (
        select(func.count(Service.id))
        .where(Service.customer_id == Customer.id)
        .correlate(Customer)
        .scalar_subquery()
    )

    query = select(
        Customer,
        vehicle_count.label("vehicle_count"),
        service_count.label("service_count"),
    ).where(Customer.user_id == user_id)

    if search:
        pattern = f"%{search}%"
        query = query.where(
            or_(
                Customer.name.ilike(pattern),
                Customer.email.ilike(pattern),
                Customer.phone.ilike(pattern),
            )
        )

    result = await db.execute(query.order_by(Customer.created_at.desc(), Customer.id.desc()))

    summaries = []
    for customer, vehicles, services in result.all():
        summary = CustomerSummary.model_validate(customer)
        summary.vehicle_count = vehicles or 0
        summary.service_count = services or 0
        summaries.append(summary)
    return summaries


async def get_customer(db: AsyncSession, user_id: int, customer_id: int) -> Customer:
    result = await db.execute(
        select(Customer).where(Customer.id == customer_id, Customer.user_id == user_id)
    )
    customer = result.scalar_one_or_none()

    if not customer:
        raise NotFoundError("Customer not found")

    return customer


async def create_customer(db: AsyncSession, user_id: int, customer: CustomerCreate) -> Customer:
    db_customer = Customer(user_id=user_id, **customer.model_dump())
    db.add(db_customer)
    await db.commit()
    await db.refresh(db_customer)

    logger.info("Created customer %s for user %s", db_customer.id, user_id)
    return db_customer


async def update_customer(
    db: AsyncSession, user_id: int, customer_id: int, customer_update: CustomerUpdate
) -> Customer:
    db_customer = await get_customer(db, user_id, customer_id)

    # Update only provided fields; an explicit null never clears the required name
    update_data = customer_update.model_dump(exclude_unset=True)
    if "name" in update_data and update_data["name"] is None:
        del update_data["name"]
    for field, value in update_data.items():
        setattr(db_customer, field, value)

    await db.commit()
    await db.refresh(db_customer)

    return db_customer


async def delete_customer(db: AsyncSession, user_id: int, customer_id: int) -> None:
    """Delete a customer; the database cascades to its vehicles and services."""
    db_customer = await get_customer(db, user_id, customer_id)

    await db.delete(db_customer)
    await db.commit()

    logger.info("Deleted customer %s for user %s", customer_id, user_id)
