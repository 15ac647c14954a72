"""
Dashboard statistics.
"""
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.customer import Customer
from app.models.service import Service
from app.models.vehicle import Vehicle
from app.schemas.stats import DashboardStats

_CENTS = Decimal("0.01")


def month_bounds(now: Optional[datetime] = None) -> tuple[datetime, datetime]:
    """Return ``[start, end)`` of the calendar month containing ``now`` (UTC)."""
    now = now or datetime.now(timezone.utc)
    start = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    if start.month == 12:
        end = start.replace(year=start.year + 1, month=1)
    else:
        end = start.replace(month=start.month + 1)
    return start, end


async def get_dashboard_stats(
    db: AsyncSession, user_id: int, now: Optional[datetime] = None
) -> DashboardStats:
    # The three counts travel together as scalar subqueries of one SELECT
    customers = (
        select(func.count(Customer.id)).where(Customer.user_id == user_id).scalar_subquery()
    )
    vehicles = (
        select(func.count(Vehicle.id))
        .select_from(Vehicle)
        .join(Customer, Vehicle.customer_id == Customer.id)
        .where(Customer.user_id == user_id)
        .scalar_subquery()
    )
    services = (
        select(func.count(Service.id))
        .select_from(Service)
        .join(Customer, Service.customer_id == Customer.id)
        .where(Customer.user_id == user_id)
        .scalar_subquery()
    )
    counts = (await db.execute(select(customers, vehicles, services))).one()

    start, end = month_bounds(now)
    revenue = await db.scalar(
        select(func.coalesce(func.sum(Service.amount_paid), 0))
        .select_from(Service)
        .join(Customer, Service.customer_id == Customer.id)
        .where(
            Customer.user_id == user_id,
            Service.submission_date >= start,
            Service.submission_date < end,
        )
    )

    return DashboardStats(
        total_customers=counts[0] or 0,
        total_vehicles=counts[1] or 0,
        total_services=counts[2] or 0,
        monthly_revenue=Decimal(str(revenue or 0)).quantize(_CENTS),
    )
