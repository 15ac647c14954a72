"""
Dashboard routes.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth import get_current_active_user
from app.crud.stats import get_dashboard_stats
from app.database import get_db
from app.models.user import User
from app.schemas.stats import DashboardStats

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStats)
async def get_stats(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_active_user)
):
    """
    Totals for the current user plus this month's revenue.
    """
    return await get_dashboard_stats(db, current_user.id)
