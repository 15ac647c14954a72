"""
Pydantic schemas for dashboard statistics.
"""
from decimal import Decimal

from pydantic import BaseModel, computed_field


def format_currency(amount: Decimal) -> str:
    """Render an amount the way the dashboard shows it, e.g. ``$1,234.50``."""
    return f"${amount:,.2f}"


class DashboardStats(BaseModel):
    """Per-owner totals shown on the dashboard."""
    total_customers: int = 0
    total_vehicles: int = 0
    total_services: int = 0
    monthly_revenue: Decimal = Decimal("0.00")

    @computed_field
    @property
    def monthly_revenue_display(self) -> str:
        return format_currency(self.monthly_revenue)
