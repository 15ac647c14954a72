"""
Export routes: CSV and PDF downloads of the entity listings.
"""
import enum
from datetime import date
from typing import Optional, Sequence

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth import get_current_active_user
from app.crud import customers, service_records, vehicles
from app.database import get_db
from app.export import ExportColumn, export_csv, export_pdf, format_export_data
from app.export.columns import CUSTOMER_COLUMNS, SERVICE_COLUMNS, VEHICLE_COLUMNS
from app.models.service import ServiceStatus
from app.models.user import User

router = APIRouter(prefix="/export", tags=["export"])


class ExportFormat(str, enum.Enum):
    CSV = "csv"
    PDF = "pdf"


def dated_filename(prefix: str, extension: str, today: Optional[date] = None) -> str:
    """``customers_2026-10-19.csv``"""
    return f"{prefix}_{(today or date.today()).isoformat()}.{extension}"


def export_response(
    records: Sequence,
    columns: Sequence[ExportColumn],
    prefix: str,
    title: str,
    fmt: ExportFormat,
) -> Response:
    rows = format_export_data(records, columns)
    filename = dated_filename(prefix, fmt.value)

    if fmt is ExportFormat.PDF:
        export = export_pdf(rows, filename, title)
    else:
        export = export_csv(rows, filename)

    if export is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return Response(
        content=export.content,
        media_type=export.media_type,
        headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
    )


@router.get("/customers")
async def export_customers(
    format: ExportFormat = ExportFormat.CSV,
    search: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_active_user)
):
    """Export the customer listing."""
    records = await customers.list_customers(db, current_user.id, search=search)
    return export_response(records, CUSTOMER_COLUMNS, "customers", "Customers Report", format)


@router.get("/vehicles")
async def export_vehicles(
    format: ExportFormat = ExportFormat.CSV,
    customer_id: Optional[int] = None,
    search: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_active_user)
):
    """Export the vehicle listing."""
    records = await vehicles.list_vehicles(db, current_user.id, customer_id=customer_id, search=search)
    return export_response(records, VEHICLE_COLUMNS, "vehicles", "Vehicles Report", format)


@router.get("/services")
async def export_services(
    format: ExportFormat = ExportFormat.CSV,
    customer_id: Optional[int] = None,
    status_filter: Optional[ServiceStatus] = None,
    search: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_active_user)
):
    """Export the service listing."""
    records = await service_records.list_services(
        db, current_user.id, customer_id=customer_id, status=status_filter, search=search
    )
    return export_response(records, SERVICE_COLUMNS, "services", "Service Report", format)
