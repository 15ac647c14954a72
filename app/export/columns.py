"""Export column sets for each entity listing."""
from enum import Enum
from typing import Any

from app.export.formatting import ExportColumn


def _enum_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _count(value: Any) -> str:
    return str(value or 0)


CUSTOMER_COLUMNS = (
    ExportColumn("name"),
    ExportColumn("email"),
    ExportColumn("phone"),
    ExportColumn("vehicle_count", "Vehicles", _count),
    ExportColumn("service_count", "Services", _count),
    ExportColumn("created_at", "Created"),
)

VEHICLE_COLUMNS = (
    ExportColumn("model"),
    ExportColumn("plate_number"),
    ExportColumn("customer.name", "Customer"),
    ExportColumn("created_at", "Created"),
)

SERVICE_COLUMNS = (
    ExportColumn("customer.name", "Customer"),
    ExportColumn("vehicle.model", "Vehicle"),
    ExportColumn("vehicle.plate_number", "Plate"),
    ExportColumn("description"),
    ExportColumn("submission_date", "Submitted"),
    ExportColumn("collection_date", "Collected"),
    ExportColumn("amount_paid"),
    ExportColumn("status", formatter=_enum_value),
)
