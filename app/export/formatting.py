"""
Turn domain records into display-ready export rows.

Rows are plain dicts mapping a human-readable column label to a display value.
They can be produced generically from whatever keys a record carries, or from
an explicit list of ``ExportColumn`` descriptors that fixes column order,
labels and per-column formatting.
"""
import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Iterable, Optional, Sequence

INTERNAL_PREFIX = "_"

_UPPER = re.compile(r"([A-Z])")
_SPACES = re.compile(r"\s+")


@dataclass(frozen=True)
class ExportFile:
    """A finished export, ready to be sent as a download."""

    filename: str
    media_type: str
    content: bytes


@dataclass(frozen=True)
class ExportColumn:
    """
    One export column.

    ``key`` is a dotted path into the record (``"vehicle.plate_number"``);
    each segment is looked up as a mapping key or an attribute. ``label``
    defaults to the humanised last segment. ``formatter``, when given,
    replaces the default value formatting.
    """

    key: str
    label: Optional[str] = None
    formatter: Optional[Callable[[Any], Any]] = None

    @property
    def heading(self) -> str:
        return self.label or humanize_key(self.key.rsplit(".", 1)[-1])


def short_date(value: date) -> str:
    """Locale short date, e.g. ``10/19/26`` under the C locale."""
    return value.strftime("%x")


def humanize_key(name: str) -> str:
    """``plate_number`` -> ``Plate number``, ``createdAt`` -> ``Created At``."""
    text = name.replace("_", " ")
    text = text[:1].upper() + text[1:]
    text = _UPPER.sub(r" \1", text)
    return _SPACES.sub(" ", text).strip()


def format_value(value: Any) -> Any:
    if value is None:
        return ""
    if isinstance(value, date):
        return short_date(value)
    return value


def resolve(record: Any, path: str) -> Any:
    value = record
    for part in path.split("."):
        if value is None:
            return None
        if isinstance(value, Mapping):
            value = value.get(part)
        else:
            value = getattr(value, part, None)
    return value


def _format_generic(record: Mapping) -> dict[str, Any]:
    formatted = {}
    for key, value in record.items():
        if key.startswith(INTERNAL_PREFIX):
            continue
        formatted[humanize_key(key)] = format_value(value)
    return formatted


def _format_columns(record: Any, columns: Sequence[ExportColumn]) -> dict[str, Any]:
    formatted = {}
    for column in columns:
        value = resolve(record, column.key)
        if column.formatter is not None:
            value = column.formatter(value)
        formatted[column.heading] = format_value(value)
    return formatted


def format_export_data(
    records: Iterable[Any], columns: Optional[Sequence[ExportColumn]] = None
) -> list[dict[str, Any]]:
    """
    Format records for export; one output row per input record.

    Without ``columns`` each record must be a mapping: keys starting with
    ``_`` are dropped, the rest are humanised. Dates become locale short
    dates and ``None`` becomes an empty string in both modes.
    """
    if columns is None:
        return [_format_generic(record) for record in records]
    return [_format_columns(record, columns) for record in records]


def column_names(rows: Sequence[Mapping[str, Any]]) -> list[str]:
    """Union of row keys in first-seen order."""
    names: dict[str, None] = {}
    for row in rows:
        for key in row:
            names.setdefault(key, None)
    return list(names)
