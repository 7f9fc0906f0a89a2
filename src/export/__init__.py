"""Project parsed notes into third-party highlight import formats."""

from .payload_io import build_payload, write_payload
from .readwise import ExportRecord, HighlightCategory, LocationType, to_export_records

__all__ = [
    "ExportRecord",
    "HighlightCategory",
    "LocationType",
    "build_payload",
    "to_export_records",
    "write_payload",
]
