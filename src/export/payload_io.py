"""Export payload serialization and file output."""

import json
from pathlib import Path

from .readwise import ExportRecord


def build_payload(records: list[ExportRecord]) -> dict:
    """Wrap records in the import request body: {"highlights": [...]}."""
    return {"highlights": [record.to_dict() for record in records]}


def write_payload(file_path: Path, records: list[ExportRecord]) -> None:
    """
    Write the export payload as pretty-printed UTF-8 JSON.

    Args:
        file_path: Path to write the file
        records: Export records to serialize
    """
    file_path.parent.mkdir(parents=True, exist_ok=True)

    with open(file_path, "w", encoding="utf-8") as f:
        json.dump(build_payload(records), f, indent=2, ensure_ascii=False)
