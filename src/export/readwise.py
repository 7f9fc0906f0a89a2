"""Project parsed notes into Readwise-style highlight records."""

from dataclasses import dataclass
from enum import Enum

from common.env import env
from extract.models import NotesExport


class HighlightCategory(Enum):
    """Kind of source a highlight comes from."""

    BOOKS = "books"


class LocationType(Enum):
    """Unit of ExportRecord.location."""

    PAGE = "page"


@dataclass(frozen=True)
class ExportRecord:
    """One highlight in the import format of the note-taking service."""

    text: str
    title: str
    author: str
    source_tag: str
    location: int
    category: HighlightCategory = HighlightCategory.BOOKS
    location_type: LocationType = LocationType.PAGE
    comment: str | None = None
    highlighted_at: str | None = None  # never filled from the export date

    def to_dict(self) -> dict:
        """Serialize with wire field names, omitting unknown optional fields."""
        data = {
            "text": self.text,
            "title": self.title,
            "author": self.author,
            "source_type": self.source_tag,
            "category": self.category.value,
            "note": self.comment,
            "location": self.location,
            "location_type": self.location_type.value,
            "highlighted_at": self.highlighted_at,
        }
        return {key: value for key, value in data.items() if value is not None}


def to_export_records(export: NotesExport, source_tag: str | None = None) -> list[ExportRecord]:
    """
    Build one ExportRecord per non-bookmark note, in document order.

    Args:
        export: Parsed annotation export
        source_tag: Importer identifier; defaults to POCKETBOOK_SOURCE_TAG

    Returns:
        List of ExportRecords
    """
    tag = source_tag or env.source_tag()
    return [
        ExportRecord(
            text=note.highlight,
            title=export.book.title,
            author=export.book.author,
            source_tag=tag,
            location=note.page,
            comment=note.comment,
        )
        for note in export.annotations()
    ]
