"""Parse e-reader HTML annotation exports into books and notes."""

from .assembler import extract_note, parse_export
from .errors import ContentError, ExtractionError, NoteError, StructuralError
from .models import Book, Note, NotesExport, SkippedNote

__all__ = [
    "Book",
    "ContentError",
    "ExtractionError",
    "Note",
    "NoteError",
    "NotesExport",
    "SkippedNote",
    "StructuralError",
    "extract_note",
    "parse_export",
]
