"""
Assemble book metadata and notes from an annotation export.

The export is a flat run of elements sharing the 'bookmark' class. The
first carries "<export-date> - <title>", the second the author, and every
later one is a note. Header failures always abort; note failures abort
under the strict policy and are skipped and reported under the lenient one.
"""

from bs4 import Tag

from common.constants import BOOKMARK_CLASS, NOTE_POLICIES
from common.env import env
from common.logger import get_logger

from .errors import ExtractionError, NoteError, StructuralError
from .fields import (
    extract_author,
    extract_comment,
    extract_export_date,
    extract_highlight,
    extract_page,
    extract_title,
)
from .models import Book, Note, NotesExport, SkippedNote
from .tree import find_all_by_class, load_document

logger = get_logger(__name__)

# Document text may contain square brackets; render it without rich markup
PLAIN = {"markup": False}


def extract_note(element: Tag) -> Note:
    """Build a Note from one marker element; highlight and page are required."""
    return Note(
        highlight=extract_highlight(element),
        page=extract_page(element),
        comment=extract_comment(element),
    )


def _resolve_policy(policy: str | None) -> str:
    if policy is None:
        return env.note_policy()
    if policy not in NOTE_POLICIES:
        raise ValueError(f"Unknown note policy '{policy}', expected one of {sorted(NOTE_POLICIES)}")
    return policy


def parse_export(html: str, policy: str | None = None) -> NotesExport:
    """
    Parse an annotation export into book metadata and ordered notes.

    Args:
        html: Full text of the exported HTML document
        policy: "strict" or "lenient"; None reads POCKETBOOK_NOTE_POLICY

    Returns:
        NotesExport with book, export date, notes and any skipped notes

    Raises:
        StructuralError, ContentError: If a header element is missing or malformed
        NoteError: If a note element is malformed under the strict policy
    """
    policy = _resolve_policy(policy)
    markers = iter(find_all_by_class(load_document(html), BOOKMARK_CLASS))

    title_node = next(markers, None)
    if title_node is None:
        raise StructuralError(
            "title", f"Expected at least one HTML element with '{BOOKMARK_CLASS}' class"
        )
    export_date = extract_export_date(title_node)
    title = extract_title(title_node)

    author_node = next(markers, None)
    if author_node is None:
        raise StructuralError(
            "author", f"Expected another HTML element with '{BOOKMARK_CLASS}' class"
        )
    author = extract_author(author_node)

    notes: list[Note] = []
    skipped: list[SkippedNote] = []
    for position, element in enumerate(markers, start=1):
        logger.debug(f"Extracting note #{position}")
        try:
            notes.append(extract_note(element))
        except ExtractionError as e:
            if policy == "strict":
                raise NoteError(position, e) from e
            logger.warning(f"Skipping note #{position}: {e.message}", extra=PLAIN)
            skipped.append(SkippedNote(position=position, reason=e.message))

    export = NotesExport(
        book=Book(title=title, author=author),
        export_date=export_date,
        notes=tuple(notes),
        skipped=tuple(skipped),
    )

    logger.info(
        f"Parsed {len(notes)} note(s) from '{title}' "
        f"({len(export.bookmarks())} bookmark(s), {len(skipped)} skipped)",
        extra=PLAIN,
    )
    return export
