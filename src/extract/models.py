"""Domain records parsed from an e-reader annotation export."""

from dataclasses import dataclass

from common.constants import BOOKMARK_PLACEHOLDER


@dataclass(frozen=True)
class Book:
    """Book metadata taken from the two header elements."""

    title: str
    author: str


@dataclass(frozen=True)
class Note:
    """One annotation block: highlight text, page and optional comment."""

    highlight: str
    page: int
    comment: str | None = None

    @property
    def is_bookmark(self) -> bool:
        """True for a bare page marker with no user content."""
        return self.highlight == BOOKMARK_PLACEHOLDER and self.comment is None


@dataclass(frozen=True)
class SkippedNote:
    """A note element dropped under the lenient policy."""

    position: int  # 1-based among note elements
    reason: str


@dataclass(frozen=True)
class NotesExport:
    """Complete result of parsing one annotation export."""

    book: Book
    export_date: str  # verbatim, never parsed
    notes: tuple[Note, ...] = ()
    skipped: tuple[SkippedNote, ...] = ()

    def annotations(self) -> list[Note]:
        """Notes carrying content, in document order."""
        return [note for note in self.notes if not note.is_bookmark]

    def bookmarks(self) -> list[Note]:
        """Bare page bookmarks, in document order."""
        return [note for note in self.notes if note.is_bookmark]
