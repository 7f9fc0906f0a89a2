"""
Field extractors for annotation export marker elements.

Every semantic field (export date, title, author, highlight, page, comment)
is described by one Field: a name plus the rule its raw text must satisfy.
Extractors are pure functions of a single marker element; they never modify
the tree and raise StructuralError or ContentError on failure.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from bs4 import Tag

from common.constants import (
    AUTHOR_TAG,
    HEADER_SEPARATOR,
    HEADING_TAG,
    NOTE_CLASS,
    PAGE_CLASS,
    PARAGRAPH_TAG,
    TEXT_CLASS,
)
from common.logger import get_logger

from .errors import ContentError, StructuralError
from .text import reconstruct_text
from .tree import find_by_class, find_by_name, first_text

T = TypeVar("T")

logger = get_logger(__name__)


@dataclass(frozen=True)
class Field(Generic[T]):
    """A named field and the validation rule applied to its raw text.

    The rule raises ValueError when the text is malformed; the message
    prefix explains what was expected.
    """

    name: str
    rule: Callable[[str], T]
    expectation: str

    def validate(self, raw: str) -> T:
        try:
            return self.rule(raw)
        except ValueError as e:
            raise ContentError(self.name, f"{self.expectation}: {e}") from e

    def missing(self, what: str) -> StructuralError:
        return StructuralError(self.name, f"Expected {what}")


def _split_header(raw: str) -> tuple[str, str]:
    export_date, sep, title = raw.partition(HEADER_SEPARATOR)
    if not sep:
        raise ValueError(f"no '{HEADER_SEPARATOR}' in {raw!r}")
    return export_date, title


def _positive_int(raw: str) -> int:
    token = raw.strip()
    # str.isdigit() also accepts superscripts and other unicode digits
    if not token.isascii() or not token.isdigit():
        raise ValueError(f"invalid digit found in {raw!r}")
    value = int(token)
    if value == 0:
        raise ValueError("page numbers start at 1")
    return value


def _non_empty(raw: str) -> str:
    if not raw:
        raise ValueError("text is empty")
    return raw


def _verbatim(raw: str) -> str:
    return raw


HEADER_EXPECTATION = (
    f"Expected text with '{HEADER_SEPARATOR}' inside to delimit export date and book title"
)

EXPORT_DATE = Field("export_date", lambda raw: _split_header(raw)[0], HEADER_EXPECTATION)
TITLE = Field("title", lambda raw: _split_header(raw)[1], HEADER_EXPECTATION)
AUTHOR = Field("author", _verbatim, "Expected book author")
HIGHLIGHT = Field("highlight", _non_empty, "Expected highlight to have content")
PAGE = Field("page", _positive_int, "Expected text to be a positive integer")
COMMENT = Field("comment", _verbatim, "Expected comment text")


def _heading_text(element: Tag, field: Field) -> str:
    heading = find_by_name(element, HEADING_TAG)
    if heading is None:
        raise field.missing(
            f"<{HEADING_TAG}> element with export date and book title inside"
        )
    text = first_text(heading)
    if text is None:
        raise field.missing(f"text inside <{HEADING_TAG}> element")
    return text


def _paragraph(element: Tag, field: Field, class_name: str) -> Tag | None:
    """The first paragraph inside the class_name marker, None when the marker is absent."""
    marker = find_by_class(element, class_name)
    if marker is None:
        return None
    paragraph = find_by_name(marker, PARAGRAPH_TAG)
    if paragraph is None:
        raise field.missing(f"one '{PARAGRAPH_TAG}' element inside '.{class_name}'")
    return paragraph


def extract_export_date(element: Tag) -> str:
    """Export date token preceding the separator in the header heading."""
    return EXPORT_DATE.validate(_heading_text(element, EXPORT_DATE))


def extract_title(element: Tag) -> str:
    """Book title following the separator in the header heading."""
    return TITLE.validate(_heading_text(element, TITLE))


def extract_author(element: Tag) -> str:
    span = find_by_name(element, AUTHOR_TAG)
    if span is None:
        raise AUTHOR.missing(f"<{AUTHOR_TAG}> element with book author inside")
    text = first_text(span)
    if text is None:
        raise AUTHOR.missing(f"text inside <{AUTHOR_TAG}> element")
    return AUTHOR.validate(text)


def extract_highlight(element: Tag) -> str:
    paragraph = _paragraph(element, HIGHLIGHT, TEXT_CLASS)
    if paragraph is None:
        raise HIGHLIGHT.missing(f"element with '{TEXT_CLASS}' class")
    return HIGHLIGHT.validate(reconstruct_text(paragraph))


def extract_page(element: Tag) -> int:
    marker = find_by_class(element, PAGE_CLASS)
    if marker is None:
        raise PAGE.missing(f"element with '{PAGE_CLASS}' class")
    text = first_text(marker)
    if text is None:
        raise PAGE.missing(f"text inside element with '{PAGE_CLASS}' class")
    return PAGE.validate(text)


def extract_comment(element: Tag) -> str | None:
    """The user's comment, or None when the note carries none.

    An empty comment paragraph, or a comment marker without a paragraph,
    counts as no comment.
    """
    try:
        paragraph = _paragraph(element, COMMENT, NOTE_CLASS)
    except StructuralError as e:
        logger.debug(f"Ignoring comment: {e.message}", extra={"markup": False})
        return None
    if paragraph is None:
        return None
    return COMMENT.validate(reconstruct_text(paragraph)) or None
