"""Narrow adapter over BeautifulSoup used by the field extractors.

Extractors only need to load a document, find marker elements by class,
find descendants by tag name or class, and read a leading text node.
"""

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString


def load_document(html: str) -> BeautifulSoup:
    """Parse the whole export into a queryable tree."""
    return BeautifulSoup(html, "html.parser")


def is_text(node) -> bool:
    """True for plain text nodes (comments, doctypes and CDATA excluded)."""
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def find_all_by_class(root: Tag, class_name: str) -> list[Tag]:
    """All descendants carrying class_name, in document order."""
    return root.find_all(class_=class_name)


def find_by_class(root: Tag, class_name: str) -> Tag | None:
    return root.find(class_=class_name)


def find_by_name(root: Tag, name: str) -> Tag | None:
    return root.find(name)


def first_text(element: Tag) -> str | None:
    """Content of the element's first child when that child is a text node."""
    if not element.contents:
        return None
    first = element.contents[0]
    return str(first) if is_text(first) else None
