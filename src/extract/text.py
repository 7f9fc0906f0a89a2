"""Reconstruct the visible text of an element subtree."""

from bs4 import Tag

from common.constants import LINE_BREAK_TAG, QUOTE_REPLACEMENTS

from .tree import is_text


def normalize_quotes(text: str) -> str:
    """Rewrite typographic quotes to their ASCII counterparts.

    Replacements never produce a character that is itself replaced, so
    applying this twice gives the same result as applying it once.
    """
    for smart, plain in QUOTE_REPLACEMENTS.items():
        text = text.replace(smart, plain)
    return text


def reconstruct_text(element: Tag) -> str:
    """
    Concatenate all text below element in document order.

    Each <br> contributes a single newline at its position. The result is
    trimmed and its typographic quotes normalized. Traversal uses an explicit
    stack, so nesting depth is not limited by the recursion limit.
    """
    parts: list[str] = []
    stack = list(reversed(element.contents))

    while stack:
        node = stack.pop()
        if isinstance(node, Tag):
            if node.name == LINE_BREAK_TAG:
                parts.append("\n")
            stack.extend(reversed(node.contents))
        elif is_text(node):
            parts.append(str(node))

    return normalize_quotes("".join(parts).strip())
