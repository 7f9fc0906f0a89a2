"""Shared constants for pocketbook-notes.

Marker classes and tag names describe the fixed markup contract of the
e-reader's HTML annotation export.

For environment-based configuration, use the env module:
    from common.env import env
    policy = env.note_policy()
"""

from pathlib import Path

DATA_DIR = Path("./data")
DEFAULT_OUTPUT_DIR = DATA_DIR / "export"

# Marker classes
BOOKMARK_CLASS = "bookmark"
TEXT_CLASS = "bm-text"
PAGE_CLASS = "bm-page"
NOTE_CLASS = "bm-note"

# Tags expected inside marker elements
HEADING_TAG = "h1"
AUTHOR_TAG = "span"
PARAGRAPH_TAG = "p"
LINE_BREAK_TAG = "br"

# "<export-date> - <title>" in the first header element
HEADER_SEPARATOR = " - "

# Highlight text of a bare page bookmark
BOOKMARK_PLACEHOLDER = "Bookmark"

# Typographic punctuation rewritten during text reconstruction
QUOTE_REPLACEMENTS: dict[str, str] = {
    "“": '"',
    "”": '"',
    "’": "'",
}

NOTE_POLICIES: set[str] = {"strict", "lenient"}

DEFAULT_SOURCE_TAG = "pocketbook_notes"
