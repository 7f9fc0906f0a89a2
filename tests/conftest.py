"""Shared fixtures."""

import pytest

from builders import export_html, note_html


@pytest.fixture
def basb_html():
    """Header plus one annotated note, one commented note and one bare bookmark."""
    return export_html(
        note_html("La vida es sueño", "42"),
        note_html("“Capture” what resonates", "57", comment="Applies to work notes"),
        note_html("Bookmark", "17"),
    )
