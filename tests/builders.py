"""Builders for annotation export HTML used across tests."""

from bs4 import BeautifulSoup


def header_html(heading="2021-01-01 - Building a Second Brain", author="Tiago Forte"):
    return (
        f'<div class="bookmark"><h1>{heading}</h1></div>\n'
        f'<div class="bookmark"><span>{author}</span></div>\n'
    )


def note_html(text="La vida es sueño", page="42", comment=None):
    parts = ['<div class="bookmark bm-color-yellow">']
    if page is not None:
        parts.append(f'<div class="bm-page">{page}</div>')
    if text is not None:
        parts.append(f'<div class="bm-text"><p>{text}</p></div>')
    if comment is not None:
        parts.append(f'<div class="bm-note"><p>{comment}</p></div>')
    parts.append("</div>\n")
    return "".join(parts)


def export_html(*notes, **header):
    return f"<html><body>{header_html(**header)}{''.join(notes)}</body></html>"


def element(html):
    """First element of an HTML fragment."""
    return BeautifulSoup(html, "html.parser").find()


