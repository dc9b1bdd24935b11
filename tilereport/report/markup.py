"""HTML fragments shared by the report writers."""

from __future__ import annotations

from html import escape

HTML_HEADER = (
    "<html>\n"
    "<head>\n"
    "<title>Tilereport Graphical Game Report</title>\n"
    '<meta http-equiv="Content-Type" content="text/html; charset=utf-8">\n'
    "</head>\n"
    "<body bgcolor=white>\n"
    "<h1>Graphical Game Report</h1>\n"
    "<p><i>Generated by tilereport crossword game analysis</i></p>\n"
    "\n\n"
)

CURRENT_PLAYER_MARKER = "&rarr;"
OTHER_PLAYER_MARKER = "&nbsp;"
PLAYED_MOVE_MARKER = " &nbsp;&larr;"
POSITION_SEPARATOR = "\n\n"
HTML_FOOTER = "</body>\n</html>\n"


def sanitize_letters(text: str) -> str:
    """Escape user-entered names, racks and tile strings for embedding in HTML."""
    return escape(text, quote=True)


def title_html(text: str) -> str:
    return f"<h2>{text}</h2>"


def link_html(href: str, text: str) -> str:
    return f'<a href="{escape(href, quote=True)}">{text}</a>'


def image_html(src: str) -> str:
    return f'<p><img src="{escape(src, quote=True)}"></p>'
