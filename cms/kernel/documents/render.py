"""
Render dispatch for documents.

Markdown goes through Python-Markdown and is wrapped in the page layout by the
caller. Everything else, including extensions we know nothing about, is served
as plain text.
"""

from enum import Enum

import markdown

from cms.kernel.documents.namer import split_name


class RenderMode(str, Enum):
    MARKDOWN = "markdown"
    PLAIN_TEXT = "plain_text"


MARKDOWN_EXTENSIONS = frozenset({".md", ".markdown"})

PLAIN_TEXT_MEDIA_TYPE = "text/plain"


def render_mode_for(name: str) -> RenderMode:
    """Pick the render mode from the file extension (case-insensitive)."""
    _, extension = split_name(name)
    if extension.lower() in MARKDOWN_EXTENSIONS:
        return RenderMode.MARKDOWN
    return RenderMode.PLAIN_TEXT


def render_markdown(text: str) -> str:
    """Convert markdown source to an HTML fragment."""
    return markdown.markdown(text, extensions=["fenced_code", "tables"])
