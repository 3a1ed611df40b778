"""
Documents - naming rules, file storage and render dispatch.
"""

from cms.kernel.documents.namer import (
    derive_indexed_name,
    generate_unique_duplicate_name,
    is_safe_basename,
    is_valid_new_name,
)
from cms.kernel.documents.render import RenderMode, render_markdown, render_mode_for
from cms.kernel.documents.store import Document, DocumentStore

__all__ = [
    "derive_indexed_name",
    "generate_unique_duplicate_name",
    "is_safe_basename",
    "is_valid_new_name",
    "RenderMode",
    "render_markdown",
    "render_mode_for",
    "Document",
    "DocumentStore",
]
