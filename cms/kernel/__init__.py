"""
Kernel Layer

Everything with real invariants lives here, free of HTTP concerns:
- Document naming rules and the file-backed document store
- Credential table and password hashing
- Session context and the access guard

The API layer only wires HTTP requests to these pieces.
"""

from cms.kernel.errors import (
    CMSError,
    DocumentNotFound,
    InvalidDocumentName,
    NameConflict,
    Unauthorized,
    ValidationFailed,
)

__all__ = [
    "CMSError",
    "DocumentNotFound",
    "InvalidDocumentName",
    "NameConflict",
    "Unauthorized",
    "ValidationFailed",
]
