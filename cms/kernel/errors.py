"""
Domain errors.

Every error here is scoped to a single request: the app's exception handlers
turn them into a flash message plus a redirect, or the route re-renders a form
with 422.
"""

from typing import Optional


class CMSError(Exception):
    """Base class for CMS domain errors."""

    message = "Something went wrong."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)

    @property
    def user_message(self) -> str:
        return str(self)


class DocumentNotFound(CMSError):
    """Operation on a document that does not exist."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{name} does not exist.")


class NameConflict(CMSError):
    """Create/duplicate with an empty or already taken name."""

    message = "Filename must be nonempty and unique."

    def __init__(self, name: str = ""):
        self.name = name
        super().__init__()


class InvalidDocumentName(CMSError):
    """Name that is not a plain filename inside the document root."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{name} is not a valid document name.")


class Unauthorized(CMSError):
    """Mutating action without a signed-in session."""

    message = "You must be signed in to do that."


class ValidationFailed(CMSError):
    """Bad username/password at sign-up or bad credentials at sign-in."""
