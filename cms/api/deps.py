"""
FastAPI dependencies for settings, storage, sessions and the access guard.
"""

from typing import Annotated

from fastapi import Depends, Request

from cms.config import Settings, get_settings
from cms.kernel.documents.store import DocumentStore
from cms.kernel.identity.credential_store import CredentialStore
from cms.kernel.session.access_guard import SessionContext, require_signed_in


AppSettings = Annotated[Settings, Depends(get_settings)]


def get_document_store(settings: AppSettings) -> DocumentStore:
    """Document store rooted at the configured data directory."""
    return DocumentStore(settings.documents_root)


def get_credential_store(settings: AppSettings) -> CredentialStore:
    return CredentialStore(settings.credentials_path)


def get_session(request: Request) -> SessionContext:
    """Wrap the cookie-backed session (set up by SessionMiddleware)."""
    return SessionContext(request.session)


Documents = Annotated[DocumentStore, Depends(get_document_store)]
Credentials = Annotated[CredentialStore, Depends(get_credential_store)]
Session = Annotated[SessionContext, Depends(get_session)]


def get_signed_in_user(session: Session) -> str:
    """Username of the signed-in user, or Unauthorized (redirect to sign-in)."""
    return require_signed_in(session)


SignedInUser = Annotated[str, Depends(get_signed_in_user)]
