"""
Session context and access guard.

The HTTP layer hands each request's session mapping to a SessionContext; the
guard functions below only ever talk to that object, never to global state.
"""

from typing import Any, MutableMapping, Optional

from cms.kernel.errors import Unauthorized
from cms.kernel.identity.credential_store import CredentialStore
from cms.logging_config import get_logger

logger = get_logger(__name__)

IDENTITY_KEY = "signed_in"
FLASH_KEY = "message"


class SessionContext:
    """Per-client state: who is signed in, plus a one-shot flash message."""

    def __init__(self, data: MutableMapping[str, Any]):
        self._data = data

    @property
    def identity(self) -> Optional[str]:
        return self._data.get(IDENTITY_KEY) or None

    @property
    def is_signed_in(self) -> bool:
        return self.identity is not None

    def set_identity(self, username: str) -> None:
        self._data[IDENTITY_KEY] = username

    def clear_identity(self) -> None:
        self._data.pop(IDENTITY_KEY, None)

    def set_flash(self, text: str) -> None:
        self._data[FLASH_KEY] = text

    def take_flash(self) -> Optional[str]:
        """Return the pending flash message and forget it."""
        return self._data.pop(FLASH_KEY, None)

    def peek_flash(self) -> Optional[str]:
        return self._data.get(FLASH_KEY)

    def clear(self) -> None:
        self._data.clear()


def require_signed_in(session: SessionContext) -> str:
    """Return the signed-in username or raise Unauthorized."""
    if not session.is_signed_in:
        raise Unauthorized()
    return session.identity


def sign_in(session: SessionContext, username: str) -> None:
    session.clear()
    session.set_identity(username)
    logger.info("Signed in", extra={"username": username})


def sign_out(session: SessionContext) -> None:
    username = session.identity
    session.clear_identity()
    logger.info("Signed out", extra={"username": username})


def set_flash(session: SessionContext, text: str) -> None:
    session.set_flash(text)


def take_flash(session: SessionContext) -> Optional[str]:
    return session.take_flash()


def authenticate(
    session: SessionContext,
    credentials: CredentialStore,
    username: str,
    password: str,
) -> bool:
    """
    Decide a sign-in attempt.

    Succeeds when the credentials verify, or when the session is already
    signed in. In the latter case no password is checked at all, so a signed-in
    client may re-submit the form under another username. An empty username
    keeps the current identity.
    """
    if credentials.verify(username, password):
        sign_in(session, username)
        return True
    if session.is_signed_in:
        sign_in(session, username or session.identity)
        return True
    logger.info("Sign-in rejected", extra={"username": username})
    return False
