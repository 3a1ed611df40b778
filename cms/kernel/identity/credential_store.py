"""
Credential store backed by a YAML file of ``username: hash`` rows.

The table is re-read on every call so a sign-up is visible to the very next
request. New entries are appended; existing rows are never rewritten.
"""

import threading
from pathlib import Path
from typing import Collection, Dict, List

import yaml

from cms.kernel.errors import ValidationFailed
from cms.kernel.identity.password import hash_password, verify_password
from cms.logging_config import get_logger

logger = get_logger(__name__)

MIN_PASSWORD_LENGTH = 6

INVALID_USERNAME_MESSAGE = "Invalid Username. Username must be at least one character and unique."
INVALID_PASSWORD_MESSAGE = f"Passwords must be at least {MIN_PASSWORD_LENGTH} characters."

# Validate-then-append must not interleave between two sign-ups in this process.
_register_lock = threading.Lock()


def is_new_username_valid(username: str, existing_usernames: Collection[str]) -> bool:
    """Non-empty and unique, ignoring case."""
    if not username:
        return False
    taken = {name.lower() for name in existing_usernames}
    return username.lower() not in taken


def is_new_password_valid(password: str) -> bool:
    return len(password) >= MIN_PASSWORD_LENGTH


class CredentialStore:
    """Username -> password hash table persisted as YAML."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> Dict[str, str]:
        """Read the whole table. A missing or empty file is an empty table."""
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            return {}
        if not data:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Credential file {self.path.name} is not a mapping")
        # YAML turns keys like `123` or `yes` into non-strings
        return {str(username): str(hsh) for username, hsh in data.items()}

    def usernames(self) -> List[str]:
        return list(self.load())

    def verify(self, username: str, password: str) -> bool:
        """True iff the user exists and the password matches the stored hash."""
        hsh = self.load().get(username)
        if not hsh:
            return False
        return verify_password(password, hsh)

    def register(self, username: str, password: str) -> None:
        """
        Validate and append a new account.

        Raises:
            ValidationFailed: username empty or taken, or password too short.
                The message is the one shown to the user.
        """
        with _register_lock:
            if not is_new_username_valid(username, self.usernames()):
                raise ValidationFailed(INVALID_USERNAME_MESSAGE)
            if not is_new_password_valid(password):
                raise ValidationFailed(INVALID_PASSWORD_MESSAGE)
            self._append(username, hash_password(password))
        logger.info("Account registered", extra={"username": username})

    def _append(self, username: str, hsh: str) -> None:
        row = yaml.safe_dump({username: hsh}, default_flow_style=False, allow_unicode=True)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as f:
            # Previous content may not end with a newline
            f.write("\n" + row)
