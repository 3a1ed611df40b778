"""
Identity Core - password hashing and the credential table.
"""

from cms.kernel.identity.password import PasswordHasher, verify_password, hash_password
from cms.kernel.identity.credential_store import (
    MIN_PASSWORD_LENGTH,
    CredentialStore,
    is_new_password_valid,
    is_new_username_valid,
)

__all__ = [
    "PasswordHasher",
    "verify_password",
    "hash_password",
    "MIN_PASSWORD_LENGTH",
    "CredentialStore",
    "is_new_password_valid",
    "is_new_username_valid",
]
