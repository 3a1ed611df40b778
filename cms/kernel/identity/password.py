"""
bcrypt hashing for the credential table.

Hashes are stored in the YAML file as their ``$2b$...`` text form.
"""

import bcrypt

from cms.logging_config import get_logger

logger = get_logger(__name__)

BCRYPT_ROUNDS = 12

# bcrypt ignores everything past this many bytes
BCRYPT_MAX_BYTES = 72


class PasswordHasher:
    @staticmethod
    def _encode(password: str) -> bytes:
        return password.encode("utf-8")[:BCRYPT_MAX_BYTES]

    @staticmethod
    def hash(password: str) -> str:
        salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
        return bcrypt.hashpw(PasswordHasher._encode(password), salt).decode("ascii")

    @staticmethod
    def verify(plain_password: str, hashed_password: str) -> bool:
        """
        Check a password against a stored hash.

        A row that is not a bcrypt hash (hand-edited file, wrong scheme) is a
        mismatch, never an error.
        """
        try:
            return bcrypt.checkpw(
                PasswordHasher._encode(plain_password),
                hashed_password.encode("utf-8"),
            )
        except (ValueError, TypeError, AttributeError):
            logger.warning("Stored password hash is not a bcrypt hash")
            return False


def hash_password(password: str) -> str:
    return PasswordHasher.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return PasswordHasher.verify(plain_password, hashed_password)
