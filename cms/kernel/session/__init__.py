"""
Session state and the access guard for mutating operations.
"""

from cms.kernel.session.access_guard import (
    SessionContext,
    authenticate,
    require_signed_in,
    set_flash,
    sign_in,
    sign_out,
    take_flash,
)

__all__ = [
    "SessionContext",
    "authenticate",
    "require_signed_in",
    "set_flash",
    "sign_in",
    "sign_out",
    "take_flash",
]
