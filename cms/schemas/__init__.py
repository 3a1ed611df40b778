"""
Pydantic schemas for JSON responses.
"""

from cms.schemas.common import ErrorResponse, HealthResponse

__all__ = [
    "ErrorResponse",
    "HealthResponse",
]
