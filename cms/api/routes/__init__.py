"""
HTTP routes.
"""

from fastapi import APIRouter

from cms.api.routes import documents, users

router = APIRouter()

# Users first so /users/... never reaches the document routes
router.include_router(users.router, prefix="/users", tags=["Users"])
router.include_router(documents.router, tags=["Documents"])
