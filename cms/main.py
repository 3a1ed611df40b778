"""
Flat-file CMS

FastAPI application entry point.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.sessions import SessionMiddleware

from cms.config import get_settings
from cms.api.deps import Documents
from cms.api.middleware.request_id import RequestIdMiddleware
from cms.api.routes import router as cms_router
from cms.api.templating import redirect
from cms.kernel.errors import (
    CMSError,
    DocumentNotFound,
    InvalidDocumentName,
    NameConflict,
    Unauthorized,
)
from cms.kernel.session.access_guard import SessionContext
from cms.logging_config import configure_logging, get_logger
from cms.schemas.common import ErrorResponse, HealthResponse

settings = get_settings()
logger = get_logger(__name__)

# Where each domain error sends the browser; the error text becomes the flash message
ERROR_REDIRECTS = {
    DocumentNotFound: "/",
    InvalidDocumentName: "/",
    NameConflict: "/new",
    Unauthorized: "/users/signin",
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan handler.

    Runs startup and shutdown tasks.
    """
    configure_logging(
        log_level=settings.log_level,
        environment=settings.environment,
        debug=settings.debug,
    )

    logger.info("Starting %s v%s", settings.project_name, settings.version)
    logger.info(
        "Serving documents from %s",
        settings.documents_root,
        extra={"credentials": str(settings.credentials_path)},
    )

    yield

    logger.info("Shutting down...")


app = FastAPI(
    title=settings.project_name,
    description="""
    Flat-file CMS

    Signed-in users create, edit, duplicate and delete text and markdown
    documents stored as plain files in one directory.
    """,
    version=settings.version,
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)


# add_middleware stacks innermost-first: the session middleware wraps everything,
# including the exception handlers below, so flash messages they set are saved.
app.add_middleware(RequestIdMiddleware)
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.session_secret,
    session_cookie=settings.session_cookie,
    max_age=settings.session_max_age,
    https_only=settings.environment == "production",
)


@app.exception_handler(CMSError)
async def cms_error_handler(request: Request, exc: CMSError):
    """Turn a domain error into a flash message plus a 302."""
    target = "/"
    for error_type, url in ERROR_REDIRECTS.items():
        if isinstance(exc, error_type):
            target = url
            break
    logger.info(
        "%s: %s",
        type(exc).__name__,
        exc.user_message,
        extra={"path": request.url.path, "method": request.method},
    )
    SessionContext(request.session).set_flash(exc.user_message)
    return redirect(target)


@app.exception_handler(Exception)
async def general_exception_handler(
    request: Request,
    exc: Exception,
):
    """Handle unexpected exceptions (permission denied, disk full, ...)."""
    logger.exception("Unhandled exception: %s", exc)
    req_id = getattr(request.state, "request_id", None)
    if settings.debug:
        content = ErrorResponse(detail=str(exc), type=type(exc).__name__, request_id=req_id)
    else:
        content = ErrorResponse(detail="Internal server error", request_id=req_id)
    headers = {"X-Request-ID": req_id} if req_id else None
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=content.model_dump(exclude_none=True),
        headers=headers,
    )


# Health check endpoint (registered before the catch-all document routes)
@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check(store: Documents):
    """Check application health."""
    return HealthResponse(
        status="ok",
        version=settings.version,
        documents=len(store.list_documents()),
    )


app.include_router(cms_router)


# Main entry point for development
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "cms.main:app",
        host="127.0.0.1",
        port=4567,
        reload=settings.debug,
    )
