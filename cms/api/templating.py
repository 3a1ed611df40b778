"""
HTML rendering helpers.

Every page goes through `render_page`, which consumes the session's flash
message so it is shown exactly once.
"""

from pathlib import Path
from typing import Any, Optional

from fastapi import Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from cms.kernel.session.access_guard import SessionContext

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

# Jinja2Templates enables autoescaping; rendered markdown is passed through `|safe`
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render_page(
    request: Request,
    session: SessionContext,
    template: str,
    context: Optional[dict[str, Any]] = None,
    status_code: int = status.HTTP_200_OK,
) -> HTMLResponse:
    page_context = {
        "flash": session.take_flash(),
        "current_user": session.identity,
    }
    page_context.update(context or {})
    return templates.TemplateResponse(
        request,
        template,
        page_context,
        status_code=status_code,
    )


def redirect(url: str) -> RedirectResponse:
    """302 redirect; RedirectResponse defaults to 307."""
    return RedirectResponse(url, status_code=status.HTTP_302_FOUND)
