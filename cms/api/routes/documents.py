"""
Document endpoints.

Everything except viewing a single document requires a signed-in session.
"""

from typing import Annotated

from fastapi import APIRouter, Form, Request
from fastapi.responses import Response

from cms.api.deps import Documents, Session, SignedInUser
from cms.api.templating import redirect, render_page
from cms.kernel.documents.render import (
    PLAIN_TEXT_MEDIA_TYPE,
    RenderMode,
    render_markdown,
)
from cms.kernel.errors import DocumentNotFound

router = APIRouter()


@router.get("/")
async def list_documents(
    request: Request,
    user: SignedInUser,
    session: Session,
    store: Documents,
):
    """Home page: every document in the store."""
    return render_page(
        request,
        session,
        "home.html",
        {"files": store.list_documents()},
    )


@router.get("/new")
async def new_document_form(request: Request, user: SignedInUser, session: Session):
    return render_page(request, session, "new.html")


@router.post("/")
async def create_document(
    user: SignedInUser,
    session: Session,
    store: Documents,
    new_file: Annotated[str, Form()] = "",
):
    """Create an empty document named exactly as submitted. Empty or taken names raise NameConflict."""
    store.create_empty(new_file)
    session.set_flash(f"{new_file} has been created.")
    return redirect("/")


@router.get("/{name}")
async def view_document(request: Request, name: str, session: Session, store: Documents) -> Response:
    """Markdown is rendered into the layout; anything else is served as plain text."""
    document = store.load(name)
    if document.render_mode is RenderMode.MARKDOWN:
        return render_page(
            request,
            session,
            "document.html",
            {"name": document.name, "body": render_markdown(document.text)},
        )
    return Response(document.content, media_type=PLAIN_TEXT_MEDIA_TYPE)


@router.get("/{name}/edit")
async def edit_document_form(
    request: Request,
    name: str,
    user: SignedInUser,
    session: Session,
    store: Documents,
):
    document = store.load(name)
    return render_page(
        request,
        session,
        "edit.html",
        {"filename": document.name, "old_content": document.text},
    )


@router.post("/{name}")
async def update_document(
    name: str,
    user: SignedInUser,
    session: Session,
    store: Documents,
    new_content: Annotated[str, Form()] = "",
):
    """Replace the full content of an existing document."""
    if not store.exists(name):
        raise DocumentNotFound(name)
    store.write(name, new_content)
    session.set_flash(f"{name} has been edited.")
    return redirect("/")


@router.post("/{name}/duplicate")
async def duplicate_document(name: str, user: SignedInUser, session: Session, store: Documents):
    copy_name = store.duplicate_with_unique_name(name)
    session.set_flash(f"A duplicate of {name} has been created as {copy_name}.")
    return redirect("/")


@router.post("/{name}/delete")
async def delete_document(name: str, user: SignedInUser, session: Session, store: Documents):
    store.delete(name)
    session.set_flash(f"{name} was deleted.")
    return redirect("/")
