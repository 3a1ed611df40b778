"""
Sign-in, sign-out and sign-up endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Form, Request, status

from cms.api.deps import Credentials, Session
from cms.api.templating import redirect, render_page
from cms.kernel.errors import ValidationFailed
from cms.kernel.session.access_guard import authenticate, sign_in, sign_out

router = APIRouter()

INVALID_CREDENTIALS_MESSAGE = "Invalid Credentials"


@router.get("/signin")
async def signin_form(request: Request, session: Session):
    return render_page(request, session, "signin.html")


@router.post("/signin")
async def signin(
    request: Request,
    session: Session,
    credentials: Credentials,
    username: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
):
    """
    Sign in.

    Re-submitting the form while already signed in succeeds without a
    password check (see `authenticate`).
    """
    if authenticate(session, credentials, username, password):
        session.set_flash("Welcome!")
        return redirect("/")

    session.set_flash(INVALID_CREDENTIALS_MESSAGE)
    return render_page(
        request,
        session,
        "signin.html",
        {"username": username},
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
    )


@router.post("/signout")
async def signout(session: Session):
    sign_out(session)
    session.set_flash("You were signed out.")
    return redirect("/users/signin")


@router.get("/signup")
async def signup_form(request: Request, session: Session):
    return render_page(request, session, "signup.html")


@router.post("/signup")
async def signup(
    request: Request,
    session: Session,
    credentials: Credentials,
    username: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
):
    """Create an account and sign it in. Validation failures re-render the form with 422."""
    try:
        credentials.register(username, password)
    except ValidationFailed as e:
        session.set_flash(e.user_message)
        return render_page(
            request,
            session,
            "signup.html",
            {"username": username},
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        )

    sign_in(session, username)
    session.set_flash(f"New account created for {username}. Welcome!")
    return redirect("/")
