"""
Pytest fixtures for CMS tests.
"""

from pathlib import Path
from typing import AsyncGenerator, Callable

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from cms.config import Settings, get_settings
from cms.kernel.documents.store import DocumentStore
from cms.kernel.identity import password as password_module
from cms.kernel.identity.credential_store import CredentialStore
from cms.main import app


ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "secret"


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    """bcrypt at 12 rounds makes every sign-in slow; tests don't need the strength."""
    monkeypatch.setattr(password_module, "BCRYPT_ROUNDS", 4)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a throwaway data directory and credential file."""
    return Settings(
        environment="test",
        data_dir=tmp_path / "data",
        credentials_file=tmp_path / "user_accounts.yml",
    )


@pytest.fixture
def document_store(settings: Settings) -> DocumentStore:
    return DocumentStore(settings.documents_root)


@pytest.fixture
def credential_store(settings: Settings) -> CredentialStore:
    return CredentialStore(settings.credentials_path)


@pytest.fixture
def admin_account(credential_store: CredentialStore) -> str:
    """Seed the credential file with the admin account."""
    credential_store.register(ADMIN_USERNAME, ADMIN_PASSWORD)
    return ADMIN_USERNAME


@pytest.fixture
def create_document(document_store: DocumentStore) -> Callable[..., None]:
    """Write a document straight to disk, bypassing the HTTP layer."""

    def _create(name: str, content: str = "") -> None:
        (document_store.root / name).write_text(content, encoding="utf-8")

    return _create


@pytest_asyncio.fixture
async def client(settings: Settings) -> AsyncGenerator[AsyncClient, None]:
    """Async client wired to the test settings; keeps the session cookie between calls."""
    app.dependency_overrides[get_settings] = lambda: settings
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as ac:
            yield ac
    finally:
        app.dependency_overrides.pop(get_settings, None)


@pytest_asyncio.fixture
async def admin_client(client: AsyncClient, admin_account: str) -> AsyncClient:
    """Client whose session is signed in as admin."""
    r = await client.post(
        "/users/signin",
        data={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD},
    )
    assert r.status_code == 302, r.text
    return client
