"""Fixtures for API tests.

Requests go through the real FastAPI app (middleware, routers, exception
handlers, handler factories). Only the outer collaborators are replaced via
``app.dependency_overrides``:

- credential repository and session store: in-memory dicts
- extraction gateway: canned result with a call counter
- password service: fast PBKDF2 iteration count (root conftest fixture)
"""

import secrets
from datetime import UTC, datetime, timedelta
from typing import Any

import pytest
from fastapi.testclient import TestClient

from src.core.config import settings
from src.core.container import (
    get_credential_repository,
    get_extraction_gateway,
    get_password_service,
    get_session_store,
    get_trial_token_service,
)
from src.core.result import Result, Success
from src.domain.entities import CredentialRecord, Session
from src.domain.value_objects import TrialState
from src.infrastructure.security import TrialTokenService
from src.main import app
from tests.conftest import TEST_SECRET_KEY

PAGE = "data:image/png;base64,iVBORw0KGgo="

INVOICE: dict[str, Any] = {
    "seller": {"company_name": "Acme Traders", "gstin": None, "address": None},
    "invoice": {"number": "INV-42", "date": "05-03-2025", "transaction_id": None},
    "taxes": [{"type": "IGST", "rate_percent": 18, "amount": 18.0}],
    "amounts": {"taxable_amount": 100.0, "total_amount": 118.0},
}


class InMemoryCredentialRepository:
    """Credential records keyed by username."""

    def __init__(self) -> None:
        self.records: dict[str, CredentialRecord] = {}

    def add(self, record: CredentialRecord) -> None:
        self.records[record.username] = record

    async def find_by_username(self, username: str):
        return Success(value=self.records.get(username))


class InMemorySessionStore:
    """Sessions keyed by token."""

    def __init__(self) -> None:
        self.sessions: dict[str, Session] = {}

    async def create(self, username: str, roles: tuple[str, ...]):
        now = datetime.now(UTC)
        session = Session(
            token=secrets.token_urlsafe(24),
            username=username,
            roles=tuple(roles),
            created_at=now,
            expires_at=now + timedelta(seconds=settings.session_ttl_seconds),
        )
        self.sessions[session.token] = session
        return Success(value=session)

    async def lookup(self, token: str | None) -> Session | None:
        session = self.sessions.get(token) if token else None
        if session is None or session.is_expired():
            return None
        return session

    async def destroy(self, token: str | None) -> None:
        if token:
            self.sessions.pop(token, None)


class FakeExtractionGateway:
    """Returns ``result`` (or raises ``raises``) and records every call."""

    def __init__(self) -> None:
        self.result: Result[dict[str, Any], Any] = Success(value=INVOICE)
        self.raises: Exception | None = None
        self.calls: list[tuple[list[str], str]] = []

    async def extract(self, images: list[str], text: str):
        self.calls.append((list(images), text))
        if self.raises is not None:
            raise self.raises
        return self.result


@pytest.fixture
def credential_repo() -> InMemoryCredentialRepository:
    return InMemoryCredentialRepository()


@pytest.fixture
def session_store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def gateway() -> FakeExtractionGateway:
    return FakeExtractionGateway()


@pytest.fixture
def trial_tokens() -> TrialTokenService:
    return TrialTokenService(TEST_SECRET_KEY, ttl_seconds=settings.trial_ttl_seconds)


@pytest.fixture
def client(credential_repo, session_store, gateway, trial_tokens, password_service):
    """TestClient over HTTPS so Secure cookies round-trip."""
    app.dependency_overrides[get_credential_repository] = lambda: credential_repo
    app.dependency_overrides[get_session_store] = lambda: session_store
    app.dependency_overrides[get_extraction_gateway] = lambda: gateway
    app.dependency_overrides[get_trial_token_service] = lambda: trial_tokens
    app.dependency_overrides[get_password_service] = lambda: password_service

    with TestClient(app, base_url="https://testserver") as test_client:
        yield test_client

    app.dependency_overrides.clear()


def trial_cookie(trial_tokens: TrialTokenService, count: int) -> str:
    """Signed trial cookie value carrying ``count`` consumed uses."""
    return trial_tokens.issue(TrialState(count))


def set_cookie_headers(response) -> list[str]:
    return response.headers.get_list("set-cookie")


def cleared(response, name: str) -> bool:
    """True when the response expires cookie ``name``."""
    return any(
        header.startswith(f"{name}=") and "Max-Age=0" in header
        for header in set_cookie_headers(response)
    )
