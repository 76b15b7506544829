"""Pytest configuration.

Settings are required at import time of ``src.core.config``, so test
defaults are placed in the environment before any ``src`` import. Real
environment values (e.g. in CI) take precedence.
"""

import inspect
import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/15")
os.environ.setdefault("ALLOWED_ORIGIN", "https://app.example.com")
os.environ.setdefault("OPENAI_API_KEY", "sk-test-key")
os.environ.setdefault(
    "TRIAL_SECRET_KEY", "test-trial-secret-key-0123456789abcdef0123456789"
)

import pytest  # noqa: E402

from src.domain.entities import CredentialRecord  # noqa: E402
from src.domain.enums import AccountStatus  # noqa: E402
from src.infrastructure.security import Pbkdf2PasswordService  # noqa: E402

TEST_SECRET_KEY = os.environ["TRIAL_SECRET_KEY"]

# Low iteration count keeps hashing fast in tests; records carry their own
# iteration count so verification is unaffected.
TEST_ITERATIONS = 1000


@pytest.fixture
def password_service() -> Pbkdf2PasswordService:
    """PBKDF2 service with a fast iteration count."""
    return Pbkdf2PasswordService(iterations=TEST_ITERATIONS)


def create_record(
    password_service: Pbkdf2PasswordService,
    username: str = "acme",
    password: str = "s3cret-pass",
    roles: tuple[str, ...] = ("user",),
    expires=None,
    status: AccountStatus = AccountStatus.ACTIVE,
) -> CredentialRecord:
    """Helper to build a CredentialRecord with a real PBKDF2 hash.

    Args:
        password_service: Service used to hash ``password``.
        username: Account name.
        password: Plaintext password.
        roles: Role tuple.
        expires: Expiry datetime (None = never).
        status: Account status.

    Returns:
        CredentialRecord for testing.
    """
    return CredentialRecord(
        username=username,
        password_hash=password_service.hash_password(password),
        roles=roles,
        expires=expires,
        status=status,
    )


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with fakeredis or mocked HTTP"
    )
    config.addinivalue_line("markers", "api: API tests through FastAPI TestClient")


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)
