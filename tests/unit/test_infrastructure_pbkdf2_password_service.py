"""Unit tests for Pbkdf2PasswordService.

Tests cover:
- Deterministic derivation (known-answer vector)
- Verification of provisioning and legacy records
- Unknown users (None hash) still verify to False
- Unusable parameters fail securely (False, no exception)
"""

import base64
import hashlib

import pytest

from src.domain.value_objects import PasswordHash
from src.infrastructure.security import Pbkdf2PasswordService


@pytest.fixture
def service() -> Pbkdf2PasswordService:
    return Pbkdf2PasswordService(iterations=1000)


@pytest.mark.unit
class TestDerive:
    """Test raw key derivation."""

    def test_derive_matches_hashlib_pbkdf2(self, service):
        expected = hashlib.pbkdf2_hmac("sha256", b"password", b"salt", 1000, 32)

        assert service.derive("password", b"salt", 1000, "sha256") == expected

    def test_derive_is_deterministic(self, service):
        first = service.derive("pw", b"salt-bytes", 2000, "sha512")
        second = service.derive("pw", b"salt-bytes", 2000, "sha512")

        assert first == second
        assert len(first) == 32

    def test_derive_rejects_unknown_digest(self, service):
        with pytest.raises(ValueError):
            service.derive("pw", b"salt", 1000, "md5")

    def test_derive_rejects_non_positive_iterations(self, service):
        with pytest.raises(ValueError):
            service.derive("pw", b"salt", 0, "sha256")


@pytest.mark.unit
class TestVerify:
    """Test password verification."""

    def test_hash_then_verify_round_trip(self, service):
        password_hash = service.hash_password("s3cret")

        assert service.verify("s3cret", password_hash) is True
        assert service.verify("S3cret", password_hash) is False

    def test_hash_uses_fresh_salt(self, service):
        first = service.hash_password("s3cret")
        second = service.hash_password("s3cret")

        assert first.salt != second.salt
        assert first.derived_key != second.derived_key

    def test_verify_legacy_record(self, service):
        salt = b"legacy-salt-1234"
        key = hashlib.pbkdf2_hmac("sha256", b"old-password", salt, 1500, 32)
        password_hash = PasswordHash.from_legacy(
            salt=base64.b64encode(salt).decode(),
            derived_key=base64.b64encode(key).decode(),
            iterations=1500,
        )

        assert service.verify("old-password", password_hash) is True
        assert service.verify("wrong", password_hash) is False

    def test_verify_record_with_its_own_parameters(self, service):
        salt = b"another-salt"
        key = hashlib.pbkdf2_hmac("sha512", b"pw", salt, 3000, 64)
        password_hash = PasswordHash(
            digest="sha512", iterations=3000, salt=salt, derived_key=key
        )

        assert service.verify("pw", password_hash) is True

    def test_verify_unknown_user_returns_false(self, service):
        assert service.verify("anything", None) is False

    def test_empty_and_long_passwords(self, service):
        long_password = "x" * 4096
        empty_hash = service.hash_password("")
        long_hash = service.hash_password(long_password)

        assert service.verify("", empty_hash) is True
        assert service.verify(long_password, long_hash) is True
        assert service.verify(long_password[:-1], long_hash) is False

    def test_unsupported_digest_fails_securely(self, service):
        password_hash = PasswordHash(
            digest="md5", iterations=1000, salt=b"salt", derived_key=b"k" * 32
        )

        assert service.verify("pw", password_hash) is False

    def test_zero_iterations_fails_securely(self, service):
        password_hash = PasswordHash(
            digest="sha256", iterations=0, salt=b"salt", derived_key=b"k" * 32
        )

        assert service.verify("pw", password_hash) is False


@pytest.mark.unit
class TestConfiguration:
    """Test constructor validation."""

    def test_rejects_unsupported_digest(self):
        with pytest.raises(ValueError):
            Pbkdf2PasswordService(digest="md5")

    def test_rejects_non_positive_iterations(self):
        with pytest.raises(ValueError):
            Pbkdf2PasswordService(iterations=0)

    def test_hash_password_overrides(self, service):
        password_hash = service.hash_password("pw", iterations=1200, digest="sha384")

        assert password_hash.iterations == 1200
        assert password_hash.digest == "sha384"
        assert password_hash.encode().startswith("pbkdf2$sha384$1200$")
