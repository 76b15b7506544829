"""Unit tests for credential record domain types.

Tests cover:
- PasswordHash parsing (provisioning and legacy formats) and encoding
- CredentialRecord expiry and status rules
- AccountStatus parsing of stored values
- Quota defaults
"""

import base64
from datetime import UTC, datetime, timedelta

import pytest

from src.domain.entities import CredentialRecord
from src.domain.enums import AccountStatus
from src.domain.value_objects import PasswordHash, Quota

SALT = base64.b64encode(b"0123456789abcdef").decode()
KEY = base64.b64encode(b"k" * 32).decode()


def make_hash() -> PasswordHash:
    return PasswordHash.from_encoded(f"pbkdf2$sha256$1000${SALT}${KEY}")


@pytest.mark.unit
class TestPasswordHash:
    """Test PasswordHash parsing and encoding."""

    def test_from_encoded_reads_all_parameters(self):
        password_hash = PasswordHash.from_encoded(f"pbkdf2$SHA512$120000${SALT}${KEY}")

        assert password_hash.digest == "sha512"
        assert password_hash.iterations == 120000
        assert password_hash.salt == b"0123456789abcdef"
        assert password_hash.derived_key == b"k" * 32

    def test_encode_returns_provisioning_format(self):
        encoded = f"pbkdf2$sha256$1000${SALT}${KEY}"

        assert PasswordHash.from_encoded(encoded).encode() == encoded

    def test_from_legacy_implies_sha256(self):
        password_hash = PasswordHash.from_legacy(
            salt=SALT, derived_key=KEY, iterations="120000"
        )

        assert password_hash.digest == "sha256"
        assert password_hash.iterations == 120000

    def test_accepts_urlsafe_base64_without_padding(self):
        salt = base64.urlsafe_b64encode(b"\xfb\xff\xfe-salt").decode().rstrip("=")

        password_hash = PasswordHash.from_encoded(f"pbkdf2$sha256$1000${salt}${KEY}")

        assert password_hash.salt == b"\xfb\xff\xfe-salt"

    @pytest.mark.parametrize(
        "encoded",
        [
            "bcrypt$sha256$1000$abc$def",
            "pbkdf2$sha256$1000$abc",
            f"pbkdf2$sha256$many${SALT}${KEY}",
            f"pbkdf2$sha256$1000${SALT}$!!!not-base64!!!",
            f"pbkdf2$sha256$1000${SALT}$",
        ],
    )
    def test_malformed_strings_raise_value_error(self, encoded):
        with pytest.raises(ValueError):
            PasswordHash.from_encoded(encoded)

    def test_repr_hides_key_material(self):
        assert KEY not in repr(make_hash())
        assert SALT not in repr(make_hash())


@pytest.mark.unit
class TestCredentialRecord:
    """Test CredentialRecord business rules."""

    def test_record_without_expiry_never_expires(self):
        record = CredentialRecord(username="acme", password_hash=make_hash())

        assert record.is_expired() is False

    def test_record_expired_when_expiry_in_past(self):
        now = datetime(2025, 6, 1, tzinfo=UTC)
        record = CredentialRecord(
            username="acme",
            password_hash=make_hash(),
            expires=now - timedelta(seconds=1),
        )

        assert record.is_expired(now) is True

    def test_record_not_expired_at_exact_expiry_instant(self):
        now = datetime(2025, 6, 1, tzinfo=UTC)
        record = CredentialRecord(
            username="acme", password_hash=make_hash(), expires=now
        )

        assert record.is_expired(now) is False

    def test_default_status_is_active(self):
        record = CredentialRecord(username="acme", password_hash=make_hash())

        assert record.is_active() is True
        assert record.quota == Quota(max_pages=10, max_files=100)

    def test_disabled_record_is_not_active(self):
        record = CredentialRecord(
            username="acme",
            password_hash=make_hash(),
            status=AccountStatus.DISABLED,
        )

        assert record.is_active() is False


@pytest.mark.unit
class TestAccountStatus:
    """Test AccountStatus.parse for stored values."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (None, AccountStatus.ACTIVE),
            ("active", AccountStatus.ACTIVE),
            (" Active ", AccountStatus.ACTIVE),
            ("disabled", AccountStatus.DISABLED),
            ("suspended", AccountStatus.DISABLED),
            (42, AccountStatus.DISABLED),
        ],
    )
    def test_parse(self, raw, expected):
        assert AccountStatus.parse(raw) is expected


@pytest.mark.unit
class TestQuota:
    """Test Quota mapping."""

    def test_from_dict_falls_back_per_field(self):
        assert Quota.from_dict({"max_pages": 5}) == Quota(max_pages=5, max_files=100)

    def test_from_empty_is_default(self):
        assert Quota.from_dict(None) == Quota()
        assert Quota.from_dict({}) == Quota()
