"""Integration tests for RedisCredentialRepository using fakeredis."""

import base64
import json
from datetime import UTC, datetime

import pytest

from src.core.result import Success
from src.domain.enums import AccountStatus
from src.infrastructure.persistence.repositories.credential_repository import (
    RedisCredentialRepository,
)
from tests.conftest import create_record


@pytest.fixture
def repository(redis_adapter, cache_keys) -> RedisCredentialRepository:
    return RedisCredentialRepository(redis_adapter, cache_keys)


@pytest.mark.integration
class TestCredentialLookup:
    """Test reading provisioned records."""

    async def test_encoded_hash_record(
        self, repository, fakeredis_client, password_service
    ):
        password_hash = password_service.hash_password("s3cret")
        await fakeredis_client.set(
            "user:acme",
            json.dumps(
                {
                    "username": "acme",
                    "role": "admin",
                    "quota": {"max_pages": 5, "max_files": 50},
                    "expires": "2099-12-31",
                    "status": "active",
                    "hash": password_hash.encode(),
                }
            ),
        )

        result = await repository.find_by_username("acme")

        assert isinstance(result, Success)
        record = result.value
        assert record.username == "acme"
        assert record.roles == ("admin",)
        assert record.quota.max_pages == 5
        assert record.expires == datetime(2099, 12, 31, tzinfo=UTC)
        assert record.status is AccountStatus.ACTIVE
        assert password_service.verify("s3cret", record.password_hash) is True

    async def test_split_field_record(
        self, repository, fakeredis_client, password_service
    ):
        salt = b"0123456789abcdef"
        derived = password_service.derive("s3cret", salt, 1000, "sha256")
        await fakeredis_client.set(
            "user:legacy",
            json.dumps(
                {
                    "roles": ["user"],
                    "salt": base64.b64encode(salt).decode(),
                    "hash": base64.b64encode(derived).decode(),
                    "iterations": 1000,
                }
            ),
        )

        record = (await repository.find_by_username("legacy")).value

        assert record.username == "legacy"
        assert record.roles == ("user",)
        assert record.expires is None
        assert record.password_hash.digest == "sha256"
        assert password_service.verify("s3cret", record.password_hash) is True
        assert password_service.verify("wrong", record.password_hash) is False

    async def test_absent_record(self, repository):
        result = await repository.find_by_username("nobody")

        assert result == Success(value=None)

    @pytest.mark.parametrize(
        "raw",
        [
            "{not json",
            "[1, 2]",
            '{"username": "acme"}',
            '{"hash": "pbkdf2$sha256$notanumber$c2FsdA==$a2V5"}',
        ],
    )
    async def test_corrupted_record_reads_as_absent(
        self, repository, fakeredis_client, raw
    ):
        await fakeredis_client.set("user:acme", raw)

        result = await repository.find_by_username("acme")

        assert result == Success(value=None)


@pytest.mark.integration
class TestCredentialSave:
    """Test provisioning writes."""

    async def test_save_then_find(self, repository, password_service):
        record = create_record(
            password_service,
            roles=("user", "admin"),
            expires=datetime(2030, 1, 31, tzinfo=UTC),
        )

        assert await repository.save(record) == Success(value=True)
        loaded = (await repository.find_by_username("acme")).value

        assert loaded.username == record.username
        assert loaded.roles == record.roles
        assert loaded.expires == record.expires
        assert loaded.password_hash == record.password_hash

    async def test_disabled_status_round_trips(self, repository, password_service):
        record = create_record(password_service, status=AccountStatus.DISABLED)

        await repository.save(record)
        loaded = (await repository.find_by_username("acme")).value

        assert loaded.status is AccountStatus.DISABLED
        assert loaded.is_active() is False
