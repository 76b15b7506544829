"""Unit tests for the credential provisioning script."""

import json

import pytest

from src.core.make_user import build_parser, build_record, main
from src.domain.enums import AccountStatus
from src.infrastructure.persistence.repositories.credential_repository import (
    credential_record_from_dict,
)
from src.infrastructure.security import Pbkdf2PasswordService


@pytest.mark.unit
class TestMakeUser:
    """Test record construction and output."""

    def test_build_record_hashes_password(self):
        args = build_parser().parse_args(
            ["acme", "s3cret", "--iterations", "1000", "--expires", "2030-01-31"]
        )

        record = build_record(args)

        assert record.username == "acme"
        assert record.roles == ("user",)
        assert record.expires.isoformat() == "2030-01-31T00:00:00+00:00"
        service = Pbkdf2PasswordService(iterations=1000)
        assert service.verify("s3cret", record.password_hash) is True

    def test_main_prints_key_and_loadable_record(self, capsys):
        exit_code = main(
            [
                "acme",
                "s3cret",
                "--iterations",
                "1000",
                "--role",
                "admin",
                "--max-pages",
                "5",
                "--disabled",
            ]
        )

        output = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert output["key"] == "user:acme"
        value = output["value"]
        assert value["hash"].startswith("pbkdf2$sha256$1000$")
        assert value["role"] == "admin"
        assert value["quota"] == {"max_pages": 5, "max_files": 100}
        assert value["expires"] == "2099-12-31"
        assert value["status"] == "disabled"

        record = credential_record_from_dict(value)
        assert record.status is AccountStatus.DISABLED
        assert record.roles == ("admin",)

    def test_key_prefix_applied(self, capsys):
        main(["acme", "pw", "--iterations", "1000", "--key-prefix", "inv"])

        assert json.loads(capsys.readouterr().out)["key"] == "inv:user:acme"

    def test_empty_username_rejected(self, capsys):
        assert main(["   ", "pw", "--iterations", "1000"]) == 2
        assert "required" in capsys.readouterr().err

    def test_invalid_expiry_rejected(self):
        assert main(["acme", "pw", "--expires", "31/12/2099"]) == 2

    def test_store_requires_redis_url(self, monkeypatch):
        monkeypatch.delenv("REDIS_URL", raising=False)

        assert (
            main(["acme", "pw", "--iterations", "1000", "--store", "--redis-url", ""])
            == 2
        )
