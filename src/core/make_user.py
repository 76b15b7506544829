#!/usr/bin/env python3
"""
Credential provisioning script.

Builds a credential record for one account and prints it as JSON together
with the key it belongs under. With ``--store`` the record is written to
Redis directly (overwriting any existing record for the username).

The service never writes credential records; this script is the only
producer.

Usage:
    python -m src.core.make_user acme 's3cret' --expires 2026-12-31
    python -m src.core.make_user acme 's3cret' --store --redis-url redis://localhost:6379/0
"""

import argparse
import asyncio
import json
import os
import sys
from datetime import UTC, date, datetime
from typing import Any

from src.domain.entities import CredentialRecord
from src.domain.enums import AccountStatus
from src.domain.value_objects import Quota
from src.infrastructure.cache import CacheKeys
from src.infrastructure.persistence.repositories.credential_repository import (
    credential_record_to_dict,
)
from src.infrastructure.security import Pbkdf2PasswordService

DEFAULT_EXPIRES = "2099-12-31"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="make_user",
        description="Create a credential record for the invoice extractor.",
    )
    parser.add_argument("username", help="Account name (record key)")
    parser.add_argument("password", help="Plaintext password (hashed with PBKDF2)")
    parser.add_argument("--role", default="user", help="Account role (default: user)")
    parser.add_argument("--max-pages", type=int, default=10)
    parser.add_argument("--max-files", type=int, default=100)
    parser.add_argument(
        "--expires",
        default=DEFAULT_EXPIRES,
        help=f"Expiry date YYYY-MM-DD (default: {DEFAULT_EXPIRES})",
    )
    parser.add_argument("--iterations", type=int, default=120_000)
    parser.add_argument(
        "--digest", default="sha256", choices=["sha1", "sha256", "sha384", "sha512"]
    )
    parser.add_argument(
        "--disabled", action="store_true", help="Create the account disabled"
    )
    parser.add_argument(
        "--store", action="store_true", help="Write the record to Redis"
    )
    parser.add_argument(
        "--redis-url",
        default=os.environ.get("REDIS_URL"),
        help="Redis URL for --store (default: $REDIS_URL)",
    )
    parser.add_argument(
        "--key-prefix",
        default=os.environ.get("CACHE_KEY_PREFIX", ""),
        help="Key prefix (default: $CACHE_KEY_PREFIX)",
    )
    return parser


def build_record(args: argparse.Namespace) -> CredentialRecord:
    """Hash the password and assemble the record.

    Raises:
        ValueError: If username/password are empty or a value is invalid.
    """
    username = args.username.strip()
    if not username or not args.password:
        raise ValueError("username and password are required")

    expires_on = date.fromisoformat(args.expires)
    password_service = Pbkdf2PasswordService(
        iterations=args.iterations, digest=args.digest
    )
    return CredentialRecord(
        username=username,
        password_hash=password_service.hash_password(args.password),
        roles=(args.role,),
        quota=Quota(max_pages=args.max_pages, max_files=args.max_files),
        expires=datetime(
            expires_on.year, expires_on.month, expires_on.day, tzinfo=UTC
        ),
        status=AccountStatus.DISABLED if args.disabled else AccountStatus.ACTIVE,
    )


async def store_record(
    redis_url: str, keys: CacheKeys, record: CredentialRecord
) -> bool:
    """Write a record to Redis. Returns True on success."""
    from redis.asyncio import Redis

    from src.core.result import Success
    from src.infrastructure.cache import RedisAdapter
    from src.infrastructure.persistence.repositories import RedisCredentialRepository

    redis_client = Redis.from_url(redis_url, decode_responses=True)
    try:
        repository = RedisCredentialRepository(RedisAdapter(redis_client), keys)
        result = await repository.save(record)
    finally:
        await redis_client.aclose()
    return isinstance(result, Success)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        record = build_record(args)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    keys = CacheKeys(prefix=args.key_prefix)
    output: dict[str, Any] = {
        "key": keys.user(record.username),
        "value": credential_record_to_dict(record),
    }
    print(json.dumps(output, indent=2))

    if args.store:
        if not args.redis_url:
            print("error: --store needs --redis-url or REDIS_URL", file=sys.stderr)
            return 2
        if not asyncio.run(store_record(args.redis_url, keys, record)):
            print("error: failed to write record to Redis", file=sys.stderr)
            return 1
        print(f"stored {output['key']}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
