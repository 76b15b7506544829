"""Infrastructure layer - Adapters and external integrations.

Implementations of domain protocols (ports):
- cache/: Redis adapter (Result-returning wrapper around redis.asyncio)
- persistence/: Credential and session stores on top of the Redis adapter
- security/: PBKDF2 password service, signed trial token service
- extraction/: Extraction gateway for the external model API
- logging/: structlog console adapter

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
