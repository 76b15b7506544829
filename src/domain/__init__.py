"""Domain layer - Pure business logic.

Entities, value objects, enums and protocols (ports) for the credential,
session and trial model. The domain layer has NO dependencies on any
framework or infrastructure - it is pure Python.

Structure:
- entities/: CredentialRecord, Session
- value_objects/: PasswordHash, Quota, TrialState
- enums/: AccountStatus, AccessMode
- protocols/: Store, hashing, token, extraction and logger interfaces
- errors/: Extraction (upstream) errors
"""
