"""Application layer - Use cases and orchestration.

Structure:
- commands/: Command dataclasses and handlers (login, logout, extract)
- services/: Access guard shared by the extraction handler

The application layer orchestrates domain logic; it imports only from the
domain and core layers.
"""
