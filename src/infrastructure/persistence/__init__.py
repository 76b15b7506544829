"""Key-value persistence infrastructure.

Credential and session records live in Redis; see ``repositories``.
"""
