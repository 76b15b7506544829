"""Access modes selected by the access guard for an extraction request."""

from enum import Enum


class AccessMode(str, Enum):
    """How an extraction request was authorized.

    SESSION: Caller presented a live session (account-level quota).
    TRIAL: Anonymous caller using the free trial (single page, counted).
    """

    SESSION = "session"
    TRIAL = "trial"
