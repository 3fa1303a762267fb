"""
Client-side error kinds.

`ErrorKind` tags every failed call; the HTTP status code decides the kind,
never the message text.  `NotAuthenticated` is the only exception the
client raises: it is checked locally, before any request is sent.
"""
from enum import Enum


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    AUTH = "auth"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    NETWORK = "network"
    SERVER = "server"

    @classmethod
    def from_status(cls, status_code: int) -> "ErrorKind":
        if status_code in (400, 422):
            return cls.VALIDATION
        if status_code in (401, 403):
            return cls.AUTH
        if status_code == 404:
            return cls.NOT_FOUND
        if status_code == 409:
            return cls.CONFLICT
        return cls.SERVER


class NotAuthenticated(Exception):
    """Raised before a write when the request context has no actor or token."""

    def __init__(self, message: str = "User not authenticated"):
        super().__init__(message)
