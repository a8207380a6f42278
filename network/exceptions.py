"""Typed errors raised by the network services.

Business-rule violations are raised as subclasses of NetworkError so the
API layer can turn them into structured responses. StorageFailure wraps
database errors that the services do not handle themselves.
"""

from typing import Dict, List, Optional


class NetworkError(Exception):
    """Base class for every error the services raise on purpose."""

    def __init__(self, message: str, errors: Optional[List[Dict[str, str]]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.errors = errors or []


class ValidationError(NetworkError):
    """Malformed or missing input; `errors` lists every violated field."""

    @classmethod
    def from_fields(cls, errors: List[Dict[str, str]]) -> "ValidationError":
        """Build an error whose message joins every field message."""
        return cls("; ".join(err["msg"] for err in errors), errors=errors)


class InvalidOperation(NetworkError):
    """The request is well-formed but can never succeed (e.g. self-follow)."""


class NotFound(NetworkError):
    """A referenced entity does not exist."""


class Unauthorized(NetworkError):
    """The caller is authenticated but does not own the record."""


class Conflict(NetworkError):
    """A duplicate edge (follow or like) or a missing edge on removal."""


class StorageFailure(NetworkError):
    """The database could not complete the operation."""
