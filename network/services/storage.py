"""Translate unexpected database errors into StorageFailure."""

import functools
import logging

from django.db import DatabaseError

from network.exceptions import StorageFailure

logger = logging.getLogger(__name__)

GENERIC_FAILURE = "There was an issue with the server. Try again later."


def storage_guard(func):
    """Re-raise DatabaseError from a service method as StorageFailure.

    The wrapped method's own transaction has already rolled back by the
    time the error reaches this wrapper. Nothing is retried.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except DatabaseError as exc:
            logger.exception("Storage failure in %s", func.__qualname__)
            raise StorageFailure(GENERIC_FAILURE) from exc
    return wrapper
