"""Map service errors onto HTTP responses."""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from network.exceptions import (
    Conflict,
    InvalidOperation,
    NetworkError,
    NotFound,
    StorageFailure,
    Unauthorized,
    ValidationError,
)
from network.services.storage import GENERIC_FAILURE

logger = logging.getLogger(__name__)

STATUS_FOR = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    InvalidOperation: status.HTTP_400_BAD_REQUEST,
    NotFound: status.HTTP_404_NOT_FOUND,
    Unauthorized: status.HTTP_401_UNAUTHORIZED,
    Conflict: status.HTTP_409_CONFLICT,
    StorageFailure: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def network_exception_handler(exc, context):
    """DRF exception handler that understands NetworkError subclasses."""
    if not isinstance(exc, NetworkError):
        return exception_handler(exc, context)

    code = STATUS_FOR.get(type(exc), status.HTTP_400_BAD_REQUEST)
    if isinstance(exc, StorageFailure):
        view = context.get("view")
        logger.error("Storage failure while serving %s", type(view).__name__ if view else "request")
        return Response({"msg": GENERIC_FAILURE}, status=code)
    if exc.errors:
        return Response({"errors": exc.errors}, status=code)
    return Response({"msg": exc.message}, status=code)
