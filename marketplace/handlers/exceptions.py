"""Mapping of domain errors to HTTP responses.

Installed as REST_FRAMEWORK["EXCEPTION_HANDLER"]. Internal details are logged,
never returned to the client.
"""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from marketplace.domain.errors import DomainError, ErrorCode

logger = logging.getLogger(__name__)

DEFAULT_FAILURE_MESSAGE = "Internal server error"

STATUS_BY_CODE = {
    ErrorCode.EXPERIENCE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.BOOKING_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.PERSISTENCE_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _failure_message(context) -> str:
    view = context.get("view")
    return getattr(view, "failure_message", DEFAULT_FAILURE_MESSAGE)


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is not None:
        return response

    if isinstance(exc, DomainError):
        status_code = STATUS_BY_CODE[exc.code]
        if status_code < status.HTTP_500_INTERNAL_SERVER_ERROR:
            return Response({"error": exc.message}, status=status_code)
        logger.error("Request failed: %s", exc, exc_info=exc)
        return Response({"error": _failure_message(context)}, status=status_code)

    logger.error("Unhandled error in %s", context.get("view"), exc_info=exc)
    return Response(
        {"error": _failure_message(context)},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
