"""Maps domain errors to HTTP responses."""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from events.domain.errors import DomainError, ErrorCode

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_REQUEST_BODY: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.SPOT_NOT_FOUND: status.HTTP_400_BAD_REQUEST,
    ErrorCode.SPOT_ALREADY_RESERVED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.SERIALIZATION_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def domain_exception_handler(exc: Exception, context: dict) -> Response | None:
    """DRF exception handler that renders DomainError as ``{code, message}``.

    Other exceptions are left to DRF's default handler.
    """
    if not isinstance(exc, DomainError):
        return exception_handler(exc, context)

    http_status = STATUS_BY_CODE.get(exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR)
    if http_status >= 500:
        logger.error("%s while handling %s", exc, context.get("view").__class__.__name__)
    return Response({"code": exc.code.value, "message": exc.message}, status=http_status)
