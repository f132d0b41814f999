"""Map domain errors to HTTP responses without exposing internals."""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from bookings.domain.errors import DomainError, ErrorCode

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    ErrorCode.BOOKING_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_BOOKING_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_OFFER: status.HTTP_400_BAD_REQUEST,
    ErrorCode.MISSING_SIGNATURE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_TRANSITION: status.HTTP_409_CONFLICT,
    ErrorCode.BOOKING_DECLINED: status.HTTP_409_CONFLICT,
    ErrorCode.ALREADY_SIGNED: status.HTTP_409_CONFLICT,
    ErrorCode.CONTRACT_NOT_READY: status.HTTP_409_CONFLICT,
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.NOT_LOGGED_IN: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.ACCESS_DENIED: status.HTTP_403_FORBIDDEN,
}


def domain_exception_handler(exc, context):
    if isinstance(exc, DomainError):
        logger.info("%s in %s", exc, context["view"].__class__.__name__)
        return Response(
            {"code": exc.code.value, "message": exc.message},
            status=STATUS_BY_CODE.get(exc.code, status.HTTP_400_BAD_REQUEST),
        )
    return exception_handler(exc, context)
