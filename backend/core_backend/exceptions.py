"""
API exception handling.

Maps order pipeline errors onto HTTP responses. Anything that is neither a DRF
APIException nor an OrderServiceError (database outages, deadlocks) is left
to propagate as a server error.
"""
import logging

from django.db.models import ProtectedError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from orders.exceptions import (
    OrderServiceError,
    ResourceNotFoundError,
    TableConflictError,
    OrderRejectedError,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR = (
    (ResourceNotFoundError, status.HTTP_404_NOT_FOUND),
    (TableConflictError, status.HTTP_409_CONFLICT),
    (OrderRejectedError, status.HTTP_403_FORBIDDEN),
)


def api_exception_handler(exc, context):
    """
    DRF exception handler that understands order pipeline errors.
    """
    if isinstance(exc, OrderServiceError):
        status_code = status.HTTP_400_BAD_REQUEST
        for error_class, mapped_status in STATUS_BY_ERROR:
            if isinstance(exc, error_class):
                status_code = mapped_status
                break

        request = context.get('request')
        logger.warning(
            f"Order request rejected: {exc.__class__.__name__}: {exc.message}",
            extra={
                'status_code': status_code,
                'path': getattr(request, 'path', None),
                'method': getattr(request, 'method', None),
            }
        )
        return Response({"error": exc.message, "code": exc.code}, status=status_code)

    if isinstance(exc, ProtectedError):
        # Deleting a table or product that orders still reference
        logger.warning(f"Delete blocked by protected references: {exc}")
        return Response(
            {"error": "Cannot delete: still referenced by other records.", "code": "protected"},
            status=status.HTTP_409_CONFLICT,
        )

    return exception_handler(exc, context)
