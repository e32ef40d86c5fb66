import structlog
from django.db import DatabaseError, IntegrityError
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException, NotFound
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

logger = structlog.get_logger(__name__)


def _request_context(context):
    request = context.get("request")
    return {
        "method": getattr(request, "method", None),
        "path": getattr(request, "path", None),
    }


def custom_exception_handler(exc, context):
    request_context = _request_context(context)

    # missing tournaments and players are routine lookups
    if isinstance(exc, (Http404, NotFound)):
        pass
    elif isinstance(exc, APIException) and exc.status_code < 500:
        logger.warning(str(exc.detail), status_code=exc.status_code, **request_context)
    else:
        logger.error(str(exc), exc_info=True, **request_context)

    response = exception_handler(exc, context)

    # DRF returns None for anything that is not an APIException or Http404
    if response is None:
        if isinstance(exc, IntegrityError):
            response = Response({"detail": "Conflicts with an existing record"}, status=status.HTTP_409_CONFLICT)
        elif isinstance(exc, DatabaseError):
            response = Response({"detail": "Database error"}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        else:
            response = Response({"detail": str(exc)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        set_rollback()

    return response
