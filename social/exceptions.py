"""Uniform `{"error": ...}` error responses for the JSON API."""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Something went wrong!"


def _first_message(detail):
    """Flatten DRF error detail (dict/list/str) down to its first message."""
    if isinstance(detail, dict):
        if "detail" in detail:
            return _first_message(detail["detail"])
        for value in detail.values():
            return _first_message(value)
        return GENERIC_ERROR
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else GENERIC_ERROR
    return str(detail)


def api_exception_handler(exc, context):
    """
    Convert any exception raised in an API view into `{"error": message}`.

    Known DRF/Django exceptions keep their status code. Anything else is
    logged with its stack trace and reported as a generic 500.
    """
    response = exception_handler(exc, context)
    if response is None:
        request = context.get("request")
        path = getattr(request, "path", "?")
        logger.exception("Unhandled error on %s", path, exc_info=exc)
        return Response({"error": GENERIC_ERROR}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    response.data = {"error": _first_message(response.data)}
    return response
