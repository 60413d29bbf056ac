"""Custom exception handling for the Articles API."""

from typing import Any

from django.db import Error
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from .logging import get_logger

log = get_logger(__name__)


def custom_exception_handler(exc: Exception, context: dict[str, Any]) -> Response | None:
    """Log query failures and close the request with an empty 503.

    Database errors (any ``django.db.Error``) never become a structured error
    payload: the failure is logged and the caller gets a bodiless 503. Anything
    else (malformed body, unsupported method) keeps DRF's default handling.
    """

    if isinstance(exc, Error):
        view = context.get("view")
        request = context.get("request")
        log.error(
            "articles.query_failed",
            view=type(view).__name__ if view is not None else None,
            method=getattr(request, "method", None),
            error=str(exc),
            exc_info=exc,
        )
        return Response(status=status.HTTP_503_SERVICE_UNAVAILABLE)

    return drf_exception_handler(exc, context)


__all__ = ["custom_exception_handler"]
