"""Centralized translation of domain errors into HTTP responses.

Every "entity not found" condition in the API is rendered by
``not_found_response`` so the body shape is identical whether the view
branches on a failed ``Result`` or the error is raised and reaches
DRF's global ``EXCEPTION_HANDLER``.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = structlog.get_logger(__name__)


class DomainNotFound(Exception):
    """Base class for "lookup by id yielded no record" errors.

    Subclasses override ``title``, the short human-readable summary
    placed in the ``message`` field of the error body.
    """

    title = "Resource not found"


def not_found_response(error: DomainNotFound) -> Response:
    """Build the 404 response for a ``DomainNotFound`` error."""
    logger.info(
        "api.not_found",
        error_type=type(error).__name__,
        detail=str(error),
    )
    return Response(
        {"message": error.title, "error": str(error)},
        status=status.HTTP_404_NOT_FOUND,
    )


def exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    """DRF ``EXCEPTION_HANDLER`` hook.

    Domain not-found errors get the structured 404 body; everything else
    is left to DRF's default handler (``None`` means an unhandled 500).
    """
    if isinstance(exc, DomainNotFound):
        return not_found_response(exc)
    return drf_exception_handler(exc, context)
