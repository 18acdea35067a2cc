"""Project-wide DRF exception handler.

Wraps every error that escapes a view in the error envelope:

- Errors DRF knows how to answer (``APIException`` subclasses, Django's
  ``Http404`` and ``PermissionDenied``) keep their status code.
- Anything else is an internal failure: it is logged with its traceback
  and answered with 500.  The transaction of the request is marked for
  rollback.
"""

from __future__ import annotations

import structlog
from rest_framework import status
from rest_framework.views import exception_handler, set_rollback

from modules.core.responses import error_response

logger = structlog.get_logger(__name__)

REQUEST_ERROR_TITLE = "Request error"
INTERNAL_ERROR_TITLE = "Internal server error"


def envelope_exception_handler(exc, context):
    view = context.get("view")
    view_name = type(view).__name__ if view is not None else None

    response = exception_handler(exc, context)
    if response is not None:
        data = response.data
        detail = data.get("detail", data) if isinstance(data, dict) else data
        logger.warning(
            "api.request_rejected",
            view=view_name,
            status_code=response.status_code,
            error=str(detail),
        )
        enveloped = error_response(
            REQUEST_ERROR_TITLE, str(detail), status=response.status_code
        )
        for header, value in response.headers.items():
            if header.lower() != "content-type":
                enveloped[header] = value
        return enveloped

    set_rollback()
    logger.exception("api.unhandled_exception", view=view_name, error=str(exc))
    return error_response(
        INTERNAL_ERROR_TITLE,
        str(exc),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
