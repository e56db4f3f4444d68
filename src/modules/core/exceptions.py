"""DRF exception handler that renders every failure in the response envelope.

Views translate domain exceptions themselves.  Anything that escapes a view
lands here: DRF ``APIException`` subclasses (malformed JSON, unsupported
method, ...) keep their status code, and any other exception is logged with
its traceback and answered with a generic 500.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.utils.translation import gettext_lazy as _
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

from modules.core.responses import envelope

logger = structlog.get_logger(__name__)

INTERNAL_ERROR_MESSAGE = _(
    "An unexpected error occurred. Please contact the administrator."
)


def _detail_message(response: Response) -> str:
    data = response.data
    if isinstance(data, dict) and "detail" in data:
        return str(data["detail"])
    return str(data)


def envelope_exception_handler(
    exc: Exception, context: Dict[str, Any]
) -> Optional[Response]:
    response = exception_handler(exc, context)
    if response is not None:
        response.data = {
            "status": response.status_code,
            "message": _detail_message(response),
        }
        return response

    view = context.get("view")
    logger.exception(
        "unhandled_error",
        view=type(view).__name__ if view is not None else None,
        error_type=type(exc).__name__,
    )
    set_rollback()
    return envelope(500, INTERNAL_ERROR_MESSAGE)
