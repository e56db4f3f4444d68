"""Uniform JSON envelope for every API response.

Shape: ``{"status": <int>, "message": <str>, ...payload}`` where the payload
key is ``data`` for single records and ``products`` for collections.  The
status echo is always the integer HTTP status code.
"""

from __future__ import annotations

from typing import Any

from rest_framework.response import Response


def envelope(status_code: int, message: Any, **payload: Any) -> Response:
    """Build a DRF ``Response`` wrapped in the standard envelope.

    ``message`` may be a lazy translation; it is rendered in the language
    active for the current request.
    """
    body = {"status": status_code, "message": str(message)}
    body.update(payload)
    return Response(body, status=status_code)
