"""Product DTOs: the request validation rules.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (views) and the
Service layer.  DTOs are immutable (``frozen=True``) and keep only
the fields they declare, so unknown keys in a request body are dropped.

- ``ProductPayloadDTO``: full record rules, used by create and update.
- ``PasswordDTO``: password-only rules, used by delete.

Pydantic reports every violated constraint in a single ``ValidationError``;
``field_errors`` turns it into localized per-field messages.
"""

from __future__ import annotations

from typing import Annotated, Dict, List, Optional

from django.utils.translation import gettext_lazy as _
from pydantic import BaseModel, ConfigDict, StringConstraints, ValidationError

from modules.products.models import ProductStatus

NON_FIELD_ERRORS = "non_field_errors"

NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]

# Missing, empty and non-text values all get the same prompt.
REQUIRED_MESSAGES = {
    "name": _("Please enter the product name."),
    "manager": _("Please enter the manager."),
    "description": _("Please enter the description."),
    "password": _("Please enter the password."),
}
STATUS_MESSAGE = _("Product status must be one of [FOR_SALE, SOLD_OUT].")
BODY_MESSAGE = _("Request body must be a JSON object.")

_REQUIRED_ERROR_TYPES = frozenset({"missing", "string_type", "string_too_short"})


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class ProductPayloadDTO(BaseModel):
    """Immutable DTO for product create and update requests.

    Validates:
    - ``name``, ``manager``, ``description`` and ``password`` are non-empty text.
    - ``status``, when supplied, is one of ``ProductStatus``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: NonEmptyStr
    manager: NonEmptyStr
    description: NonEmptyStr
    password: NonEmptyStr
    status: Optional[ProductStatus] = None


class PasswordDTO(BaseModel):
    """Immutable DTO carrying only the record password (delete requests)."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    password: NonEmptyStr


# ---------------------------------------------------------------------------
# Error rendering
# ---------------------------------------------------------------------------


def _message_for(field: str, error_type: str, default: str) -> str:
    if field in REQUIRED_MESSAGES and error_type in _REQUIRED_ERROR_TYPES:
        return str(REQUIRED_MESSAGES[field])
    if field == "status":
        return str(STATUS_MESSAGE)
    if field == NON_FIELD_ERRORS and error_type == "model_type":
        return str(BODY_MESSAGE)
    return default


def field_errors(exc: ValidationError) -> Dict[str, List[str]]:
    """Map a pydantic ``ValidationError`` to ``{field: [messages]}``.

    Fields appear in declaration order; each message appears once per field.
    """
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        loc = error["loc"]
        field = str(loc[0]) if loc else NON_FIELD_ERRORS
        message = _message_for(field, error["type"], error["msg"])
        messages = errors.setdefault(field, [])
        if message not in messages:
            messages.append(message)
    return errors


def summarize(errors: Dict[str, List[str]]) -> str:
    """Join every field message into one human-readable sentence."""
    return " ".join(message for messages in errors.values() for message in messages)
