"""Product domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations


class ProductAlreadyExists(Exception):
    """A product with exactly the same name is already registered."""


class ProductNotFound(Exception):
    """The requested product does not exist."""


class PasswordMismatch(Exception):
    """The supplied password does not match the one stored on the product."""
