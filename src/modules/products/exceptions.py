"""Product domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.

``ProductNotFound`` and ``ProductAlreadyExists`` are distinct kinds but
both subclass ``ProductValidationError``: callers that only care about
"the request was rejected" catch the base class and answer 400.
"""

from __future__ import annotations


class ProductValidationError(Exception):
    """Malformed input: a field is missing, out of range or badly formed."""


class ProductNotFound(ProductValidationError):
    """The requested product does not exist."""


class ProductAlreadyExists(ProductValidationError):
    """A product with the same code already exists, active or not."""
