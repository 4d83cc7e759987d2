"""Customer domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations

from modules.core.exceptions import StatusCodeError


class InvalidCustomerData(ValueError):
    """The request is missing or fails validation; detected before any I/O."""


class InvalidCustomerInput(StatusCodeError):
    """A look-up key is missing.  Reported with its own status (400)."""

    status_code = 400


class CustomerAlreadyExists(Exception):
    """A customer with the same email already exists."""


class CustomerNotFound(Exception):
    """No customer is stored under the given key."""


class UnexpectedCustomerError(Exception):
    """The store failed in a way that is neither 'absent' nor 'invalid'.

    The original error is chained as ``__cause__``.
    """
