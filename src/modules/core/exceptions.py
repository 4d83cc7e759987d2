"""Shared exception types.

Domain modules derive their exceptions from these when the error itself
decides the HTTP status of the response.
"""

from __future__ import annotations


class StatusCodeError(Exception):
    """An error that carries the HTTP status it must be reported with.

    Rendered with a plain-text body holding ``message``.
    """

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
