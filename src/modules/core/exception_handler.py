"""DRF exception handler producing the service's error format.

Covers framework errors raised outside the view actions' own mapping
tables (unsupported method, malformed request before dispatch, ...).
"""

from __future__ import annotations

from typing import Any

from rest_framework.response import Response
from rest_framework.views import exception_handler

from modules.core.errors import error_body, error_message


def api_exception_handler(exc: Exception, context: dict[str, Any]) -> Response | None:
    response = exception_handler(exc, context)
    if response is None:
        return None
    response.data = error_body(error_message(exc))
    return response
