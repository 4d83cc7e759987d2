"""Exception-to-response mapping tables.

An ``ErrorMapping`` is an ordered list of rules, each pairing one or more
exception types with a *responder* that renders the HTTP response.  The
first matching rule wins; unmatched exceptions go to the fallback.

Views attach a table per action with ``map_errors``, so one endpoint can
deviate from the shared table without affecting the others::

    DEFAULT = ErrorMapping((NotFound, structured(404)))
    LENIENT = ErrorMapping(fallback=empty(404))

Structured bodies have the shape ``{"error": <message>, "timestamp": <iso>}``.
"""

from __future__ import annotations

import functools
from typing import Any, Callable, Tuple, Type, Union

import structlog
from django.http import HttpResponse
from django.utils import timezone
from rest_framework.exceptions import APIException
from rest_framework.response import Response

from modules.core.exceptions import StatusCodeError

logger = structlog.get_logger(__name__)

Responder = Callable[[Exception], HttpResponse]
ExceptionTypes = Union[Type[BaseException], Tuple[Type[BaseException], ...]]
Rule = Tuple[ExceptionTypes, Responder]


def _flatten_detail(detail: Any, prefix: str = "") -> list[str]:
    if isinstance(detail, dict):
        messages: list[str] = []
        for field, value in detail.items():
            name = f"{prefix}.{field}" if prefix else str(field)
            messages.extend(_flatten_detail(value, name))
        return messages
    if isinstance(detail, list):
        return [m for item in detail for m in _flatten_detail(item, prefix)]
    return [f"{prefix}: {detail}" if prefix else str(detail)]


def error_message(exc: Exception) -> str:
    """Human-readable message for ``exc``."""
    if isinstance(exc, StatusCodeError):
        return exc.message
    if isinstance(exc, APIException):
        return "; ".join(_flatten_detail(exc.detail))
    return str(exc)


def error_body(message: str) -> dict[str, Any]:
    return {"error": message, "timestamp": timezone.now().isoformat()}


def _status_of(exc: Exception, status_code: int | None) -> int:
    if status_code is not None:
        return status_code
    return getattr(exc, "status_code", 500)


# ---------------------------------------------------------------------------
# Responders
# ---------------------------------------------------------------------------


def structured(status_code: int | None = None) -> Responder:
    """JSON ``{error, timestamp}`` body.

    With no ``status_code`` the exception's own ``status_code`` is used.
    """

    def respond(exc: Exception) -> HttpResponse:
        return Response(
            error_body(error_message(exc)), status=_status_of(exc, status_code)
        )

    return respond


def plain_text(status_code: int | None = None) -> Responder:
    """Plain-text body holding the exception message."""

    def respond(exc: Exception) -> HttpResponse:
        return HttpResponse(
            error_message(exc),
            status=_status_of(exc, status_code),
            content_type="text/plain; charset=utf-8",
        )

    return respond


def empty(status_code: int | None = None) -> Responder:
    """Status only, no body."""

    def respond(exc: Exception) -> HttpResponse:
        return HttpResponse(status=_status_of(exc, status_code))

    return respond


# ---------------------------------------------------------------------------
# Mapping table
# ---------------------------------------------------------------------------


class ErrorMapping:
    """Ordered exception → responder table with a fallback."""

    def __init__(self, *rules: Rule, fallback: Responder | None = None) -> None:
        self.rules: tuple[Rule, ...] = rules
        self.fallback: Responder = fallback or structured(500)

    def responder_for(self, exc: Exception) -> Responder:
        for exc_types, responder in self.rules:
            if isinstance(exc, exc_types):
                return responder
        return self.fallback

    def to_response(self, exc: Exception) -> HttpResponse:
        response = self.responder_for(exc)(exc)
        log = logger.bind(
            error_type=type(exc).__name__,
            status_code=response.status_code,
        )
        if response.status_code >= 500:
            log.error("request.failed", error=str(exc), exc_info=exc)
        else:
            log.warning("request.failed", error=str(exc))
        return response


def map_errors(mapping: ErrorMapping) -> Callable:
    """Render exceptions raised by a view action through ``mapping``."""

    def decorator(handler: Callable[..., HttpResponse]) -> Callable[..., HttpResponse]:
        @functools.wraps(handler)
        def wrapper(self, request, *args, **kwargs) -> HttpResponse:
            try:
                return handler(self, request, *args, **kwargs)
            except Exception as exc:
                return mapping.to_response(exc)

        return wrapper

    return decorator
