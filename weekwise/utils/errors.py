"""Classification of model provider failures into HTTP-facing errors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

import openai

from weekwise.utils.constants import (
    AUTH_MARKERS,
    QUOTA_MARKERS,
    RATE_LIMIT_MARKERS,
    UNAVAILABLE_MARKERS,
)
from weekwise.utils.messages import ERROR_MESSAGES, localized

ErrorType = Literal[
    "validation",
    "rate_limit",
    "service_unavailable",
    "auth_error",
    "quota_exceeded",
    "unknown",
]

STATUS_BY_ERROR_TYPE: dict[str, int] = {
    "validation": 400,
    "rate_limit": 429,
    "service_unavailable": 503,
    "auth_error": 401,
    "quota_exceeded": 429,
    "unknown": 500,
}

_ERROR_TYPE_BY_PROVIDER_STATUS: dict[int, str] = {
    401: "auth_error",
    408: "service_unavailable",
    429: "rate_limit",
    502: "service_unavailable",
    503: "service_unavailable",
    504: "service_unavailable",
}


class ModelProviderError(RuntimeError):
    """Raised when the provider cannot be called or answers with a non-success status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class ClassifiedError:
    error_type: str
    status_code: int
    message: str
    details: str | None = None

    def to_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.message, "errorType": self.error_type}
        if self.details is not None:
            body["details"] = self.details
        return body


def validation_error(language: str, details: str | None = None) -> ClassifiedError:
    return ClassifiedError(
        error_type="validation",
        status_code=STATUS_BY_ERROR_TYPE["validation"],
        message=localized(ERROR_MESSAGES, language, "validation"),
        details=details,
    )


def classify_provider_error(exc: BaseException, language: str) -> ClassifiedError:
    """Map a provider failure to an error type, HTTP status and localized message.

    Structured signals (connection/timeout exception classes, HTTP status code)
    are consulted first; the error message is inspected only when they are absent
    or inconclusive.
    """
    raw = str(exc) or exc.__class__.__name__
    error_type = _error_type_from_exception(exc) or _error_type_from_message(raw)
    return ClassifiedError(
        error_type=error_type,
        status_code=STATUS_BY_ERROR_TYPE[error_type],
        message=localized(ERROR_MESSAGES, language, error_type),
        details=raw,
    )


def _error_type_from_exception(exc: BaseException) -> str | None:
    if isinstance(exc, (openai.APIConnectionError, TimeoutError, ConnectionError)):
        return "service_unavailable"
    status = getattr(exc, "status_code", None)
    if isinstance(status, int):
        return _ERROR_TYPE_BY_PROVIDER_STATUS.get(status)
    return None


def _error_type_from_message(message: str) -> str:
    lowered = message.lower()
    if any(marker in lowered for marker in RATE_LIMIT_MARKERS):
        return "rate_limit"
    if any(marker in lowered for marker in UNAVAILABLE_MARKERS):
        return "service_unavailable"
    if any(marker in lowered for marker in AUTH_MARKERS):
        return "auth_error"
    if any(marker in lowered for marker in QUOTA_MARKERS):
        return "quota_exceeded"
    return "unknown"
