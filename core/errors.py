"""Proxy failures and the HTTP responses they map to."""

from __future__ import annotations

from typing import Any

from core.models import ProxyResponse
from prompts.templates import (
    CONFIGURATION_ERROR,
    INTERNAL_ERROR,
    METHOD_NOT_ALLOWED,
    MISSING_PROMPT,
    UPSTREAM_FAILURE,
)


class ProxyError(Exception):
    """Base class for failures answered with an error response."""

    status_code: int = 500

    def to_response(self) -> ProxyResponse:
        return ProxyResponse.of_json(self.status_code, {"error": str(self)})


class ConfigurationError(ProxyError):
    def __init__(self, env_name: str) -> None:
        super().__init__(CONFIGURATION_ERROR.format(env_name=env_name))


class MethodNotAllowedError(ProxyError):
    status_code = 405

    def __init__(self) -> None:
        super().__init__(METHOD_NOT_ALLOWED)

    def to_response(self) -> ProxyResponse:
        return ProxyResponse.of_text(self.status_code, str(self))


class ValidationError(ProxyError):
    status_code = 400

    def __init__(self, message: str = MISSING_PROMPT) -> None:
        super().__init__(message)


class UpstreamError(ProxyError):
    """The external API failed or returned no candidates."""

    def __init__(self, details: Any, status: int | None = None) -> None:
        super().__init__(UPSTREAM_FAILURE)
        self.details = details
        self.status = status

    def to_response(self) -> ProxyResponse:
        return ProxyResponse.of_json(
            self.status_code, {"error": str(self), "details": self.details}
        )


def internal_error_response(exc: Exception) -> ProxyResponse:
    return ProxyResponse.of_json(500, {"error": INTERNAL_ERROR.format(message=exc)})
