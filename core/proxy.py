"""Credential-guarding proxy between the browser and Gemini."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from core.errors import (
    ConfigurationError,
    MethodNotAllowedError,
    ProxyError,
    UpstreamError,
    ValidationError,
    internal_error_response,
)
from core.gemini_client import GeminiClient
from core.models import PlanRequest, ProxyResponse
from core.settings import ProxySettings

logger = logging.getLogger(__name__)


class PlanProxy:
    """Answers one plan request with the generated text or an error response."""

    def __init__(self, settings: ProxySettings, http: httpx.Client | None = None) -> None:
        self.settings = settings
        self.client = GeminiClient(settings, http=http)

    def handle(
        self, method: str | None, body: Any = None, base64_encoded: bool = False
    ) -> ProxyResponse:
        """Run a request through configuration, method and prompt checks.

        Every failure is converted to a response; nothing is raised.
        """
        try:
            if not self.settings.configured:
                raise ConfigurationError(self.settings.api_key_env)
            request = PlanRequest(method=method or "")
            if not request.is_post:
                raise MethodNotAllowedError()
            return self._generate(request, body, base64_encoded)
        except ProxyError as e:
            return e.to_response()

    def _generate(self, request: PlanRequest, raw_body: Any, base64_encoded: bool) -> ProxyResponse:
        try:
            request.body = PlanRequest.parse_body(raw_body, base64_encoded=base64_encoded)
            if not request.prompt:
                raise ValidationError()

            resp, result = self.client.generate(request.prompt)

            if resp.is_success and result.has_candidates:
                return ProxyResponse.of_json(200, {"text": result.text})

            error = UpstreamError(result.data, status=resp.status_code)
            logger.error("Gemini API error (status=%d): %s", error.status, error.details)
            raise error

        except ProxyError:
            raise
        except Exception as e:
            logger.exception("Proxy function execution error: %s", e)
            return internal_error_response(e)
