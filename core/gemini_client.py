"""Thin REST client for the Gemini generateContent endpoint."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from core.models import GenerationResult, build_payload
from core.settings import ProxySettings

logger = logging.getLogger(__name__)


class GeminiClient:
    """Posts a prompt plus the fixed system instruction to Gemini.

    The API key travels as the ``key`` query parameter. No timeout and no
    retries are applied; the call waits for the upstream answer or a
    transport failure.
    """

    def __init__(self, settings: ProxySettings, http: httpx.Client | None = None) -> None:
        self.settings = settings
        self._http = http

    def generate(self, prompt: Any) -> tuple[httpx.Response, GenerationResult]:
        """Send the prompt and return the raw response with its parsed body.

        The body is parsed as JSON whatever the status code; a non-JSON
        body raises ``ValueError``.
        """
        payload = build_payload(prompt)
        logger.info(
            "Requesting plan from Gemini model=%s prompt_chars=%d",
            self.settings.model, len(str(prompt)),
        )

        if self._http is not None:
            resp = self._post(self._http, payload)
        else:
            with httpx.Client(timeout=None) as http:
                resp = self._post(http, payload)

        return resp, GenerationResult(resp.json())

    def _post(self, http: httpx.Client, payload: dict[str, Any]) -> httpx.Response:
        return http.post(
            self.settings.endpoint,
            params={"key": self.settings.api_key},
            headers={"Content-Type": "application/json"},
            json=payload,
        )
