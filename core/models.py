"""Request, payload and response models for the fitness plan proxy."""

from __future__ import annotations

import base64
import json
from dataclasses import dataclass, field
from typing import Any

from prompts.templates import NO_TEXT_FALLBACK, SYSTEM_PROMPT


@dataclass
class PlanRequest:
    method: str
    body: dict[str, Any] = field(default_factory=dict)

    @property
    def is_post(self) -> bool:
        return self.method.upper() == "POST"

    @property
    def prompt(self) -> Any:
        return self.body.get("prompt")

    @staticmethod
    def parse_body(raw: Any, base64_encoded: bool = False) -> dict[str, Any]:
        """Decode a request body into a dict.

        Accepts an already-parsed dict, a JSON string or bytes, or nothing.
        A JSON value that is not an object has no fields. Malformed JSON
        raises ``json.JSONDecodeError``; a bad base64 body raises
        ``binascii.Error``.
        """
        if raw is None:
            return {}
        if isinstance(raw, dict):
            return raw
        if base64_encoded and isinstance(raw, (str, bytes, bytearray)):
            raw = base64.b64decode(raw)
        if isinstance(raw, (bytes, bytearray)):
            raw = raw.decode("utf-8")
        if isinstance(raw, str):
            if not raw.strip():
                return {}
            raw = json.loads(raw)
        return raw if isinstance(raw, dict) else {}


def build_payload(prompt: Any) -> dict[str, Any]:
    """Build the generateContent body for a user prompt."""
    return {
        "contents": [{"parts": [{"text": prompt}]}],
        "systemInstruction": {"parts": [{"text": SYSTEM_PROMPT}]},
    }


def _field(obj: Any, key: str) -> Any:
    return obj.get(key) if isinstance(obj, dict) else None


def _first(seq: Any) -> Any:
    return seq[0] if isinstance(seq, list) and seq else None


@dataclass
class GenerationResult:
    """Parsed generateContent response."""

    data: Any

    @property
    def candidates(self) -> list[Any]:
        candidates = _field(self.data, "candidates")
        return candidates if isinstance(candidates, list) else []

    @property
    def has_candidates(self) -> bool:
        return len(self.candidates) > 0

    @property
    def text(self) -> str:
        content = _field(_first(self.candidates), "content")
        part = _first(_field(content, "parts"))
        text = _field(part, "text")
        return text if text else NO_TEXT_FALLBACK


@dataclass
class ProxyResponse:
    status_code: int
    body: Any
    content_type: str = "application/json"

    @classmethod
    def of_json(cls, status_code: int, body: dict[str, Any]) -> ProxyResponse:
        return cls(status_code=status_code, body=body)

    @classmethod
    def of_text(cls, status_code: int, body: str) -> ProxyResponse:
        return cls(status_code=status_code, body=body, content_type="text/plain")

    def to_dict(self) -> dict[str, Any]:
        """Render in the serverless function return shape."""
        if self.content_type == "application/json":
            body = json.dumps(self.body)
        else:
            body = str(self.body)
        return {
            "statusCode": self.status_code,
            "headers": {"content-type": self.content_type},
            "body": body,
        }
