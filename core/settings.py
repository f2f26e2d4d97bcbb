"""Runtime configuration for the Gemini proxy."""

from __future__ import annotations

import os
from dataclasses import dataclass

API_KEY_ENV_NAMES: tuple[str, ...] = ("GEMINI_API_KEY", "GOOGLE_API_KEY")

DEFAULT_MODEL = "gemini-2.5-flash-preview-09-2025"
DEFAULT_API_BASE = "https://generativelanguage.googleapis.com/v1beta"


def resolve_api_key(explicit: str | None, *env_names: str) -> str:
    """Return the explicit key if given, otherwise the first non-empty env var."""
    if explicit and explicit.strip():
        return explicit.strip()
    for name in env_names:
        value = os.environ.get(name, "").strip()
        if value:
            return value
    return ""


@dataclass(frozen=True)
class ProxySettings:
    api_key: str
    model: str = DEFAULT_MODEL
    api_base: str = DEFAULT_API_BASE
    api_key_env: str = API_KEY_ENV_NAMES[0]

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    @property
    def endpoint(self) -> str:
        return f"{self.api_base.rstrip('/')}/models/{self.model}:generateContent"

    @classmethod
    def from_env(cls, api_key: str | None = None) -> ProxySettings:
        """Build settings from the process environment at call time."""
        return cls(
            api_key=resolve_api_key(api_key, *API_KEY_ENV_NAMES),
            model=os.environ.get("GEMINI_MODEL", "").strip() or DEFAULT_MODEL,
            api_base=os.environ.get("GEMINI_API_BASE", "").strip() or DEFAULT_API_BASE,
        )
