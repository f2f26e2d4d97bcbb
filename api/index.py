"""Vercel serverless entrypoint for the fitness plan generator.

Keeps GEMINI_API_KEY on the server: the browser posts ``{"prompt": ...}``
here and receives only ``{"text": ...}`` back.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

# Ensure project root is on the path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from core.proxy import PlanProxy
from core.settings import ProxySettings

load_dotenv()
logging.basicConfig(level=logging.INFO)


def _request_parts(request: Any) -> tuple[str | None, Any, bool]:
    """Pull method, body and the base64 flag from a dict event or a request object."""
    if isinstance(request, dict):
        method = request.get("method") or request.get("httpMethod")
        return method, request.get("body"), bool(request.get("isBase64Encoded"))
    return getattr(request, "method", None), getattr(request, "body", None), False


def handler(request, settings: ProxySettings | None = None):
    """Vercel Python serverless function handler."""
    if settings is None:
        settings = ProxySettings.from_env()
    method, body, base64_encoded = _request_parts(request)
    return PlanProxy(settings).handle(method, body, base64_encoded=base64_encoded).to_dict()
