from pathlib import Path
import base64
import binascii
import json
import sys

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from core.models import GenerationResult, PlanRequest, ProxyResponse, build_payload
from prompts.templates import NO_TEXT_FALLBACK, SYSTEM_PROMPT


def test_parse_body_accepts_dict_str_and_bytes():
    assert PlanRequest.parse_body({"prompt": "a"}) == {"prompt": "a"}
    assert PlanRequest.parse_body('{"prompt": "b"}') == {"prompt": "b"}
    assert PlanRequest.parse_body(b'{"prompt": "c"}') == {"prompt": "c"}


def test_parse_body_rejects_malformed_json():
    with pytest.raises(json.JSONDecodeError):
        PlanRequest.parse_body("{prompt:")


def test_build_payload_embeds_system_prompt():
    payload = build_payload("Get flexible")
    assert payload["contents"] == [{"parts": [{"text": "Get flexible"}]}]
    assert payload["systemInstruction"]["parts"][0]["text"] == SYSTEM_PROMPT


@pytest.mark.parametrize("data", [None, [], "oops", {"candidates": {"0": {}}}])
def test_generation_result_tolerates_unexpected_shapes(data):
    result = GenerationResult(data)
    assert result.has_candidates is False
    assert result.text == NO_TEXT_FALLBACK


def test_generation_result_reads_first_part_only():
    result = GenerationResult(
        {"candidates": [{"content": {"parts": [{"text": "first"}, {"text": "second"}]}}]}
    )
    assert result.text == "first"


def test_proxy_response_to_dict_serializes_json():
    rendered = ProxyResponse.of_json(200, {"text": "hi"}).to_dict()
    assert rendered["headers"] == {"content-type": "application/json"}
    assert json.loads(rendered["body"]) == {"text": "hi"}


@pytest.mark.parametrize("method,expected", [("POST", True), ("post", True), ("GET", False), ("", False)])
def test_plan_request_is_post(method, expected):
    assert PlanRequest(method=method).is_post is expected


def test_parse_body_decodes_base64():
    raw = base64.b64encode(b'{"prompt": "Run faster"}').decode()
    assert PlanRequest.parse_body(raw, base64_encoded=True) == {"prompt": "Run faster"}


def test_parse_body_rejects_bad_base64():
    with pytest.raises(binascii.Error):
        PlanRequest.parse_body("abc", base64_encoded=True)
