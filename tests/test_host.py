"""Tests for host call handling."""

import json

import pytest

from watchbot.errors import DependencyUnavailable
from watchbot.host import call_host


def reply_with(raw):
    def fn(payload):
        return raw
    return fn


def test_decodes_result():
    seen = []

    def fn(payload):
        seen.append(payload)
        return json.dumps({"errorCode": 0, "id": "55"})

    result = call_host("sendMessage", fn, '{"message": "hi"}')

    assert seen == ['{"message": "hi"}']
    assert result.ok
    assert result.id == "55"


def test_empty_reply_is_success():
    assert call_host("watchMessage", reply_with(""), "42").ok


def test_negative_code_is_returned_not_raised():
    result = call_host("react", reply_with('{"errorCode": -1}'), "{}")
    assert result.error_code == -1


@pytest.mark.parametrize("raw", [
    "not json",
    "[]",
    '{"errorCode": [1]}',
    '{"errorCode": "abc"}',
])
def test_bad_reply_is_dependency_unavailable(raw):
    with pytest.raises(DependencyUnavailable) as exc_info:
        call_host("react", reply_with(raw), "{}")
    assert exc_info.value.operation == "react"


def test_raising_host_function_is_dependency_unavailable():
    def fn(payload):
        raise RuntimeError("host went away")

    with pytest.raises(DependencyUnavailable) as exc_info:
        call_host("sendMessage", fn, "{}")
    assert "host went away" in str(exc_info.value)
