"""Tests for the robust JSON extraction function used by GeminiClient."""
import json

import pytest

from integrations.gemini.client import _extract_json_object


class TestExtractJsonObject:
    """Test _extract_json_object against various LLM output formats."""

    def test_clean_json(self):
        raw = '{"action": "navigate", "target": "kisan_mandi"}'
        result = _extract_json_object(raw)
        assert '"kisan_mandi"' in result

    def test_markdown_fence_json(self):
        raw = '```json\n{"start": "Sonapur"}\n```'
        result = _extract_json_object(raw)
        assert json.loads(result) == {"start": "Sonapur"}

    def test_markdown_fence_no_language(self):
        raw = '```\n{"start": "Sonapur"}\n```'
        result = _extract_json_object(raw)
        assert '"Sonapur"' in result

    def test_prose_before_and_after(self):
        raw = 'Here is the form:\n{"name": "Ramesh", "skills": "tailoring"}\nHope this helps!'
        parsed = json.loads(_extract_json_object(raw))
        assert parsed["name"] == "Ramesh"

    def test_nested_braces(self):
        raw = '{"intent": {"action": "plan_mobility", "route": {"from": "Sonapur"}}}'
        parsed = json.loads(_extract_json_object(raw))
        assert parsed["intent"]["route"]["from"] == "Sonapur"

    def test_multiple_json_objects_takes_first(self):
        raw = '{"a": 1}\n{"b": 2}'
        parsed = json.loads(_extract_json_object(raw))
        assert "a" in parsed

    def test_stray_closing_brace_before_object(self):
        raw = '} oops {"aid": "Wheelchair"}'
        parsed = json.loads(_extract_json_object(raw))
        assert parsed["aid"] == "Wheelchair"

    def test_no_json_raises_valueerror(self):
        with pytest.raises(ValueError, match="No valid JSON"):
            _extract_json_object("I cannot fill this form, sorry!")

    def test_empty_string_raises(self):
        with pytest.raises(ValueError):
            _extract_json_object("")

    def test_only_opening_brace_raises(self):
        with pytest.raises(ValueError):
            _extract_json_object('{"broken": ')

    def test_json_with_string_containing_braces(self):
        raw = '{"text": "use { and } in strings"}'
        parsed = json.loads(_extract_json_object(raw))
        assert "{" in parsed["text"]

    def test_markdown_fence_with_invalid_json_falls_through(self):
        """If the fence content is not valid JSON, fall through to brace matching."""
        raw = '```json\nnot valid json\n```\n\nBut here: {"valid": true}'
        parsed = json.loads(_extract_json_object(raw))
        assert parsed["valid"] is True

    def test_json_array_not_matched(self):
        with pytest.raises(ValueError):
            _extract_json_object('[1, 2, 3]')

    def test_unicode_values_survive(self):
        raw = '{"name": "रमेश", "location": "सोनपुर"}'
        parsed = json.loads(_extract_json_object(raw))
        assert parsed["name"] == "रमेश"
