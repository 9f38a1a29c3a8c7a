"""
Test Feedback JSON Extraction

Tests pulling the feedback object out of free-form model output.

Dependencies:
- pytest: For testing framework
- app.helper.extract_feedback_json: The module being tested

Author: @kcaparas1630
"""

import json
import pytest
from app.errors.exceptions import DirectLLMError
from app.helper.extract_feedback_json import extract_json_object, parse_feedback_content, strip_reasoning
from app.schemas.feedback.feedback_response import FeedbackResponse

class TestExtractJsonObject:

    def test_plain_object(self):
        assert extract_json_object('{"a": 1}') == '{"a": 1}'

    def test_object_wrapped_in_prose(self):
        content = 'Here is your feedback: {"a": {"b": 2}} Let me know!'
        assert extract_json_object(content) == '{"a": {"b": 2}}'

    def test_braces_inside_strings_are_ignored(self):
        content = '{"text": "use {braces} and \\"quotes\\" freely", "n": 1}'
        assert extract_json_object(content) == content

    def test_skips_unbalanced_leading_brace(self):
        content = 'Note: { this never closes {"a": 1}'
        assert extract_json_object(content) == '{"a": 1}'

    def test_reasoning_blocks_are_removed_first(self):
        content = '<think>maybe {"draft": true}</think>{"final": true}'
        assert strip_reasoning(content) == '{"final": true}'
        assert extract_json_object(content) == '{"final": true}'

    @pytest.mark.parametrize("content", ["", "no json here", "only } closing"])
    def test_returns_none_without_object(self, content):
        assert extract_json_object(content) is None

class TestParseFeedbackContent:

    def test_markdown_fenced_json(self, valid_feedback_json):
        content = f"```json\n{valid_feedback_json}\n```"
        feedback = parse_feedback_content(content)
        assert feedback.overall_score == 4

    def test_serialized_feedback_parses_back_unchanged(self, feedback_payload):
        original = FeedbackResponse(**feedback_payload)
        assert parse_feedback_content(original.model_dump_json()) == original

    @pytest.mark.parametrize("content", [None, "", "   "])
    def test_empty_content(self, content):
        with pytest.raises(DirectLLMError, match="no content"):
            parse_feedback_content(content)

    def test_no_json_object(self):
        with pytest.raises(DirectLLMError, match="No JSON object"):
            parse_feedback_content("I cannot help with that.")

    def test_invalid_json(self):
        with pytest.raises(DirectLLMError, match="not valid JSON"):
            parse_feedback_content("{'overall_score': 4}")

    def test_invalid_feedback_structure(self, feedback_payload):
        feedback_payload["overall_score"] = 9
        with pytest.raises(DirectLLMError, match="overall_score"):
            parse_feedback_content(json.dumps(feedback_payload))
