"""
Test Response Validation Module

This module tests validate_feedback_payload to ensure feedback coming from the
backend function or an LLM provider is checked against the feedback contract.

Dependencies:
- pytest: For testing framework
- app.helper.response_validation: The module being tested

Author: @kcaparas1630
"""

import pytest
from app.helper.response_validation import validate_feedback_payload

class TestValidateFeedbackPayload:
    """Test validate_feedback_payload for accepted and rejected payloads."""

    def test_valid_payload(self, feedback_payload):
        result = validate_feedback_payload(feedback_payload)
        assert result.ok is True
        assert result.error is None
        assert result.feedback.overall_score == 4
        assert result.feedback.strengths == ["Clear situation", "Concrete actions"]

    def test_long_lists_are_truncated(self, feedback_payload):
        """Sources that return more than three items keep the first three."""
        feedback_payload["strengths"] = ["a", "b", "c", "d", "e"]
        feedback_payload["areas_to_improve"] = ["v", "w", "x", "y"]
        result = validate_feedback_payload(feedback_payload)
        assert result.ok is True
        assert result.feedback.strengths == ["a", "b", "c"]
        assert result.feedback.areas_to_improve == ["v", "w", "x"]

    @pytest.mark.parametrize("score", [0, 6, -1, "4", 4.5, True, None])
    def test_rejects_out_of_range_or_non_integer_score(self, feedback_payload, score):
        feedback_payload["overall_score"] = score
        result = validate_feedback_payload(feedback_payload)
        assert result.ok is False
        assert result.feedback is None
        assert "overall_score" in result.error

    @pytest.mark.parametrize("field,value", [
        ("strengths", []),
        ("strengths", ["Good", "   "]),
        ("areas_to_improve", "not a list"),
        ("example_improvement", ""),
        ("interview_readiness", "   "),
    ])
    def test_rejects_empty_or_malformed_fields(self, feedback_payload, field, value):
        feedback_payload[field] = value
        result = validate_feedback_payload(feedback_payload)
        assert result.ok is False
        assert field in result.error

    def test_rejects_missing_field(self, feedback_payload):
        del feedback_payload["interview_readiness"]
        result = validate_feedback_payload(feedback_payload)
        assert result.ok is False
        assert "interview_readiness" in result.error

    @pytest.mark.parametrize("payload,type_name", [
        ([1, 2, 3], "list"),
        ("feedback", "str"),
        (None, "NoneType"),
    ])
    def test_rejects_non_object_payload(self, payload, type_name):
        result = validate_feedback_payload(payload)
        assert result.ok is False
        assert result.error == f"Expected a JSON object, got {type_name}"

    def test_error_key_marks_payload_invalid(self, feedback_payload):
        """A source that reports an error is invalid even if the other fields look fine."""
        feedback_payload["error"] = "Model quota exceeded"
        result = validate_feedback_payload(feedback_payload)
        assert result.ok is False
        assert "Model quota exceeded" in result.error
