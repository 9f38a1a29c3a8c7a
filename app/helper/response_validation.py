"""
Feedback Response Validation Module

Validation boundary for feedback coming from outside the process (the backend
function or an LLM provider). Untrusted payloads are checked against the
FeedbackResponse contract and turned into a tagged result instead of raising, so
callers decide whether an invalid payload means retry or fall back.

Dependencies:
- pydantic: For schema validation of the payload.
- app.schemas.feedback: FeedbackResponse contract.

Author: @kcaparas1630
"""

from dataclasses import dataclass
from typing import Any, Optional
from pydantic import ValidationError
from app.schemas.feedback.feedback_response import FeedbackResponse


@dataclass(frozen=True)
class FeedbackValidationResult:
    ok: bool
    feedback: Optional[FeedbackResponse] = None
    error: Optional[str] = None


def _describe_errors(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ())) or "payload"
        parts.append(f"{location}: {error.get('msg')}")
    return "; ".join(parts)


def validate_feedback_payload(payload: Any) -> FeedbackValidationResult:
    """
    Check an untrusted payload against the FeedbackResponse contract.

    Args:
        payload (Any): Decoded JSON from a remote source.

    Returns:
        FeedbackValidationResult: ok=True with the parsed feedback, or ok=False with
            a readable description of what was wrong.

    Example:
        >>> validate_feedback_payload({"overall_score": 9}).ok
        False
    """
    if not isinstance(payload, dict):
        return FeedbackValidationResult(ok=False, error=f"Expected a JSON object, got {type(payload).__name__}")

    if payload.get("error"):
        return FeedbackValidationResult(ok=False, error=f"Source reported an error: {payload['error']}")

    try:
        feedback = FeedbackResponse.model_validate(payload)
    except ValidationError as e:
        return FeedbackValidationResult(ok=False, error=f"Invalid feedback structure: {_describe_errors(e)}")

    return FeedbackValidationResult(ok=True, feedback=feedback)
