"""
Description:
Extract feedback JSON from free-form model output.

Chat models wrap the requested JSON in prose, markdown fences or <think> blocks. This
module strips reasoning blocks, finds the first balanced {...} object (ignoring braces
inside string literals), decodes it and validates it as feedback.

Arguments:
- content: The raw message content returned by the chat-completion provider.

Returns:
- A validated FeedbackResponse, or raises DirectLLMError.

Dependencies:
- app.constants.regex_patterns: For the reasoning-block patterns.
- app.helper.response_validation: For the FeedbackResponse contract check.
- json: Python's built-in JSON decoder.

Author: @kcaparas1630

"""
import json
from typing import Optional
from loguru import logger
from app.constants.regex_patterns import REGEX_PATTERNS
from app.errors.exceptions import DirectLLMError
from app.schemas.feedback.feedback_response import FeedbackResponse
from app.helper.response_validation import validate_feedback_payload


def strip_reasoning(content: str) -> str:
    content = REGEX_PATTERNS['think_block'].sub('', content)
    return REGEX_PATTERNS['think_tag'].sub('', content)


def extract_json_object(content: str) -> Optional[str]:
    """
    Return the first balanced JSON object in the content, or None.

    Example:
        >>> extract_json_object('Sure! {"a": "}", "b": {"c": 1}} Hope this helps')
        '{"a": "}", "b": {"c": 1}}'
    """
    if not content:
        return None
    content = strip_reasoning(content)

    start = content.find('{')
    while start != -1:
        depth = 0
        in_string = False
        escaped = False
        for i in range(start, len(content)):
            char = content[i]
            if in_string:
                if escaped:
                    escaped = False
                elif char == '\\':
                    escaped = True
                elif char == '"':
                    in_string = False
                continue
            if char == '"':
                in_string = True
            elif char == '{':
                depth += 1
            elif char == '}':
                depth -= 1
                if depth == 0:
                    return content[start:i + 1]
        # Unbalanced from this brace; try the next opening brace.
        start = content.find('{', start + 1)
    return None


def parse_feedback_content(content: Optional[str]) -> FeedbackResponse:
    """
    Parse and validate the feedback embedded in a model message.

    Raises:
        DirectLLMError: If the content is empty, holds no JSON object, is not valid
            JSON or does not match the FeedbackResponse contract.
    """
    if not content or not content.strip():
        raise DirectLLMError("Model returned no content")

    json_string = extract_json_object(content)
    if json_string is None:
        logger.warning(f"[DIRECT_LLM] No JSON object found in model output: {content[:100]}...")
        raise DirectLLMError("No JSON object found in model output")

    try:
        payload = json.loads(json_string)
    except json.JSONDecodeError as e:
        logger.error(f"[DIRECT_LLM] JSON parsing error: {e}")
        raise DirectLLMError(f"Model output is not valid JSON: {e}") from e

    result = validate_feedback_payload(payload)
    if not result.ok:
        raise DirectLLMError(result.error)
    return result.feedback
