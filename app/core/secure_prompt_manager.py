"""
Secure Prompt Manager Module

This module provides a secure way to manage AI prompts by isolating them from user data
to prevent injection attacks. It implements a template-based system with explicit
placeholders and comprehensive sanitization.

The module contains:
- PromptTemplate: A dataclass for secure prompt templates with placeholders
- SecurePromptManager: Main class for managing secure prompts
- sanitize_text: Utility function for text sanitization

Dependencies:
- dataclasses: For template data structures
- typing: For type hints
- re: For regex-based sanitization
- html: For HTML entity encoding

Author: @kcaparas1630
"""

from typing import Dict
from dataclasses import dataclass
import re
import html
from loguru import logger
from app.constants.frameworks import DEFAULT_CATEGORY, DEFAULT_DIFFICULTY
from app.schemas.feedback.feedback_request import FeedbackRequest

MAX_STEP_RESPONSE_LENGTH = 2000

def sanitize_text(text: str, max_length: int = 1000, escape_html: bool = True) -> str:
    """
    Sanitize text input to prevent injection attacks and ensure data safety.

    This function performs multiple sanitization steps:
    1. Optional HTML entity encoding to prevent XSS
    2. Strips leading/trailing whitespace
    3. Removes null bytes and other control characters
    4. Configurable length limiting to prevent DoS attacks

    Args:
        text (str): The text to sanitize
        max_length (int): Maximum allowed length (default: 1000)
        escape_html (bool): Whether to HTML escape the text (default: True)

    Returns:
        str: The sanitized text

    Raises:
        ValueError: If text is None or empty after sanitization
    """
    if text is None:
        raise ValueError("Text cannot be None")

    text = str(text)

    if escape_html:
        text = html.escape(text)

    text = text.strip()

    # Remove null bytes and other control characters (except newlines and tabs)
    text = re.sub(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]', '', text)

    if len(text) > max_length:
        text = text[:max_length]
        logger.warning(f"Text truncated to {max_length} characters for security")

    if not text:
        raise ValueError("Text cannot be empty after sanitization")

    return text

@dataclass
class PromptTemplate:
    """Secure prompt template with placeholders for safe data injection."""
    template: str
    placeholders: Dict[str, str]
    sanitization_config: Dict[str, Dict] = None  # Per-placeholder sanitization config

    def render(self, **kwargs) -> str:
        """
        Safely render the template with provided data.

        Args:
            **kwargs: Data to inject into placeholders

        Returns:
            str: Rendered prompt with sanitized data

        Raises:
            ValueError: If required placeholders are missing or data is invalid
        """
        missing_placeholders = set(self.placeholders.keys()) - set(kwargs.keys())
        if missing_placeholders:
            raise ValueError(f"Missing required placeholders: {missing_placeholders}")

        sanitized_data = {}
        for key, value in kwargs.items():
            if key not in self.placeholders:
                # Skip unknown keys to prevent injection
                logger.warning(f"Unknown placeholder key: {key}")
                continue
            config = self.sanitization_config.get(key, {}) if self.sanitization_config else {}
            sanitized_data[key] = sanitize_text(
                str(value),
                max_length=config.get('max_length', 1000),
                escape_html=config.get('escape_html', True)
            )

        try:
            return self.template.format(**sanitized_data)
        except KeyError as e:
            raise ValueError(f"Template rendering error: {e}") from e

class SecurePromptManager:
    """
    Builds the feedback prompt sent to the chat-completion provider.

    Candidate answers are user-authored text, so every value goes through
    sanitize_text before it is placed into a fixed template.
    """

    def __init__(self):
        self._templates = self._initialize_templates()

    def _initialize_templates(self) -> Dict[str, PromptTemplate]:
        return {
            "feedback_generation": PromptTemplate(
                template="""You are a professional interview coach analyzing a user's response to a behavioral interview question.

QUESTION: "{question}"
FRAMEWORK USED: {framework}
CATEGORY: {category}
DIFFICULTY: {difficulty}

USER RESPONSES:
{responses}

Based on the user's responses, provide feedback in the following JSON format:
{{
  "overall_score": <integer between 1 and 5, with 5 being the best>,
  "strengths": [<2-3 specific strengths in their response>],
  "areas_to_improve": [<2-3 specific areas to improve>],
  "example_improvement": "<a brief, specific example of how they could improve one point>",
  "interview_readiness": "<a 1-2 sentence assessment of how well this response would work in a real interview>"
}}

Ensure your feedback is constructive, specific to their responses, and focuses on both content and framework usage.
You MUST respond ONLY with a valid JSON object matching the format above.""",
                placeholders={
                    "question": "Interview question being answered",
                    "framework": "Answering framework name",
                    "category": "Question category",
                    "difficulty": "Question difficulty",
                    "responses": "Step-by-step responses, already sanitized"
                },
                # Plain-text prompt: strip control characters, keep quotes and markup as typed.
                sanitization_config={
                    "question": {"escape_html": False},
                    "framework": {"max_length": 50, "escape_html": False},
                    "category": {"max_length": 100, "escape_html": False},
                    "difficulty": {"max_length": 50, "escape_html": False},
                    "responses": {
                        "max_length": MAX_STEP_RESPONSE_LENGTH * 8,
                        "escape_html": False
                    }
                }
            )
        }

    def format_step_responses(self, request: FeedbackRequest) -> str:
        """Render answers as 'Step: answer' blocks in framework order, then any extra steps."""
        ordered_steps = [step for step in request.required_steps() if step in request.step_responses]
        ordered_steps += [step for step in request.step_responses if step not in ordered_steps]

        blocks = []
        for step in ordered_steps:
            answer = request.step_responses[step]
            if not answer or not answer.strip():
                continue
            blocks.append(
                f"{sanitize_text(step, max_length=50, escape_html=False)}: "
                f"{sanitize_text(answer, max_length=MAX_STEP_RESPONSE_LENGTH, escape_html=False)}"
            )
        return "\n\n".join(blocks)

    def get_feedback_prompt(self, request: FeedbackRequest) -> str:
        """
        Get a secure feedback prompt with sanitized user data.

        Args:
            request: A complete feedback request

        Returns:
            str: Secure prompt with sanitized data

        Raises:
            ValueError: If a required value is empty after sanitization
        """
        template = self._templates["feedback_generation"]

        return template.render(
            question=request.question_text,
            framework=request.framework_name,
            category=request.category.strip() or DEFAULT_CATEGORY,
            difficulty=request.difficulty.strip() or DEFAULT_DIFFICULTY,
            responses=self.format_step_responses(request)
        )
