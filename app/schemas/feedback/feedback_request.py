"""
Description:
This module defines the schema for a framework feedback request.

The model accepts partially filled submissions on purpose: deciding whether a
submission is complete belongs to the feedback orchestrator, which answers
incomplete ones with a fixed invalid-submission response instead of an error.

Dependencies:
- pydantic: For data validation and settings management.
- app.constants.frameworks: For the step names each framework requires.

Author: @kcaparas1630
"""
from typing import Dict, List, Any
from pydantic import BaseModel, ConfigDict, Field, field_validator
from app.constants.frameworks import DEFAULT_CATEGORY, DEFAULT_DIFFICULTY, get_framework_steps


class FeedbackRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    question_text: str = Field(default="", description="The interview question being answered")
    framework_name: str = Field(default="", description="Answering framework: STAR, PARADE, CAR or CIRCLE")
    category: str = Field(default=DEFAULT_CATEGORY, description="Question category, e.g. Teamwork")
    difficulty: str = Field(default=DEFAULT_DIFFICULTY, description="Question difficulty")
    step_responses: Dict[str, str] = Field(
        default_factory=dict,
        alias="framework_steps_with_responses",
        description="Answer text keyed by framework step name",
    )

    @field_validator("question_text", "framework_name", mode="before")
    @classmethod
    def null_text_is_blank(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("category", mode="before")
    @classmethod
    def default_category(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_CATEGORY
        return value

    @field_validator("difficulty", mode="before")
    @classmethod
    def default_difficulty(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_DIFFICULTY
        return value

    @field_validator("step_responses", mode="before")
    @classmethod
    def null_answers_are_blank(cls, value: Any) -> Any:
        # a null answer is an unanswered step, not a malformed body
        if isinstance(value, dict):
            return {step: "" if answer is None else answer for step, answer in value.items()}
        return value

    def required_steps(self) -> List[str]:
        return get_framework_steps(self.framework_name)

    def missing_steps(self) -> List[str]:
        """Steps of the selected framework that have no non-blank answer."""
        return [
            step for step in self.required_steps()
            if not (self.step_responses.get(step) or "").strip()
        ]

    def is_complete(self) -> bool:
        """
        A request is complete when it has a question, a known framework and a
        non-blank answer for every step that framework requires.
        """
        if not self.question_text.strip() or not self.framework_name.strip():
            return False
        if not self.required_steps():
            return False
        return not self.missing_steps()

    def to_backend_payload(self) -> Dict[str, Any]:
        """Serialize with the wire keys the backend feedback function expects."""
        return self.model_dump(by_alias=True)
