"""
Description:
This module defines the schema for the feedback returned to the candidate.

Dependencies:
- pydantic: For data validation and settings management.
- typing: For type annotations.

Author: @kcaparas1630
"""
from typing import List
from pydantic import BaseModel, ConfigDict, Field, field_validator

MAX_LIST_ITEMS = 3


class FeedbackResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    overall_score: int = Field(..., ge=1, le=5, strict=True, description="Overall score between 1 and 5")
    strengths: List[str] = Field(..., min_length=1, max_length=MAX_LIST_ITEMS, description="Strengths of the response")
    areas_to_improve: List[str] = Field(..., min_length=1, max_length=MAX_LIST_ITEMS, description="Areas to improve")
    example_improvement: str = Field(..., min_length=1, description="A concrete example of a better answer")
    interview_readiness: str = Field(..., min_length=1, description="How the answer would land in a real interview")

    @field_validator("strengths", "areas_to_improve", mode="before")
    @classmethod
    def truncate_long_lists(cls, value):
        # Models often return more than three items; keep the first three.
        if isinstance(value, list) and len(value) > MAX_LIST_ITEMS:
            return value[:MAX_LIST_ITEMS]
        return value

    @field_validator("strengths", "areas_to_improve")
    @classmethod
    def reject_blank_items(cls, value: List[str]) -> List[str]:
        if any(not item.strip() for item in value):
            raise ValueError("list items must be non-empty strings")
        return value

    @field_validator("example_improvement", "interview_readiness")
    @classmethod
    def reject_blank_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must be a non-empty string")
        return value
