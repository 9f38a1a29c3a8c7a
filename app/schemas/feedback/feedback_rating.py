"""
Description:
Schemas for rating a piece of generated feedback as helpful or not.

Dependencies:
- pydantic: For data validation and settings management.

Author: @kcaparas1630
"""
from pydantic import BaseModel, Field


class FeedbackRatingRequest(BaseModel):
    helpful: bool = Field(..., description="Whether the candidate found the feedback helpful")


class FeedbackRatingResponse(BaseModel):
    id: int
    helpful: bool
