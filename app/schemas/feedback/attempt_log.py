"""
Description:
Schemas describing feedback generation attempts and their outcome.

Dependencies:
- pydantic: For data validation and settings management.

Author: @kcaparas1630
"""
from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from app.schemas.feedback.feedback_request import FeedbackRequest
from app.schemas.feedback.feedback_response import FeedbackResponse


class FeedbackSource(str, Enum):
    """Pipeline stage that produced (or failed to produce) feedback."""
    REMOTE = "remote"
    DIRECT_LLM = "direct-llm"
    LOCAL = "local"


class AttemptLog(BaseModel):
    model_config = ConfigDict(frozen=True)

    source: FeedbackSource
    request: FeedbackRequest
    response: Optional[FeedbackResponse] = None
    error_message: Optional[str] = None
    success: bool
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class FeedbackOutcome(BaseModel):
    """Feedback plus where it came from and the id of the attempt log row that recorded it."""
    feedback: FeedbackResponse
    source: FeedbackSource
    log_id: Optional[int] = None
