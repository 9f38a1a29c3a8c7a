from .feedback_request import FeedbackRequest
from .feedback_response import FeedbackResponse
from .content_analysis import ContentAnalysis, Sentiment
from .attempt_log import AttemptLog, FeedbackOutcome, FeedbackSource
from .feedback_rating import FeedbackRatingRequest, FeedbackRatingResponse

__all__ = [
    "FeedbackRequest",
    "FeedbackResponse",
    "ContentAnalysis",
    "Sentiment",
    "AttemptLog",
    "FeedbackOutcome",
    "FeedbackSource",
    "FeedbackRatingRequest",
    "FeedbackRatingResponse",
]
