"""
Framework Feedback API Routes

Description:
This module defines FastAPI routes for generating feedback on a framework-structured
interview answer and for rating that feedback afterwards.

Arguments:
- request: An instance of FeedbackRequest with the question, framework and step answers.

Returns:
- A FeedbackOutcome with the feedback, the source that produced it and the attempt log id.

Dependencies:
- fastapi: For creating the FastAPI application and defining routes.
- app.services.feedback: For the feedback pipeline and rating.
- app.core.route_limiters: For rate limiting the generation endpoint.
- loguru: For logging information about the request.

Author: @kcaparas1630

"""
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session
from loguru import logger
from app.core.route_limiters import limiter, FEEDBACK_RATE_LIMIT
from app.database import get_db_session
from app.schemas.feedback import FeedbackOutcome, FeedbackRequest, FeedbackRatingRequest, FeedbackRatingResponse
from app.services.feedback.feedback_orchestrator import FeedbackOrchestrator
from app.services.feedback.feedback_rating_service import rate_feedback

router = APIRouter(
    prefix="/api",
    tags=["feedback"],
    responses={404: {"description": "Not found"}}
)


def get_feedback_orchestrator(request: Request) -> FeedbackOrchestrator:
    return request.app.state.feedback_orchestrator


@router.post("/feedback", response_model=FeedbackOutcome)
@limiter.limit(FEEDBACK_RATE_LIMIT)
async def generate_feedback(
    request: Request,
    feedback_request: FeedbackRequest,
    orchestrator: FeedbackOrchestrator = Depends(get_feedback_orchestrator),
):
    """
    Generate feedback for a framework answer. Always returns usable feedback;
    upstream failures only lower its quality.
    """
    outcome = await orchestrator.generate_feedback_with_outcome(feedback_request)
    logger.info(f"Feedback served from {outcome.source.value} with score {outcome.feedback.overall_score}")
    return outcome


@router.patch("/feedback-logs/{log_id}/rating", response_model=FeedbackRatingResponse)
async def rate_feedback_log(
    log_id: int,
    rating: FeedbackRatingRequest,
    db: Session = Depends(get_db_session),
):
    """
    Record whether the candidate found the feedback helpful.
    """
    feedback_log = rate_feedback(db, log_id, rating.helpful)
    return FeedbackRatingResponse(id=feedback_log.id, helpful=feedback_log.helpful)
