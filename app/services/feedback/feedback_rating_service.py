"""
Feedback Rating Service Module

Records whether a candidate found a piece of generated feedback helpful, against the
attempt log row that produced it.

Dependencies:
- sqlalchemy: For loading and updating the feedback log row.
- loguru: For logging operations.

Author: @kcaparas1630
"""

from loguru import logger
from sqlalchemy.orm import Session
from app.errors.exceptions import FeedbackLogNotFound
from app.models.feedback_models import FeedbackLog


def rate_feedback(db: Session, log_id: int, helpful: bool) -> FeedbackLog:
    """
    Set the helpful flag on a feedback log row.

    Args:
        db (Session): Database session.
        log_id (int): Id of the feedback log row returned with the feedback.
        helpful (bool): The candidate's rating.

    Returns:
        FeedbackLog: The updated row.

    Raises:
        FeedbackLogNotFound: If no row has this id.
    """
    feedback_log = db.get(FeedbackLog, log_id)
    if feedback_log is None:
        logger.warning(f"Rating requested for unknown feedback log {log_id}")
        raise FeedbackLogNotFound(log_id)

    feedback_log.helpful = helpful
    db.commit()
    db.refresh(feedback_log)
    logger.info(f"Feedback log {log_id} rated helpful={helpful}")
    return feedback_log
