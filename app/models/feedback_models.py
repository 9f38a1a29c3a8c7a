"""Feedback Log Models Module

This module defines the SQLAlchemy model for the append-only feedback attempt log.
Each row records one attempt of one feedback source: the request, the response (if
any), the error message (if any), whether it succeeded and, later, whether the
candidate rated the feedback as helpful.

Dependencies:
- sqlalchemy: For ORM functionality and database modeling.
- datetime: For timestamp handling.
- typing: For type annotations and optional fields.

Author: @kcaparas1630
"""

from datetime import datetime
from typing import Optional
from sqlalchemy import String, DateTime, Text, Boolean, func, JSON
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models.

    Provides the foundation for all database models in the application.
    """
    pass

class FeedbackLog(Base):
    """One feedback generation attempt and its outcome.

    Attributes:
        id (int): Primary key, auto-incrementing
        source (str): Pipeline stage, one of "remote", "direct-llm" or "local"
        request_data (dict): Serialized feedback request, using wire keys
        response_data (dict, optional): Serialized feedback response when one was produced
        error_message (str, optional): Why the attempt failed
        success (bool): True if the source produced valid feedback
        helpful (bool, optional): Candidate's rating of the feedback, set after the fact
        created_at (datetime): Timestamp of the attempt
    """
    __tablename__ = "feedback_logs"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    source: Mapped[str] = mapped_column(String(20))
    request_data: Mapped[dict] = mapped_column(JSON)
    response_data: Mapped[Optional[dict]] = mapped_column(JSON, nullable=True)
    error_message: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    success: Mapped[bool] = mapped_column(Boolean, default=False)
    helpful: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=func.now())

    def __repr__(self):
        return f"FeedbackLog(id={self.id}, source={self.source}, success={self.success})"
