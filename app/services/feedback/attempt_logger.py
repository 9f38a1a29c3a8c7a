"""
Attempt Logger Module

Append-only writer for feedback attempt records. Writes are best-effort: any failure
(database down, serialization problem, missing table) is logged and swallowed so it
can never change the feedback a candidate receives.

Dependencies:
- sqlalchemy: For the durable feedback_logs table.
- asyncio: For running the blocking write off the event loop.
- loguru: For logging operations.

Author: @kcaparas1630
"""

import asyncio
from typing import Optional
from loguru import logger
from sqlalchemy.orm import sessionmaker
from app.models.feedback_models import FeedbackLog
from app.schemas.feedback.attempt_log import AttemptLog


class AttemptLogger:
    def __init__(self, session_factory: Optional[sessionmaker]):
        self.session_factory = session_factory

    def _write(self, record: AttemptLog) -> int:
        with self.session_factory() as session:
            row = FeedbackLog(
                source=record.source.value,
                request_data=record.request.to_backend_payload(),
                response_data=record.response.model_dump() if record.response else None,
                error_message=record.error_message,
                success=record.success,
                created_at=record.created_at,
            )
            session.add(row)
            session.commit()
            return row.id

    async def append(self, record: AttemptLog) -> Optional[int]:
        """
        Persist one attempt record.

        Returns:
            Optional[int]: The new row id, or None if the write failed or no store is configured.
        """
        if self.session_factory is None:
            logger.debug("[ATTEMPT_LOG] No log store configured, skipping write")
            return None
        try:
            log_id = await asyncio.to_thread(self._write, record)
            logger.debug(f"[ATTEMPT_LOG] Recorded {record.source.value} attempt (success={record.success}) as #{log_id}")
            return log_id
        except Exception as e:
            logger.error(f"[ATTEMPT_LOG] Failed to record {record.source.value} attempt: {type(e).__name__}: {e}")
            return None
