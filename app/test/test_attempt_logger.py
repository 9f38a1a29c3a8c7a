"""
Test Attempt Logger, Rating Service and Connectivity Monitor

Dependencies:
- pytest, pytest-asyncio: For testing framework
- sqlalchemy: In-memory SQLite store from conftest
- httpx: MockTransport for the connectivity probe

Author: @kcaparas1630
"""

from unittest.mock import MagicMock
import httpx
import pytest
from fastapi import HTTPException
from app.errors.exceptions import FeedbackLogNotFound, NotFound
from app.models.feedback_models import FeedbackLog
from app.schemas.feedback.attempt_log import AttemptLog, FeedbackSource
from app.schemas.feedback.feedback_response import FeedbackResponse
from app.services.feedback.attempt_logger import AttemptLogger
from app.services.feedback.connectivity import ConnectivityMonitor
from app.services.feedback.feedback_rating_service import rate_feedback


def _record(request, **kwargs) -> AttemptLog:
    kwargs.setdefault("source", FeedbackSource.REMOTE)
    kwargs.setdefault("success", False)
    return AttemptLog(request=request, **kwargs)

class TestAttemptLogger:

    @pytest.mark.asyncio
    async def test_append_persists_record(self, star_request, session_factory, feedback_payload):
        feedback = FeedbackResponse(**feedback_payload)
        log_id = await AttemptLogger(session_factory).append(
            _record(star_request, source=FeedbackSource.DIRECT_LLM, success=True, response=feedback)
        )

        assert log_id is not None
        with session_factory() as session:
            row = session.get(FeedbackLog, log_id)
            assert row.source == "direct-llm"
            assert row.success is True
            assert row.helpful is None
            assert row.error_message is None
            assert row.request_data["framework_name"] == "STAR"
            assert row.request_data["framework_steps_with_responses"] == star_request.step_responses
            assert row.response_data == feedback.model_dump()

    @pytest.mark.asyncio
    async def test_failed_attempt_has_no_response(self, star_request, session_factory):
        log_id = await AttemptLogger(session_factory).append(
            _record(star_request, error_message="Backend function returned HTTP 502")
        )

        with session_factory() as session:
            row = session.get(FeedbackLog, log_id)
            assert row.response_data is None
            assert row.error_message == "Backend function returned HTTP 502"

    @pytest.mark.asyncio
    async def test_rows_are_appended_in_order(self, star_request, session_factory):
        attempt_logger = AttemptLogger(session_factory)
        first = await attempt_logger.append(_record(star_request))
        second = await attempt_logger.append(_record(star_request, source=FeedbackSource.LOCAL))
        assert second > first

    @pytest.mark.asyncio
    async def test_no_store_configured(self, star_request):
        assert await AttemptLogger(None).append(_record(star_request)) is None

    @pytest.mark.asyncio
    async def test_write_failure_is_swallowed(self, star_request):
        broken_store = MagicMock(side_effect=RuntimeError("disk full"))
        assert await AttemptLogger(broken_store).append(_record(star_request)) is None

class TestRateFeedback:

    @pytest.mark.asyncio
    async def test_sets_helpful_flag(self, star_request, session_factory):
        log_id = await AttemptLogger(session_factory).append(
            _record(star_request, source=FeedbackSource.LOCAL, success=True)
        )

        with session_factory() as session:
            updated = rate_feedback(session, log_id, helpful=True)
            assert updated.id == log_id
            assert updated.helpful is True

        with session_factory() as session:
            assert rate_feedback(session, log_id, helpful=False).helpful is False
            assert session.get(FeedbackLog, log_id).helpful is False

    def test_unknown_log_id(self, session_factory):
        with session_factory() as session:
            with pytest.raises(FeedbackLogNotFound) as exc_info:
                rate_feedback(session, 999, helpful=True)
        assert exc_info.value.status_code == 404
        assert exc_info.value.detail == "Feedback log 999 not found."
        assert isinstance(exc_info.value, NotFound)
        assert isinstance(exc_info.value, HTTPException)

class TestConnectivityMonitor:

    @pytest.mark.asyncio
    async def test_offline_mode(self):
        assert await ConnectivityMonitor(offline_mode=True).is_online() is False

    @pytest.mark.asyncio
    async def test_online_without_probe(self):
        assert await ConnectivityMonitor().is_online() is True

    @pytest.mark.asyncio
    async def test_probe_success(self):
        probed = []

        def handler(request):
            probed.append(request)
            return httpx.Response(204)

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        monitor = ConnectivityMonitor(probe_url="http://probe/ping", client=client)

        assert await monitor.is_online() is True
        assert probed[0].method == "HEAD"

    @pytest.mark.asyncio
    async def test_probe_failure(self):
        def handler(request):
            raise httpx.ConnectTimeout("timed out", request=request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        monitor = ConnectivityMonitor(probe_url="http://probe/ping", client=client)

        assert await monitor.is_online() is False
