"""
Test Remote Feedback Client Module

Tests the backend function client against an in-process httpx transport: request
shape, validation of the returned body, per-attempt timeout and retry with backoff.

Dependencies:
- pytest, pytest-asyncio: For testing framework
- httpx: MockTransport stands in for the backend
- app.services.feedback.remote_feedback_client: The module being tested

Author: @kcaparas1630
"""

import asyncio
import json
import httpx
import pytest
from app.errors.exceptions import FeedbackTimeoutError, RemoteFeedbackError
from app.services.feedback import remote_feedback_client as remote_module
from app.services.feedback.remote_feedback_client import RemoteFeedbackClient
from app.test.conftest import VALID_FEEDBACK_PAYLOAD

VALID = (200, {"json": VALID_FEEDBACK_PAYLOAD})
SERVER_ERROR = (500, {"text": "boom"})


def _client(handler, **kwargs) -> RemoteFeedbackClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://backend")
    kwargs.setdefault("retry_delay", 0)
    return RemoteFeedbackClient(client=http_client, **kwargs)


def _counting_handler(replies):
    """
    Handler answering with the (status, kwargs) replies in order, repeating the last
    one. Every request is recorded.
    """
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        status, kwargs = replies[min(len(calls), len(replies)) - 1]
        return httpx.Response(status, **kwargs)

    return handler, calls

class TestRemoteFeedbackSuccess:

    @pytest.mark.asyncio
    async def test_posts_wire_payload_and_returns_feedback(self, star_request):
        handler, calls = _counting_handler([VALID])
        client = _client(handler, api_key="anon-key")

        feedback = await client.generate_feedback(star_request)

        assert feedback.overall_score == 4
        assert len(calls) == 1
        sent = calls[0]
        assert sent.method == "POST"
        assert sent.url.path == "/functions/v1/generate-feedback"
        assert sent.headers["x-client-info"] == "feedback-service/1.0"
        assert sent.headers["authorization"] == "Bearer anon-key"
        assert sent.headers["apikey"] == "anon-key"

        body = json.loads(sent.content)
        assert body["question_text"] == star_request.question_text
        assert body["framework_name"] == "STAR"
        assert body["category"] == "Teamwork"
        assert body["difficulty"] == "Medium"
        assert body["framework_steps_with_responses"] == star_request.step_responses

    @pytest.mark.asyncio
    async def test_no_auth_headers_without_key(self, star_request):
        handler, calls = _counting_handler([VALID])
        await _client(handler).generate_feedback(star_request)

        assert "authorization" not in calls[0].headers
        assert "apikey" not in calls[0].headers

    @pytest.mark.asyncio
    async def test_custom_function_name(self, star_request):
        handler, calls = _counting_handler([VALID])
        await _client(handler, function_name="feedback-v2").generate_feedback(star_request)
        assert calls[0].url.path == "/functions/v1/feedback-v2"

class TestRemoteFeedbackFailures:

    @pytest.mark.asyncio
    async def test_retries_until_success(self, star_request):
        handler, calls = _counting_handler([
            SERVER_ERROR,
            (200, {"json": {"error": "provider unavailable"}}),
            VALID,
        ])
        feedback = await _client(handler).generate_feedback(star_request)

        assert feedback.overall_score == 4
        assert len(calls) == 3

    @pytest.mark.asyncio
    @pytest.mark.parametrize("reply,message", [
        ((503, {"text": "unavailable"}), "HTTP 503"),
        ((200, {"text": "<html>oops</html>"}), "non-JSON"),
        ((200, {"json": {}}), "no data"),
        ((200, {"json": {"error": "quota"}}), "quota"),
        ((200, {"json": {**VALID_FEEDBACK_PAYLOAD, "overall_score": 7}}), "overall_score"),
    ])
    async def test_invalid_responses_exhaust_attempts(self, star_request, reply, message):
        handler, calls = _counting_handler([reply])
        client = _client(handler)

        with pytest.raises(RemoteFeedbackError, match="after 3 attempts") as exc_info:
            await client.generate_feedback(star_request)

        assert len(calls) == 3
        assert isinstance(exc_info.value.__cause__, RemoteFeedbackError)
        assert message in str(exc_info.value.__cause__)

    @pytest.mark.asyncio
    async def test_transport_error_is_wrapped(self, star_request):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(RemoteFeedbackError) as exc_info:
            await _client(handler, max_retries=1).generate_feedback(star_request)

        assert "Transport error" in str(exc_info.value.__cause__)

    @pytest.mark.asyncio
    async def test_attempt_timeout(self, star_request):
        calls = []

        async def handler(request):
            calls.append(request)
            await asyncio.sleep(1)
            return httpx.Response(200, json=VALID_FEEDBACK_PAYLOAD)

        client = _client(handler, timeout=0.05, max_retries=2)
        with pytest.raises(RemoteFeedbackError) as exc_info:
            await client.generate_feedback(star_request)

        assert len(calls) == 2
        assert isinstance(exc_info.value.__cause__, FeedbackTimeoutError)
        assert exc_info.value.__cause__.timeout == 0.05

    @pytest.mark.asyncio
    async def test_backoff_doubles_between_attempts(self, star_request, monkeypatch):
        delays = []

        async def fake_sleep(delay):
            delays.append(delay)

        monkeypatch.setattr(remote_module.asyncio, "sleep", fake_sleep)
        handler, calls = _counting_handler([SERVER_ERROR])

        with pytest.raises(RemoteFeedbackError):
            await _client(handler, retry_delay=1.0).generate_feedback(star_request)

        assert len(calls) == 3
        assert delays == [1.0, 2.0]

    @pytest.mark.asyncio
    async def test_unconfigured_backend_fails_fast(self, star_request):
        client = RemoteFeedbackClient(client=None)
        with pytest.raises(RemoteFeedbackError, match="not configured"):
            await client.generate_feedback(star_request)
