"""
Remote Feedback Client Module

Calls the managed backend feedback function, which talks to one or more LLM providers
server-side. Each attempt races the HTTP call against a wall-clock timer; timeouts,
transport errors, error bodies and malformed feedback all count as failed attempts.
Failed attempts are retried with exponential backoff (1s, 2s, ...) until the attempt
budget is spent, then a RemoteFeedbackError is raised. This client never falls back
on its own; that is the orchestrator's job.

Dependencies:
- httpx: For the HTTP call to the backend function.
- asyncio: For the per-attempt timer and backoff sleeps.
- loguru: For logging operations.

Author: @kcaparas1630
"""

import asyncio
import time
from typing import Optional
import httpx
from loguru import logger
from app.errors.exceptions import FeedbackTimeoutError, RemoteFeedbackError
from app.schemas.feedback.feedback_request import FeedbackRequest
from app.schemas.feedback.feedback_response import FeedbackResponse
from app.helper.response_validation import validate_feedback_payload

MAX_RETRIES = 3
RETRY_DELAY_SECONDS = 1.0
FUNCTION_TIMEOUT_SECONDS = 15.0
FUNCTION_PATH = "/functions/v1/{function_name}"
CLIENT_INFO_HEADER = "feedback-service/1.0"


class RemoteFeedbackClient:
    """
    Client for the backend `generate-feedback` function.

    Attributes:
        client (Optional[httpx.AsyncClient]): HTTP client with the backend base URL.
            None means the backend is not configured and every call fails fast.
        function_name (str): Name of the backend function to invoke.
        api_key (Optional[str]): Sent as bearer token and `apikey` header.
        timeout (float): Seconds allowed per attempt.
        max_retries (int): Total attempts per call.
        retry_delay (float): First backoff delay; doubles after each failed attempt.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient],
        function_name: str = "generate-feedback",
        api_key: Optional[str] = None,
        timeout: float = FUNCTION_TIMEOUT_SECONDS,
        max_retries: int = MAX_RETRIES,
        retry_delay: float = RETRY_DELAY_SECONDS,
    ):
        self.client = client
        self.function_name = function_name
        self.api_key = api_key
        self.timeout = timeout
        self.max_retries = max(1, max_retries)
        self.retry_delay = retry_delay

    def _headers(self) -> dict:
        headers = {
            "x-client-info": CLIENT_INFO_HEADER,
            "Content-Type": "application/json",
        }
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
            headers["apikey"] = self.api_key
        return headers

    async def _invoke(self, request: FeedbackRequest) -> FeedbackResponse:
        """One attempt: POST the request and validate the returned body."""
        response = await self.client.post(
            FUNCTION_PATH.format(function_name=self.function_name),
            json=request.to_backend_payload(),
            headers=self._headers(),
        )
        if response.status_code >= 400:
            raise RemoteFeedbackError(
                f"Backend function returned HTTP {response.status_code}: {response.text[:200]}"
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise RemoteFeedbackError("Backend function returned a non-JSON body") from e

        if not payload:
            raise RemoteFeedbackError("Backend function returned no data")

        result = validate_feedback_payload(payload)
        if not result.ok:
            raise RemoteFeedbackError(result.error)
        return result.feedback

    async def _attempt(self, request: FeedbackRequest) -> FeedbackResponse:
        try:
            return await asyncio.wait_for(self._invoke(request), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise FeedbackTimeoutError(self.timeout) from e
        except httpx.HTTPError as e:
            raise RemoteFeedbackError(f"Transport error calling backend function: {e}") from e

    async def generate_feedback(self, request: FeedbackRequest) -> FeedbackResponse:
        """
        Get feedback from the backend function, retrying failed attempts.

        Args:
            request (FeedbackRequest): A complete feedback request.

        Returns:
            FeedbackResponse: Validated feedback from the backend.

        Raises:
            RemoteFeedbackError: If the backend is not configured or every attempt failed.
                The error of the last attempt is chained as the cause.
        """
        if self.client is None:
            raise RemoteFeedbackError("Backend feedback function is not configured")

        last_error: Optional[RemoteFeedbackError] = None
        for attempt in range(self.max_retries):
            start_time = time.time()
            try:
                feedback = await self._attempt(request)
                logger.info(
                    f"[REMOTE] Attempt {attempt + 1}/{self.max_retries} returned valid feedback "
                    f"with score {feedback.overall_score} in {time.time() - start_time:.3f}s"
                )
                return feedback
            except RemoteFeedbackError as e:
                last_error = e
                logger.warning(f"[REMOTE] Attempt {attempt + 1}/{self.max_retries} failed: {e}")

            if attempt < self.max_retries - 1:
                delay = self.retry_delay * (2 ** attempt)
                logger.info(f"[REMOTE] Retrying in {delay:.1f}s...")
                await asyncio.sleep(delay)

        logger.error(f"[REMOTE] All {self.max_retries} attempts failed")
        raise RemoteFeedbackError(
            f"Backend feedback function failed after {self.max_retries} attempts: {last_error}"
        ) from last_error
