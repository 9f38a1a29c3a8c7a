"""
Feedback Orchestrator Module

The feedback fallback pipeline. Sources are tried in priority order and the first
structurally valid result wins:

    Start -> TryRemote -> TryDirect -> TryLocal -> Done

1. Incomplete submissions (missing question, unknown framework, or any empty step)
   get a fixed invalid-submission response without touching the network.
2. When the network is unavailable the pipeline jumps straight to local feedback.
3. The backend feedback function is tried with retries and backoff.
4. On failure, the chat-completion provider is asked once.
5. On failure, the local heuristic scorer produces feedback. It cannot fail.

Every attempt is written to the attempt log. Logging is best-effort and never
changes the result. generate_feedback never raises.

The orchestrator holds no per-request state, so one instance serves every
concurrent request.

Dependencies:
- loguru: For logging operations.
- app.services.feedback: Pipeline sources, attempt logger and connectivity monitor.

Author: @kcaparas1630
"""

import time
from typing import Callable, Optional
from loguru import logger
from app.errors.exceptions import DirectLLMDisabled
from app.schemas.feedback.attempt_log import AttemptLog, FeedbackOutcome, FeedbackSource
from app.schemas.feedback.feedback_request import FeedbackRequest
from app.schemas.feedback.feedback_response import FeedbackResponse
from app.services.feedback.attempt_logger import AttemptLogger
from app.services.feedback.connectivity import ConnectivityMonitor
from app.services.feedback.direct_llm_client import DirectLLMClient
from app.services.feedback.local_scorer import generate_local_feedback
from app.services.feedback.remote_feedback_client import RemoteFeedbackClient

INVALID_SUBMISSION_FEEDBACK = FeedbackResponse(
    overall_score=1,
    strengths=["You started working on this question"],
    areas_to_improve=["Answer every step of the framework before requesting feedback"],
    example_improvement="Fill in each step with at least a few sentences describing what happened, what you did and what the outcome was.",
    interview_readiness="We couldn't evaluate this answer because it is incomplete. Complete all steps and try again.",
)

SERVICE_UNAVAILABLE_FEEDBACK = FeedbackResponse(
    overall_score=3,
    strengths=["Unable to generate detailed feedback at this time"],
    areas_to_improve=["Please try again later"],
    example_improvement="Service temporarily unavailable",
    interview_readiness="We're experiencing technical difficulties with our feedback system.",
)


class FeedbackOrchestrator:
    """
    Runs the remote -> direct LLM -> local feedback pipeline.

    Attributes:
        remote_client (RemoteFeedbackClient): Backend function client (retries internally).
        direct_client (Optional[DirectLLMClient]): Chat-completion client, None to skip.
        attempt_logger (AttemptLogger): Durable, best-effort attempt log.
        connectivity (ConnectivityMonitor): Decides whether network sources are tried.
        local_scorer (Callable): Heuristic scorer used as the final fallback.
    """

    def __init__(
        self,
        remote_client: RemoteFeedbackClient,
        direct_client: Optional[DirectLLMClient],
        attempt_logger: AttemptLogger,
        connectivity: Optional[ConnectivityMonitor] = None,
        local_scorer: Callable[[FeedbackRequest], FeedbackResponse] = generate_local_feedback,
    ):
        self.remote_client = remote_client
        self.direct_client = direct_client
        self.attempt_logger = attempt_logger
        self.connectivity = connectivity or ConnectivityMonitor()
        self.local_scorer = local_scorer

    async def _log(
        self,
        source: FeedbackSource,
        request: FeedbackRequest,
        success: bool,
        response: Optional[FeedbackResponse] = None,
        error_message: Optional[str] = None,
    ) -> Optional[int]:
        try:
            return await self.attempt_logger.append(AttemptLog(
                source=source,
                request=request,
                response=response,
                error_message=error_message,
                success=success,
            ))
        except Exception as e:
            logger.error(f"[ORCHESTRATOR] Attempt log write raised {type(e).__name__}: {e}")
            return None

    def _describe_invalid(self, request: FeedbackRequest) -> str:
        if not request.question_text.strip():
            return "Invalid submission: missing question text"
        if not request.framework_name.strip():
            return "Invalid submission: missing framework name"
        if not request.required_steps():
            return f"Invalid submission: unknown framework '{request.framework_name}'"
        return f"Invalid submission: missing responses for {', '.join(request.missing_steps())}"

    async def _try_local(self, request: FeedbackRequest) -> FeedbackOutcome:
        feedback = self.local_scorer(request)
        log_id = await self._log(FeedbackSource.LOCAL, request, success=True, response=feedback)
        return FeedbackOutcome(feedback=feedback, source=FeedbackSource.LOCAL, log_id=log_id)

    async def generate_feedback_with_outcome(self, request: FeedbackRequest) -> FeedbackOutcome:
        """
        Run the pipeline and report which source produced the feedback.

        Args:
            request (FeedbackRequest): Submission to evaluate. Never mutated.

        Returns:
            FeedbackOutcome: The feedback, its source and the id of the final attempt
                log row (None if logging failed).
        """
        total_start_time = time.time()
        try:
            logger.info(
                f"[ORCHESTRATOR] Generating feedback (framework={request.framework_name or '-'}, "
                f"category={request.category}, steps={list(request.step_responses.keys())})"
            )

            if not request.is_complete():
                reason = self._describe_invalid(request)
                logger.warning(f"[ORCHESTRATOR] {reason}")
                log_id = await self._log(
                    FeedbackSource.LOCAL, request, success=False,
                    response=INVALID_SUBMISSION_FEEDBACK, error_message=reason,
                )
                return FeedbackOutcome(feedback=INVALID_SUBMISSION_FEEDBACK, source=FeedbackSource.LOCAL, log_id=log_id)

            if not await self.connectivity.is_online():
                logger.info("[ORCHESTRATOR] No network connectivity, using local feedback")
                return await self._try_local(request)

            try:
                feedback = await self.remote_client.generate_feedback(request)
                log_id = await self._log(FeedbackSource.REMOTE, request, success=True, response=feedback)
                return FeedbackOutcome(feedback=feedback, source=FeedbackSource.REMOTE, log_id=log_id)
            except Exception as e:
                logger.warning(f"[ORCHESTRATOR] Remote feedback failed, falling back to direct LLM: {e}")
                await self._log(FeedbackSource.REMOTE, request, success=False, error_message=str(e))

            if self.direct_client is not None:
                try:
                    feedback = await self.direct_client.generate_feedback(request)
                    log_id = await self._log(FeedbackSource.DIRECT_LLM, request, success=True, response=feedback)
                    return FeedbackOutcome(feedback=feedback, source=FeedbackSource.DIRECT_LLM, log_id=log_id)
                except DirectLLMDisabled:
                    logger.info("[ORCHESTRATOR] Direct LLM disabled, skipping to local feedback")
                except Exception as e:
                    logger.warning(f"[ORCHESTRATOR] Direct LLM feedback failed, falling back to local: {e}")
                    await self._log(FeedbackSource.DIRECT_LLM, request, success=False, error_message=str(e))

            return await self._try_local(request)

        except Exception as e:
            logger.error(f"[ORCHESTRATOR] Unexpected error in feedback pipeline: {type(e).__name__}: {e}")
            return FeedbackOutcome(feedback=SERVICE_UNAVAILABLE_FEEDBACK, source=FeedbackSource.LOCAL)
        finally:
            logger.info(f"[PERF] Feedback pipeline completed in {time.time() - total_start_time:.3f}s")

    async def generate_feedback(self, request: FeedbackRequest) -> FeedbackResponse:
        """Run the pipeline and return only the feedback. Never raises."""
        outcome = await self.generate_feedback_with_outcome(request)
        return outcome.feedback
