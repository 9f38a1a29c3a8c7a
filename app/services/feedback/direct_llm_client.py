"""
Direct LLM Client Module

Secondary feedback source: sends the candidate's answers straight to an
OpenAI-compatible chat-completion provider and parses the JSON feedback out of the
model's free-form reply. One request per call, no retries here.

This is a privacy boundary: user-authored text leaves the service. The client is
only built when DIRECT_LLM_ENABLED is true and an API key is configured; otherwise
every call raises DirectLLMDisabled and the orchestrator skips this stage.

Dependencies:
- openai: For the chat-completion API.
- app.core.secure_prompt_manager: For building the sanitized prompt.
- app.helper.extract_feedback_json: For pulling validated JSON out of the reply.
- loguru: For logging operations.

Author: @kcaparas1630
"""

import time
from typing import Optional
from openai import AsyncOpenAI
from loguru import logger
from app.core.secure_prompt_manager import SecurePromptManager
from app.errors.exceptions import DirectLLMDisabled, DirectLLMError
from app.helper.extract_feedback_json import parse_feedback_content
from app.schemas.feedback.feedback_request import FeedbackRequest
from app.schemas.feedback.feedback_response import FeedbackResponse

DEFAULT_MODEL = "gpt-4o-mini"


class DirectLLMClient:
    """
    Client that asks a chat-completion model for feedback.

    Attributes:
        client (Optional[AsyncOpenAI]): Provider client, None when disabled.
        model (str): Model name.
        prompt_manager (SecurePromptManager): Builds the sanitized prompt.
    """

    def __init__(
        self,
        client: Optional[AsyncOpenAI],
        model: str = DEFAULT_MODEL,
        prompt_manager: Optional[SecurePromptManager] = None,
        temperature: float = 0.7,
        max_tokens: int = 800,
    ):
        self.client = client
        self.model = model
        self.prompt_manager = prompt_manager or SecurePromptManager()
        self.temperature = temperature
        self.max_tokens = max_tokens

    @property
    def enabled(self) -> bool:
        return self.client is not None

    async def generate_feedback(self, request: FeedbackRequest) -> FeedbackResponse:
        """
        Ask the model for feedback on a complete request.

        Args:
            request (FeedbackRequest): A complete feedback request.

        Returns:
            FeedbackResponse: Feedback parsed and validated from the model reply.

        Raises:
            DirectLLMDisabled: If no provider client is configured.
            DirectLLMError: If the API call fails, the reply has no content, or the
                embedded JSON is missing, malformed or invalid.
        """
        if not self.enabled:
            raise DirectLLMDisabled()

        try:
            prompt = self.prompt_manager.get_feedback_prompt(request)
        except ValueError as e:
            raise DirectLLMError(f"Could not build feedback prompt: {e}") from e

        llm_start_time = time.time()
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
                messages=[
                    {
                        "role": "user",
                        "content": prompt
                    }
                ]
            )
        except Exception as e:
            logger.error(f"[DIRECT_LLM] Chat completion failed: {type(e).__name__}: {e}")
            raise DirectLLMError(f"Chat completion request failed: {e}") from e

        logger.info(f"[DIRECT_LLM] LLM call completed in {time.time() - llm_start_time:.3f}s")

        if not response.choices:
            raise DirectLLMError("Chat completion returned no choices")
        content = response.choices[0].message.content
        logger.debug(f"[DIRECT_LLM] Raw model output: {content}")

        feedback = parse_feedback_content(content)
        logger.info(f"[DIRECT_LLM] Parsed valid feedback with score {feedback.overall_score}")
        return feedback
