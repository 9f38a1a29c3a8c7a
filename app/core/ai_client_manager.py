"""
AI Client Manager

This module builds the network clients used by the feedback pipeline: an httpx client
for the managed backend feedback function and an AsyncOpenAI client for the direct
chat-completion fallback. Clients are created explicitly from settings during
application startup and closed on shutdown; nothing is created at import time.
"""

from typing import Optional
import httpx
from openai import AsyncOpenAI
from loguru import logger
from app.core.config import FeedbackSettings

class FeedbackClients:
    """
    Owns the network clients shared by all feedback requests.

    Attributes:
        backend (Optional[httpx.AsyncClient]): Client for the backend feedback function,
            None when no backend URL is configured.
        llm (Optional[AsyncOpenAI]): Client for the chat-completion provider, None when
            direct LLM access is disabled or has no API key.
    """

    def __init__(self, backend: Optional[httpx.AsyncClient], llm: Optional[AsyncOpenAI]):
        self.backend = backend
        self.llm = llm

    @classmethod
    def from_settings(cls, settings: FeedbackSettings) -> "FeedbackClients":
        backend = None
        if settings.backend_url:
            backend = httpx.AsyncClient(
                base_url=settings.backend_url.rstrip("/"),
                timeout=settings.remote_timeout,
            )
        else:
            logger.warning("FEEDBACK_BACKEND_URL not set - backend feedback function disabled")

        llm = None
        if settings.direct_llm_available:
            try:
                llm = AsyncOpenAI(
                    base_url=settings.direct_llm_base_url,
                    api_key=settings.direct_llm_api_key,
                    timeout=settings.direct_llm_timeout,
                    # Retries belong to the orchestrator, not to this client.
                    max_retries=0,
                )
            except Exception as e:
                logger.error(f"Failed to initialize direct LLM client: {e}")
                raise RuntimeError(f"Failed to initialize direct LLM client: {e}") from e
        elif not settings.direct_llm_enabled:
            logger.info("Direct LLM feedback disabled by configuration")
        else:
            logger.warning("DIRECT_LLM_API_KEY not set - direct LLM feedback disabled")

        logger.info(
            f"Initialized feedback clients (backend={'on' if backend else 'off'}, "
            f"direct_llm={'on' if llm else 'off'})"
        )
        return cls(backend=backend, llm=llm)

    async def aclose(self):
        """Close every open client. Safe to call more than once."""
        if self.backend is not None:
            await self.backend.aclose()
            self.backend = None
        if self.llm is not None:
            await self.llm.close()
            self.llm = None
        logger.info("Feedback clients closed")
