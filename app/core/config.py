"""
Description:
Application configuration loaded from environment variables (and a local .env file).

Every tunable of the feedback pipeline lives here: backend function location and
retry budget, direct LLM access, offline mode, database location, CORS and rate limits.

Dependencies:
- python-dotenv: For loading a local .env file into the environment.
- dataclasses: For the immutable settings container.

Author: @kcaparas1630
"""
import os
from dataclasses import dataclass, field
from typing import List, Optional
from dotenv import load_dotenv

TRUTHY_VALUES = {"1", "true", "yes", "on"}


def _get_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in TRUTHY_VALUES


def _get_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return float(value)
    except ValueError as e:
        raise ValueError(f"Environment variable {name} must be a number, got '{value}'") from e


def _get_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError as e:
        raise ValueError(f"Environment variable {name} must be an integer, got '{value}'") from e


def _get_list(name: str) -> List[str]:
    value = os.getenv(name, "")
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass(frozen=True)
class FeedbackSettings:
    """
    Settings for the feedback service.

    Attributes:
        database_url: SQLAlchemy URL of the attempt log store.
        backend_url: Base URL of the managed backend hosting the feedback function.
        backend_key: Key sent as bearer token and apikey header to the backend.
        function_name: Name of the backend feedback function.
        remote_timeout: Wall-clock budget per backend attempt, in seconds.
        remote_max_retries: Total backend attempts before giving up.
        remote_retry_delay: First backoff delay in seconds, doubled on each retry.
        direct_llm_enabled: Whether user answers may be sent straight to the LLM provider.
        direct_llm_api_key: Bearer token for the chat-completion provider.
        direct_llm_base_url: Base URL of the OpenAI-compatible provider.
        direct_llm_model: Model name used for chat completions.
        direct_llm_timeout: Request timeout for the provider, in seconds.
        offline_mode: Forces the pipeline to skip every network source.
        connectivity_probe_url: Optional URL probed to decide if the network is reachable.
        cors_origins: Allowed CORS origins.
        log_level: loguru level name.
    """
    database_url: str = "sqlite:///./feedback_logs.db"
    backend_url: Optional[str] = None
    backend_key: Optional[str] = None
    function_name: str = "generate-feedback"
    remote_timeout: float = 15.0
    remote_max_retries: int = 3
    remote_retry_delay: float = 1.0
    direct_llm_enabled: bool = True
    direct_llm_api_key: Optional[str] = None
    direct_llm_base_url: str = "https://api.openai.com/v1"
    direct_llm_model: str = "gpt-4o-mini"
    direct_llm_timeout: float = 30.0
    offline_mode: bool = False
    connectivity_probe_url: Optional[str] = None
    cors_origins: List[str] = field(default_factory=list)
    log_level: str = "INFO"

    @property
    def direct_llm_available(self) -> bool:
        return self.direct_llm_enabled and bool(self.direct_llm_api_key)

    @classmethod
    def from_env(cls) -> "FeedbackSettings":
        """Build settings from the process environment, loading .env first."""
        load_dotenv()
        return cls(
            database_url=os.getenv("DATABASE_URL", cls.database_url),
            backend_url=os.getenv("FEEDBACK_BACKEND_URL") or None,
            backend_key=os.getenv("FEEDBACK_BACKEND_KEY") or None,
            function_name=os.getenv("FEEDBACK_FUNCTION_NAME", cls.function_name),
            remote_timeout=_get_float("REMOTE_TIMEOUT_SECONDS", cls.remote_timeout),
            remote_max_retries=_get_int("REMOTE_MAX_RETRIES", cls.remote_max_retries),
            remote_retry_delay=_get_float("REMOTE_RETRY_DELAY_SECONDS", cls.remote_retry_delay),
            direct_llm_enabled=_get_bool("DIRECT_LLM_ENABLED", cls.direct_llm_enabled),
            direct_llm_api_key=os.getenv("DIRECT_LLM_API_KEY") or None,
            direct_llm_base_url=os.getenv("DIRECT_LLM_BASE_URL", cls.direct_llm_base_url),
            direct_llm_model=os.getenv("DIRECT_LLM_MODEL", cls.direct_llm_model),
            direct_llm_timeout=_get_float("DIRECT_LLM_TIMEOUT_SECONDS", cls.direct_llm_timeout),
            offline_mode=_get_bool("OFFLINE_MODE", cls.offline_mode),
            connectivity_probe_url=os.getenv("CONNECTIVITY_PROBE_URL") or None,
            cors_origins=_get_list("CORS_ORIGINS"),
            log_level=os.getenv("LOG_LEVEL", cls.log_level),
        )
