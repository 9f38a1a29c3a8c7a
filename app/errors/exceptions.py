from fastapi import HTTPException
from starlette.status import HTTP_404_NOT_FOUND

class NotFound(HTTPException):
    def __init__(self, detail: str = "Resource not found"):
        super().__init__(status_code=HTTP_404_NOT_FOUND, detail=detail)

class FeedbackLogNotFound(NotFound):
    def __init__(self, identifier: int = None):
        detail = f"Feedback log {identifier} not found." if identifier is not None else "Feedback log not found."
        super().__init__(detail=detail)

# Pipeline errors. Raised by feedback sources and handled by the orchestrator only.
class FeedbackSourceError(Exception):
    """A feedback source could not produce valid feedback."""

class RemoteFeedbackError(FeedbackSourceError):
    """The backend feedback function failed, returned an error or an invalid body."""

class FeedbackTimeoutError(RemoteFeedbackError):
    def __init__(self, timeout: float):
        super().__init__(f"Backend feedback function timed out after {timeout:.1f}s")
        self.timeout = timeout

class DirectLLMError(FeedbackSourceError):
    """The chat-completion provider failed or its output could not be parsed."""

class DirectLLMDisabled(DirectLLMError):
    def __init__(self, detail: str = "Direct LLM feedback is disabled"):
        super().__init__(detail)
