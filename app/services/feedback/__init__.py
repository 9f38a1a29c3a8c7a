from .content_analyzer import analyze_content
from .local_scorer import generate_local_feedback
from .remote_feedback_client import RemoteFeedbackClient
from .direct_llm_client import DirectLLMClient
from .attempt_logger import AttemptLogger
from .connectivity import ConnectivityMonitor
from .feedback_orchestrator import FeedbackOrchestrator, INVALID_SUBMISSION_FEEDBACK

__all__ = [
    "analyze_content",
    "generate_local_feedback",
    "RemoteFeedbackClient",
    "DirectLLMClient",
    "AttemptLogger",
    "ConnectivityMonitor",
    "FeedbackOrchestrator",
    "INVALID_SUBMISSION_FEEDBACK",
]
