"""
Shared fixtures for the feedback service tests.

Author: @kcaparas1630
"""
import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from app.database import create_session_factory, create_tables, drop_tables
from app.schemas.feedback.feedback_request import FeedbackRequest

STAR_RESPONSES = {
    "Situation": (
        "In March 2023 our team at Acme Corp faced a critical deadline. For example, the Payments "
        "migration had to ship in 6 weeks while two colleagues were on leave, so collaboration across "
        "the shared backlog and support from our partner team became essential."
    ),
    "Task": (
        "My task was to coordinate the team so that every colleague knew their part. Specifically, "
        "I set up a shared tracker with 12 milestones, agreed on support rotations with our partner "
        "team in Berlin, and made sure we could work together across 3 time zones."
    ),
    "Action": (
        "I organized daily 15 minute standups and paired each colleague with a partner for code "
        "reviews. For instance, Maria and I collaborated on the database cutover plan, and I asked the "
        "Platform team for support, which kept our shared work moving together every single day."
    ),
    "Result": (
        "We delivered the migration on June 14, two days early, with zero downtime. The team improved "
        "deployment frequency by 40 percent, and for example our partner teams adopted the shared "
        "tracker. I learned that regular collaboration and support keep a team aligned together."
    ),
}

VALID_FEEDBACK_PAYLOAD = {
    "overall_score": 4,
    "strengths": ["Clear situation", "Concrete actions"],
    "areas_to_improve": ["Quantify the result"],
    "example_improvement": "Say how much time the new process saved each week.",
    "interview_readiness": "Strong answer that would work well in a real interview.",
}


def make_request(**overrides) -> FeedbackRequest:
    data = {
        "question_text": "Tell me about a time you helped your team meet a difficult deadline.",
        "framework_name": "STAR",
        "category": "Teamwork",
        "difficulty": "Medium",
        "framework_steps_with_responses": dict(STAR_RESPONSES),
    }
    data.update(overrides)
    return FeedbackRequest(**data)


def make_llm_client(content=None, error: Exception = None):
    """AsyncOpenAI stand-in whose chat.completions.create returns `content` or raises `error`."""
    client = MagicMock()
    if error is not None:
        client.chat.completions.create = AsyncMock(side_effect=error)
    else:
        completion = SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])
        client.chat.completions.create = AsyncMock(return_value=completion)
    return client


@pytest.fixture
def star_request() -> FeedbackRequest:
    return make_request()


@pytest.fixture
def valid_feedback_json() -> str:
    return json.dumps(VALID_FEEDBACK_PAYLOAD)


@pytest.fixture
def db_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(engine)
    yield engine
    drop_tables(engine)
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return create_session_factory(db_engine)


@pytest.fixture
def request_factory():
    return make_request


@pytest.fixture
def llm_client_factory():
    return make_llm_client


@pytest.fixture
def feedback_payload():
    return dict(VALID_FEEDBACK_PAYLOAD)
