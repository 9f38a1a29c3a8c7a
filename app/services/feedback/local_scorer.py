"""
Local Heuristic Scorer Module

Deterministic, non-AI feedback built from text statistics alone. This is the last
stage of the feedback pipeline, so it must always return a valid FeedbackResponse.

Each step answer is scored on four 1-5 criteria:
- content quality: answer length
- relevance: number of category keywords mentioned
- specificity: example phrases plus numbers, dates and names
- framework usage: the answer is distinct from every other step's answer

The four per-criterion averages are weighted equally and rounded half-up to give the
overall score. Strength and improvement lines come from fixed templates, chosen by
thresholds, never at random.

Dependencies:
- app.services.feedback.content_analyzer: Per-answer signal extraction.
- app.schemas.feedback: Request and response models.
- loguru: For logging operations.

Author: @kcaparas1630
"""

import math
from dataclasses import dataclass
from typing import Dict, List
from loguru import logger
from app.schemas.feedback.content_analysis import ContentAnalysis
from app.schemas.feedback.feedback_request import FeedbackRequest
from app.schemas.feedback.feedback_response import FeedbackResponse, MAX_LIST_ITEMS
from app.services.feedback.content_analyzer import analyze_content

CRITERIA_WEIGHTS = {
    "content_quality": 0.25,
    "relevance": 0.25,
    "specificity": 0.25,
    "framework_usage": 0.25,
}

# Keyword matches needed before a step earns a "rich terminology" strength.
KEYWORD_RICHNESS_THRESHOLD = 3
# Answers shorter than this earn an "expand this step" improvement.
SHORT_RESPONSE_LENGTH = 100

FALLBACK_STRENGTH = "You completed every step of the {framework} framework"
FALLBACK_IMPROVEMENT = "Add more detail and concrete examples to each step of your answer"

EXAMPLE_IMPROVEMENT_DEVELOPING = (
    "Anchor each step in a specific moment. Instead of 'I improved the process', try: "
    "'In March I rewrote our deployment checklist, which cut release failures from 5 to 1 per month.'"
)
EXAMPLE_IMPROVEMENT_STRONG = (
    "Close the loop on your result with what you learned. For example: 'Since then I run a "
    "short retrospective after every release, and the team adopted it as a standard practice.'"
)

READINESS_READY = (
    "This answer is interview-ready: it is structured, specific and backed by concrete examples."
)
READINESS_ALMOST = (
    "You are close. Tighten each step and add measurable outcomes to make this answer stand out."
)
READINESS_NEEDS_PRACTICE = (
    "This answer needs more practice. Focus on giving every step concrete details before your interview."
)


@dataclass(frozen=True)
class StepScores:
    content_quality: int
    relevance: int
    specificity: int
    framework_usage: int


def score_content_quality(text: str) -> int:
    length = len(text)
    if length > 200:
        return 5
    if length > 150:
        return 4
    if length > 100:
        return 3
    if length > 50:
        return 2
    return 1


def score_relevance(analysis: ContentAnalysis) -> int:
    matches = len(analysis.keyword_matches)
    if matches >= 5:
        return 5
    if matches >= 4:
        return 4
    if matches >= 3:
        return 3
    if matches >= 2:
        return 2
    return 1


def score_specificity(analysis: ContentAnalysis) -> int:
    if analysis.has_examples:
        if analysis.specificity >= 5:
            return 5
        if analysis.specificity >= 3:
            return 4
        if analysis.specificity >= 1:
            return 3
        return 2
    return 1


def score_framework_usage(step: str, step_responses: Dict[str, str]) -> int:
    """
    5 if this step's answer neither contains nor is contained in another step's answer, else 1.

    Very short answers made of generic words can be flagged as duplicates; that is
    an accepted false positive of the containment check.
    """
    text = step_responses[step].strip().lower()
    for other_step, other_text in step_responses.items():
        if other_step == step:
            continue
        other = other_text.strip().lower()
        if text in other or other in text:
            return 1
    return 5


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def generate_local_feedback(request: FeedbackRequest) -> FeedbackResponse:
    """
    Build heuristic feedback for a complete request.

    Args:
        request (FeedbackRequest): A request whose steps all have answers. Steps are
            read in the framework's order; extra keys in step_responses are ignored.

    Returns:
        FeedbackResponse: Deterministic feedback. Identical requests always produce
            identical responses.
    """
    steps = [step for step in request.required_steps() if step in request.step_responses]
    if not steps:
        # Unknown framework: score whatever answers were given.
        steps = list(request.step_responses.keys())
    responses = {step: request.step_responses[step] for step in steps}

    totals = {criterion: 0 for criterion in CRITERIA_WEIGHTS}
    strengths: List[str] = []
    improvements: List[str] = []

    for step in steps:
        text = responses[step]
        analysis = analyze_content(text, request.category)
        scores = StepScores(
            content_quality=score_content_quality(text),
            relevance=score_relevance(analysis),
            specificity=score_specificity(analysis),
            framework_usage=score_framework_usage(step, responses),
        )
        for criterion in totals:
            totals[criterion] += getattr(scores, criterion)

        if len(analysis.keyword_matches) >= KEYWORD_RICHNESS_THRESHOLD:
            strengths.append(f"Strong, relevant vocabulary in your {step} step")
        if analysis.has_examples:
            strengths.append(f"Good use of a concrete example in your {step} step")
        if len(text) < SHORT_RESPONSE_LENGTH:
            improvements.append(f"Expand your {step} step with more detail")
        if not analysis.has_examples:
            improvements.append(f"Add a specific example to your {step} step")

        logger.debug(f"[LOCAL] Step '{step}' scored {scores}")

    step_count = max(len(steps), 1)
    weighted = sum(
        (totals[criterion] / step_count) * weight
        for criterion, weight in CRITERIA_WEIGHTS.items()
    )
    overall_score = min(5, max(1, round_half_up(weighted)))

    if not strengths:
        strengths = [FALLBACK_STRENGTH.format(framework=request.framework_name or "answering")]
    if not improvements:
        improvements = [FALLBACK_IMPROVEMENT]

    if overall_score >= 4:
        example_improvement = EXAMPLE_IMPROVEMENT_STRONG
        interview_readiness = READINESS_READY
    elif overall_score >= 3:
        example_improvement = EXAMPLE_IMPROVEMENT_DEVELOPING
        interview_readiness = READINESS_ALMOST
    else:
        example_improvement = EXAMPLE_IMPROVEMENT_DEVELOPING
        interview_readiness = READINESS_NEEDS_PRACTICE

    logger.info(f"[LOCAL] Heuristic feedback generated with score {overall_score} across {len(steps)} steps")

    return FeedbackResponse(
        overall_score=overall_score,
        strengths=strengths[:MAX_LIST_ITEMS],
        areas_to_improve=improvements[:MAX_LIST_ITEMS],
        example_improvement=example_improvement,
        interview_readiness=interview_readiness,
    )
