"""
Description:
Word lists used by the content analyzer: per-category keyword sets and the
positive, negative and learning vocabularies used for sentiment.

Category keys are normalized (lowercase, no spaces, hyphens or underscores) so that
"Problem Solving", "problem-solving" and "problemSolving" resolve to the same set.

Author: @kcaparas1630
"""
from typing import Dict, FrozenSet

CATEGORY_KEYWORDS: Dict[str, FrozenSet[str]] = {
    "teamwork": frozenset({
        "team", "collaborat", "together", "colleague", "cooperat", "support",
        "partner", "cross-functional", "stakeholder", "shared", "helped",
    }),
    "problemsolving": frozenset({
        "problem", "solution", "solve", "analy", "root cause", "debug",
        "investigat", "approach", "resolve", "challenge", "fix",
    }),
    "leadership": frozenset({
        "lead", "led", "mentor", "guide", "decision", "responsib", "initiative",
        "delegat", "vision", "motivat", "ownership",
    }),
    "technical": frozenset({
        "system", "design", "architecture", "code", "implement", "deploy",
        "database", "api", "performance", "test", "scal",
    }),
    "communication": frozenset({
        "communicat", "present", "explain", "listen", "feedback", "discuss",
        "clarif", "align", "update", "meeting", "document",
    }),
}

ALL_KEYWORDS: FrozenSet[str] = frozenset().union(*CATEGORY_KEYWORDS.values())

POSITIVE_WORDS = frozenset({
    "success", "successful", "achieved", "improved", "increased", "delivered",
    "completed", "effective", "great", "proud", "excellent", "resolved",
})

NEGATIVE_WORDS = frozenset({
    "failed", "failure", "problem", "difficult", "conflict", "mistake",
    "issue", "struggled", "frustrated", "delay", "missed", "wrong",
})

LEARNING_WORDS = frozenset({
    "learned", "learning", "realized", "understood", "grew", "growth",
    "reflect", "lesson", "insight", "discovered",
})

MONTH_NAMES = (
    "january", "february", "march", "april", "may", "june", "july",
    "august", "september", "october", "november", "december",
)


def normalize_category(category: str) -> str:
    """Lowercase a category and drop separators so it can key CATEGORY_KEYWORDS."""
    if not category:
        return ""
    return "".join(ch for ch in category.lower() if ch not in " -_")
