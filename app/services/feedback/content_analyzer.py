"""
Content Analyzer Module

Extracts lightweight signals from one free-text answer: which category keywords it
mentions, its overall sentiment, whether it introduces a concrete example, and a
coarse specificity count (numbers, month names and capitalized words).

The analysis is a pure function with no I/O. It never fails; empty input simply
produces an empty analysis.

Dependencies:
- app.constants.analysis_vocabulary: Keyword sets and sentiment word lists.
- app.constants.regex_patterns: Precompiled example/specificity patterns.
- app.schemas.feedback: ContentAnalysis result model.

Author: @kcaparas1630
"""

import re
from typing import FrozenSet, Optional, Tuple
from app.constants.analysis_vocabulary import (
    ALL_KEYWORDS,
    CATEGORY_KEYWORDS,
    LEARNING_WORDS,
    NEGATIVE_WORDS,
    POSITIVE_WORDS,
    normalize_category,
)
from app.constants.regex_patterns import REGEX_PATTERNS
from app.schemas.feedback.content_analysis import ContentAnalysis, Sentiment

WORD_PATTERN = re.compile(r"[a-z']+")


def keywords_for_category(category: Optional[str]) -> FrozenSet[str]:
    """Keyword set for a category, or the union of every set if the category is unknown."""
    return CATEGORY_KEYWORDS.get(normalize_category(category or ""), ALL_KEYWORDS)


def _count_tone_words(text: str) -> Tuple[int, int, int]:
    words = WORD_PATTERN.findall(text.lower())
    positive = sum(1 for word in words if word in POSITIVE_WORDS)
    negative = sum(1 for word in words if word in NEGATIVE_WORDS)
    learning = sum(1 for word in words if word in LEARNING_WORDS)
    return positive, negative, learning


def _sentiment_from_counts(positive: int, negative: int) -> Sentiment:
    if positive > negative:
        return Sentiment.POSITIVE
    if negative > positive:
        return Sentiment.NEGATIVE
    if positive > 0:
        return Sentiment.MIXED
    return Sentiment.NEUTRAL


def count_specificity(text: str) -> int:
    """Digit sequences + month names + capitalized words. A month written with a capital counts twice."""
    return (
        len(REGEX_PATTERNS['digit_sequence'].findall(text))
        + len(REGEX_PATTERNS['month_name'].findall(text))
        + len(REGEX_PATTERNS['capitalized_word'].findall(text))
    )


def analyze_content(text: str, category: Optional[str] = None) -> ContentAnalysis:
    """
    Analyze a single answer.

    Args:
        text (str): The candidate's answer for one framework step.
        category (Optional[str]): Question category used to choose the keyword set.

    Returns:
        ContentAnalysis: keyword matches, sentiment, example presence, specificity
            and the learning-word count.

    Example:
        >>> analysis = analyze_content("For example, our team shipped 3 fixes in May.", "Teamwork")
        >>> analysis.has_examples
        True
        >>> sorted(analysis.keyword_matches)
        ['team']
    """
    text = text or ""
    lowered = text.lower()

    keyword_matches = frozenset(
        keyword for keyword in keywords_for_category(category) if keyword in lowered
    )
    positive, negative, learning = _count_tone_words(text)

    return ContentAnalysis(
        keyword_matches=keyword_matches,
        # Learning words do not affect the verdict.
        sentiment=_sentiment_from_counts(positive, negative),
        has_examples=bool(REGEX_PATTERNS['example_phrase'].search(text)),
        specificity=count_specificity(text),
        learning_signals=learning,
    )
