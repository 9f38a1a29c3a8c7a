"""
Description:
Signals extracted from a single free-text answer by the content analyzer.

Dependencies:
- pydantic: For data validation and settings management.

Author: @kcaparas1630
"""
from enum import Enum
from typing import FrozenSet
from pydantic import BaseModel, Field


class Sentiment(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    MIXED = "mixed"
    NEUTRAL = "neutral"


class ContentAnalysis(BaseModel):
    keyword_matches: FrozenSet[str] = Field(default_factory=frozenset, description="Category keywords found in the answer")
    sentiment: Sentiment = Field(default=Sentiment.NEUTRAL, description="Overall tone of the answer")
    has_examples: bool = Field(default=False, description="True if the answer introduces a concrete example")
    specificity: int = Field(default=0, ge=0, description="Digits, month names and capitalized words found")
    learning_signals: int = Field(default=0, ge=0, description="Learning-oriented words found; not used for sentiment")
