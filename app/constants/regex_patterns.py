"""
Description:
This module contains precompiled regex patterns for answer analysis and for
pulling JSON out of free-form model output.

Dependencies:
- re: Python's built-in regular expression module for pattern matching.

Author: @kcaparas1630

"""

import re
from app.constants.analysis_vocabulary import MONTH_NAMES

# Compile regex patterns once for better performance
REGEX_PATTERNS = {
    'example_phrase': re.compile(
        r"\b(?:for example|for instance|such as|like when|specifically|in particular)\b",
        re.IGNORECASE,
    ),
    'digit_sequence': re.compile(r"\d+"),
    'month_name': re.compile(r"\b(?:" + "|".join(MONTH_NAMES) + r")\b", re.IGNORECASE),
    'capitalized_word': re.compile(r"\b[A-Z][a-z]+\b"),
    'think_block': re.compile(r"<think>.*?</think>", re.DOTALL | re.IGNORECASE),
    'think_tag': re.compile(r"</?think[^>]*>", re.IGNORECASE),
}
