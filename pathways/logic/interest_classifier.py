"""
Interest Classifier

Maps free-text career-interest statements to category tags using the
static keyword table in constants. Matching is on whole words, so short
keywords such as "it" only fire on the word itself.
"""

import re
from typing import List, Optional

from .constants import INTEREST_KEYWORDS

_WORD_RE = re.compile(r"[a-z]+")


def _tokenize(text: str) -> List[str]:
    return _WORD_RE.findall(text.lower())


def _contains_phrase(tokens: List[str], phrase: str) -> bool:
    words = phrase.split()
    if len(words) == 1:
        return words[0] in tokens
    width = len(words)
    return any(tokens[i:i + width] == words for i in range(len(tokens) - width + 1))


def classify_interests(text: Optional[str]) -> List[str]:
    """
    Tag a free-text interest statement with career categories.

    Args:
        text: Student's career interests, e.g. "I like computers and law"

    Returns:
        Category tags in keyword-table order, without duplicates
    """
    if not text:
        return []

    tokens = _tokenize(text)
    if not tokens:
        return []

    return [
        category
        for category, keywords in INTEREST_KEYWORDS.items()
        if any(_contains_phrase(tokens, keyword) for keyword in keywords)
    ]
