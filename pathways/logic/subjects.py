"""
Subject name helpers

Case-insensitive, alias-aware lookups over a student's subjects and marks.
"""

import math
from typing import Any, Iterable, List, Mapping, Optional

from .constants import SUBJECT_ALIASES, MATHEMATICS


def normalize(value: str) -> str:
    return value.strip().lower()


def as_percentage(value: Any) -> Optional[float]:
    """Coerce a mark to a float in [0, 100], or None when it is unusable."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or number < 0 or number > 100:
        return None
    return number


def spellings(subject: str) -> List[str]:
    """Every accepted spelling of ``subject`` (lower-case)."""
    key = normalize(subject)
    for canonical, aliases in SUBJECT_ALIASES.items():
        if key == normalize(canonical) or key in aliases:
            return aliases + [normalize(canonical)]
    return [key]


def has_subject(subjects: Iterable[str], subject: str) -> bool:
    wanted = set(spellings(subject))
    return any(normalize(s) in wanted for s in subjects)


def mark_for(marks: Mapping[str, float], subject: str) -> Optional[float]:
    """Look up a mark by subject name, honouring the alias table."""
    by_name = {normalize(name): mark for name, mark in marks.items()}
    for spelling in spellings(subject):
        if spelling in by_name:
            return by_name[spelling]
    return None


def student_mark(student, subject: str) -> Optional[float]:
    """
    A student's mark for ``subject``.

    Mathematics prefers the dedicated ``math_mark`` field and falls back
    to the marks table; every other subject reads the marks table only.
    """
    if normalize(subject) in spellings(MATHEMATICS) and student.math_mark is not None:
        return student.math_mark
    return mark_for(student.marks, subject)
