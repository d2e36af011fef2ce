"""
Question Detector
=================
Collects the question markers ("Q1", "Q.2", "Question 3", "Q(4)") present
on a page and reduces them to a "<min>-<max>" range.
"""

from __future__ import annotations

import re
from typing import Optional

# ─── Question Patterns ────────────────────────────────────────────────────────

# Strict formats only. Patterns overlap ("Q 1" matches the first and the
# third); results are deduplicated by number. Word boundaries and digits
# are ASCII only, while \s also accepts Unicode spaces such as U+00A0.
_START = r"(?<![A-Za-z0-9_])"
_END = r"(?![A-Za-z0-9_])"

QUESTION_PATTERNS: list[re.Pattern] = [
    re.compile(_START + r"Q\s*([0-9]+)" + _END, re.IGNORECASE),         # Q1
    re.compile(_START + r"Q\.\s*([0-9]+)" + _END, re.IGNORECASE),       # Q.1
    re.compile(_START + r"Q\s+([0-9]+)" + _END, re.IGNORECASE),         # Q 1
    re.compile(_START + r"Question\s+([0-9]+)" + _END, re.IGNORECASE),  # Question 1
    re.compile(_START + r"Q\(\s*([0-9]+)\s*\)", re.IGNORECASE),        # Q(1)
]


def find_questions(text: str) -> list[int]:
    """
    Return the distinct question numbers found anywhere in ``text``.

    Every match of every pattern counts. The result is sorted ascending.
    """
    questions: set[int] = set()

    for pattern in QUESTION_PATTERNS:
        for match in pattern.finditer(text):
            questions.add(int(match.group(1)))

    return sorted(questions)


def question_range(question_starts: list[int]) -> Optional[str]:
    """
    Render the range of a page's question numbers.

    >>> question_range([3, 4, 7])
    '3-7'
    >>> question_range([5])
    '5-5'
    >>> question_range([]) is None
    True
    """
    if not question_starts:
        return None
    return f"{min(question_starts)}-{max(question_starts)}"
