"""
Page-Number Recognizer
======================
Recovers the printed page number of a page from its first and last lines.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Optional

logger = logging.getLogger(__name__)

# Lines inspected at each end of a page segment
BOUNDARY_LINES = 3


def _first_group(match: re.Match) -> int:
    return int(match.group(1))


# ─── Page Number Patterns ─────────────────────────────────────────────────────

# Ordered by priority; the first pattern matching a line decides its value.
# Each pattern must match the whole (stripped) line. Digits are ASCII only;
# \s also accepts Unicode spaces such as U+00A0 from PDF text.
PAGE_NUMBER_PATTERNS: list[tuple[re.Pattern, Callable[[re.Match], Optional[int]]]] = [
    (re.compile(r"^([0-9]+)$"), _first_group),                          # "12"
    (re.compile(r"^page\s+([0-9]+)$", re.IGNORECASE), _first_group),    # "page 12"
    (re.compile(r"^Page\s+([0-9]+)$"), _first_group),                   # "Page 12"
    (re.compile(r"^([0-9]+)\s*/\s*[0-9]+$"), _first_group),             # "12 / 40"
    (re.compile(r"^\(([0-9]+)\)$"), _first_group),                      # "(12)"
    (re.compile(r"^-\s*([0-9]+)\s*-$"), _first_group),                  # "- 12 -"
    (re.compile(r"^p\.\s*([0-9]+)$", re.IGNORECASE), _first_group),     # "p. 12"
]


def candidate_lines(segment: str) -> list[str]:
    """
    Return the lines inspected for a page number, in scan order.

    The first lines of the segment come first, then the last lines. On
    short segments the two blocks overlap.
    """
    lines = segment.split("\n")
    return lines[:BOUNDARY_LINES] + lines[-BOUNDARY_LINES:]


def match_page_number(line: str) -> Optional[int]:
    """Match a single line against the patterns, first match wins."""
    line = line.strip()
    for pattern, extract in PAGE_NUMBER_PATTERNS:
        match = pattern.match(line)
        if match:
            return extract(match)
    return None


def find_printed_page_number(segment: str) -> Optional[int]:
    """
    Find the printed page number of a page segment.

    Returns the value from the first candidate line that yields a number,
    or None when no candidate line matches any pattern.
    """
    for line in candidate_lines(segment):
        number = match_page_number(line)
        if number is not None:
            return number
    return None
