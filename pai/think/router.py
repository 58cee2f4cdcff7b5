"""Keyword routing from a problem statement to a thinking mode.

Rule sets are checked in priority order and the first one with any match
wins.  Risk language comes first so it is never masked by a softer mode;
``council`` is the fallback.
"""

from __future__ import annotations

import logging
import re

from pai.think.models import ThinkMode

logger = logging.getLogger(__name__)

RED_TEAM_PATTERNS = [
    re.compile(r"\battack\b", re.IGNORECASE),
    re.compile(r"\bvulnerab", re.IGNORECASE),
    re.compile(r"\bsecurity\s+risk", re.IGNORECASE),
    re.compile(r"\bexploit", re.IGNORECASE),
    re.compile(r"\bthreat\b", re.IGNORECASE),
    re.compile(r"\bpenetrat", re.IGNORECASE),
]

FIRST_PRINCIPLES_PATTERNS = [
    re.compile(r"\bwhy\s+do\s+we\b", re.IGNORECASE),
    re.compile(r"\bassumptions?\b", re.IGNORECASE),
    re.compile(r"\bfundamental", re.IGNORECASE),
    re.compile(r"\bfrom\s+scratch\b", re.IGNORECASE),
    re.compile(r"\bfirst\s+principles?\b", re.IGNORECASE),
]

CREATIVE_PATTERNS = [
    re.compile(r"\bstuck\b", re.IGNORECASE),
    re.compile(r"\bnovel\b", re.IGNORECASE),
    re.compile(r"\blateral\b", re.IGNORECASE),
    re.compile(r"\bwhat\s+if\s+we\b", re.IGNORECASE),
    re.compile(r"\bunconventional", re.IGNORECASE),
    re.compile(r"\bwild\s+idea", re.IGNORECASE),
    re.compile(r"\bout\s+of\s+the\s+box", re.IGNORECASE),
]

# Priority order, highest first.
RULES: list[tuple[ThinkMode, list[re.Pattern[str]]]] = [
    (ThinkMode.RED_TEAM, RED_TEAM_PATTERNS),
    (ThinkMode.FIRST_PRINCIPLES, FIRST_PRINCIPLES_PATTERNS),
    (ThinkMode.BE_CREATIVE, CREATIVE_PATTERNS),
]

DEFAULT_MODE = ThinkMode.COUNCIL


def _matches_any(text: str, patterns: list[re.Pattern[str]]) -> bool:
    return any(p.search(text) for p in patterns)


def matches(problem: str) -> list[ThinkMode]:
    """Every mode whose rule set fires on *problem*, in priority order."""
    return [mode for mode, patterns in RULES if _matches_any(problem, patterns)]


def classify(problem: str) -> ThinkMode:
    """Pick the thinking mode for *problem*. Never fails."""
    hits = matches(problem)
    if not hits:
        return DEFAULT_MODE
    if len(hits) > 1:
        logger.debug("Rule sets %s all matched, %s wins on priority", hits, hits[0])
    return hits[0]
