"""Label normalization and similarity scoring."""

import re
from typing import Any

from .constants import CONTAINMENT_SCORE, MIN_PARTIAL_SCORE

_WHITESPACE = re.compile(r"\s+")


def normalize_label(value: Any) -> str:
    """Lower-case, trim and strip all whitespace from a header or row label."""
    if not value:
        return ""
    return _WHITESPACE.sub("", str(value).lower().strip())


def calculate_similarity(first: Any, second: Any) -> float:
    """
    Score how alike two labels are, from 0.0 to 1.0.

    Rules are applied in order and the first one that applies wins:

    1. Equal after normalization: 1.0
    2. One contains the other: 0.8, so exact matches always rank higher
    3. Longest prefix of the shorter label found anywhere in the longer one,
       as a fraction of the shorter label's length. Ratios under 0.5 score 0.

    When both labels have the same length the second one is the "shorter".
    """
    s1 = normalize_label(first)
    s2 = normalize_label(second)

    if s1 == s2:
        return 1.0

    if s2 in s1 or s1 in s2:
        return CONTAINMENT_SCORE

    if len(s1) < len(s2):
        shorter, longer = s1, s2
    else:
        shorter, longer = s2, s1

    match_length = 0
    for length in range(1, len(shorter) + 1):
        if shorter[:length] not in longer:
            break
        match_length = length

    similarity = match_length / len(shorter)
    return similarity if similarity >= MIN_PARTIAL_SCORE else 0.0
