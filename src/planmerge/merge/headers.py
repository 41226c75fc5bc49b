"""Header matching and row-label column detection."""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from .constants import (
    FALLBACK_ROW_LABEL_KEY,
    MATCH_THRESHOLD,
    PERIOD_ROW_LABEL_KEYS,
    ROW_LABEL_KEYWORDS,
)
from .text import calculate_similarity, normalize_label

logger = logging.getLogger(__name__)


@dataclass
class HeaderMatch:
    """Best existing header found for one imported header."""

    found: bool
    match: Optional[str]
    score: float


@dataclass
class RowLabelColumn:
    """Where an import keeps its row labels, and which key they belong to."""

    index: int  # Column index in the imported table
    key: str  # Normalized header text of that column
    label_key: str  # Row field holding the label, e.g. "day"


def find_matching_header(
    header: str,
    candidates: Sequence[str],
    threshold: float = MATCH_THRESHOLD,
) -> HeaderMatch:
    """
    Find the candidate most similar to a header.

    Only a strictly higher score replaces the current best, so the first
    candidate wins ties.
    """
    best_match: Optional[str] = None
    best_score = 0.0

    for candidate in candidates:
        score = calculate_similarity(header, candidate)
        if score > best_score and score >= threshold:
            best_score = score
            best_match = candidate

    return HeaderMatch(found=best_match is not None, match=best_match, score=best_score)


def create_header_mapping(
    new_headers: Sequence[str],
    existing_keys: Sequence[str],
) -> dict[int, Optional[str]]:
    """
    Map each imported header index to an existing column key, or None.

    Exact matches (after normalization) are assigned first, then fuzzy
    matches for whatever is left. Each existing key is claimed at most once,
    greedily in header order. Blank headers are never matched.
    """
    mapping: dict[int, Optional[str]] = {}
    used: set[str] = set()

    # First pass: exact matches
    for index, header in enumerate(new_headers):
        normalized = normalize_label(header)
        if not normalized:
            continue
        for key in existing_keys:
            if key not in used and normalize_label(key) == normalized:
                mapping[index] = key
                used.add(key)
                break

    # Second pass: fuzzy matches for remaining
    for index, header in enumerate(new_headers):
        if index in mapping:
            continue

        if not normalize_label(header):
            mapping[index] = None
            continue

        available = [key for key in existing_keys if key not in used]
        result = find_matching_header(header, available)

        if result.found:
            logger.debug(f"Header '{header}' fuzzy-matched '{result.match}' ({result.score:.2f})")
            mapping[index] = result.match
            used.add(result.match)
        else:
            mapping[index] = None

    return dict(sorted(mapping.items()))


def row_label_key_for_period(period_type: Any) -> str:
    """Return the row field that labels rows for a period type."""
    value = getattr(period_type, "value", period_type)
    return PERIOD_ROW_LABEL_KEYS.get(str(value or "").lower(), FALLBACK_ROW_LABEL_KEY)


def detect_row_label_column(new_headers: Sequence[str], period_type: Any) -> RowLabelColumn:
    """
    Find the imported column that holds row labels.

    The first header containing "stage", "day", "phase" or "section" is
    used; without one, the first column is.
    """
    index = 0
    for i, header in enumerate(new_headers):
        normalized = normalize_label(header)
        if any(keyword in normalized for keyword in ROW_LABEL_KEYWORDS):
            index = i
            break

    key = normalize_label(new_headers[index]) if new_headers else ""
    return RowLabelColumn(
        index=index,
        key=key,
        label_key=row_label_key_for_period(period_type),
    )
