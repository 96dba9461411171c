"""Per-component sub-scores and term weighting."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from .models import ScoreRecord, TermResult
from .normalizer import normalize_component
from .scale import scale_lookup
from .weights import (
    EXAM_COMPONENT,
    FIRST_GRADED_ITEM,
    SUM_ALL_ITEMS,
    ComponentWeight,
    weight_table_for,
)

logger = logging.getLogger(__name__)


def graded_items(items: Iterable[ScoreRecord]) -> List[ScoreRecord]:
    """Return the items that carry both a score and a max score."""

    return [item for item in items if item.is_graded]


def component_percentage(
    items: Sequence[ScoreRecord], policy: str = SUM_ALL_ITEMS
) -> Optional[float]:
    """Percentage earned on one component, or ``None`` when nothing is graded.

    ``SUM_ALL_ITEMS`` pools every graded item (8/10 and 2/10 give 50, not the
    average of 80 and 20). ``FIRST_GRADED_ITEM`` scores only the lowest
    numbered graded item.
    """

    graded = graded_items(items)
    if not graded:
        return None

    if policy == FIRST_GRADED_ITEM:
        graded = sorted(graded, key=lambda item: item.item_number)[:1]
    elif policy != SUM_ALL_ITEMS:
        raise ValueError(f"Unknown aggregation policy: {policy!r}")

    total_score = sum(float(item.score) for item in graded)
    total_max = sum(float(item.max_score) for item in graded)
    if total_max == 0:
        return None

    return 100.0 * total_score / total_max


def group_by_component(records: Iterable[ScoreRecord]) -> Dict[str, List[ScoreRecord]]:
    groups: Dict[str, List[ScoreRecord]] = {}
    for record in records:
        groups.setdefault(normalize_component(record.component), []).append(record)
    return groups


def _find_group(
    groups: Dict[str, List[ScoreRecord]], entry: ComponentWeight
) -> List[ScoreRecord]:
    for name in entry.group_names:
        group = groups.get(name)
        if group:
            return group
    return []


def compute_term(records: Iterable[ScoreRecord], class_type: str | None) -> TermResult:
    """Weighted term percentage and scale grade for one student's term.

    Components without graded items add nothing to the total but do not void
    the term; the term is ungraded only when no component has a graded item.
    """

    groups = group_by_component(records)
    table = weight_table_for(class_type)

    total = 0.0
    class_standing = 0.0
    exam_grade = 0.0
    has_valid_grade = False
    components: Dict[str, Optional[float]] = {}

    for entry in table:
        percentage = component_percentage(_find_group(groups, entry), entry.policy)
        components[entry.name] = percentage
        if percentage is None:
            continue

        weighted = entry.weight * percentage
        total += weighted
        if entry.name == EXAM_COMPONENT:
            exam_grade += weighted
        else:
            class_standing += weighted
        has_valid_grade = True

    if not has_valid_grade:
        logger.debug("No graded components for class type %s", class_type)
        return TermResult(components=components)

    scale_grade = scale_lookup(total)
    logger.debug(
        "Term computed for class type %s: percentage=%.2f scale=%.2f",
        class_type,
        total,
        scale_grade,
    )
    return TermResult(
        percentage=total,
        scale_grade=scale_grade,
        class_standing=class_standing,
        exam_grade=exam_grade,
        components=components,
    )


__all__ = [
    "graded_items",
    "component_percentage",
    "group_by_component",
    "compute_term",
]
