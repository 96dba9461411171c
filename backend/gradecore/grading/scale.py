"""Percentage to scale grade conversion (1.00 best, 3.00 passing, 5.00 failed)."""

from __future__ import annotations

from typing import List, Tuple

SCALE_BANDS: Tuple[Tuple[float, float], ...] = (
    (97.0, 1.00),
    (94.0, 1.25),
    (91.0, 1.50),
    (88.0, 1.75),
    (85.0, 2.00),
    (82.0, 2.25),
    (79.0, 2.50),
    (76.0, 2.75),
    (75.0, 3.00),
)

PASSING_GRADE = 3.00
FAILING_GRADE = 5.00

VALID_GRADES: Tuple[float, ...] = tuple(grade for _, grade in SCALE_BANDS) + (
    FAILING_GRADE,
)


def scale_lookup(percentage: float) -> float:
    """Map a 0-100 percentage onto the grading scale.

    Each band includes its lower bound; anything under 75 fails.
    """

    for threshold, grade in SCALE_BANDS:
        if percentage >= threshold:
            return grade
    return FAILING_GRADE


def round_to_valid_grade(value: float) -> float:
    """Snap an averaged scale value onto the closest valid grade.

    Values past 3.00 are failing averages and always become 5.00. Ties go to
    the lower (better) grade.
    """

    if value in VALID_GRADES:
        return value
    if value > PASSING_GRADE:
        return FAILING_GRADE

    candidates: List[float] = sorted(VALID_GRADES)
    nearest = candidates[0]
    min_diff = abs(value - nearest)
    for grade in candidates[1:]:
        diff = abs(value - grade)
        if diff < min_diff:
            nearest = grade
            min_diff = diff
    return nearest


def is_passing(scale_grade: float | None) -> bool | None:
    if scale_grade is None:
        return None
    return scale_grade <= PASSING_GRADE


__all__ = [
    "SCALE_BANDS",
    "PASSING_GRADE",
    "FAILING_GRADE",
    "VALID_GRADES",
    "scale_lookup",
    "round_to_valid_grade",
    "is_passing",
]
