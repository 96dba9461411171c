"""Offering summaries: two terms folded into one overall grade."""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from .calculator import compute_term
from .models import (
    COMPLETE,
    FINAL,
    MIDTERM,
    PARTIAL,
    UNGRADED,
    OfferingSummary,
    OverallResult,
    ScoreRecord,
    SummaryResult,
    TermResult,
)
from .scale import round_to_valid_grade
from .weights import resolve_class_type


def grade_status(midterm: TermResult, final: TermResult) -> str:
    resolved = sum(1 for term in (midterm, final) if term.scale_grade is not None)
    if resolved == 2:
        return COMPLETE
    if resolved == 1:
        return PARTIAL
    return UNGRADED


def _overall(midterm: TermResult, final: TermResult) -> Optional[OverallResult]:
    # A single finished term must never look like a final grade.
    if midterm.scale_grade is None or final.scale_grade is None:
        return None

    scale_grade = (midterm.scale_grade + final.scale_grade) / 2
    percentage: Optional[float] = None
    if midterm.percentage is not None and final.percentage is not None:
        percentage = (midterm.percentage + final.percentage) / 2

    return OverallResult(
        scale_grade=scale_grade,
        percentage=percentage,
        rounded_grade=round_to_valid_grade(scale_grade),
    )


def summarize(
    midterm_records: Iterable[ScoreRecord],
    final_records: Iterable[ScoreRecord],
    class_type: str | None,
) -> SummaryResult:
    resolved_type = resolve_class_type(class_type)
    midterm = compute_term(midterm_records, resolved_type)
    final = compute_term(final_records, resolved_type)

    return SummaryResult(
        class_type=resolved_type,
        midterm=midterm,
        final=final,
        overall=_overall(midterm, final),
        status=grade_status(midterm, final),
    )


def split_by_term(
    records: Iterable[ScoreRecord],
) -> Tuple[List[ScoreRecord], List[ScoreRecord]]:
    """Split rows into midterm and final lists; other term labels are dropped."""

    midterm: List[ScoreRecord] = []
    final: List[ScoreRecord] = []
    for record in records:
        term = str(record.term or "").strip().lower()
        if term == MIDTERM:
            midterm.append(record)
        elif term == FINAL:
            final.append(record)
    return midterm, final


def summarize_records(
    records: Iterable[ScoreRecord], class_type: str | None
) -> SummaryResult:
    midterm, final = split_by_term(records)
    return summarize(midterm, final, class_type)


def summarize_student(
    records: Iterable[ScoreRecord],
    class_types: Mapping[str, str | None],
    subject_codes: Mapping[str, str | None] | None = None,
) -> List[OfferingSummary]:
    """Summaries for every offering in one student's rows, ordered by schedule."""

    by_schedule: Dict[str, List[ScoreRecord]] = {}
    for record in records:
        by_schedule.setdefault(record.schedule_id, []).append(record)

    subject_codes = subject_codes or {}
    offerings: List[OfferingSummary] = []
    for schedule_id in sorted(by_schedule):
        rows = by_schedule[schedule_id]
        subject_code = subject_codes.get(schedule_id)
        if subject_code is None:
            subject_code = next(
                (row.subject_code for row in rows if row.subject_code), None
            )
        offerings.append(
            OfferingSummary(
                schedule_id=schedule_id,
                subject_code=subject_code,
                summary=summarize_records(rows, class_types.get(schedule_id)),
            )
        )
    return offerings


__all__ = [
    "grade_status",
    "summarize",
    "split_by_term",
    "summarize_records",
    "summarize_student",
]
