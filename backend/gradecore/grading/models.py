"""Value types shared by the grade computation engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from .scale import is_passing

MIDTERM = "midterm"
FINAL = "final"
TERMS: Tuple[str, ...] = (MIDTERM, FINAL)

LECTURE = "LECTURE"
LECTURE_LAB = "LECTURE+LAB"
MAJOR = "MAJOR"
NSTP = "NSTP"
OJT = "OJT"
CLASS_TYPES: Tuple[str, ...] = (LECTURE, LECTURE_LAB, MAJOR, NSTP, OJT)

UNGRADED = "UNGRADED"
PARTIAL = "PARTIAL"
COMPLETE = "COMPLETE"


@dataclass(frozen=True)
class ScoreRecord:
    """One graded item for a student in a course offering."""

    student_id: str
    schedule_id: str
    term: str
    component: str
    item_number: int = 1
    score: Optional[float] = None
    max_score: Optional[float] = None
    subject_code: Optional[str] = None

    @property
    def is_graded(self) -> bool:
        return self.score is not None and self.max_score is not None


@dataclass(frozen=True)
class TermResult:
    percentage: Optional[float] = None
    scale_grade: Optional[float] = None
    class_standing: float = 0.0
    exam_grade: float = 0.0
    components: Dict[str, Optional[float]] = field(default_factory=dict)

    @property
    def is_graded(self) -> bool:
        return self.percentage is not None

    def to_dict(self) -> Dict[str, object]:
        return {
            "percentage": self.percentage,
            "scale_grade": self.scale_grade,
            "class_standing": self.class_standing,
            "exam_grade": self.exam_grade,
            "components": dict(self.components),
        }


@dataclass(frozen=True)
class OverallResult:
    """Average of two resolved terms.

    ``scale_grade`` is the plain mean of the two term scale grades and may fall
    between valid scale values; ``rounded_grade`` is the same value snapped to
    the grading scale for display.
    """

    scale_grade: float
    percentage: Optional[float]
    rounded_grade: float

    def to_dict(self) -> Dict[str, object]:
        return {
            "scale_grade": self.scale_grade,
            "percentage": self.percentage,
            "rounded_grade": self.rounded_grade,
            "passed": is_passing(self.rounded_grade),
        }


@dataclass(frozen=True)
class SummaryResult:
    class_type: str
    midterm: TermResult
    final: TermResult
    overall: Optional[OverallResult]
    status: str

    def to_dict(self) -> Dict[str, object]:
        return {
            "class_type": self.class_type,
            "midterm": self.midterm.to_dict(),
            "final": self.final.to_dict(),
            "overall": self.overall.to_dict() if self.overall else None,
            "status": self.status,
        }


@dataclass(frozen=True)
class OfferingSummary:
    schedule_id: str
    subject_code: Optional[str]
    summary: SummaryResult

    def to_dict(self) -> Dict[str, object]:
        payload = {"schedule_id": self.schedule_id, "subject_code": self.subject_code}
        payload.update(self.summary.to_dict())
        return payload


__all__ = [
    "MIDTERM",
    "FINAL",
    "TERMS",
    "LECTURE",
    "LECTURE_LAB",
    "MAJOR",
    "NSTP",
    "OJT",
    "CLASS_TYPES",
    "UNGRADED",
    "PARTIAL",
    "COMPLETE",
    "ScoreRecord",
    "TermResult",
    "OverallResult",
    "SummaryResult",
    "OfferingSummary",
]
