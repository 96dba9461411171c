"""Cross-offering academic standing.

NSTP offerings are graded on their own but never count toward a student's
general average.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from .models import OfferingSummary
from .scale import round_to_valid_grade


def is_nstp_subject(subject_code: str | None) -> bool:
    if not subject_code:
        return False
    return "NSTP" in str(subject_code).upper()


@dataclass(frozen=True)
class AcademicStanding:
    general_average: Optional[float] = None
    rounded_average: Optional[float] = None
    counted: List[str] = field(default_factory=list)
    excluded: List[str] = field(default_factory=list)
    incomplete: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        return {
            "general_average": self.general_average,
            "rounded_average": self.rounded_average,
            "counted": list(self.counted),
            "excluded": list(self.excluded),
            "incomplete": list(self.incomplete),
        }


def academic_standing(offerings: Iterable[OfferingSummary]) -> AcademicStanding:
    counted: List[str] = []
    excluded: List[str] = []
    incomplete: List[str] = []
    grades: List[float] = []

    for offering in offerings:
        if is_nstp_subject(offering.subject_code):
            excluded.append(offering.schedule_id)
            continue

        overall = offering.summary.overall
        if overall is None:
            incomplete.append(offering.schedule_id)
            continue

        counted.append(offering.schedule_id)
        grades.append(overall.scale_grade)

    if not grades:
        return AcademicStanding(counted=counted, excluded=excluded, incomplete=incomplete)

    average = sum(grades) / len(grades)
    return AcademicStanding(
        general_average=round(average, 2),
        rounded_average=round_to_valid_grade(average),
        counted=counted,
        excluded=excluded,
        incomplete=incomplete,
    )


__all__ = ["AcademicStanding", "is_nstp_subject", "academic_standing"]
