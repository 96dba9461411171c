"""Builders shared by the grading test cases."""

from __future__ import annotations

import sys
from pathlib import Path

BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from gradecore.grading.models import ScoreRecord  # noqa: E402


def record(component, score, max_score, *, item=1, term="midterm", schedule="SCH-1",
           student="2024-0001", subject_code=None):
    return ScoreRecord(
        student_id=student,
        schedule_id=schedule,
        term=term,
        component=component,
        item_number=item,
        score=score,
        max_score=max_score,
        subject_code=subject_code,
    )


def lecture_term(quiz_pct, exam_pct, *, term="midterm", schedule="SCH-1", subject_code=None):
    """A LECTURE term with one quiz and one exam, both out of 100."""

    return [
        record("Quiz", quiz_pct, 100, term=term, schedule=schedule, subject_code=subject_code),
        record("Exam", exam_pct, 100, term=term, schedule=schedule, subject_code=subject_code),
    ]
