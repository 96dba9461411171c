"""Sample data used by scripts/seed.py."""

from __future__ import annotations

import sys
import unittest

from _helpers import BACKEND_DIR

ROOT_DIR = BACKEND_DIR.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from gradecore.db import score_record_from_document  # noqa: E402
from gradecore.grading import summarize_records  # noqa: E402
from scripts.seed import read_seed_file, validate_seed_data  # noqa: E402


class SeedDataTestCase(unittest.TestCase):
    def test_bundled_seed_file_is_valid(self) -> None:
        data = read_seed_file()
        self.assertEqual({"schedules", "scores"}, set(data))
        self.assertTrue(data["scores"])

    def test_seeded_lecture_lab_offering(self) -> None:
        data = read_seed_file()
        schedule = next(s for s in data["schedules"] if s["_id"] == "SCH-101")
        records = [
            score_record_from_document(doc)
            for doc in data["scores"]
            if doc["schedule_id"] == "SCH-101"
        ]

        result = summarize_records(records, schedule["class_type"])

        self.assertAlmostEqual(76.4167, result.midterm.percentage, places=3)
        self.assertEqual(2.75, result.midterm.scale_grade)
        self.assertEqual("COMPLETE", result.status)

    def test_rejects_unknown_collections(self) -> None:
        with self.assertRaises(ValueError):
            validate_seed_data({"students": []})

    def test_rejects_incomplete_scores(self) -> None:
        with self.assertRaises(ValueError):
            validate_seed_data({"scores": [{"student_id": "s1", "term": "midterm"}]})

    def test_rejects_unknown_terms(self) -> None:
        score = {
            "student_id": "s1",
            "schedule_id": "SCH-1",
            "term": "prelim",
            "component": "Quiz",
        }
        with self.assertRaises(ValueError):
            validate_seed_data({"scores": [score]})

    def test_rejects_non_object(self) -> None:
        with self.assertRaises(ValueError):
            validate_seed_data([])


if __name__ == "__main__":
    unittest.main()
