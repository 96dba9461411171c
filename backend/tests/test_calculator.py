"""Component sub-scores and term weighting."""

from __future__ import annotations

import unittest

from _helpers import BACKEND_DIR, record  # noqa: F401

from gradecore.grading.calculator import component_percentage, compute_term
from gradecore.grading.weights import FIRST_GRADED_ITEM


class ComponentPercentageTestCase(unittest.TestCase):
    def test_empty_and_ungraded_groups(self) -> None:
        self.assertIsNone(component_percentage([]))
        self.assertIsNone(component_percentage([record("Quiz", None, 10)]))
        self.assertIsNone(component_percentage([record("Quiz", 8, None)]))

    def test_sums_rather_than_averages(self) -> None:
        items = [record("Quiz", 8, 10, item=1), record("Quiz", 2, 10, item=2)]
        self.assertAlmostEqual(50.0, component_percentage(items))

    def test_uneven_max_scores_are_pooled(self) -> None:
        items = [record("Quiz", 5, 5, item=1), record("Quiz", 10, 20, item=2)]
        self.assertAlmostEqual(60.0, component_percentage(items))

    def test_ungraded_items_are_skipped(self) -> None:
        items = [record("Quiz", 9, 10, item=1), record("Quiz", None, 10, item=2)]
        self.assertAlmostEqual(90.0, component_percentage(items))

    def test_zero_max_score_is_ungraded(self) -> None:
        self.assertIsNone(component_percentage([record("Quiz", 0, 0)]))

    def test_first_graded_item_policy(self) -> None:
        items = [
            record("Exam", 30, 60, item=3),
            record("Exam", None, 60, item=1),
            record("Exam", 50, 60, item=2),
        ]
        self.assertAlmostEqual(
            100 * 50 / 60, component_percentage(items, FIRST_GRADED_ITEM)
        )

    def test_first_graded_item_does_not_average(self) -> None:
        items = [record("Exam", 60, 60, item=1), record("Exam", 0, 60, item=2)]
        self.assertAlmostEqual(100.0, component_percentage(items, FIRST_GRADED_ITEM))

    def test_unknown_policy(self) -> None:
        with self.assertRaises(ValueError):
            component_percentage([record("Quiz", 1, 1)], "median")


class ComputeTermTestCase(unittest.TestCase):
    def test_lecture_lab_scenario(self) -> None:
        records = [
            record("Quiz", 8, 10, item=1),
            record("Quiz", 9, 10, item=2),
            record("Laboratory", 18, 20),
            record("OLO", None, 10),
            record("Exam", 55, 60),
        ]

        result = compute_term(records, "LECTURE+LAB")

        self.assertAlmostEqual(76.4167, result.percentage, places=3)
        self.assertEqual(2.75, result.scale_grade)
        self.assertAlmostEqual(39.75, result.class_standing)
        self.assertAlmostEqual(36.6667, result.exam_grade, places=3)
        self.assertAlmostEqual(85.0, result.components["quiz"])
        self.assertAlmostEqual(90.0, result.components["laboratory"])
        self.assertIsNone(result.components["olo"])

    def test_lecture_with_quiz_only_is_partial_not_null(self) -> None:
        result = compute_term([record("Quizzes", 17, 20)], "LECTURE")

        self.assertAlmostEqual(85.0 * 0.60, result.percentage)
        self.assertEqual(5.00, result.scale_grade)
        self.assertEqual(0.0, result.exam_grade)

    def test_no_graded_component(self) -> None:
        records = [record("Quiz", None, 10), record("Attendance", 10, 10)]

        result = compute_term(records, "LECTURE")

        self.assertIsNone(result.percentage)
        self.assertIsNone(result.scale_grade)
        self.assertFalse(result.is_graded)
        self.assertEqual({"quiz": None, "exam": None}, result.components)

    def test_empty_records(self) -> None:
        result = compute_term([], "MAJOR")
        self.assertIsNone(result.percentage)
        self.assertIsNone(result.scale_grade)

    def test_major_exam_label_feeds_exam_weight(self) -> None:
        result = compute_term([record("Major Exam", 48, 60)], "LECTURE")
        self.assertAlmostEqual(32.0, result.percentage)
        self.assertAlmostEqual(32.0, result.exam_grade)

    def test_major_class_type(self) -> None:
        records = [
            record("Quiz", 10, 10),
            record("Lab", 45, 50),
            record("OLO", 8, 10),
            record("Exam", 51, 60),
        ]

        result = compute_term(records, "MAJOR")

        self.assertAlmostEqual(88.5, result.percentage)
        self.assertEqual(1.75, result.scale_grade)

    def test_ojt_class_type(self) -> None:
        records = [
            record("Online Course", 40, 50),
            record("Recitation", 19, 20),
            record("Seatwork", 27, 30),
        ]

        result = compute_term(records, "OJT")

        self.assertAlmostEqual(86.0, result.percentage)
        self.assertEqual(2.00, result.scale_grade)
        self.assertEqual(0.0, result.exam_grade)

    def test_unrecognized_class_type_uses_lecture_weights(self) -> None:
        records = [record("Quiz", 10, 10), record("Exam", 60, 60), record("Lab", 0, 10)]

        fallback = compute_term(records, "THESIS")
        lecture = compute_term(records, "LECTURE")

        self.assertEqual(lecture, fallback)
        self.assertAlmostEqual(100.0, fallback.percentage)

    def test_components_outside_the_table_are_ignored(self) -> None:
        records = [record("Quiz", 10, 10), record("Laboratory", 0, 50)]
        result = compute_term(records, "LECTURE")
        self.assertAlmostEqual(60.0, result.percentage)

    def test_same_input_gives_same_result(self) -> None:
        records = [
            record("Quiz", 7, 10, item=1),
            record("quiz", 6, 10, item=2),
            record("Exam", 44, 60),
        ]
        self.assertEqual(compute_term(records, "NSTP"), compute_term(records, "NSTP"))


if __name__ == "__main__":
    unittest.main()
