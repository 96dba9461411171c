"""Page and sort query parameter parsing."""

from __future__ import annotations

import unittest

from _helpers import BACKEND_DIR  # noqa: F401
from pymongo import ASCENDING, DESCENDING

from gradecore.routes.grades import RECORD_SORT_FIELDS
from gradecore.utils.paging import PagingParamError, parse_paging_params


def _parse(args):
    return parse_paging_params(
        args, allowed_sort_fields=RECORD_SORT_FIELDS, default_sort="term"
    )


class ParsePagingParamsTestCase(unittest.TestCase):
    def test_defaults(self) -> None:
        params = _parse({})

        self.assertEqual(1, params.page)
        self.assertEqual(50, params.page_size)
        self.assertEqual(0, params.skip)
        self.assertEqual("term", params.normalized_sort)
        self.assertEqual(
            [("term", ASCENDING), ("component", ASCENDING), ("item_number", ASCENDING)],
            params.sort,
        )

    def test_descending_sort_keeps_ascending_tie_breakers(self) -> None:
        params = _parse({"sort": "-item_number", "page": "3", "page_size": "20"})

        self.assertEqual(
            [("item_number", DESCENDING), ("term", ASCENDING), ("component", ASCENDING)],
            params.sort,
        )
        self.assertEqual("-item_number", params.normalized_sort)
        self.assertEqual(40, params.skip)

    def test_invalid_values(self) -> None:
        for args in (
            {"page": "0"},
            {"page": "first"},
            {"page_size": "500"},
            {"sort": "score"},
        ):
            with self.subTest(args=args):
                with self.assertRaises(PagingParamError):
                    _parse(args)

    def test_error_lists_sort_options(self) -> None:
        with self.assertRaises(PagingParamError) as ctx:
            _parse({"sort": "-score"})
        self.assertIn("-component", str(ctx.exception))

    def test_requires_sort_fields(self) -> None:
        with self.assertRaises(PagingParamError):
            parse_paging_params({}, allowed_sort_fields={}, default_sort="term")


if __name__ == "__main__":
    unittest.main()
