"""Parsing of page, page_size and sort query parameters for score listings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping, Sequence, Tuple

from pymongo import ASCENDING, DESCENDING


class PagingParamError(ValueError):
    """Raised when pagination or sort query parameters are invalid."""


SortSpec = List[Tuple[str, int]]


@dataclass
class PagingParams:
    page: int
    page_size: int
    sort: SortSpec
    normalized_sort: str

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.page_size


def _parse_int_arg(
    raw_value: str | None,
    *,
    name: str,
    default: int,
    minimum: int | None = None,
    maximum: int | None = None,
) -> int:
    if raw_value in (None, ""):
        value = default
    else:
        try:
            value = int(raw_value)
        except (TypeError, ValueError):
            raise PagingParamError(f"{name} must be an integer.") from None

    if minimum is not None and value < minimum:
        raise PagingParamError(f"{name} must be ≥ {minimum}.")
    if maximum is not None and value > maximum:
        raise PagingParamError(f"{name} must be ≤ {maximum}.")

    return value


def _parse_sort_arg(
    raw_sort: str | None,
    *,
    allowed_fields: Mapping[str, Sequence[str]],
    default_sort: str,
) -> Tuple[SortSpec, str]:
    """Expand a ``field`` / ``-field`` sort key into a Mongo sort list.

    Each allowed key maps to one or more document fields; the direction applies
    to the first field and the rest act as ascending tie-breakers.
    """

    if not allowed_fields:
        raise PagingParamError("No sort fields configured.")

    sort_value = (raw_sort or default_sort).strip()
    direction = ASCENDING
    field_key = sort_value

    if sort_value.startswith("-"):
        direction = DESCENDING
        field_key = sort_value[1:]

    if field_key not in allowed_fields:
        options = [
            value
            for field in sorted(allowed_fields)
            for value in (field, f"-{field}")
        ]
        raise PagingParamError("sort must be one of: " + ", ".join(options) + ".")

    primary, *tie_breakers = allowed_fields[field_key]
    sort_spec: SortSpec = [(primary, direction)]
    sort_spec.extend((name, ASCENDING) for name in tie_breakers)

    normalized = f"-{field_key}" if direction == DESCENDING else field_key
    return sort_spec, normalized


def parse_paging_params(
    args: Mapping[str, str],
    *,
    default_page: int = 1,
    default_page_size: int = 50,
    max_page_size: int = 200,
    allowed_sort_fields: Mapping[str, Sequence[str]],
    default_sort: str,
) -> PagingParams:
    """Parse standard pagination parameters from a request args mapping."""

    page = _parse_int_arg(args.get("page"), name="page", default=default_page, minimum=1)
    page_size = _parse_int_arg(
        args.get("page_size"),
        name="page_size",
        default=default_page_size,
        minimum=1,
        maximum=max_page_size,
    )
    sort_spec, normalized_sort = _parse_sort_arg(
        args.get("sort"),
        allowed_fields=allowed_sort_fields,
        default_sort=default_sort,
    )

    return PagingParams(
        page=page,
        page_size=page_size,
        sort=sort_spec,
        normalized_sort=normalized_sort,
    )


__all__ = ["PagingParamError", "PagingParams", "parse_paging_params"]
