"""Per class type weight tables.

Each table is an ordered tuple of :class:`ComponentWeight` entries whose
weights add up to 1.0. The tables are built once at import time and exposed
through a read-only mapping.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from .models import LECTURE, LECTURE_LAB, MAJOR, NSTP, OJT

SUM_ALL_ITEMS = "sum_all_items"
FIRST_GRADED_ITEM = "first_graded_item"

EXAM_COMPONENT = "exam"


@dataclass(frozen=True)
class ComponentWeight:
    name: str
    weight: float
    policy: str = SUM_ALL_ITEMS
    aliases: Tuple[str, ...] = ()

    @property
    def group_names(self) -> Tuple[str, ...]:
        """Normalized group names this entry accepts, in preference order."""

        return (self.name,) + self.aliases


WeightTable = Tuple[ComponentWeight, ...]

_EXAM_40 = ComponentWeight(
    EXAM_COMPONENT, 0.40, policy=FIRST_GRADED_ITEM, aliases=("major exam",)
)
_EXAM_30 = ComponentWeight(
    EXAM_COMPONENT, 0.30, policy=FIRST_GRADED_ITEM, aliases=("major exam",)
)

_LECTURE_TABLE: WeightTable = (
    ComponentWeight("quiz", 0.60),
    _EXAM_40,
)

WEIGHT_TABLES: Mapping[str, WeightTable] = MappingProxyType(
    {
        LECTURE: _LECTURE_TABLE,
        LECTURE_LAB: (
            ComponentWeight("quiz", 0.15),
            ComponentWeight("laboratory", 0.30),
            ComponentWeight("olo", 0.15),
            _EXAM_40,
        ),
        MAJOR: (
            ComponentWeight("quiz", 0.15),
            ComponentWeight("laboratory", 0.40),
            ComponentWeight("olo", 0.15),
            _EXAM_30,
        ),
        NSTP: (
            ComponentWeight("quiz", 0.60),
            _EXAM_40,
        ),
        OJT: (
            ComponentWeight("online course", 0.50),
            ComponentWeight("recitation", 0.20),
            ComponentWeight("seatwork", 0.30),
        ),
    }
)

DEFAULT_CLASS_TYPE = LECTURE

_WHITESPACE_RE = re.compile(r"\s+")


def resolve_class_type(raw_class_type: str | None) -> str:
    """Return the known class type for ``raw_class_type``.

    Casing and whitespace are ignored (``"Lecture + Lab"`` is ``LECTURE+LAB``).
    Anything unrecognized resolves to ``LECTURE``.
    """

    if raw_class_type is None:
        return DEFAULT_CLASS_TYPE

    key = _WHITESPACE_RE.sub("", str(raw_class_type)).upper()
    if key in WEIGHT_TABLES:
        return key
    return DEFAULT_CLASS_TYPE


def weight_table_for(class_type: str | None) -> WeightTable:
    return WEIGHT_TABLES[resolve_class_type(class_type)]


__all__ = [
    "SUM_ALL_ITEMS",
    "FIRST_GRADED_ITEM",
    "EXAM_COMPONENT",
    "ComponentWeight",
    "WeightTable",
    "WEIGHT_TABLES",
    "DEFAULT_CLASS_TYPE",
    "resolve_class_type",
    "weight_table_for",
]
