"""Component label normalization."""

from __future__ import annotations

from typing import Tuple

# Checked in order: exact matches first, then substring containment.
COMPONENT_SYNONYMS: Tuple[Tuple[str, str], ...] = (
    ("quiz", "quiz"),
    ("quizzes", "quiz"),
    ("lab", "laboratory"),
    ("laboratory", "laboratory"),
    ("laboratory activity", "laboratory"),
    ("olo", "olo"),
    ("online learning opportunity", "olo"),
    ("exam", "exam"),
    ("examination", "exam"),
    ("midterm", "exam"),
    ("final", "exam"),
    ("midterm exam", "exam"),
    ("final exam", "exam"),
    ("online course", "online course"),
    ("recitation", "recitation"),
    ("seatwork", "seatwork"),
)


def _clean_label(value: str | None) -> str:
    return str(value).strip().lower() if value is not None else ""


def normalize_component(raw_label: str | None) -> str:
    """Map a free-text component label onto its canonical name.

    Unknown labels come back lower-cased and trimmed so identical labels still
    group together.
    """

    label = _clean_label(raw_label)
    if not label:
        return label

    for pattern, canonical in COMPONENT_SYNONYMS:
        if label == pattern:
            return canonical

    for pattern, canonical in COMPONENT_SYNONYMS:
        if pattern in label:
            return canonical

    return label


__all__ = ["COMPONENT_SYNONYMS", "normalize_component"]
