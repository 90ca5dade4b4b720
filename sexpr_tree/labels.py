"""Node label helpers.

Labels are single uppercase ASCII letters.  Every component of the validator
addresses nodes through the ``0..25`` index produced by :func:`label_to_index`
so the adjacency structures can stay fixed-size.
"""

from __future__ import annotations

FIRST_LABEL = "A"
ALPHABET_SIZE = 26

_FIRST_ORDINAL = ord(FIRST_LABEL)


def is_label(value: object) -> bool:
    """Return ``True`` when *value* is a single ``A``..``Z`` character."""

    return (
        isinstance(value, str)
        and len(value) == 1
        and 0 <= ord(value) - _FIRST_ORDINAL < ALPHABET_SIZE
    )


def label_to_index(label: str) -> int:
    """Map *label* to its ``0..25`` index."""

    if not is_label(label):
        raise ValueError(f"Invalid node label: {label!r}")
    return ord(label) - _FIRST_ORDINAL


def index_to_label(index: int) -> str:
    """Map a ``0..25`` index back to its label."""

    if not isinstance(index, int) or isinstance(index, bool):
        raise TypeError("Label index must be an integer")
    if not 0 <= index < ALPHABET_SIZE:
        raise ValueError(f"Label index out of range: {index}")
    return chr(_FIRST_ORDINAL + index)


__all__ = [
    "ALPHABET_SIZE",
    "FIRST_LABEL",
    "index_to_label",
    "is_label",
    "label_to_index",
]
