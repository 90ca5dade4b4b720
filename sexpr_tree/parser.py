"""Tokenizer for parent/child pair lists such as ``"(A,B) (B,C)"``.

Every group occupies exactly five characters, ``(X,Y)``, and consecutive
groups are separated by a single space.  The scanner therefore walks the input
in fixed strides of six characters instead of tokenising it: a group whose
parent label sits at index ``i`` must have its opening brace at ``i - 1``, the
comma at ``i + 1``, the child label at ``i + 2``, the closing brace at
``i + 3`` and, unless it is the last group, the separator at ``i + 4``.

Only lexical shape is checked here.  Duplicate edges, degree limits, roots and
cycles are the business of the later pipeline stages.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterable, List, Tuple

from .errors import ErrorCode, Outcome
from .labels import is_label

logger = logging.getLogger(__name__)

MIN_INPUT_LENGTH = 5
GROUP_WIDTH = 5
GROUP_STRIDE = GROUP_WIDTH + 1

PairList = Tuple["ParsedPair", ...]


@dataclass(frozen=True, slots=True)
class ParsedPair:
    """A single ``(parent, child)`` edge extracted from the input."""

    parent: str
    child: str

    def __post_init__(self) -> None:
        if not is_label(self.parent) or not is_label(self.child):
            raise ValueError(
                f"Pair labels must be uppercase letters: ({self.parent!r}, {self.child!r})"
            )

    def __str__(self) -> str:
        return f"({self.parent},{self.child})"


def _read_group(text: str, start: int) -> ParsedPair | None:
    """Return the pair whose parent label sits at *start* or ``None``."""

    if start + 3 >= len(text):
        return None
    open_brace = text[start - 1]
    parent = text[start]
    comma = text[start + 1]
    child = text[start + 2]
    close_brace = text[start + 3]
    if start + 4 < len(text):
        separator = text[start + 4]
        # Trailing characters after the last group are not a separator.
        if start + GROUP_STRIDE >= len(text):
            return None
    else:
        separator = " "

    if (
        open_brace != "("
        or comma != ","
        or close_brace != ")"
        or separator != " "
        or not is_label(parent)
        or not is_label(child)
    ):
        return None
    return ParsedPair(parent, child)


def parse_pairs(text: object) -> Outcome[PairList]:
    """Split *text* into its ordered ``(parent, child)`` pairs.

    Parameters
    ----------
    text:
        Raw pair list.  ``None`` and other non-string values are rejected the
        same way as malformed strings.

    Returns
    -------
    Outcome
        The parsed pairs in input order, or :attr:`ErrorCode.INVALID_FORMAT`.
    """

    if not isinstance(text, str) or len(text) < MIN_INPUT_LENGTH:
        logger.debug("Rejecting input shorter than %d characters", MIN_INPUT_LENGTH)
        return Outcome.failure(ErrorCode.INVALID_FORMAT)

    pairs: List[ParsedPair] = []
    for start in range(1, len(text), GROUP_STRIDE):
        pair = _read_group(text, start)
        if pair is None:
            logger.debug("Malformed group at offset %d in %r", start - 1, text)
            return Outcome.failure(ErrorCode.INVALID_FORMAT)
        pairs.append(pair)

    logger.debug("Parsed %d pairs", len(pairs))
    return Outcome.success(tuple(pairs))


def format_pairs(pairs: Iterable[ParsedPair | Tuple[str, str]]) -> str:
    """Render *pairs* in the grammar accepted by :func:`parse_pairs`."""

    groups: List[str] = []
    for pair in pairs:
        if not isinstance(pair, ParsedPair):
            parent, child = pair
            pair = ParsedPair(parent, child)
        groups.append(str(pair))
    return " ".join(groups)


__all__ = [
    "GROUP_STRIDE",
    "MIN_INPUT_LENGTH",
    "ParsedPair",
    "format_pairs",
    "parse_pairs",
]
