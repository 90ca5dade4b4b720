"""Structural checks: the binary degree bound and root uniqueness."""

from __future__ import annotations

import logging
from typing import Tuple

from .errors import ErrorCode, Outcome
from .graph import TreeGraph
from .labels import ALPHABET_SIZE, index_to_label

logger = logging.getLogger(__name__)

MAX_CHILDREN = 2


def check_degree(graph: TreeGraph) -> Outcome[None]:
    """Fail with :attr:`ErrorCode.TOO_MANY_CHILDREN` if any node has > 2 children.

    Every one of the 26 possible parents is scanned, not only the labels seen
    in the input.
    """

    for index in range(ALPHABET_SIZE):
        label = index_to_label(index)
        degree = graph.matrix.out_degree(label)
        if degree > MAX_CHILDREN:
            logger.debug("Node %s has %d children", label, degree)
            return Outcome.failure(ErrorCode.TOO_MANY_CHILDREN)
    return Outcome.success(None)


def root_candidates(graph: TreeGraph) -> Tuple[str, ...]:
    """Return every observed label without an incoming edge, sorted."""

    return tuple(
        label for label in graph.sorted_nodes() if not graph.matrix.has_parent(label)
    )


def find_root(graph: TreeGraph) -> Outcome[str]:
    """Return the single root candidate.

    Any candidate count other than one, including an empty node set, is
    reported as :attr:`ErrorCode.MULTIPLE_ROOTS`.
    """

    candidates = root_candidates(graph)
    if len(candidates) != 1:
        logger.debug("Expected one root, found %d: %s", len(candidates), candidates)
        return Outcome.failure(ErrorCode.MULTIPLE_ROOTS)
    return Outcome.success(candidates[0])


__all__ = ["MAX_CHILDREN", "check_degree", "find_root", "root_candidates"]
