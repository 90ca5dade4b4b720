"""Depth-first cycle detection from the validated root.

The traversal reports a cycle whenever it reaches a node it has already
visited.  Besides genuine cycles this also catches a node reachable along two
paths (two parents), which is just as fatal for a tree.

A node that the traversal never reaches is reported as a cycle too: the root
is the only label without a parent, so every node in a component detached
from it has a parent inside that component, and following parents through a
finite component must eventually loop.
"""

from __future__ import annotations

import logging
from typing import List

from .errors import ErrorCode, Outcome
from .graph import TreeGraph
from .labels import ALPHABET_SIZE, label_to_index

logger = logging.getLogger(__name__)


def _visit(graph: TreeGraph, node: str, visited: List[bool]) -> bool:
    """Return ``True`` when a revisit is found below *node*."""

    index = label_to_index(node)
    if visited[index]:
        logger.debug("Node %s reached twice", node)
        return True
    visited[index] = True
    for child in graph.matrix.children(node):
        if _visit(graph, child, visited):
            return True
    return False


def contains_cycle(graph: TreeGraph, root: str) -> bool:
    """Return ``True`` when *graph* is not a tree hanging off *root*."""

    visited = [False] * ALPHABET_SIZE
    if _visit(graph, root, visited):
        return True
    unreachable = [node for node in graph.sorted_nodes() if not visited[label_to_index(node)]]
    if unreachable:
        logger.debug("Nodes unreachable from %s: %s", root, unreachable)
        return True
    return False


def detect_cycle(graph: TreeGraph, root: str) -> Outcome[None]:
    """Stage wrapper around :func:`contains_cycle`."""

    if contains_cycle(graph, root):
        return Outcome.failure(ErrorCode.CONTAINS_CYCLE)
    return Outcome.success(None)


__all__ = ["contains_cycle", "detect_cycle"]
