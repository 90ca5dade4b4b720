"""Fixed-capacity adjacency structures for the pair list.

The alphabet is capped at 26 labels, so the graph is stored as a 26×26
boolean matrix where cell ``(p, c)`` records that ``p`` is the parent of
``c``.  Capacity never depends on how many labels the input actually uses.

``to_networkx`` mirrors the matrix into a ``networkx.DiGraph`` for callers
that want to inspect or draw the structure.  NetworkX is imported lazily so
the validator itself stays dependency-free.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import TYPE_CHECKING, Any, Iterable, Iterator, List, Set, Tuple, TypeAlias

from .errors import ErrorCode, Outcome
from .labels import ALPHABET_SIZE, index_to_label, label_to_index
from .parser import ParsedPair

if TYPE_CHECKING:  # pragma: no cover - import is for type checking only
    import networkx as nx  # type: ignore[import-not-found,import-untyped]

    NxDiGraph: TypeAlias = nx.DiGraph
else:  # pragma: no cover - alias keeps runtime dependency optional
    NxDiGraph: TypeAlias = Any

logger = logging.getLogger(__name__)


class AdjacencyMatrix:
    """26×26 parent→child matrix with at most one entry per ordered pair."""

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: List[List[bool]] = [
            [False] * ALPHABET_SIZE for _ in range(ALPHABET_SIZE)
        ]

    def has_edge(self, parent: str, child: str) -> bool:
        return self._cells[label_to_index(parent)][label_to_index(child)]

    def add_edge(self, parent: str, child: str) -> bool:
        """Mark ``parent -> child``; return ``False`` if it was already present."""

        row = self._cells[label_to_index(parent)]
        column = label_to_index(child)
        if row[column]:
            return False
        row[column] = True
        return True

    def out_degree(self, parent: str) -> int:
        return sum(self._cells[label_to_index(parent)])

    def children(self, parent: str) -> Tuple[str, ...]:
        """Return the children of *parent* in ascending label order."""

        row = self._cells[label_to_index(parent)]
        return tuple(index_to_label(index) for index, flag in enumerate(row) if flag)

    def has_parent(self, label: str) -> bool:
        column = label_to_index(label)
        return any(row[column] for row in self._cells)

    def edges(self) -> Iterator[Tuple[str, str]]:
        """Yield every edge ordered by parent, then child."""

        for parent_index, row in enumerate(self._cells):
            for child_index, flag in enumerate(row):
                if flag:
                    yield index_to_label(parent_index), index_to_label(child_index)

    def edge_count(self) -> int:
        return sum(sum(row) for row in self._cells)


@dataclass(slots=True)
class TreeGraph:
    """Per-call working state: the adjacency matrix and the observed labels."""

    matrix: AdjacencyMatrix = field(default_factory=AdjacencyMatrix)
    nodes: Set[str] = field(default_factory=set)

    def add_pair(self, pair: ParsedPair) -> bool:
        """Insert *pair*, registering both endpoints; ``False`` on duplicates."""

        if not self.matrix.add_edge(pair.parent, pair.child):
            return False
        self.nodes.add(pair.parent)
        self.nodes.add(pair.child)
        return True

    def sorted_nodes(self) -> Tuple[str, ...]:
        return tuple(sorted(self.nodes))


def build_graph(pairs: Iterable[ParsedPair]) -> Outcome[TreeGraph]:
    """Insert *pairs* into a fresh :class:`TreeGraph`.

    The first repeated ``(parent, child)`` edge stops the build with
    :attr:`ErrorCode.DUPLICATE_PAIR`; later pairs are not inspected.
    """

    graph = TreeGraph()
    for pair in pairs:
        if not graph.add_pair(pair):
            logger.debug("Duplicate pair %s", pair)
            return Outcome.failure(ErrorCode.DUPLICATE_PAIR)
    logger.debug(
        "Built graph with %d nodes and %d edges",
        len(graph.nodes),
        graph.matrix.edge_count(),
    )
    return Outcome.success(graph)


def to_networkx(graph: TreeGraph) -> NxDiGraph:
    """Convert *graph* to a NetworkX ``DiGraph``.

    Nodes are added in label order so the export is deterministic.
    """

    try:
        import networkx as nx  # type: ignore[import-not-found]
    except ImportError as exc:  # pragma: no cover - exercised when missing
        raise ModuleNotFoundError(
            "NetworkX is required for graph export. Install it via 'pip install networkx'."
        ) from exc

    nx_graph = nx.DiGraph()
    for node in graph.sorted_nodes():
        nx_graph.add_node(node)
    for parent, child in graph.matrix.edges():
        nx_graph.add_edge(parent, child)
    return nx_graph


__all__ = [
    "AdjacencyMatrix",
    "TreeGraph",
    "build_graph",
    "to_networkx",
]
