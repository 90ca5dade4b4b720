"""End-to-end validation of parent/child pair lists.

The pipeline runs five stages strictly in order and stops at the first
failure:

1. ``parse_pairs`` – lexical shape (``E1``).
2. ``build_graph`` – duplicate edges (``E2``).
3. ``check_degree`` – at most two children per node (``E3``).
4. ``find_root`` – exactly one label without a parent (``E4``).
5. ``detect_cycle`` – the structure is a tree below that root (``E5``).

Accepted inputs are rendered with ``canonicalize``.  Three entry points share
the same run:

* ``validate_s_expression`` returns the canonical string or the error code
  and never raises.
* ``analyse_s_expression`` returns a :class:`ValidationReport` with
  diagnostics for tooling such as the CLI.
* ``require_canonical`` raises :class:`SExpressionError` on rejection.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Dict, Optional

from .canonical import TreeNode, build_tree, canonicalize
from .cycles import detect_cycle
from .errors import ErrorCode, SExpressionError
from .graph import TreeGraph, build_graph
from .parser import parse_pairs
from .validation import check_degree, find_root

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationReport:
    """Outcome of validating one expression."""

    expression: object
    canonical: Optional[str] = None
    error: Optional[ErrorCode] = None
    root: Optional[str] = None
    node_count: int = 0
    edge_count: int = 0
    tree: Optional[TreeNode] = None

    @property
    def is_valid(self) -> bool:
        return self.error is None

    @property
    def output(self) -> str:
        """The canonical string, or the error code when rejected."""

        if self.error is not None:
            return self.error.value
        assert self.canonical is not None  # pragma: no cover - set on success
        return self.canonical

    def to_dict(self) -> Dict[str, object]:
        return {
            "expression": self.expression if isinstance(self.expression, str) else None,
            "output": self.output,
            "valid": self.is_valid,
            "error": self.error.value if self.error is not None else None,
            "error_description": (
                self.error.description if self.error is not None else None
            ),
            "root": self.root,
            "node_count": self.node_count,
            "edge_count": self.edge_count,
        }

    def summary(self) -> str:
        if self.is_valid:
            return (
                f"Accepted {self.node_count} nodes rooted at {self.root}: {self.canonical}"
            )
        assert self.error is not None  # pragma: no cover - checked above
        return f"Rejected with {self.error.value} ({self.error.description})"


def _rejected(
    expression: object, error: ErrorCode, graph: Optional[TreeGraph] = None
) -> ValidationReport:
    logger.info("Expression %r rejected with %s", expression, error.value)
    if graph is None:
        return ValidationReport(expression=expression, error=error)
    return ValidationReport(
        expression=expression,
        error=error,
        node_count=len(graph.nodes),
        edge_count=graph.matrix.edge_count(),
    )


def analyse_s_expression(expression: object) -> ValidationReport:
    """Run every stage over *expression* and describe the result."""

    parsed = parse_pairs(expression)
    if parsed.error is not None:
        return _rejected(expression, parsed.error)

    built = build_graph(parsed.unwrap())
    if built.error is not None:
        return _rejected(expression, built.error)
    graph = built.unwrap()

    degree = check_degree(graph)
    if degree.error is not None:
        return _rejected(expression, degree.error, graph)

    rooted = find_root(graph)
    if rooted.error is not None:
        return _rejected(expression, rooted.error, graph)
    root = rooted.unwrap()

    acyclic = detect_cycle(graph, root)
    if acyclic.error is not None:
        return _rejected(expression, acyclic.error, graph)

    canonical = canonicalize(graph, root)
    logger.info("Expression %r accepted as %s", expression, canonical)
    return ValidationReport(
        expression=expression,
        canonical=canonical,
        root=root,
        node_count=len(graph.nodes),
        edge_count=graph.matrix.edge_count(),
        tree=build_tree(graph, root),
    )


def validate_s_expression(expression: object) -> str:
    """Return the canonical form of *expression* or its error code.

    Examples
    --------
    >>> validate_s_expression("(A,B) (A,C) (B,D) (C,E)")
    '(A(B(D))(C(E)))'
    >>> validate_s_expression("(A,B) (B,C) (B,C)")
    'E2'
    """

    return analyse_s_expression(expression).output


def require_canonical(expression: object) -> str:
    """Return the canonical form or raise :class:`SExpressionError`."""

    report = analyse_s_expression(expression)
    if report.error is not None:
        raise SExpressionError(report.error)
    assert report.canonical is not None  # pragma: no cover - set on success
    return report.canonical


__all__ = [
    "ValidationReport",
    "analyse_s_expression",
    "require_canonical",
    "validate_s_expression",
]
