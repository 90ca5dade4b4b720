"""Canonical nested-parenthesis form of a validated tree.

A node is written as ``(`` + label + children + ``)`` where the children are
emitted in ascending label order, so ``(A,C) (A,B)`` and ``(A,B) (A,C)`` both
become ``(A(B)(C))``.  Leaves collapse to ``(X)``.

Besides :func:`canonicalize`, which works directly on the adjacency matrix,
the module offers a small ``TreeNode`` model for callers that want to inspect
the result:

* ``build_tree`` – materialise a validated graph as ``TreeNode`` objects.
* ``parse_canonical`` – read a canonical string back into ``TreeNode`` form.
* ``tree_to_pairs`` – flatten a tree into the pair list grammar again.
* ``render_tree`` – indented top-down drawing, one node per line.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Set, Tuple

from .errors import ErrorCode, SExpressionError
from .graph import TreeGraph
from .labels import is_label
from .parser import ParsedPair
from .validation import MAX_CHILDREN


@dataclass(slots=True)
class TreeNode:
    """Labelled binary tree node; ``left`` always holds the smaller child."""

    label: str
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    def __post_init__(self) -> None:
        if not is_label(self.label):
            raise TypeError("TreeNode label must be a single uppercase letter")

    def children(self) -> Tuple["TreeNode", ...]:
        """Return the present children ordered by label."""

        present = [child for child in (self.left, self.right) if child is not None]
        return tuple(sorted(present, key=lambda child: child.label))

    def to_canonical(self) -> str:
        inner = "".join(child.to_canonical() for child in self.children())
        return f"({self.label}{inner})"


def canonicalize(graph: TreeGraph, root: str) -> str:
    """Return the canonical string of the tree rooted at *root*.

    Only call this on graphs that passed the degree, root and cycle checks;
    the recursion assumes every node is reached once.
    """

    inner = "".join(canonicalize(graph, child) for child in graph.matrix.children(root))
    return f"({root}{inner})"


def build_tree(graph: TreeGraph, root: str) -> TreeNode:
    """Materialise the validated tree rooted at *root*."""

    children = [build_tree(graph, child) for child in graph.matrix.children(root)]
    node = TreeNode(root)
    if children:
        node.left = children[0]
    if len(children) > 1:
        node.right = children[1]
    return node


def _parse_node(text: str, position: int, seen: Set[str]) -> Tuple[TreeNode, int]:
    if (
        position + 1 >= len(text)
        or text[position] != "("
        or not is_label(text[position + 1])
    ):
        raise SExpressionError(
            ErrorCode.INVALID_FORMAT, f"expected '(' and a label at offset {position}"
        )
    label = text[position + 1]
    if label in seen:
        raise SExpressionError(
            ErrorCode.CONTAINS_CYCLE, f"label {label} appears more than once"
        )
    seen.add(label)
    position += 2

    children: List[TreeNode] = []
    while position < len(text) and text[position] == "(":
        if len(children) == MAX_CHILDREN:
            raise SExpressionError(
                ErrorCode.TOO_MANY_CHILDREN, f"node {label} has more than two children"
            )
        child, position = _parse_node(text, position, seen)
        children.append(child)

    if position >= len(text) or text[position] != ")":
        raise SExpressionError(
            ErrorCode.INVALID_FORMAT, f"expected ')' at offset {position}"
        )
    children.sort(key=lambda child: child.label)
    node = TreeNode(
        label,
        left=children[0] if children else None,
        right=children[1] if len(children) > 1 else None,
    )
    return node, position + 1


def parse_canonical(text: str) -> TreeNode:
    """Parse a nested-parenthesis string such as ``"(A(B)(C))"``.

    Children may appear in any order; they are stored by label.  Malformed
    text raises :class:`SExpressionError` with :attr:`ErrorCode.INVALID_FORMAT`.
    """

    if not isinstance(text, str):
        raise SExpressionError(ErrorCode.INVALID_FORMAT, "expected a string")
    root, position = _parse_node(text, 0, set())
    if position != len(text):
        raise SExpressionError(
            ErrorCode.INVALID_FORMAT, f"unexpected text at offset {position}"
        )
    return root


def tree_to_pairs(root: TreeNode) -> Tuple[ParsedPair, ...]:
    """Return the tree's edges grouped by parent, parents in pre-order."""

    pairs: List[ParsedPair] = []
    stack: List[TreeNode] = [root]
    while stack:
        node = stack.pop()
        children = node.children()
        for child in children:
            pairs.append(ParsedPair(node.label, child.label))
        stack.extend(reversed(children))
    return tuple(pairs)


def _render_children(node: TreeNode, prefix: str, lines: List[str]) -> None:
    children = node.children()
    for position, child in enumerate(children):
        last = position == len(children) - 1
        lines.append(f"{prefix}{'└── ' if last else '├── '}{child.label}")
        _render_children(child, prefix + ("    " if last else "│   "), lines)


def render_tree(root: Optional[TreeNode]) -> str:
    """Render *root* top-down, one node per line, children indented below it.

    Children appear in label order.  The output has exactly one line per node,
    so even a 26-node chain renders in a few hundred characters.
    """

    if root is None:
        return "<empty>"

    lines: List[str] = [root.label]
    _render_children(root, "", lines)
    return "\n".join(lines)


__all__ = [
    "TreeNode",
    "build_tree",
    "canonicalize",
    "parse_canonical",
    "render_tree",
    "tree_to_pairs",
]
