from __future__ import annotations

import pytest

from sexpr_tree.canonical import (
    TreeNode,
    build_tree,
    canonicalize,
    parse_canonical,
    render_tree,
    tree_to_pairs,
)
from sexpr_tree.errors import ErrorCode, SExpressionError
from sexpr_tree.graph import TreeGraph, build_graph
from sexpr_tree.parser import format_pairs, parse_pairs
from sexpr_tree.pipeline import validate_s_expression


def _graph(text: str) -> TreeGraph:
    return build_graph(parse_pairs(text).unwrap()).unwrap()


def test_canonicalize_orders_children_by_label() -> None:
    assert canonicalize(_graph("(A,C) (A,B)"), "A") == "(A(B)(C))"
    assert canonicalize(_graph("(A,B) (A,C)"), "A") == "(A(B)(C))"


def test_canonicalize_leaf_and_chain() -> None:
    assert canonicalize(_graph("(A,B)"), "B") == "(B)"
    assert canonicalize(_graph("(A,B) (B,C)"), "A") == "(A(B(C)))"


def test_canonicalize_nested_tree() -> None:
    graph = _graph("(A,B) (B,D) (D,E) (A,C) (C,F) (E,G)")
    assert canonicalize(graph, "A") == "(A(B(D(E(G))))(C(F)))"


def test_build_tree_places_smaller_child_left() -> None:
    tree = build_tree(_graph("(A,C) (A,B) (C,D)"), "A")
    assert tree.label == "A"
    assert tree.left is not None and tree.left.label == "B"
    assert tree.right is not None and tree.right.label == "C"
    assert tree.right.left is not None and tree.right.left.label == "D"
    assert tree.to_canonical() == "(A(B)(C(D)))"


def test_tree_node_rejects_invalid_labels() -> None:
    with pytest.raises(TypeError):
        TreeNode("a")
    with pytest.raises(TypeError):
        TreeNode(1)  # type: ignore[arg-type]


def test_tree_node_canonical_ignores_slot_order() -> None:
    tree = TreeNode("A", left=TreeNode("C"), right=TreeNode("B"))
    assert tree.to_canonical() == "(A(B)(C))"


def test_parse_canonical_round_trip() -> None:
    canonical = "(A(B(D(E(G))))(C(F)))"
    tree = parse_canonical(canonical)
    assert tree.to_canonical() == canonical
    assert validate_s_expression(format_pairs(tree_to_pairs(tree))) == canonical


def test_parse_canonical_sorts_children() -> None:
    assert parse_canonical("(A(C)(B))").to_canonical() == "(A(B)(C))"


@pytest.mark.parametrize(
    "text,code",
    [
        ("", ErrorCode.INVALID_FORMAT),
        ("A", ErrorCode.INVALID_FORMAT),
        ("(A", ErrorCode.INVALID_FORMAT),
        ("(A(B)", ErrorCode.INVALID_FORMAT),
        ("(A)(B)", ErrorCode.INVALID_FORMAT),
        ("(a)", ErrorCode.INVALID_FORMAT),
        ("(A(B)(C)(D))", ErrorCode.TOO_MANY_CHILDREN),
        ("(A(B(A)))", ErrorCode.CONTAINS_CYCLE),
    ],
)
def test_parse_canonical_rejects_invalid_text(text: str, code: ErrorCode) -> None:
    with pytest.raises(SExpressionError) as excinfo:
        parse_canonical(text)
    assert excinfo.value.code is code


def test_tree_to_pairs_is_preorder() -> None:
    tree = parse_canonical("(A(B(D))(C(E)(F)))")
    pairs = tree_to_pairs(tree)
    assert format_pairs(pairs) == "(A,B) (A,C) (B,D) (C,E) (C,F)"


def test_render_tree_indents_children_in_label_order() -> None:
    tree = parse_canonical("(A(C(E)(F))(B(D)))")
    expected = "\n".join(
        [
            "A",
            "├── B",
            "│   └── D",
            "└── C",
            "    ├── E",
            "    └── F",
        ]
    )
    assert render_tree(tree) == expected


def test_render_tree_empty_tree() -> None:
    assert render_tree(None) == "<empty>"


def test_render_tree_full_chain_stays_linear() -> None:
    labels = [chr(ord("A") + index) for index in range(26)]
    expression = format_pairs(zip(labels, labels[1:]))
    tree = parse_canonical(validate_s_expression(expression))

    rendered = render_tree(tree)
    lines = rendered.splitlines()
    assert len(lines) == 26
    assert lines[0] == "A"
    assert lines[-1] == " " * 4 * 24 + "└── Z"
    assert len(rendered) < 26 * 110
