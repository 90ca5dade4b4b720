"""Validation and canonicalisation of binary trees given as pair lists."""

from .canonical import (
    TreeNode,
    build_tree,
    canonicalize,
    parse_canonical,
    render_tree,
    tree_to_pairs,
)
from .cycles import contains_cycle, detect_cycle
from .errors import ErrorCode, Outcome, SExpressionError
from .graph import AdjacencyMatrix, TreeGraph, build_graph, to_networkx
from .labels import ALPHABET_SIZE, FIRST_LABEL, index_to_label, is_label, label_to_index
from .parser import ParsedPair, format_pairs, parse_pairs
from .pipeline import (
    ValidationReport,
    analyse_s_expression,
    require_canonical,
    validate_s_expression,
)
from .validation import MAX_CHILDREN, check_degree, find_root, root_candidates

__all__ = [
    "ALPHABET_SIZE",
    "AdjacencyMatrix",
    "ErrorCode",
    "FIRST_LABEL",
    "MAX_CHILDREN",
    "Outcome",
    "ParsedPair",
    "SExpressionError",
    "TreeGraph",
    "TreeNode",
    "ValidationReport",
    "analyse_s_expression",
    "build_graph",
    "build_tree",
    "canonicalize",
    "check_degree",
    "contains_cycle",
    "detect_cycle",
    "find_root",
    "format_pairs",
    "index_to_label",
    "is_label",
    "label_to_index",
    "parse_canonical",
    "parse_pairs",
    "render_tree",
    "require_canonical",
    "root_candidates",
    "to_networkx",
    "tree_to_pairs",
    "validate_s_expression",
]
