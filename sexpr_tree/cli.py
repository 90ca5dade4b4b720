"""Command line front-end for the pair list validator.

Expressions are taken from positional arguments and/or a file with one
expression per line (``-`` reads standard input).  Each expression produces
one line of output: the canonical tree or the error code.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys
from typing import List, Sequence, TextIO

from .canonical import render_tree
from .pipeline import ValidationReport, analyse_s_expression

logger = logging.getLogger(__name__)


def _read_expressions(source: str, stdin: TextIO) -> List[str]:
    if source == "-":
        lines = stdin.read().splitlines()
    else:
        lines = Path(source).read_text(encoding="utf-8").splitlines()
    return [line for line in lines if line.strip()]


def _emit_text(reports: Sequence[ValidationReport], render: bool, out: TextIO) -> None:
    for report in reports:
        print(report.output, file=out)
        if render and report.tree is not None:
            print(render_tree(report.tree), file=out)
            print(file=out)


def _emit_json(reports: Sequence[ValidationReport], render: bool, out: TextIO) -> None:
    payload = []
    for report in reports:
        entry = report.to_dict()
        if render and report.tree is not None:
            entry["rendering"] = render_tree(report.tree).splitlines()
        payload.append(entry)
    json.dump(payload, out, indent=2, ensure_ascii=False)
    out.write("\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sexpr-tree",
        description=(
            "Validate parent/child pair lists such as '(A,B) (A,C)' and print "
            "their canonical tree form or an error code (E1-E5)."
        ),
    )
    parser.add_argument(
        "expressions",
        nargs="*",
        help="Pair lists to validate. Quote each one, e.g. '(A,B) (B,C)'.",
    )
    parser.add_argument(
        "--input",
        default=None,
        help="Read additional expressions from a file, one per line ('-' for stdin).",
    )
    parser.add_argument(
        "--format",
        default="text",
        choices=["text", "json"],
        help="Output format.",
    )
    parser.add_argument(
        "--render",
        action="store_true",
        help="Also print a level-order rendering of every accepted tree.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 when any expression is rejected.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity for diagnostic output.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point; returns the process exit status."""

    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    expressions = list(args.expressions)
    if args.input is not None:
        try:
            expressions.extend(_read_expressions(args.input, sys.stdin))
        except OSError as exc:
            parser.error(f"Failed to read {args.input}: {exc}")
    if not expressions:
        parser.error("no expressions given; pass them as arguments or via --input")

    reports = [analyse_s_expression(expression) for expression in expressions]
    if args.format == "json":
        _emit_json(reports, args.render, sys.stdout)
    else:
        _emit_text(reports, args.render, sys.stdout)

    rejected = sum(1 for report in reports if not report.is_valid)
    logger.info("Validated %d expressions, %d rejected", len(reports), rejected)
    if args.strict and rejected:
        return 1
    return 0


__all__ = ["build_parser", "main"]


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
