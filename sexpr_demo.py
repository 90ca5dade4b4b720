"""Command line demonstration of the pair list validator.

This script replays a fixed catalogue of pair lists through
``sexpr_tree.pipeline.validate_s_expression`` and prints each input together
with its result.  The catalogue covers a well-formed tree, every error code
``E1``..``E5`` and the usual lexical near-misses (lowercase labels, stray
spaces, wrong braces or separators).

Each case pins the output it must produce, so running the script doubles as a
quick smoke check: a mismatch aborts with ``RuntimeError`` naming the input.
Everything beyond that bookkeeping is delegated to ``sexpr_tree``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List

from sexpr_tree.pipeline import validate_s_expression


@dataclass(frozen=True)
class DemoCase:
    """Container describing a pair list and its expected validator output."""

    expression: str
    expected_output: str

    def run(self) -> str:
        """Validate the expression associated with this demo case."""

        return validate_s_expression(self.expression)


def _iter_demo_cases() -> Iterator[DemoCase]:
    """Yield the built-in demonstration cases."""

    yield DemoCase("(A,B) (B,D) (D,E) (A,C) (C,F) (E,G)", "(A(B(D(E(G))))(C(F)))")
    yield DemoCase("(A,B) (A,C) (B,D) (D,C)", "E5")
    yield DemoCase("XYZ", "E1")
    yield DemoCase("(A,B) (B,C)", "(A(B(C)))")
    yield DemoCase("(A,BX", "E1")
    yield DemoCase("(A,b)", "E1")
    yield DemoCase("(A, b)", "E1")
    yield DemoCase("(A, B)", "E1")
    yield DemoCase("(A,B)|(B,C)", "E1")
    yield DemoCase("(A,B) (X,C)", "E4")
    yield DemoCase("", "E1")
    yield DemoCase("A", "E1")
    yield DemoCase("A,B", "E1")
    yield DemoCase("(A)", "E1")
    yield DemoCase("(A,B)", "(A(B))")
    yield DemoCase("[A,B]", "E1")
    yield DemoCase("(a,b)", "E1")
    yield DemoCase("(A,B) (B,C) (B,C)", "E2")
    yield DemoCase("(A,B) (A,C) (B,D) (B,E) (B,F)", "E3")
    yield DemoCase("(A,B) (A,C) (B,D) (B,E) (F,C)", "E4")
    yield DemoCase("(A,B) (A,C) (B,D) (B,E) (E,C)", "E5")


def _format_report(case: DemoCase, output: str) -> List[str]:
    """Return formatted output lines for *case* and its validator *output*."""

    if output != case.expected_output:
        raise RuntimeError(
            "Demo case expectation mismatch:"
            f" {case.expression!r} expected {case.expected_output}"
            f" but received {output}"
        )

    return [
        f"Input: {case.expression!r}",
        f"Output: {output}",
    ]


def main() -> None:
    """Execute the demonstration flow for all configured cases."""

    for case in _iter_demo_cases():
        output_lines = _format_report(case, case.run())
        for line in output_lines:
            print(line)
        print()  # Spacer between cases


if __name__ == "__main__":
    main()
