"""
Truth tables for boolean expressions over an ordered set of declared variables.

Main features:
- Context: ordered registry of declared variable names
- Enumeration of all 2^n assignments, first declared variable as the most
  significant bit
- Text truth tables via the TextTable renderer (add_cell / end_row)
- numpy matrix and pandas DataFrame views of the same table
- Brute-force queries: tautology, contradiction, equivalence, satisfying rows
"""

from __future__ import annotations
import logging
import sys
from itertools import product
from typing import (
    Dict,
    Iterator,
    List,
    Optional,
    Protocol,
    Sequence,
    Set,
    TextIO,
    Tuple,
    Union,
    runtime_checkable,
)

import numpy as np
import pandas as pd

from boolean_expressions import (
    FALSE,
    TRUE,
    Expression,
    Var,
    equiv,
    implies,
    not_,
    or_,
    variable,
)
from text_table import TextTable

logger = logging.getLogger(__name__)

TRUE_CELL = "1"
FALSE_CELL = "0"

# Above this many variables the table has more than a million rows.
LARGE_TABLE_VARIABLES = 20

Expressions = Union[Expression, Sequence[Expression]]


@runtime_checkable
class TableRenderer(Protocol):
    """Anything that accepts a table one cell and one row at a time."""

    def add_cell(self, text: str) -> None: ...

    def end_row(self) -> None: ...


# ---------------------------------------------------------------------------
# Variable registry
# ---------------------------------------------------------------------------


class Context:
    """Ordered collection of declared variable names.

    Declaration order fixes both the column order of the table and the
    enumeration order (first declared variable is the most significant bit).
    Names are not checked for duplicates.
    """

    def __init__(self) -> None:
        self.variables: List[str] = []

    def declare(self, name: str) -> Var:
        self.variables.append(name)
        return variable(name)

    def declare_many(self, *names: str) -> Tuple[Var, ...]:
        return tuple(self.declare(name) for name in names)

    def undeclared(self, expression: Expression) -> Set[str]:
        """Names referenced by ``expression`` that were never declared."""
        return expression.variables() - set(self.variables)

    def generate_table(
        self, expressions: Expressions, renderer: Optional[TableRenderer] = None
    ) -> TableRenderer:
        return generate_table(self, expressions, renderer)

    def __len__(self) -> int:
        return len(self.variables)

    def __repr__(self) -> str:
        return f"Context(variables={self.variables!r})"


def new_context() -> Context:
    return Context()


# ---------------------------------------------------------------------------
# Enumeration
# ---------------------------------------------------------------------------


def _as_list(expressions: Expressions) -> List[Expression]:
    if isinstance(expressions, Expression):
        return [expressions]
    return list(expressions)


def _bits(i: int, n: int) -> Tuple[bool, ...]:
    return tuple(bool((i >> (n - 1 - j)) & 1) for j in range(n))


def _enumerate(context: Context) -> Iterator[Tuple[Tuple[bool, ...], Dict[str, bool]]]:
    names = list(context.variables)
    n = len(names)
    if n > LARGE_TABLE_VARIABLES:
        logger.warning(
            "Enumerating %d variables produces %d rows", n, 1 << n
        )
    for i in range(1 << n):
        bits = _bits(i, n)
        # A name declared twice keeps the bit of its last declaration.
        yield bits, dict(zip(names, bits))


def assignments(context: Context) -> Iterator[Dict[str, bool]]:
    """Yield every assignment of the declared variables.

    Row 0 is the all-false assignment and row 2^n - 1 the all-true one.
    With no declared variables a single empty assignment is produced.
    """
    for _, assignment in _enumerate(context):
        yield assignment


def _cell(value: bool, true_cell: str, false_cell: str) -> str:
    return true_cell if value else false_cell


def generate_table(
    context: Context,
    expressions: Expressions,
    renderer: Optional[TableRenderer] = None,
    true_cell: str = TRUE_CELL,
    false_cell: str = FALSE_CELL,
) -> TableRenderer:
    """
    Build the truth table of one or more expressions.

    Parameters
    ----------
    context:
        Declared variables; their count n is read at call time.
    expressions:
        A single expression or an ordered sequence of expressions.
    renderer:
        Any object with ``add_cell(text)`` and ``end_row()``. A new
        TextTable is created when omitted.
    true_cell, false_cell:
        Cell text for true and false values.

    Returns
    -------
    TableRenderer
        The renderer, holding a header row followed by 2^n data rows.
    """
    exprs = _as_list(expressions)
    table = renderer if renderer is not None else TextTable()
    logger.debug(
        "Generating table for %d expression(s) over %s", len(exprs), context.variables
    )

    for name in context.variables:
        table.add_cell(name)
    for expr in exprs:
        table.add_cell(expr.render())
    table.end_row()

    for bits, assignment in _enumerate(context):
        for bit in bits:
            table.add_cell(_cell(bit, true_cell, false_cell))
        for expr in exprs:
            table.add_cell(_cell(expr.evaluate(assignment), true_cell, false_cell))
        table.end_row()
    return table


def print_truth_table(
    context: Context, expressions: Expressions, file: Optional[TextIO] = None
) -> TextTable:
    """Generate the truth table and write it to ``file`` (stdout by default)."""
    table = TextTable()
    generate_table(context, expressions, table)
    print(table.render(), file=file if file is not None else sys.stdout)
    return table


# ---------------------------------------------------------------------------
# Matrix and DataFrame views
# ---------------------------------------------------------------------------


def header(context: Context, expressions: Expressions) -> List[str]:
    return list(context.variables) + [e.render() for e in _as_list(expressions)]


def truth_matrix(context: Context, expressions: Expressions) -> np.ndarray:
    """
    Return the table as an integer matrix.

    Each row is one assignment in enumeration order; columns are the
    declared variables followed by the expressions.

    Returns
    -------
    numpy.ndarray
        Shape (2^n, n + number of expressions), entries 0 or 1.
    """
    exprs = _as_list(expressions)
    rows = [
        [int(b) for b in bits] + [int(e.evaluate(assignment)) for e in exprs]
        for bits, assignment in _enumerate(context)
    ]
    width = len(context.variables) + len(exprs)
    return np.array(rows, dtype=int).reshape(len(rows), width)


def truth_table_frame(context: Context, expressions: Expressions) -> pd.DataFrame:
    """Build a pandas DataFrame of the truth table, columns named by the header."""
    return pd.DataFrame(
        truth_matrix(context, expressions), columns=header(context, expressions)
    )


def truth_vector(context: Context, expression: Expression) -> Tuple[int, ...]:
    """Return the result column of a single expression over all assignments."""
    return tuple(int(expression.evaluate(a)) for a in assignments(context))


# ---------------------------------------------------------------------------
# Brute-force queries
# ---------------------------------------------------------------------------


def satisfying_assignments(
    context: Context, expression: Expression
) -> List[Dict[str, bool]]:
    return [a for a in assignments(context) if expression.evaluate(a)]


def is_tautology(context: Context, expression: Expression) -> bool:
    return all(expression.evaluate(a) for a in assignments(context))


def is_contradiction(context: Context, expression: Expression) -> bool:
    return not any(expression.evaluate(a) for a in assignments(context))


def equivalent(context: Context, a: Expression, b: Expression) -> bool:
    """True if ``a`` and ``b`` agree on every assignment of the declared variables."""
    return all(a.evaluate(v) == b.evaluate(v) for v in assignments(context))


# ---------------------------------------------------------------------------
# Optional demo in script mode
# ---------------------------------------------------------------------------


def _demo() -> None:
    """
    Print the truth tables of a few expressions over p and q.
    """
    ctx = new_context()
    p, q = ctx.declare_many("p", "q")

    print("Single expression:")
    print_truth_table(ctx, (p & TRUE) ^ FALSE)
    print()

    print("Several expressions at once:")
    print_truth_table(
        ctx,
        [
            implies(or_(not_(p), not_(q)), equiv(p, not_(q))),
            p | q,
        ],
    )
    print()

    print("As a DataFrame:")
    print(truth_table_frame(ctx, [p & q, implies(p, q)]))

    for x, y in product([p, q], repeat=2):
        e = implies(x, y)
        if is_tautology(ctx, e):
            print(f"Tautology: {e}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    _demo()
