"""
Boolean expression trees built from constants, variables and logical operators.

Main features:
- Expression AST: Const, Var, Unary, Binary with rendering and evaluation
- Operator symbol table: & | ^ > == for binary operators, ! (or ~) for negation
- Builder functions: and_, or_, xor, implies, equiv, not_, variable
- Shared TRUE / FALSE constants
- Python operator sugar: a & b, a | b, a ^ b, ~a
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Mapping, Set, Union


# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class Operator(Enum):
    AND = "&"
    OR = "|"
    XOR = "^"
    IMPLIES = ">"
    EQUIV = "=="
    NOT = "!"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def arity(self) -> int:
        return 1 if self is Operator.NOT else 2


# Accepted textual spellings. "~" is a synonym for "!".
SYMBOLS: Dict[str, Operator] = {op.symbol: op for op in Operator}
SYMBOLS["~"] = Operator.NOT


class UnknownOperatorError(ValueError):
    def __init__(self, symbol: str):
        super().__init__(f"Unknown operator symbol: {symbol!r}")
        self.symbol = symbol


def operator_for(symbol: str) -> Operator:
    """Return the operator spelled by ``symbol``."""
    try:
        return SYMBOLS[symbol]
    except KeyError:
        raise UnknownOperatorError(symbol) from None


def _apply(op: Operator, left: bool, right: bool) -> bool:
    if op is Operator.AND:
        return left and right
    if op is Operator.OR:
        return left or right
    if op is Operator.XOR:
        return left != right
    if op is Operator.IMPLIES:
        # a -> b is equivalent to ¬a ∨ b
        return (not left) or right
    if op is Operator.EQUIV:
        return left == right
    raise ValueError(f"{op.name} is not a binary operator")


# ---------------------------------------------------------------------------
# Expression AST
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Expression:
    def render(self) -> str:
        raise NotImplementedError

    def evaluate(self, assignment: Mapping[str, bool]) -> bool:
        raise NotImplementedError

    def variables(self) -> Set[str]:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.render()

    def __and__(self, other: Operand) -> Expression:
        return and_(self, other)

    def __rand__(self, other: Operand) -> Expression:
        return and_(other, self)

    def __or__(self, other: Operand) -> Expression:
        return or_(self, other)

    def __ror__(self, other: Operand) -> Expression:
        return or_(other, self)

    def __xor__(self, other: Operand) -> Expression:
        return xor(self, other)

    def __rxor__(self, other: Operand) -> Expression:
        return xor(other, self)

    def __invert__(self) -> Expression:
        return not_(self)


@dataclass(frozen=True)
class Const(Expression):
    value: bool

    def render(self) -> str:
        return "T" if self.value else "F"

    def evaluate(self, assignment: Mapping[str, bool]) -> bool:
        return self.value

    def variables(self) -> Set[str]:
        return set()


@dataclass(frozen=True)
class Var(Expression):
    name: str

    def render(self) -> str:
        return self.name

    def evaluate(self, assignment: Mapping[str, bool]) -> bool:
        # Unknown names read as false instead of failing.
        return bool(assignment.get(self.name, False))

    def variables(self) -> Set[str]:
        return {self.name}


@dataclass(frozen=True)
class Unary(Expression):
    op: Operator
    operand: Expression

    def __post_init__(self) -> None:
        if self.op is not Operator.NOT:
            raise ValueError(f"{self.op.name} is not a unary operator")

    def render(self) -> str:
        return f"{self.op.symbol}{self.operand.render()}"

    def evaluate(self, assignment: Mapping[str, bool]) -> bool:
        return not self.operand.evaluate(assignment)

    def variables(self) -> Set[str]:
        return self.operand.variables()


@dataclass(frozen=True)
class Binary(Expression):
    op: Operator
    left: Expression
    right: Expression

    def __post_init__(self) -> None:
        if self.op.arity != 2:
            raise ValueError(f"{self.op.name} is not a binary operator")

    def render(self) -> str:
        return f"({self.left.render()}{self.op.symbol}{self.right.render()})"

    def evaluate(self, assignment: Mapping[str, bool]) -> bool:
        # Both sides are always evaluated, no short-circuiting.
        left = self.left.evaluate(assignment)
        right = self.right.evaluate(assignment)
        return _apply(self.op, left, right)

    def variables(self) -> Set[str]:
        return self.left.variables() | self.right.variables()


Operand = Union[Expression, bool]

TRUE = Const(True)
FALSE = Const(False)


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------


def _as_expression(value: Operand) -> Expression:
    if isinstance(value, Expression):
        return value
    if isinstance(value, bool):
        return TRUE if value else FALSE
    raise TypeError(
        f"Expected an Expression or bool, got {type(value).__name__}"
    )


def variable(name: str) -> Var:
    return Var(name)


def and_(a: Operand, b: Operand) -> Binary:
    return Binary(Operator.AND, _as_expression(a), _as_expression(b))


def or_(a: Operand, b: Operand) -> Binary:
    return Binary(Operator.OR, _as_expression(a), _as_expression(b))


def xor(a: Operand, b: Operand) -> Binary:
    return Binary(Operator.XOR, _as_expression(a), _as_expression(b))


def implies(a: Operand, b: Operand) -> Binary:
    return Binary(Operator.IMPLIES, _as_expression(a), _as_expression(b))


def equiv(a: Operand, b: Operand) -> Binary:
    return Binary(Operator.EQUIV, _as_expression(a), _as_expression(b))


def not_(a: Operand) -> Unary:
    return Unary(Operator.NOT, _as_expression(a))


def combine(symbol: str, *operands: Operand) -> Expression:
    """Build a node from a textual operator spelling.

    Parameters
    ----------
    symbol:
        One of ``& | ^ > ==`` for binary operators or ``!`` / ``~`` for NOT.
    operands:
        One operand for NOT, two for every other operator.

    Returns
    -------
    Expression
        A new Unary or Binary node.
    """
    op = operator_for(symbol)
    if len(operands) != op.arity:
        raise ValueError(
            f"Operator {symbol!r} takes {op.arity} operand(s), got {len(operands)}"
        )
    if op is Operator.NOT:
        return not_(operands[0])
    left, right = operands
    return Binary(op, _as_expression(left), _as_expression(right))
