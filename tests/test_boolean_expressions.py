"""
Tests for expression nodes, rendering and the builder functions.
"""

from itertools import product

import pytest

from boolean_expressions import (
    FALSE,
    TRUE,
    Binary,
    Const,
    Operator,
    SYMBOLS,
    Unary,
    UnknownOperatorError,
    Var,
    and_,
    combine,
    equiv,
    implies,
    not_,
    operator_for,
    or_,
    variable,
    xor,
)

PAIRS = list(product([False, True], repeat=2))


class TestOperatorLaws:
    @pytest.fixture
    def a(self):
        return variable("a")

    @pytest.fixture
    def b(self):
        return variable("b")

    @pytest.mark.parametrize("x,y", PAIRS)
    def test_binary_operators(self, a, b, x, y):
        env = {"a": x, "b": y}
        assert and_(a, b).evaluate(env) == (x and y)
        assert or_(a, b).evaluate(env) == (x or y)
        assert xor(a, b).evaluate(env) == (x != y)
        assert implies(a, b).evaluate(env) == ((not x) or y)
        assert equiv(a, b).evaluate(env) == (x == y)

    @pytest.mark.parametrize("x", [False, True])
    def test_not(self, a, x):
        assert not_(a).evaluate({"a": x}) == (not x)

    def test_implies_table(self, a, b):
        results = [implies(a, b).evaluate({"a": x, "b": y}) for x, y in PAIRS]
        assert results == [True, True, False, True]


class TestNodes:
    def test_constants(self):
        assert TRUE.evaluate({}) is True
        assert FALSE.evaluate({}) is False
        assert TRUE.render() == "T"
        assert FALSE.render() == "F"

    def test_constants_are_shared(self):
        p = variable("p")
        assert and_(p, True).right is TRUE
        assert or_(False, p).left is FALSE

    def test_variable_lookup(self):
        p = variable("p")
        assert p.evaluate({"p": True}) is True
        assert p.evaluate({"p": False}) is False

    def test_unknown_variable_is_false(self):
        assert variable("zz").evaluate({"p": True}) is False
        assert not_(variable("zz")).evaluate({}) is True

    def test_variables(self):
        p, q = variable("p"), variable("q")
        assert implies(p & q, not_(p)).variables() == {"p", "q"}
        assert TRUE.variables() == set()

    def test_nodes_are_immutable(self):
        p = variable("p")
        with pytest.raises(AttributeError):
            p.name = "q"

    @pytest.mark.parametrize(
        "op", [Operator.AND, Operator.OR, Operator.XOR, Operator.IMPLIES, Operator.EQUIV]
    )
    def test_unary_rejects_binary_operator(self, op):
        with pytest.raises(ValueError, match="is not a unary operator"):
            Unary(op, variable("p"))

    def test_binary_rejects_not(self):
        with pytest.raises(ValueError, match="NOT is not a binary operator"):
            Binary(Operator.NOT, variable("p"), variable("q"))

    def test_valid_direct_construction(self):
        p, q = variable("p"), variable("q")
        assert Binary(Operator.XOR, p, q).evaluate({"p": True}) is True
        assert Unary(Operator.NOT, p).render() == "!p"

    def test_structural_equality(self):
        assert and_(variable("p"), TRUE) == and_(variable("p"), TRUE)
        assert and_(variable("p"), TRUE) != or_(variable("p"), TRUE)
        assert len({variable("p"), variable("p")}) == 1

    def test_evaluation_is_pure(self):
        p, q = variable("p"), variable("q")
        e = xor(implies(p, q), equiv(q, p))
        env = {"p": True, "q": False}
        assert e.evaluate(env) == e.evaluate(env) == e.evaluate(env)
        assert env == {"p": True, "q": False}


class TestRender:
    def test_binary_is_parenthesized(self):
        p, q = variable("p"), variable("q")
        assert and_(p, q).render() == "(p&q)"
        assert or_(p, q).render() == "(p|q)"
        assert xor(p, q).render() == "(p^q)"
        assert implies(p, q).render() == "(p>q)"
        assert equiv(p, q).render() == "(p==q)"

    def test_unary_has_no_parens(self):
        p, q = variable("p"), variable("q")
        assert not_(p).render() == "!p"
        assert not_(and_(p, q)).render() == "!(p&q)"

    def test_nested(self):
        p, q = variable("p"), variable("q")
        e = implies(or_(not_(p), not_(q)), equiv(p, not_(q)))
        assert e.render() == "((!p|!q)>(p==!q))"
        assert str(e) == e.render()

    def test_render_is_deterministic(self):
        p = variable("p")
        e = xor(and_(p, TRUE), FALSE)
        assert e.render() == e.render() == "((p&T)^F)"


class TestBuilder:
    def test_builders_return_nodes(self):
        p, q = variable("p"), variable("q")
        node = and_(p, q)
        assert isinstance(node, Binary)
        assert node.op is Operator.AND
        assert node.left is p and node.right is q
        assert isinstance(not_(p), Unary)
        assert isinstance(variable("p"), Var)
        assert isinstance(TRUE, Const)

    def test_operator_sugar(self):
        p, q = variable("p"), variable("q")
        assert (p & q) == and_(p, q)
        assert (p | q) == or_(p, q)
        assert (p ^ q) == xor(p, q)
        assert ~p == not_(p)
        assert (True & p) == and_(TRUE, p)

    def test_bad_operand(self):
        with pytest.raises(TypeError):
            and_(variable("p"), "q")
        with pytest.raises(TypeError):
            not_(1)

    def test_no_name_validation(self):
        e = and_(variable("undeclared"), TRUE)
        assert e.evaluate({}) is False


class TestSymbols:
    def test_symbol_table(self):
        assert {op: op.symbol for op in Operator} == {
            Operator.AND: "&",
            Operator.OR: "|",
            Operator.XOR: "^",
            Operator.IMPLIES: ">",
            Operator.EQUIV: "==",
            Operator.NOT: "!",
        }

    def test_not_synonym(self):
        assert SYMBOLS["!"] is SYMBOLS["~"] is Operator.NOT
        p = variable("p")
        assert combine("~", p) == combine("!", p) == not_(p)

    def test_combine(self):
        p, q = variable("p"), variable("q")
        assert combine(">", p, q) == implies(p, q)
        assert combine("==", p, q) == equiv(p, q)

    def test_combine_arity(self):
        p = variable("p")
        with pytest.raises(ValueError, match="takes 2 operand"):
            combine("&", p)
        with pytest.raises(ValueError, match="takes 1 operand"):
            combine("!", p, p)

    def test_unknown_symbol(self):
        with pytest.raises(UnknownOperatorError) as excinfo:
            operator_for("=>")
        assert excinfo.value.symbol == "=>"
        assert isinstance(excinfo.value, ValueError)
