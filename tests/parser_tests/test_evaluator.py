# tests/parser_tests/test_evaluator.py
# This file is part of Tabula - A Propositional Logic Truth Table Toolkit
#
# Test suite for formula evaluation under variable assignments

"""Test suite for the three-valued evaluator.

Covers the truth tables of every connective, constants, the propagation of
undefined variables and the purity of repeated evaluation.
"""

import itertools

import pytest
from formula_parser import evaluate, parse
from formula_parser.ast_nodes import And, Atom, Not, Value
from formula_parser.evaluator import Evaluator
from utils.logger import get_logger


class TestEvaluator:
    """Test cases for formula evaluation."""

    def setup_method(self):
        self.logger = get_logger()

    def test_conjunction_then_disjunction(self, basic_formula):
        formula = parse(basic_formula)

        assert evaluate(formula, {"a": True, "b": False, "c": True}) is True
        assert evaluate(formula, {"a": True, "b": False, "c": False}) is False

    def test_complex_formula(self, complex_formula):
        formula = parse(complex_formula)

        assert formula.evaluate(
            {"a": True, "b": False, "c": False, "d": True, "e": True}
        ) is True
        assert formula.evaluate(
            {"a": False, "b": False, "c": True, "d": False, "e": True}
        ) is True
        assert formula.evaluate(
            {"a": True, "b": True, "c": False, "d": False, "e": True}
        ) is False

    CONNECTIVE_CASES = [
        ("a & b", lambda x, y: x and y),
        ("a | b", lambda x, y: x or y),
        ("a -> b", lambda x, y: (not x) or y),
        ("a <-> b", lambda x, y: x == y),
        ("~a", lambda x, y: not x),
    ]

    @pytest.mark.parametrize("formula_text, truth_function", CONNECTIVE_CASES)
    def test_connective_truth_tables(self, formula_text, truth_function):
        formula = parse(formula_text)

        for x, y in itertools.product([True, False], repeat=2):
            result = formula.evaluate({"a": x, "b": y})
            assert result is truth_function(x, y), f"{formula_text} with a={x}, b={y}"

    def test_constants(self):
        assert parse("true").evaluate({}) is True
        assert parse("F").evaluate({}) is False
        assert parse("a | t").evaluate({"a": False}) is True
        assert parse("a & false").evaluate({"a": True}) is False

    UNDEFINED_CASES = [
        ("a & b", {"a": True}),
        ("a & b", {"a": False}),
        ("a | b", {"a": True}),
        ("~b", {}),
        ("a -> b", {"a": False}),
        ("b <-> a", {"a": True}),
        ("false & b", {}),
        ("a", {"b": True}),
    ]

    @pytest.mark.parametrize("formula_text, assignment", UNDEFINED_CASES)
    def test_missing_variable_is_undefined(self, formula_text, assignment):
        """A missing variable makes the whole result None, never False."""
        result = parse(formula_text).evaluate(assignment)
        self.logger.debug(f"{formula_text} under {assignment} -> {result}")

        assert result is None

    def test_extra_variables_are_ignored(self):
        assert parse("a").evaluate({"a": True, "zzz": False}) is True

    def test_evaluation_is_idempotent(self, complex_formula):
        formula = parse(complex_formula)
        assignment = {"a": True, "b": False, "c": False, "d": True}

        results = {formula.evaluate(assignment) for _ in range(5)}

        assert results == {None}
        assert assignment == {"a": True, "b": False, "c": False, "d": True}

        assignment["e"] = False
        assert [formula.evaluate(assignment) for _ in range(3)] == [False] * 3

    def test_evaluator_visitor_directly(self):
        tree = And(Not(Atom("x")), Value(True))

        assert Evaluator({"x": False}).evaluate(tree) is True
        assert Evaluator({"x": True}).evaluate(tree) is False
        assert Evaluator({}).evaluate(tree) is None


class TestFormulaVariables:
    """Test cases for variable collection at construction."""

    def test_variables_are_deduplicated(self):
        formula = parse("a & b | a -> ~b")

        assert formula.variables == frozenset({"a", "b"})

    def test_constants_are_not_variables(self):
        assert parse("true | x & F").variables == frozenset({"x"})
        assert parse("t <-> f").variables == frozenset()

    def test_sorted_variables(self):
        assert parse("zeta | alpha & beta").sorted_variables() == ["alpha", "beta", "zeta"]

    def test_formula_is_immutable(self):
        formula = parse("a")

        with pytest.raises(AttributeError):
            formula.root = Atom("b")
