# tests/parser_tests/test_deep_formulas.py
# This file is part of Tabula - A Propositional Logic Truth Table Toolkit
#
# Test suite for parsing, evaluating and printing very deep formulas

"""Test suite for deeply nested formulas.

Long operator chains, stacked negations and nested groups produce trees far
deeper than the interpreter's recursion limit. Parsing, variable collection,
evaluation and printing must all handle them. Trees are compared through
their printed text, since node equality itself is recursive.
"""

from formula_parser import parse, to_string
from formula_parser.ast_nodes import And, Atom, Not, walk_postorder
from utils.logger import get_logger

DEPTH = 1000


class TestDeepFormulas:
    """Test cases for trees deeper than the recursion limit."""

    def setup_method(self):
        self.logger = get_logger()

    def test_long_conjunction_chain(self):
        source = " & ".join(["a"] * (DEPTH + 1))
        formula = parse(source)

        assert formula.variables == frozenset({"a"})
        assert sum(1 for _ in walk_postorder(formula.root)) == 2 * DEPTH + 1
        assert formula.evaluate({"a": True}) is True
        assert formula.evaluate({"a": False}) is False
        assert formula.evaluate({}) is None
        assert to_string(formula) == source

    def test_stacked_negations(self):
        source = "~" * DEPTH + "a"
        formula = parse(source)

        assert formula.sorted_variables() == ["a"]
        assert formula.evaluate({"a": True}) is True
        assert parse("~" + source).evaluate({"a": True}) is False
        assert to_string(formula) == source

    def test_right_nested_groups(self):
        source = "(a -> " * DEPTH + "b" + ")" * DEPTH
        formula = parse(source)

        assert formula.sorted_variables() == ["a", "b"]
        assert formula.evaluate({"a": True, "b": False}) is False
        assert formula.evaluate({"a": False, "b": False}) is True
        assert formula.evaluate({"a": True}) is None

        # Only the outermost group is redundant
        printed = to_string(formula)
        assert printed == source[1:-1]
        assert to_string(parse(printed)) == printed

    def test_mixed_deep_formula_round_trips(self):
        source = "(~a | " * DEPTH + "b" + " & c)" * DEPTH
        printed = to_string(parse(source))
        reparsed = parse(printed)

        assert to_string(reparsed) == printed
        assert reparsed.evaluate({"a": False, "b": True, "c": False}) is True
        assert reparsed.evaluate({"a": True, "b": False, "c": True}) is False


class TestWalkPostorder:
    """Test cases for the iterative tree walk."""

    def test_children_before_parents(self):
        a, b = Atom("a"), Atom("b")
        tree = And(a, Not(b))

        assert [str(node) for node in walk_postorder(tree)] == ["a", "b", "~b", "a & ~b"]

    def test_single_leaf(self):
        assert [str(node) for node in walk_postorder(Atom("x"))] == ["x"]
