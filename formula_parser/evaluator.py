# formula_parser/evaluator.py
# This file is part of Tabula - A Propositional Logic Truth Table Toolkit
#
# AST visitor computing the truth value of a formula under an assignment

"""Three-valued evaluation of propositional formula trees.

The evaluator visits the tree bottom-up, children before parents, and applies
the classical truth tables. A variable missing from the assignment makes its
subterm undefined, represented as ``None``; undefinedness propagates to the
root rather than being raised or read as ``False``.
"""

from __future__ import annotations
from typing import Dict, Mapping, Optional

from . import ast_nodes as ast


class Evaluator(ast.Visitor):
    """Evaluates AST nodes against a fixed variable assignment.

    Both operands of a binary connective are always evaluated, so any
    undefined variable anywhere in the tree yields an undefined result.
    Nodes are visited in post-order over an explicit stack; each visit reads
    the already computed values of its children.

    Attributes:
        _assignment: Mapping from variable name to truth value
        _results: Value of every node visited so far, keyed by node identity
    """

    def __init__(self, assignment: Mapping[str, bool]):
        self._assignment = assignment
        self._results: Dict[int, Optional[bool]] = {}

    def evaluate(self, root: ast.Expr) -> Optional[bool]:
        """Compute the truth value of ``root``.

        Args:
            root: Root node of the tree to evaluate

        Returns:
            True or False, or None if some variable has no assigned value
        """
        self._results = {}
        for node in ast.walk_postorder(root):
            self._results[id(node)] = node.accept(self)
        return self._results[id(root)]

    def visit_atom(self, n: ast.Atom) -> Optional[bool]:
        value = self._assignment.get(n.name)
        if value is None:
            return None
        return bool(value)

    def visit_value(self, n: ast.Value) -> bool:
        return n.value

    def visit_not(self, n: ast.Not) -> Optional[bool]:
        operand = self._results[id(n.operand)]
        if operand is None:
            return None
        return not operand

    def visit_and(self, n: ast.And) -> Optional[bool]:
        left, right = self._operands(n)
        if left is None or right is None:
            return None
        return left and right

    def visit_or(self, n: ast.Or) -> Optional[bool]:
        left, right = self._operands(n)
        if left is None or right is None:
            return None
        return left or right

    def visit_implies(self, n: ast.Implies) -> Optional[bool]:
        left, right = self._operands(n)
        if left is None or right is None:
            return None
        return (not left) or right

    def visit_iff(self, n: ast.Iff) -> Optional[bool]:
        left, right = self._operands(n)
        if left is None or right is None:
            return None
        return left == right

    def _operands(self, n: ast.BinaryExpr):
        return self._results[id(n.left)], self._results[id(n.right)]
