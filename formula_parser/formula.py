# formula_parser/formula.py
# This file is part of Tabula - A Propositional Logic Truth Table Toolkit
#
# Formula wrapper: expression tree plus its free variables

"""
Encapsulates a parsed propositional formula.

A Formula owns exactly one expression tree and the set of variable names
occurring in it, collected once at construction. It is immutable; evaluation
and printing are read-only traversals.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import FrozenSet, List, Mapping, Optional, Set

from . import ast_nodes as ast
from .evaluator import Evaluator


class _VariableCollector(ast.Visitor):
    """Gathers the names of every Atom in a tree.

    Driven node by node by ``Formula.from_root``; the visit methods do not
    descend into children themselves.
    """

    def __init__(self):
        self.names: Set[str] = set()

    def visit_atom(self, n: ast.Atom):
        self.names.add(n.name)

    def visit_value(self, n: ast.Value):
        pass

    def visit_not(self, n: ast.Not):
        pass

    def visit_and(self, n: ast.And):
        pass

    def visit_or(self, n: ast.Or):
        pass

    def visit_implies(self, n: ast.Implies):
        pass

    def visit_iff(self, n: ast.Iff):
        pass


@dataclass(frozen=True)
class Formula:
    """
    Wraps the root of a parsed expression tree.

    Attributes:
        root: The top-level expression.
        variables: Names of all variables in the tree, without order.
    """
    root: ast.Expr
    variables: FrozenSet[str]

    @classmethod
    def from_root(cls, root: ast.Expr) -> Formula:
        """Wrap ``root``, collecting its variables by a full traversal."""
        collector = _VariableCollector()
        for node in ast.walk_postorder(root):
            node.accept(collector)
        return cls(root, frozenset(collector.names))

    def sorted_variables(self) -> List[str]:
        return sorted(self.variables)

    def evaluate(self, assignment: Mapping[str, bool]) -> Optional[bool]:
        """Evaluate the formula; None if a variable is left unassigned."""
        return Evaluator(assignment).evaluate(self.root)

    def __str__(self) -> str:
        return str(self.root)
