# formula_parser/ast_nodes.py
# This file is part of Tabula - A Propositional Logic Truth Table Toolkit
#
# Abstract Syntax Tree node classes for propositional formula representation

"""AST node classes for representing parsed propositional formulas.

This module defines immutable and hashable node classes used to construct tree
representations of propositional formulas. Every parent owns its children
exclusively; trees are built bottom-up by the expression builder and never
mutated afterwards.

Node Types:
    Atom: Propositional variables
    Value: Boolean constants
    Not, And, Or: Standard Boolean connectives
    Implies, Iff: Material implication and biconditional

All nodes support the visitor design pattern for traversal, and ``str()``
renders the canonical infix form with minimal parentheses.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar, Dict, Iterator, Protocol, Tuple


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern.

    Concrete visitors must implement visit methods for each AST node type
    to enable type-safe traversal and transformation operations.
    """

    def visit_atom(self, n: Atom): ...

    def visit_value(self, n: Value): ...

    def visit_not(self, n: Not): ...

    def visit_and(self, n: And): ...

    def visit_or(self, n: Or): ...

    def visit_implies(self, n: Implies): ...

    def visit_iff(self, n: Iff): ...


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all AST nodes in propositional formulas.

    Printing precedences (highest binds tightest): Atom/Value 5, Not 4,
    And 3, Or 2, Implies 1, Iff 0. A node is parenthesized exactly when its
    precedence is below the precedence handed down by its parent.
    """

    precedence: ClassVar[int]

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def children(self) -> Tuple[Expr, ...]:
        """Return the direct subexpressions, left to right."""
        return ()

    def render(self, parent_precedence: int = 0) -> str:
        """Render the node in infix form under a parent of given precedence.

        Subtrees are rendered bottom-up over an explicit stack, so the depth
        of the tree is not bounded by the interpreter's recursion limit.

        Args:
            parent_precedence: Precedence the enclosing node demands

        Returns:
            Infix text, parenthesized if this node binds too loosely
        """
        texts: Dict[int, str] = {}
        for node in walk_postorder(self):
            texts[id(node)] = node._render_bare(texts)
        return self._wrap(texts[id(self)], parent_precedence)

    def _wrap(self, text: str, parent_precedence: int) -> str:
        if self.precedence < parent_precedence:
            return f"({text})"
        return text

    def _render_bare(self, texts: Dict[int, str]) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        """Return the canonical infix representation of the node."""
        return self.render()


@dataclass(frozen=True, slots=True)
class Atom(Expr):
    """Propositional variable referenced by name.

    Attributes:
        name: The identifier string for this variable
    """

    name: str

    precedence: ClassVar[int] = 5

    def accept(self, v: Visitor):
        return v.visit_atom(self)

    def _render_bare(self, texts: Dict[int, str]) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Value(Expr):
    """Boolean constant ``true`` or ``false``.

    Attributes:
        value: The truth value of the constant
    """

    value: bool

    precedence: ClassVar[int] = 5

    def accept(self, v: Visitor):
        return v.visit_value(self)

    def _render_bare(self, texts: Dict[int, str]) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True, slots=True)
class Not(Expr):
    """Logical negation operator for Boolean expressions.

    Represents the unary negation operation that inverts the truth value
    of its operand expression.

    Attributes:
        operand: The expression being negated
    """

    operand: Expr

    precedence: ClassVar[int] = 4

    def accept(self, v: Visitor):
        """Accept visitor and dispatch to visit_not method.

        Args:
            v: Visitor instance to process this negation

        Returns:
            Result of visitor's visit_not method
        """
        return v.visit_not(self)

    def children(self) -> Tuple[Expr, ...]:
        return (self.operand,)

    def _render_bare(self, texts: Dict[int, str]) -> str:
        operand = self.operand._wrap(texts[id(self.operand)], self.precedence)
        return f"~{operand}"


@dataclass(frozen=True, slots=True)
class BinaryExpr(Expr):
    """Common shape of the two-operand connectives.

    The left operand is rendered under the node's own precedence. The right
    operand is rendered under ``right_precedence``, which is stricter, so an
    equal-precedence right child keeps its parentheses and the printed text
    re-parses into the same left-associative tree.

    Attributes:
        left: Left operand
        right: Right operand
    """

    left: Expr
    right: Expr

    symbol: ClassVar[str]
    right_precedence: ClassVar[int]

    def children(self) -> Tuple[Expr, ...]:
        return (self.left, self.right)

    def _render_bare(self, texts: Dict[int, str]) -> str:
        left = self.left._wrap(texts[id(self.left)], self.precedence)
        right = self.right._wrap(texts[id(self.right)], self.right_precedence)
        return f"{left} {self.symbol} {right}"


@dataclass(frozen=True, slots=True)
class And(BinaryExpr):
    """Logical conjunction, true when both operands are true."""

    precedence: ClassVar[int] = 3
    right_precedence: ClassVar[int] = 4
    symbol: ClassVar[str] = "&"

    def accept(self, v: Visitor):
        """Accept visitor and dispatch to visit_and method.

        Args:
            v: Visitor instance to process this conjunction

        Returns:
            Result of visitor's visit_and method
        """
        return v.visit_and(self)


@dataclass(frozen=True, slots=True)
class Or(BinaryExpr):
    """Logical disjunction, true when at least one operand is true."""

    precedence: ClassVar[int] = 2
    right_precedence: ClassVar[int] = 3
    symbol: ClassVar[str] = "|"

    def accept(self, v: Visitor):
        """Accept visitor and dispatch to visit_or method.

        Args:
            v: Visitor instance to process this disjunction

        Returns:
            Result of visitor's visit_or method
        """
        return v.visit_or(self)


@dataclass(frozen=True, slots=True)
class Implies(BinaryExpr):
    """Material implication, false only when left is true and right false."""

    precedence: ClassVar[int] = 1
    right_precedence: ClassVar[int] = 2
    symbol: ClassVar[str] = "->"

    def accept(self, v: Visitor):
        return v.visit_implies(self)


@dataclass(frozen=True, slots=True)
class Iff(BinaryExpr):
    """Biconditional, true when both operands have the same truth value.

    Implies and Iff share one parse precedence, so an Implies on the right
    of an Iff must stay parenthesized.
    """

    precedence: ClassVar[int] = 0
    right_precedence: ClassVar[int] = 2
    symbol: ClassVar[str] = "<->"

    def accept(self, v: Visitor):
        return v.visit_iff(self)


def walk_postorder(root: Expr) -> Iterator[Expr]:
    """Yield every node of the tree under ``root``, children before parents.

    The walk keeps its own stack instead of recursing, so arbitrarily deep
    trees can be traversed.

    Args:
        root: Root of the tree to walk

    Yields:
        Nodes in post-order, left subtree first
    """
    stack = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            yield node
            continue
        stack.append((node, True))
        for child in reversed(node.children()):
            stack.append((child, False))
