# formula_parser/builder.py
# This file is part of Tabula - A Propositional Logic Truth Table Toolkit
#
# Stack-based construction of expression trees from postfix tokens

"""Reduces a postfix token stream to a single expression tree.

Operands are pushed onto a stack as leaf nodes; each operator pops the
operands it needs and pushes the combined node. A well-formed stream leaves
exactly one tree behind.
"""

from typing import Dict, Iterable, List, Type

from . import ast_nodes as ast
from .exceptions import InvalidExpressionError, ParseError
from .formula import Formula
from .operators import OperatorKind
from .tokens import AtomToken, Token, ValueToken
from utils.logger import get_logger

_BINARY_NODES: Dict[OperatorKind, Type[ast.BinaryExpr]] = {
    OperatorKind.AND: ast.And,
    OperatorKind.OR: ast.Or,
    OperatorKind.IMPLIES: ast.Implies,
    OperatorKind.IFF: ast.Iff,
}


def build(tokens: Iterable[Token]) -> Formula:
    """Build a Formula from tokens in postfix order.

    Each token is read exactly once, left to right. For binary operators the
    first pop is the right operand and the second the left, preserving the
    source order.

    Args:
        tokens: Postfix token stream from ``tokenize``

    Returns:
        Formula wrapping the single remaining tree

    Raises:
        InvalidExpressionError: An operator lacks operands, or the stream
            leaves zero or several trees
        ParseError: A parenthesis marker reached the builder
    """
    logger = get_logger()
    stack: List[ast.Expr] = []

    for token in tokens:
        if isinstance(token, AtomToken):
            stack.append(ast.Atom(token.name))
            continue
        if isinstance(token, ValueToken):
            stack.append(ast.Value(token.value))
            continue

        kind = token.kind
        if kind is OperatorKind.PARENTHESIS:
            raise ParseError("Parenthesis marker found in postfix stream")

        if len(stack) < kind.arity:
            raise InvalidExpressionError(
                f"Operator '{kind}' expects {kind.arity} operand(s), "
                f"found {len(stack)}"
            )

        if kind is OperatorKind.NOT:
            stack.append(ast.Not(stack.pop()))
        else:
            right = stack.pop()
            left = stack.pop()
            stack.append(_BINARY_NODES[kind](left, right))

    if not stack:
        raise InvalidExpressionError("Input formula is empty.")
    if len(stack) > 1:
        raise InvalidExpressionError(
            f"Invalid expression: {len(stack)} subformulas are not joined by an operator"
        )

    root = stack.pop()
    logger.debug(f"Built expression tree with root type: {type(root).__name__}")
    return Formula.from_root(root)
