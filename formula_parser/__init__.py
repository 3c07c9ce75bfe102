# formula_parser/__init__.py
# This file is part of Tabula - A Propositional Logic Truth Table Toolkit
#
# Formula parsing, evaluation and printing for propositional logic

"""Propositional formula compiler.

This package turns infix formula text into an immutable expression tree,
evaluates that tree against variable assignments and prints it back in a
canonical form. Parsing runs in two phases that can also be driven
separately for testing:

    text -> tokenize -> postfix tokens -> build -> Formula

Core Functions:
    parse: Converts formula strings into Formula objects
    tokenize: Shunting-yard conversion into a postfix token list
    build: Reduction of a postfix token list into a Formula
    evaluate: Truth value of a Formula under an assignment
    to_string: Canonical infix form of a Formula

Supported Logic:
    - Variables (letter runs, or any single unrecognised character)
    - Constants true/t and false/f, case-insensitive
    - Negation (~, !), conjunction (&, &&), disjunction (|, ||)
    - Implication (->) and biconditional (<->)
    - Parenthetical grouping

Example:
    >>> from formula_parser import parse, evaluate
    >>> formula = parse("a & b | c")
    >>> evaluate(formula, {"a": True, "b": False, "c": True})
    True
"""

from typing import Mapping, Optional

from .ast_nodes import And, Atom, Expr, Iff, Implies, Not, Or, Value
from .builder import build
from .exceptions import InvalidExpressionError, ParseError, UnbalancedParenthesesError
from .formula import Formula
from .shunting_yard import tokenize
from utils.logger import get_logger


def parse(source: str) -> Formula:
    """Parse a formula string into a Formula.

    Args:
        source: Infix formula text

    Returns:
        Formula wrapping the expression tree and its variables

    Raises:
        UnbalancedParenthesesError: Parentheses do not pair up
        InvalidExpressionError: Operators and operands do not form one tree
        ParseError: Any other failure while parsing

    Example:
        >>> str(parse("(a | b) & ~c"))
        '(a | b) & ~c'
    """
    logger = get_logger()
    logger.debug(f"Parsing formula: {source}")

    try:
        result = build(tokenize(source))
        logger.debug(
            f"Formula parsed successfully with variables: {result.sorted_variables()}"
        )
        return result

    except ParseError:
        logger.debug("ParseError encountered during formula parsing")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


def evaluate(formula: Formula, assignment: Mapping[str, bool]) -> Optional[bool]:
    """Evaluate ``formula`` under ``assignment``.

    Returns None, never False, when a variable of the formula is missing
    from the assignment.
    """
    return formula.evaluate(assignment)


def to_string(formula: Formula) -> str:
    """Return the canonical infix form of ``formula``."""
    return str(formula)


__all__ = [
    "parse",
    "tokenize",
    "build",
    "evaluate",
    "to_string",
    "Formula",
    "Expr",
    "Atom",
    "Value",
    "Not",
    "And",
    "Or",
    "Implies",
    "Iff",
    "ParseError",
    "UnbalancedParenthesesError",
    "InvalidExpressionError",
]

__version__ = "1.0.0"
__description__ = "Propositional formula parsing, evaluation and printing"
