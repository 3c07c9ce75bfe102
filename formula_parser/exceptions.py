# formula_parser/exceptions.py
# This file is part of Tabula - A Propositional Logic Truth Table Toolkit
#
# Custom exceptions for formula tokenization and tree construction

"""Domain-specific exceptions for propositional formula processing.

This module defines the exceptions raised while turning formula text into an
expression tree. Every parse-time fault is a ``ParseError`` so callers can
catch the whole family at once, while the subclasses let tests and tools
tell the structural failure modes apart.

Undefined variables during evaluation are deliberately absent here: they are
reported as a ``None`` result, not raised.
"""


class ParseError(RuntimeError):
    """Exception raised when formula parsing fails.

    Base class for all faults raised by the tokenizer and the expression
    builder. A failed parse never produces a partial formula.
    """

    pass


class UnbalancedParenthesesError(ParseError):
    """Raised when a closing parenthesis has no opening partner, or an
    opening parenthesis is never closed.

    Attributes:
        position: Character offset of the offending parenthesis in the input
    """

    def __init__(self, message: str, position: int):
        super().__init__(message)
        self.position = position


class InvalidExpressionError(ParseError):
    """Raised when the postfix stream does not reduce to exactly one tree.

    Covers empty input, operators missing operands and operands missing an
    operator between them.
    """

    pass
