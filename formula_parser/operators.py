# formula_parser/operators.py
# This file is part of Tabula - A Propositional Logic Truth Table Toolkit
#
# Operator table: kinds, precedence, associativity and lexemes

"""Operator table for propositional formulas.

Defines the operator set recognised by the lexer together with the
precedence and associativity rules used by the shunting-yard pass.

Operator Precedence (highest to lowest):
- ( : stack marker only, never compared for output
- ~ ! : negation, right-associative
- & && : conjunction, left-associative
- | || : disjunction, left-associative
- -> <-> : implication and biconditional, left-associative
"""

import re
from enum import Enum, auto
from typing import Dict, Optional


class Associativity(Enum):
    """Grouping direction for operators of equal precedence."""

    LEFT = auto()
    RIGHT = auto()


class OperatorKind(Enum):
    """Operators known to the tokenizer, valued by their canonical symbol."""

    AND = "&"
    OR = "|"
    NOT = "~"
    IMPLIES = "->"
    IFF = "<->"
    PARENTHESIS = "("

    @property
    def precedence(self) -> int:
        return _PRECEDENCE[self]

    @property
    def associativity(self) -> Associativity:
        if self is OperatorKind.NOT:
            return Associativity.RIGHT
        return Associativity.LEFT

    @property
    def arity(self) -> int:
        """Number of operands the operator consumes (0 for the marker)."""
        if self is OperatorKind.PARENTHESIS:
            return 0
        if self is OperatorKind.NOT:
            return 1
        return 2

    def __str__(self) -> str:
        return self.value


_PRECEDENCE: Dict[OperatorKind, int] = {
    OperatorKind.PARENTHESIS: 4,
    OperatorKind.NOT: 3,
    OperatorKind.AND: 2,
    OperatorKind.OR: 1,
    OperatorKind.IMPLIES: 0,
    OperatorKind.IFF: 0,
}

# Every accepted spelling of every operator
LEXEMES: Dict[str, OperatorKind] = {
    "<->": OperatorKind.IFF,
    "->": OperatorKind.IMPLIES,
    "&&": OperatorKind.AND,
    "||": OperatorKind.OR,
    "&": OperatorKind.AND,
    "|": OperatorKind.OR,
    "~": OperatorKind.NOT,
    "!": OperatorKind.NOT,
}

# Longest lexemes first so that "<->" wins over a bare "<" and "&&" over "&"
OPERATOR_PATTERN = "|".join(
    re.escape(lexeme) for lexeme in sorted(LEXEMES, key=len, reverse=True)
)


def lookup_operator(lexeme: str) -> Optional[OperatorKind]:
    """Return the operator spelled by ``lexeme``, or None if it is not one.

    Incomplete prefixes such as ``-`` or ``<-`` are not operators.
    """
    return LEXEMES.get(lexeme)


def should_pop(top: OperatorKind, incoming: OperatorKind) -> bool:
    """Decide whether ``top`` leaves the operator stack before ``incoming``.

    The stack top is popped when it binds tighter, or binds equally and the
    incoming operator groups to the left. Right-associative operators leave
    an equal-precedence top in place, which yields right-to-left grouping.
    """
    if top is OperatorKind.PARENTHESIS:
        return False
    if top.precedence > incoming.precedence:
        return True
    return (
        top.precedence == incoming.precedence
        and incoming.associativity is Associativity.LEFT
    )
