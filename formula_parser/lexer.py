# formula_parser/lexer.py
# This file is part of Tabula - A Propositional Logic Truth Table Toolkit
#
# Lexical analyzer for propositional formula tokenization using SLY

"""Lexical analyzer for propositional formula strings.

This module breaks formula text into lexemes for the shunting-yard pass.
Operator spellings come from the operator table, identifier runs are split
into variables and truth constants, and any character the lexer does not
recognise is passed through as a one-character variable instead of being
rejected.

Supported Tokens:
- Operators: ~ ! & && | || -> <->
- Grouping: ( )
- Identifiers: runs of letters (variables)
- Constants: true, t, false, f (any case)
- Symbols: any other single character (variables)
- Whitespace: ignored during tokenization, including non-ASCII spaces
"""

from sly import Lexer

from . import operators
from utils.logger import get_logger

TRUE_WORDS = frozenset({"true", "t"})
FALSE_WORDS = frozenset({"false", "f"})


class FormulaLexer(Lexer):
    """SLY-based lexer for propositional formulas.

    OPERATOR tokens carry their ``OperatorKind`` as value, VALUE tokens carry
    a bool, IDENT and SYMBOL tokens carry the variable name.

    Attributes:
        tokens: Set of token types emitted by the lexer
        ignore: Characters to skip during tokenization
        ignore_whitespace: Any other Unicode whitespace, also skipped
    """

    tokens = {
        "OPERATOR",
        "LPAREN",
        "RPAREN",
        "IDENT",
        "VALUE",
        "SYMBOL",
    }

    ignore = " \t\r\n"
    ignore_whitespace = r"\s+"

    LPAREN = r"\("
    RPAREN = r"\)"

    @_(operators.OPERATOR_PATTERN)
    def OPERATOR(self, t):
        t.value = operators.lookup_operator(t.value)
        return t

    # Letters only; digits and underscores fall through to SYMBOL
    @_(r"[^\W\d_]+")
    def IDENT(self, t):
        lowered = t.value.lower()
        if lowered in TRUE_WORDS:
            t.type = "VALUE"
            t.value = True
        elif lowered in FALSE_WORDS:
            t.type = "VALUE"
            t.value = False
        return t

    def error(self, t):
        """Turn an unrecognised character into a one-character variable.

        Called by SLY when no pattern matches at the current position. This
        also covers incomplete operator prefixes such as a lone ``-`` or
        ``<``.

        Args:
            t: SLY token whose value holds the remaining input

        Returns:
            SYMBOL token for the single offending character
        """
        symbol = t.value[0]
        get_logger().debug(f"Treating '{symbol}' at position {self.index} as a variable")

        t.type = "SYMBOL"
        t.value = symbol
        self.index += 1
        return t
