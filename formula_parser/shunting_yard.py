# formula_parser/shunting_yard.py
# This file is part of Tabula - A Propositional Logic Truth Table Toolkit
#
# Shunting-yard conversion of infix formula text into postfix tokens

"""Infix to postfix conversion using the shunting-yard algorithm.

The lexer supplies lexemes left to right; operators wait on a side stack
until an operator of lower binding power, a closing parenthesis or the end
of input releases them. The resulting stream is in Reverse Polish order with
all parenthesis grouping resolved away.
"""

from typing import List

from .exceptions import UnbalancedParenthesesError
from .lexer import FormulaLexer
from .operators import OperatorKind, should_pop
from .tokens import AtomToken, OperatorToken, Token, ValueToken
from utils.logger import get_logger


def tokenize(text: str) -> List[Token]:
    """Convert formula text into a postfix token sequence.

    Args:
        text: Infix formula such as ``"a & (b | ~c)"``

    Returns:
        Tokens in postfix order, e.g. ``a b c ~ | &``

    Raises:
        UnbalancedParenthesesError: A ``)`` has no matching ``(``, or a
            ``(`` is never closed
    """
    logger = get_logger()
    logger.debug(f"Tokenizing formula: {text!r}")

    output: List[Token] = []
    stack: List[OperatorKind] = []
    # Offsets of the currently open parentheses, innermost last
    open_positions: List[int] = []

    for lexeme in FormulaLexer().tokenize(text):
        if lexeme.type == "LPAREN":
            stack.append(OperatorKind.PARENTHESIS)
            open_positions.append(lexeme.index)

        elif lexeme.type == "RPAREN":
            while True:
                if not stack:
                    raise UnbalancedParenthesesError(
                        f"Unmatched ')' at position {lexeme.index}", lexeme.index
                    )
                top = stack.pop()
                if top is OperatorKind.PARENTHESIS:
                    open_positions.pop()
                    break
                output.append(OperatorToken(top))

        elif lexeme.type == "OPERATOR":
            incoming = lexeme.value
            while stack and should_pop(stack[-1], incoming):
                output.append(OperatorToken(stack.pop()))
            stack.append(incoming)

        elif lexeme.type == "VALUE":
            output.append(ValueToken(lexeme.value))

        else:
            output.append(AtomToken(lexeme.value))

    while stack:
        top = stack.pop()
        if top is OperatorKind.PARENTHESIS:
            position = open_positions.pop()
            raise UnbalancedParenthesesError(
                f"Unclosed '(' at position {position}", position
            )
        output.append(OperatorToken(top))

    logger.debug(f"Postfix stream: {' '.join(str(token) for token in output)}")
    return output
