# formula_parser/tokens.py
# This file is part of Tabula - A Propositional Logic Truth Table Toolkit
#
# Postfix token types passed from the tokenizer to the expression builder

"""Token types of the postfix stream.

Tokens are produced only by the shunting-yard tokenizer and consumed only by
the expression builder. They are discarded once the tree is built.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Union

from .operators import OperatorKind


@dataclass(frozen=True, slots=True)
class OperatorToken:
    kind: OperatorKind

    def __str__(self) -> str:
        return str(self.kind)


@dataclass(frozen=True, slots=True)
class AtomToken:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class ValueToken:
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


Token = Union[OperatorToken, AtomToken, ValueToken]
