# logic/verdict.py
# This file is part of Tabula - A Propositional Logic Truth Table Toolkit
#
# Verdict enumeration for displayed evaluation results

from enum import Enum
from typing import Optional


class Verdict(Enum):
    """Three-valued outcome of evaluating a formula under an assignment.

    Evaluation returns True, False or None; the verdict gives that result a
    first-class name so that an undefined outcome is displayed as such and
    never mistaken for False.

    Values:
        TRUE: Formula holds under the assignment
        FALSE: Formula does not hold under the assignment
        UNDEFINED: Some variable of the formula had no assigned value
    """

    TRUE = "T"
    FALSE = "F"
    UNDEFINED = "E"

    def __str__(self) -> str:
        """Return the one-letter table symbol (T, F or E)."""
        return self.value

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def from_result(cls, result: Optional[bool]) -> "Verdict":
        """Map an evaluation result to its verdict.

        Args:
            result: Value returned by ``Formula.evaluate``

        Returns:
            TRUE, FALSE, or UNDEFINED for None
        """
        if result is None:
            return cls.UNDEFINED
        return cls.TRUE if result else cls.FALSE

    def is_defined(self) -> bool:
        """Determine if this verdict is a definite truth value."""
        return self is not Verdict.UNDEFINED


LEGEND = "T: True, F: False, E: Undefined"
