# logic/truth_table.py
# This file is part of Tabula - A Propositional Logic Truth Table Toolkit
#
# Truth table enumeration and text rendering for parsed formulas

"""
Truth tables over one or more formulas.

The table's variables are the union of all formulas' variables, sorted
ascending. Rows run from the all-true assignment down to the all-false one:
row index ``2^N - 1`` first, with the first variable as the most significant
bit.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from formula_parser.formula import Formula
from utils.logger import get_logger
from .verdict import LEGEND, Verdict

# Minimum width of a variable column
MIN_COLUMN_WIDTH = 5


@dataclass(frozen=True)
class TruthTableRow:
    """
    One assignment and the verdict of every formula under it.

    Attributes:
        assignment: Truth value of each table variable.
        verdicts: One verdict per formula, in table order.
    """
    assignment: Mapping[str, bool]
    verdicts: Tuple[Verdict, ...]


class TruthTable:
    """Enumerates all assignments of a set of formulas.

    Args:
        formulas: One or more parsed formulas
        max_variables: Optional upper bound on the number of variables

    Raises:
        ValueError: No formulas given, or more variables than allowed
    """

    def __init__(self, formulas: Sequence[Formula], max_variables: Optional[int] = None):
        if not formulas:
            raise ValueError("A truth table needs at least one formula")

        self.formulas: Tuple[Formula, ...] = tuple(formulas)
        self.variables: List[str] = sorted(
            set().union(*(formula.variables for formula in self.formulas))
        )

        if max_variables is not None and len(self.variables) > max_variables:
            raise ValueError(
                f"Truth table over {len(self.variables)} variables exceeds "
                f"the limit of {max_variables}"
            )

    def __len__(self) -> int:
        return 1 << len(self.variables)

    def assignments(self) -> Iterator[Dict[str, bool]]:
        """Yield every assignment, all-true first and all-false last."""
        count = len(self.variables)
        for index in range((1 << count) - 1, -1, -1):
            yield {
                variable: (index >> (count - 1 - position)) & 1 == 1
                for position, variable in enumerate(self.variables)
            }

    def rows(self) -> Iterator[TruthTableRow]:
        """Yield one row per assignment with every formula's verdict."""
        for assignment in self.assignments():
            verdicts = tuple(
                Verdict.from_result(formula.evaluate(assignment))
                for formula in self.formulas
            )
            yield TruthTableRow(assignment, verdicts)

    def render(self) -> str:
        """Render the table as text.

        Variable columns are centred in at least five characters, formula
        columns are as wide as the formula's canonical text. The grid is
        framed by dashed rules and followed by the symbol legend.
        """
        get_logger().table_summary(len(self.variables), len(self.formulas))

        titles = [str(formula) for formula in self.formulas]
        widths = [max(MIN_COLUMN_WIDTH, len(v)) for v in self.variables]
        widths += [len(title) for title in titles]

        header = _format_line(self.variables + titles, widths)
        rule = "-" * len(header)

        lines = [header, rule]
        for row in self.rows():
            cells = ["T" if row.assignment[v] else "F" for v in self.variables]
            cells += [verdict.symbol for verdict in row.verdicts]
            lines.append(_format_line(cells, widths))
        lines += [rule, LEGEND]

        return "\n".join(lines)


def _format_line(cells: Sequence[str], widths: Sequence[int]) -> str:
    padded = [f"{cell:^{width}}" for cell, width in zip(cells, widths)]
    return "| " + " | ".join(padded) + " |"
