# logic/__init__.py

"""Truth-table interface.

This package provides:
  • TruthTable: enumeration of all assignments over one or more formulas
  • TruthTableRow: one assignment with the verdict of every formula
  • Verdict: tri-state outcome (TRUE, FALSE, UNDEFINED)
"""

from .truth_table import TruthTable, TruthTableRow
from .verdict import LEGEND, Verdict

__all__ = [
    "TruthTable",
    "TruthTableRow",
    "Verdict",
    "LEGEND",
]
