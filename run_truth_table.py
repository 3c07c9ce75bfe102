#!/usr/bin/env python3
# run_truth_table.py
# This file is part of Tabula - A Propositional Logic Truth Table Toolkit
#
# Command-line interface for formula evaluation and truth tables

import sys
import argparse
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from formula_parser import Formula, parse
from formula_parser.exceptions import ParseError
from logic import TruthTable, Verdict
from utils.logger import configure_logging, get_logger

DEFAULT_MAX_VARIABLES = 16

_TRUE_SPELLINGS = {"t", "true", "1"}
_FALSE_SPELLINGS = {"f", "false", "0"}


def read_formula_file(filepath: Path) -> List[str]:
    """Read formulas from file, one per line.

    Blank lines and lines starting with ``#`` are skipped.

    Args:
        filepath: Path to the formula file

    Returns:
        Formula strings in file order

    Raises:
        FileNotFoundError: If formula file doesn't exist
        ValueError: If formula file holds no formulas or cannot be read
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            lines = [line.strip() for line in f]
    except FileNotFoundError:
        raise FileNotFoundError(f"Formula file not found: {filepath}")
    except OSError as e:
        raise ValueError(f"Error reading formula file: {e}")

    formulas = [line for line in lines if line and not line.startswith("#")]
    if not formulas:
        raise ValueError(f"Formula file is empty: {filepath}")

    return formulas


def parse_assignment(text: str) -> Tuple[str, bool]:
    """Parse a ``NAME=VALUE`` command-line assignment.

    Args:
        text: Assignment such as ``a=T`` or ``flag=false``

    Returns:
        Variable name and truth value

    Raises:
        argparse.ArgumentTypeError: Malformed assignment or unknown value
    """
    name, sep, value = text.partition("=")
    name, value = name.strip(), value.strip().lower()

    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got '{text}'")
    if value in _TRUE_SPELLINGS:
        return name, True
    if value in _FALSE_SPELLINGS:
        return name, False

    raise argparse.ArgumentTypeError(
        f"invalid truth value '{value}' for '{name}' (use T/F, true/false or 1/0)"
    )


def load_formulas(sources: Sequence[str]) -> List[Formula]:
    """Parse every formula source, logging each one.

    Raises:
        ParseError: The first source that fails to parse
    """
    logger = get_logger()
    formulas = []

    for source in sources:
        formula = parse(source)
        logger.formula_loaded(source, str(formula), formula.sorted_variables())
        formulas.append(formula)

    return formulas


def print_evaluations(formulas: Sequence[Formula], assignment: Dict[str, bool]) -> None:
    """Print the verdict of each formula under a single assignment."""
    logger = get_logger()

    for formula in formulas:
        verdict = Verdict.from_result(formula.evaluate(assignment))
        if not verdict.is_defined():
            missing = sorted(formula.variables - set(assignment))
            logger.warning(f"Unassigned variable(s) in {formula}: {', '.join(missing)}")

        print(f"{formula} = {verdict}")


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Tabula propositional logic truth tables",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_truth_table.py "a & b | c"
  python run_truth_table.py "p -> q" "~q -> ~p"
  python run_truth_table.py "a <-> b" -a a=T -a b=F
  python run_truth_table.py -f formulas.txt --canonical

Operators (loosest to tightest):
  ->  <->     implication, biconditional
  |   ||      disjunction
  &   &&      conjunction
  ~   !       negation
Constants: true/t, false/f
        """,
    )

    parser.add_argument("formulas", nargs="*", help="Formulas to tabulate")

    parser.add_argument(
        "-f", "--file", type=Path, help="Path to a file with one formula per line"
    )

    parser.add_argument(
        "-a",
        "--assign",
        action="append",
        type=parse_assignment,
        metavar="NAME=VALUE",
        help="Evaluate under this assignment instead of printing a table (repeatable)",
    )

    parser.add_argument(
        "-c",
        "--canonical",
        action="store_true",
        help="Only print the canonical form of each formula",
    )

    parser.add_argument(
        "--max-variables",
        type=int,
        default=DEFAULT_MAX_VARIABLES,
        help=f"Refuse tables over more variables (default: {DEFAULT_MAX_VARIABLES})",
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the truth table application.

    Args:
        argv: Command-line arguments (defaults to ``sys.argv[1:]``)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    sources = list(args.formulas)
    if args.file:
        try:
            sources.extend(read_formula_file(args.file))
        except (FileNotFoundError, ValueError) as e:
            logger.error(f"Formula file error: {e}")
            return 3

    if not sources:
        parser.error("no formulas given (pass them as arguments or with --file)")

    try:
        formulas = load_formulas(sources)

        if args.canonical:
            for formula in formulas:
                print(formula)
            return 0

        if args.assign:
            print_evaluations(formulas, dict(args.assign))
            return 0

        table = TruthTable(formulas, max_variables=args.max_variables)
        print(table.render())
        return 0

    except ParseError as e:
        logger.error(f"Formula parsing error: {e}")
        return 2

    except ValueError as e:
        logger.error(f"Truth table error: {e}")
        return 4

    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        return 130

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 5


if __name__ == "__main__":
    sys.exit(main())
