# tests/integration_tests/test_run_truth_table.py
# This file is part of Tabula - A Propositional Logic Truth Table Toolkit
#
# End-to-end tests for the command-line interface

"""Integration tests for run_truth_table.

Runs the command-line entry point in-process and checks printed output and
exit codes for tables, single assignments, canonical printing and failures.
"""

import argparse
import logging

import pytest
from formula_parser import parse
from run_truth_table import main, parse_assignment, print_evaluations, read_formula_file
from logic import LEGEND
from utils.logger import configure_logging, get_logger


class TestCommandLine:
    """End-to-end scenarios for the CLI."""

    def test_table_output(self, capsys):
        assert main(["a & b"]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "|   a   |   b   | a & b |"
        assert lines[2] == "|   T   |   T   |   T   |"
        assert lines[-1] == LEGEND

    def test_several_formulas_in_one_table(self, capsys):
        assert main(["x", "y -> x"]) == 0

        header = capsys.readouterr().out.splitlines()[0]
        assert header == "|   x   |   y   | x | y -> x |"

    def test_assignment_mode(self, capsys):
        assert main(["a & b | c", "-a", "a=T", "-a", "b=F", "-a", "c=1"]) == 0

        assert capsys.readouterr().out.strip() == "a & b | c = T"

    def test_assignment_mode_reports_undefined(self, capsys):
        assert main(["a & b", "--assign", "a=true"]) == 0

        assert capsys.readouterr().out.strip() == "a & b = E"

    def test_canonical_mode(self, capsys):
        assert main(["--canonical", "(a&&b)||!c", "a -> (b -> c)"]) == 0

        assert capsys.readouterr().out.splitlines() == ["a & b | ~c", "a -> (b -> c)"]

    def test_formula_file(self, capsys, formula_file):
        assert main(["-f", str(formula_file)]) == 0

        header = capsys.readouterr().out.splitlines()[0]
        assert header == "|   p   |   q   | p -> q | ~q -> ~p |"

    def test_parse_error_exit_code(self, capsys):
        assert main(["(a & b"]) == 2
        assert main(["a b"]) == 2
        assert capsys.readouterr().out == ""

    def test_missing_file_exit_code(self, tmp_path):
        assert main(["-f", str(tmp_path / "missing.txt")]) == 3

    def test_empty_file_exit_code(self, tmp_path):
        empty = tmp_path / "empty.txt"
        empty.write_text("# nothing here\n\n", encoding="utf-8")

        assert main(["-f", str(empty)]) == 3

    def test_variable_limit_exit_code(self):
        assert main(["a | b | c", "--max-variables", "2"]) == 4

    def test_no_formulas_is_usage_error(self):
        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 2


class TestArgumentHelpers:
    """Unit tests for CLI helper functions."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("a=T", ("a", True)),
            ("a=t", ("a", True)),
            ("flag = false", ("flag", False)),
            ("x=1", ("x", True)),
            ("x=0", ("x", False)),
        ],
    )
    def test_parse_assignment(self, text, expected):
        assert parse_assignment(text) == expected

    @pytest.mark.parametrize("text", ["a", "=T", "a=maybe", "a="])
    def test_parse_assignment_rejects(self, text):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_assignment(text)

    def test_read_formula_file_skips_comments(self, formula_file):
        assert read_formula_file(formula_file) == ["p -> q", "~q -> ~p"]

    def test_print_evaluations_warns_only_when_undefined(self, monkeypatch, capsys):
        warnings = []
        monkeypatch.setattr(get_logger(), "warning", warnings.append)

        print_evaluations([parse("a & b"), parse("a | ~a")], {"a": True})

        assert capsys.readouterr().out.splitlines() == ["a & b = E", "a | ~a = T"]
        assert warnings == ["Unassigned variable(s) in a & b: b"]


class TestLoggingFlags:
    """The logging flags set the global logger level."""

    def teardown_method(self):
        configure_logging()

    @pytest.mark.parametrize(
        "flags, level",
        [([], logging.WARNING), (["-v"], logging.INFO), (["-v", "--debug"], logging.DEBUG)],
    )
    def test_log_level_from_flags(self, flags, level, capsys):
        assert main([*flags, "a"]) == 0

        assert get_logger().logger.level == level
