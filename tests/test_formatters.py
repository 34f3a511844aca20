"""Tests for result formatters."""

from __future__ import annotations

import json

import pytest
from rich.console import Console

from maxcal.export.formatters import (
    JSONFormatter,
    MarkdownFormatter,
    format_result,
    print_comparison,
)
from maxcal.optimizer.models import FoodItem, OptimizationRequest, SolverType
from maxcal.optimizer.solver import compare_solvers, solve_max_calories


@pytest.fixture
def result(trivial_foods):
    request = OptimizationRequest(solver=SolverType.EXHAUSTIVE, max_weight=14)
    return solve_max_calories(request, trivial_foods)


@pytest.fixture
def empty_result(trivial_foods):
    request = OptimizationRequest(solver=SolverType.DYNAMIC, max_weight=3)
    return solve_max_calories(request, trivial_foods)


def recording_console() -> Console:
    return Console(record=True, width=120, force_terminal=False)


class TestTableFormatter:
    """Tests for the Rich table output."""

    def test_lists_foods_and_totals(self, result):
        """Test that each food and the grand totals are printed."""
        console = recording_console()
        format_result(result, "table", console=console)
        text = console.export_text()

        assert "test whole corn" in text
        assert "test pasta" in text
        assert "GRAND TOTAL" in text
        assert "25.00" in text
        assert "OPTIMAL" in text

    def test_empty_solution(self, empty_result):
        """Test that an empty solution is shown as an empty list."""
        console = recording_console()
        format_result(empty_result, "table", console=console)
        text = console.export_text()
        assert "EMPTY" in text
        assert "[empty food list]" in text


class TestJSONFormatter:
    """Tests for JSON output."""

    def test_structure(self, result):
        """Test the JSON document layout."""
        data = json.loads(JSONFormatter().format(result))

        assert data["success"] is True
        assert data["status"] == "optimal"
        assert data["capacity"] == 14
        assert data["solution"]["total_weight"] == 14
        assert data["solution"]["total_calories"] == 25
        assert [f["description"] for f in data["solution"]["foods"]] == [
            "test whole corn",
            "test pasta",
        ]
        assert data["solver_info"]["solver"] == "exhaustive"


class TestMarkdownFormatter:
    """Tests for Markdown output."""

    def test_table_rows(self, result):
        """Test that each food gets a Markdown table row."""
        text = MarkdownFormatter().format(result)
        assert "| test whole corn | 10.00 | 20.00 |" in text
        assert "**Total Calories:** 25.00" in text

    def test_empty_solution(self, empty_result):
        """Test that an empty solution says so."""
        assert "_No foods selected._" in MarkdownFormatter().format(empty_result)


class TestFormatResult:
    """Tests for format dispatch."""

    def test_table_returns_none(self, result):
        assert format_result(result, "table", console=recording_console()) is None

    def test_unknown_format(self, result):
        """Test that an unknown format is rejected."""
        with pytest.raises(ValueError, match="Unknown output format"):
            format_result(result, "xml")


class TestPrintComparison:
    """Tests for the solver comparison table."""

    def test_agreement_message(self, trivial_foods):
        console = recording_console()
        print_comparison(compare_solvers(trivial_foods, 14), console)
        text = console.export_text()
        assert "exhaustive" in text
        assert "dynamic" in text
        assert "same calorie total" in text

    def test_disagreement_message(self):
        """Test that a calorie gap is reported."""
        foods = [FoodItem("a", 2.5, 10), FoodItem("b", 2.5, 10)]
        console = recording_console()
        print_comparison(compare_solvers(foods, 5), console)
        assert "differ by -10.00" in console.export_text()
