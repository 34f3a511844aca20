"""Output formatters for optimization results."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from maxcal.optimizer.models import FoodItem, OptimizationResult, SolverComparison
from maxcal.optimizer.totals import sum_food_vector


def food_table(foods: Sequence[FoodItem], title: str = "Foods") -> Table:
    """Build a Rich table listing foods followed by a grand total row.

    Args:
        foods: Foods to list
        title: Table title

    Returns:
        Rich Table; an empty collection shows "[empty food list]"
    """
    table = Table(title=title)
    table.add_column("Food", style="cyan", max_width=50)
    table.add_column("Weight (oz)", justify="right")
    table.add_column("Calories", justify="right", style="green")

    if not foods:
        table.add_row(Text("[empty food list]", style="dim"), "", "")
        return table

    for food in foods:
        table.add_row(
            escape(food.description[:50]),
            f"{food.weight:.2f}",
            f"{food.calories:.2f}",
        )

    total_weight, total_calories = sum_food_vector(foods)
    table.add_row(
        "[bold]GRAND TOTAL[/bold]",
        f"[bold]{total_weight:.2f}[/bold]",
        f"[bold]{total_calories:.2f}[/bold]",
        style="bold",
    )
    return table


def foods_to_dicts(foods: Sequence[FoodItem]) -> list[dict]:
    """Convert foods to JSON-serializable dicts."""
    return [
        {
            "description": f.description,
            "weight": f.weight,
            "calories": f.calories,
        }
        for f in foods
    ]


class TableFormatter:
    """Format results as Rich tables for terminal display."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize the formatter.

        Args:
            console: Rich console for output. If None, creates a new one.
        """
        self.console = console or Console()

    def format(self, result: OptimizationResult) -> None:
        """Print formatted tables to console.

        Args:
            result: Optimization result to format
        """
        status_color = "green" if result.foods else "yellow"
        header_lines = [
            f"[bold]MAX CALORIE RESULT[/bold] - {datetime.now().strftime('%Y-%m-%d %H:%M')}",
            f"Solver: {result.solver_info.get('solver', '-')}",
            f"Capacity: {result.capacity:g} oz",
            f"Status: [{status_color}]{result.status.upper()}[/{status_color}]",
        ]
        self.console.print(Panel("\n".join(header_lines), title="Food Selection"))

        self.console.print(food_table(result.foods, title="Selected Foods"))

        if result.solver_info:
            info_parts = []
            if "n_foods" in result.solver_info:
                info_parts.append(f"Candidates: {result.solver_info['n_foods']} foods")
            if "elapsed_seconds" in result.solver_info:
                info_parts.append(f"Time: {result.solver_info['elapsed_seconds']:.3f}s")
            if info_parts:
                self.console.print(f"[dim]{' | '.join(info_parts)}[/dim]")


class JSONFormatter:
    """Format results as JSON for programmatic use."""

    def format(self, result: OptimizationResult) -> str:
        """Return JSON string.

        Args:
            result: Optimization result to format

        Returns:
            JSON string
        """
        data = {
            "timestamp": datetime.now().isoformat(),
            "status": result.status,
            "success": result.success,
            "message": result.message,
            "capacity": result.capacity,
            "solution": {
                "foods": foods_to_dicts(result.foods),
                "total_weight": round(result.total_weight, 2),
                "total_calories": round(result.total_calories, 2),
            },
            "solver_info": result.solver_info,
        }
        return json.dumps(data, indent=2)


class MarkdownFormatter:
    """Format results as Markdown for documentation."""

    def format(self, result: OptimizationResult) -> str:
        """Return Markdown string.

        Args:
            result: Optimization result to format

        Returns:
            Markdown string
        """
        lines = [
            "# Max Calorie Food Selection",
            "",
            f"**Solver:** {result.solver_info.get('solver', '-')}",
            f"**Capacity:** {result.capacity:g} oz",
            f"**Total Weight:** {result.total_weight:.2f} oz",
            f"**Total Calories:** {result.total_calories:.2f}",
            "",
            "## Foods",
            "",
        ]

        if not result.foods:
            lines.append("_No foods selected._")
            return "\n".join(lines)

        lines.extend(["| Food | Weight (oz) | Calories |", "|------|-------------|----------|"])
        for food in result.foods:
            lines.append(f"| {food.description} | {food.weight:.2f} | {food.calories:.2f} |")

        return "\n".join(lines)


def print_comparison(comparison: SolverComparison, console: Optional[Console] = None) -> None:
    """Print both solver results side by side."""
    console = console or Console()

    table = Table(title="Solver Comparison")
    table.add_column("Solver")
    table.add_column("Foods", justify="right")
    table.add_column("Weight (oz)", justify="right")
    table.add_column("Calories", justify="right", style="green")
    table.add_column("Time", justify="right", style="dim")

    for result in (comparison.exhaustive, comparison.dynamic):
        table.add_row(
            result.solver_info["solver"],
            str(len(result.foods)),
            f"{result.total_weight:.2f}",
            f"{result.total_calories:.2f}",
            f"{result.solver_info['elapsed_seconds']:.3f}s",
        )

    console.print(table)
    if comparison.agree:
        console.print("[green]Both solvers found the same calorie total[/green]")
    else:
        console.print(
            f"[yellow]Calorie totals differ by {comparison.calorie_difference:+.2f} "
            f"(dynamic programming rounds weights up to whole ounces)[/yellow]"
        )


def format_result(
    result: OptimizationResult,
    output_format: str = "table",
    console: Optional[Console] = None,
) -> Optional[str]:
    """Format optimization result in the specified format.

    Args:
        result: Optimization result to format
        output_format: One of 'table', 'json', 'markdown'
        console: Rich console (for table format)

    Returns:
        Formatted string for json/markdown, None for table (prints directly)
    """
    if output_format == "table":
        formatter = TableFormatter(console)
        formatter.format(result)
        return None
    elif output_format == "json":
        return JSONFormatter().format(result)
    elif output_format == "markdown":
        return MarkdownFormatter().format(result)
    else:
        raise ValueError(f"Unknown output format: {output_format}")
