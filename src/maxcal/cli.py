"""CLI interface using Typer."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from maxcal.config import get_settings, reload_settings
from maxcal.config.settings import Settings, default_config_path
from maxcal.optimizer.models import FoodVector, MaxCalError, OptimizationRequest, SolverType

app = typer.Typer(
    help="Choose the foods that maximize calories within a weight limit",
    no_args_is_help=True,
)
console = Console()

config_app = typer.Typer(help="Show and create configuration")
app.add_typer(config_app, name="config")

SOLVER_CHOICES = ("exhaustive", "dynamic")
OUTPUT_CHOICES = ("table", "json", "markdown")


# ============================================================================
# Helpers
# ============================================================================


def output_json(response: dict) -> None:
    """Output JSON response to stdout."""
    print(json.dumps(response, indent=2))


def configure_logging(verbose: bool) -> None:
    """Route log records through Rich; DEBUG when verbose, else WARNING."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def fail(command: str, message: str, json_output: bool) -> NoReturn:
    """Report an error and exit with status 1."""
    if json_output:
        output_json({
            "success": False,
            "command": command,
            "errors": [message],
        })
    else:
        console.print(f"[red]{escape(message)}[/red]")
    raise typer.Exit(1)


def resolve_catalog_path(catalog: Optional[Path], command: str, json_output: bool) -> Path:
    """Return the catalog path from the argument or the config file."""
    if catalog is not None:
        return catalog
    configured = get_settings().catalog.path
    if configured is None:
        fail(
            command,
            "No food catalog given. Pass a path or set catalog.path in the config file.",
            json_output,
        )
    return configured


def load_catalog(path: Path, command: str, json_output: bool) -> FoodVector:
    """Load a catalog, turning load failures into a CLI error."""
    from maxcal.data.food_loader import FoodLoader

    settings = get_settings()
    loader = FoodLoader(path, settings.catalog.delimiter)
    try:
        report = loader.load()
    except MaxCalError as e:
        fail(command, str(e), json_output)

    if report.skipped and not json_output:
        console.print(f"[dim]Skipped {report.skipped} malformed rows[/dim]")
    return report.foods


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
    config: Optional[Path] = typer.Option(
        None, "--config", help="Path to config.yaml (default: ~/.maxcal/config.yaml)"
    ),
) -> None:
    """maxcal: 0/1 knapsack over a food catalog."""
    configure_logging(verbose)
    reload_settings(config)


# ============================================================================
# Main Commands
# ============================================================================


@app.command()
def foods(
    catalog: Optional[Path] = typer.Argument(None, help="Path to the food catalog"),
    min_calories: Optional[float] = typer.Option(
        None, "--min-calories", help="Minimum calories per food (inclusive)"
    ),
    max_calories: Optional[float] = typer.Option(
        None, "--max-calories", help="Maximum calories per food (inclusive)"
    ),
    limit: Optional[int] = typer.Option(
        None, "--limit", "-n", help="Keep only the first N matching foods"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """List the foods of a catalog that fall in a calorie range."""
    from maxcal.export.formatters import food_table, foods_to_dicts
    from maxcal.optimizer.filters import filter_food_vector

    settings = get_settings()
    path = resolve_catalog_path(catalog, "foods", json_output)
    all_foods = load_catalog(path, "foods", json_output)

    lo = settings.optimization.min_calories if min_calories is None else min_calories
    hi = settings.optimization.max_calories if max_calories is None else max_calories
    size = limit if limit is not None else max(len(all_foods), 1)

    try:
        selected = filter_food_vector(all_foods, lo, hi, size)
    except MaxCalError as e:
        fail("foods", str(e), json_output)

    if json_output:
        output_json({
            "success": True,
            "command": "foods",
            "data": {
                "catalog": str(path),
                "foods": foods_to_dicts(selected),
                "total_matches": len(selected),
                "catalog_size": len(all_foods),
            },
            "human_summary": f"{len(selected)} of {len(all_foods)} foods match",
        })
        return

    console.print(food_table(selected, title=f"Foods with {lo:g}-{hi:g} calories"))
    console.print(f"[dim]Showing {len(selected)} of {len(all_foods)} foods[/dim]")


@app.command()
def optimize(
    catalog: Optional[Path] = typer.Argument(None, help="Path to the food catalog"),
    max_weight: Optional[float] = typer.Option(
        None, "--max-weight", "-w",
        help="Weight limit in ounces (the dynamic solver rounds it to the nearest whole ounce)",
    ),
    solver: Optional[str] = typer.Option(
        None, "--solver", "-s", help="Algorithm: exhaustive or dynamic"
    ),
    min_calories: Optional[float] = typer.Option(
        None, "--min-calories", help="Minimum calories per food (inclusive)"
    ),
    max_calories: Optional[float] = typer.Option(
        None, "--max-calories", help="Maximum calories per food (inclusive)"
    ),
    limit: Optional[int] = typer.Option(
        None, "--limit", "-n", help="Consider only the first N matching foods"
    ),
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help="Output format: table, json, markdown"
    ),
) -> None:
    """Find the foods with the most calories that fit a weight limit."""
    from maxcal.export.formatters import format_result
    from maxcal.optimizer.solver import solve_max_calories

    settings = get_settings()
    output_format = output or settings.defaults.output_format
    json_output = output_format == "json"

    if output_format not in OUTPUT_CHOICES:
        fail("optimize", f"Unknown output format: {output_format}", False)

    solver_name = solver or settings.optimization.solver
    if solver_name not in SOLVER_CHOICES:
        fail(
            "optimize",
            f"Unknown solver: {solver_name}. Choose one of: {', '.join(SOLVER_CHOICES)}",
            json_output,
        )

    request = _build_request(settings, max_weight, min_calories, max_calories, limit)
    request.solver = SolverType(solver_name)

    path = resolve_catalog_path(catalog, "optimize", json_output)
    all_foods = load_catalog(path, "optimize", json_output)

    try:
        if json_output:
            result = solve_max_calories(request, all_foods)
        else:
            with console.status("[bold green]Optimizing..."):
                result = solve_max_calories(request, all_foods)
    except MaxCalError as e:
        fail("optimize", str(e), json_output)

    formatted = format_result(result, output_format, console)
    if formatted is not None:
        print(formatted)


@app.command()
def compare(
    catalog: Optional[Path] = typer.Argument(None, help="Path to the food catalog"),
    max_weight: Optional[float] = typer.Option(
        None, "--max-weight", "-w",
        help="Weight limit in ounces (the dynamic solver rounds it to the nearest whole ounce)",
    ),
    min_calories: Optional[float] = typer.Option(
        None, "--min-calories", help="Minimum calories per food (inclusive)"
    ),
    max_calories: Optional[float] = typer.Option(
        None, "--max-calories", help="Maximum calories per food (inclusive)"
    ),
    limit: int = typer.Option(
        16, "--limit", "-n", help="Number of foods to compare on (exhaustive search is exponential)"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Run both solvers on the same foods and compare their answers."""
    from maxcal.export.formatters import foods_to_dicts, print_comparison
    from maxcal.optimizer.solver import compare_solvers, select_foods

    settings = get_settings()
    request = _build_request(settings, max_weight, min_calories, max_calories, limit)

    path = resolve_catalog_path(catalog, "compare", json_output)
    all_foods = load_catalog(path, "compare", json_output)

    try:
        selected = select_foods(request, all_foods)
        comparison = compare_solvers(selected, request.max_weight, request.max_dp_capacity)
    except MaxCalError as e:
        fail("compare", str(e), json_output)

    if json_output:
        output_json({
            "success": True,
            "command": "compare",
            "data": {
                "n_foods": len(selected),
                "max_weight": request.max_weight,
                "agree": comparison.agree,
                "calorie_difference": comparison.calorie_difference,
                "exhaustive": {
                    "foods": foods_to_dicts(comparison.exhaustive.foods),
                    "total_calories": comparison.exhaustive.total_calories,
                    "total_weight": comparison.exhaustive.total_weight,
                },
                "dynamic": {
                    "foods": foods_to_dicts(comparison.dynamic.foods),
                    "total_calories": comparison.dynamic.total_calories,
                    "total_weight": comparison.dynamic.total_weight,
                },
            },
        })
        return

    print_comparison(comparison, console)


def _build_request(
    settings: Settings,
    max_weight: Optional[float],
    min_calories: Optional[float],
    max_calories: Optional[float],
    limit: Optional[int],
) -> OptimizationRequest:
    """Merge CLI options over configured defaults into an OptimizationRequest."""
    opt = settings.optimization
    return OptimizationRequest(
        solver=SolverType(opt.solver) if opt.solver in SOLVER_CHOICES else SolverType.DYNAMIC,
        max_weight=opt.max_weight if max_weight is None else max_weight,
        calorie_range=(
            opt.min_calories if min_calories is None else min_calories,
            opt.max_calories if max_calories is None else max_calories,
        ),
        max_foods=opt.max_foods if limit is None else limit,
        max_dp_capacity=opt.max_dp_capacity,
    )


# ============================================================================
# Config Commands
# ============================================================================


@config_app.command("show")
def config_show(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show the active configuration."""
    data = get_settings().to_dict()
    if json_output:
        output_json({"success": True, "command": "config show", "data": data})
        return

    for section, values in data.items():
        console.print(f"[bold]{section}[/bold]")
        for key, value in values.items():
            console.print(f"  {key}: [cyan]{value}[/cyan]")


@config_app.command("init")
def config_init(
    path: Optional[Path] = typer.Option(None, "--path", help="Where to write config.yaml"),
    catalog: Optional[Path] = typer.Option(None, "--catalog", help="Default food catalog path"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
) -> None:
    """Write a config file with default settings."""
    target = path or default_config_path()
    if target.exists() and not force:
        console.print(f"[yellow]Config already exists: {target}[/yellow]")
        console.print("Use [cyan]--force[/cyan] to overwrite")
        raise typer.Exit(1)

    settings = Settings()
    if catalog is not None:
        settings.catalog.path = catalog.expanduser().resolve()
    settings.save(target)
    console.print(f"[green]Wrote config to {target}[/green]")


if __name__ == "__main__":
    app()
