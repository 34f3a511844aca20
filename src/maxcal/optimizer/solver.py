"""Run the max-calorie solvers on a food catalog."""

from __future__ import annotations

import logging
import time
from typing import Sequence

from maxcal.optimizer.dynamic import dynamic_max_calories
from maxcal.optimizer.exhaustive import exhaustive_max_calories
from maxcal.optimizer.filters import filter_food_vector
from maxcal.optimizer.models import (
    FoodItem,
    FoodVector,
    InvalidCapacityError,
    OptimizationRequest,
    OptimizationResult,
    SolverComparison,
    SolverType,
)
from maxcal.optimizer.totals import sum_food_vector

logger = logging.getLogger(__name__)

# Calorie totals closer than this are considered equal
CALORIE_TOLERANCE = 1e-6


def dynamic_capacity(max_weight: float) -> int:
    """Round a real weight limit to the integer capacity used by the DP table."""
    return int(round(max_weight))


def select_foods(
    request: OptimizationRequest,
    foods: Sequence[FoodItem],
) -> FoodVector:
    """Apply the request's calorie range and size limit to a catalog.

    Args:
        request: Optimization request
        foods: Full catalog

    Returns:
        Filtered foods in catalog order
    """
    min_calories, max_calories = request.calorie_range
    limit = request.max_foods if request.max_foods is not None else max(len(foods), 1)
    return filter_food_vector(foods, min_calories, max_calories, limit)


def _run_solver(
    solver: SolverType,
    foods: FoodVector,
    max_weight: float,
    max_dp_capacity: int,
) -> OptimizationResult:
    """Run one solver and wrap its output in an OptimizationResult."""
    # Checked before rounding, so -0.4 does not become capacity 0
    if max_weight < 0:
        raise InvalidCapacityError(f"Weight limit must be non-negative, got {max_weight!r}")

    start_time = time.time()

    if solver == SolverType.EXHAUSTIVE:
        capacity: float = max_weight
        chosen = exhaustive_max_calories(foods, max_weight)
        candidates = 1 << len(foods)
    else:
        capacity = dynamic_capacity(max_weight)
        if capacity > max_dp_capacity:
            raise InvalidCapacityError(
                f"Capacity {capacity} exceeds the configured maximum of {max_dp_capacity}"
            )
        chosen = dynamic_max_calories(foods, int(capacity))
        candidates = (len(foods) + 1) * (int(capacity) + 1)

    elapsed = time.time() - start_time
    total_weight, total_calories = sum_food_vector(chosen)

    logger.debug(
        "%s solver: %d foods, capacity %s, %d candidates in %.3fs",
        solver.value,
        len(foods),
        capacity,
        candidates,
        elapsed,
    )

    if chosen:
        status = "optimal"
        message = f"Selected {len(chosen)} of {len(foods)} foods"
    else:
        status = "empty"
        message = "No food fits within the weight limit"

    return OptimizationResult(
        success=True,
        status=status,
        message=message,
        foods=chosen,
        total_weight=total_weight,
        total_calories=total_calories,
        capacity=capacity,
        solver_info={
            "solver": solver.value,
            "n_foods": len(foods),
            "candidates": candidates,
            "elapsed_seconds": elapsed,
        },
    )


def solve_max_calories(
    request: OptimizationRequest,
    foods: Sequence[FoodItem],
) -> OptimizationResult:
    """Filter a catalog and find the calorie-maximizing subset.

    The exhaustive solver uses max_weight as given; the dynamic solver
    uses it rounded to the nearest integer capacity.

    Args:
        request: Optimization request
        foods: Full catalog, in catalog order

    Returns:
        OptimizationResult with the chosen foods and totals

    Raises:
        UsageError: If the request violates a solver precondition
    """
    selected = select_foods(request, foods)
    logger.info(
        "Optimizing %d of %d foods with the %s solver",
        len(selected),
        len(foods),
        request.solver.value,
    )
    return _run_solver(
        request.solver, selected, request.max_weight, request.max_dp_capacity
    )


def compare_solvers(
    foods: Sequence[FoodItem],
    max_weight: float,
    max_dp_capacity: int = 1_000_000,
) -> SolverComparison:
    """Run both solvers on the same foods and compare calorie totals.

    Args:
        foods: Candidate foods (already filtered)
        max_weight: Weight limit in ounces
        max_dp_capacity: Largest integer capacity allowed for the DP table

    Returns:
        SolverComparison with both results
    """
    foods = list(foods)
    exhaustive = _run_solver(SolverType.EXHAUSTIVE, foods, max_weight, max_dp_capacity)
    dynamic = _run_solver(SolverType.DYNAMIC, foods, max_weight, max_dp_capacity)
    difference = dynamic.total_calories - exhaustive.total_calories

    return SolverComparison(
        exhaustive=exhaustive,
        dynamic=dynamic,
        calorie_difference=difference,
        agree=abs(difference) <= CALORIE_TOLERANCE,
    )
