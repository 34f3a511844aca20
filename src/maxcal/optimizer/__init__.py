"""Max-calorie optimization engine."""

from maxcal.optimizer.dynamic import dynamic_max_calories
from maxcal.optimizer.exhaustive import EXHAUSTIVE_MAX_ITEMS, exhaustive_max_calories
from maxcal.optimizer.filters import filter_food_vector
from maxcal.optimizer.models import (
    FoodItem,
    FoodTotals,
    FoodVector,
    OptimizationRequest,
    OptimizationResult,
    SolverComparison,
    SolverType,
)
from maxcal.optimizer.solver import compare_solvers, solve_max_calories
from maxcal.optimizer.totals import sum_food_vector

__all__ = [
    "FoodItem",
    "FoodVector",
    "FoodTotals",
    "SolverType",
    "OptimizationRequest",
    "OptimizationResult",
    "SolverComparison",
    "EXHAUSTIVE_MAX_ITEMS",
    "filter_food_vector",
    "sum_food_vector",
    "exhaustive_max_calories",
    "dynamic_max_calories",
    "solve_max_calories",
    "compare_solvers",
]
