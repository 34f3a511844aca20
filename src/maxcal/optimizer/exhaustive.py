"""Exhaustive search over every subset of a small food collection."""

from __future__ import annotations

from typing import Sequence

from maxcal.optimizer.models import (
    ExhaustiveSizeError,
    FoodItem,
    FoodVector,
    InvalidCapacityError,
)
from maxcal.optimizer.totals import sum_food_vector

# Subset masks must fit a 64-bit unsigned integer
EXHAUSTIVE_MAX_ITEMS = 64


def exhaustive_max_calories(
    foods: Sequence[FoodItem],
    total_weight: float,
) -> FoodVector:
    """Compute the optimal set of foods by trying every subset.

    Each integer mask in [0, 2**n) selects the foods whose bit is set.
    Among subsets weighing at most total_weight, the first one found with
    the greatest calories wins; later subsets with equal calories do not
    replace it. The empty subset is the starting best.

    Args:
        foods: Candidate foods; fewer than EXHAUSTIVE_MAX_ITEMS
        total_weight: Maximum total weight in ounces, >= 0

    Returns:
        Best subset, in the same order as foods

    Raises:
        ExhaustiveSizeError: If there are EXHAUSTIVE_MAX_ITEMS foods or more
        InvalidCapacityError: If total_weight is negative
    """
    n = len(foods)
    if n >= EXHAUSTIVE_MAX_ITEMS:
        raise ExhaustiveSizeError(n, EXHAUSTIVE_MAX_ITEMS)
    if total_weight < 0:
        raise InvalidCapacityError(f"total_weight must be >= 0, got {total_weight}")

    best: FoodVector = []
    best_calories = 0.0

    for mask in range(1 << n):
        candidate = [foods[j] for j in range(n) if (mask >> j) & 1]
        candidate_weight, candidate_calories = sum_food_vector(candidate)

        if candidate_weight <= total_weight and candidate_calories > best_calories:
            best = candidate
            best_calories = candidate_calories

    return best
