"""Narrow a food catalog before optimization.

Filtering serves two purposes:
1. Drop foods with zero or negative calories, which can never improve a solution.
2. Bound the input size for the exhaustive solver, whose cost doubles per item.
"""

from __future__ import annotations

import numbers
from typing import Sequence

from maxcal.optimizer.models import FoodItem, FoodVector, InvalidLimitError


def filter_food_vector(
    source: Sequence[FoodItem],
    min_calories: float,
    max_calories: float,
    total_size: int,
) -> FoodVector:
    """Return the first foods of source whose calories fall in a range.

    A food is kept when its calories are > 0 and within
    [min_calories, max_calories] (inclusive). Scanning stops once
    total_size foods are kept; non-matching foods are skipped.

    Args:
        source: Foods to filter, in catalog order
        min_calories: Inclusive lower calorie bound
        max_calories: Inclusive upper calorie bound
        total_size: Maximum number of foods to return, must be positive

    Returns:
        New list of matching foods in source order

    Raises:
        InvalidLimitError: If total_size is not a positive integer
    """
    if (
        isinstance(total_size, bool)
        or not isinstance(total_size, numbers.Integral)
        or total_size <= 0
    ):
        raise InvalidLimitError(f"total_size must be a positive integer, got {total_size!r}")

    filtered: FoodVector = []
    for food in source:
        if len(filtered) >= total_size:
            break
        if food.calories > 0 and min_calories <= food.calories <= max_calories:
            filtered.append(food)

    return filtered
