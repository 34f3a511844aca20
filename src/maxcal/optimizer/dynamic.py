"""Dynamic programming (0/1 knapsack tabulation) over integer capacities."""

from __future__ import annotations

import math
import numbers
from typing import Sequence

import numpy as np

from maxcal.optimizer.models import FoodItem, FoodVector, InvalidCapacityError


def table_weight(food: FoodItem) -> int:
    """Return the integer weight a food occupies in the capacity table.

    Fractional weights are rounded up, so a tabulated solution never
    exceeds the capacity in real ounces.
    """
    return math.ceil(food.weight)


def build_calorie_table(foods: Sequence[FoodItem], capacity: int) -> np.ndarray:
    """Build the (n+1) x (capacity+1) best-calorie table.

    K[i, w] is the most calories achievable using only the first i foods
    with capacity w. Row 0 and column 0 are zero.

    Args:
        foods: Candidate foods
        capacity: Integer capacity W

    Returns:
        Float array of shape (len(foods) + 1, capacity + 1)
    """
    n = len(foods)
    K = np.zeros((n + 1, capacity + 1), dtype=float)

    for i in range(1, n + 1):
        food = foods[i - 1]
        wt = table_weight(food)
        K[i] = K[i - 1]
        if wt <= capacity:
            # Columns w >= wt may take the food: calories + K[i-1, w - wt]
            take = food.calories + K[i - 1, : capacity + 1 - wt]
            K[i, wt:] = np.maximum(K[i - 1, wt:], take)

    return K


def dynamic_max_calories(
    foods: Sequence[FoodItem],
    total_weight: int,
) -> FoodVector:
    """Compute the optimal set of foods with dynamic programming.

    Builds the calorie table, then walks back from (n, W): a row equal to
    the one above means the food was skipped, otherwise it was taken and
    its table weight is removed from the remaining capacity.

    Args:
        foods: Candidate foods
        total_weight: Integer capacity in ounces, >= 0

    Returns:
        Best subset, in the same order as foods

    Raises:
        InvalidCapacityError: If total_weight is not a non-negative integer
    """
    if isinstance(total_weight, bool) or not isinstance(total_weight, numbers.Integral):
        raise InvalidCapacityError(
            f"total_weight must be an integer capacity, got {total_weight!r}"
        )
    if total_weight < 0:
        raise InvalidCapacityError(f"total_weight must be >= 0, got {total_weight}")

    W = int(total_weight)
    K = build_calorie_table(foods, W)

    chosen: FoodVector = []
    w = W
    for i in range(len(foods), 0, -1):
        if K[i, w] == K[i - 1, w]:
            continue
        food = foods[i - 1]
        chosen.append(food)
        w -= table_weight(food)

    # Reconstruction walks backward; restore catalog order
    chosen.reverse()
    return chosen
