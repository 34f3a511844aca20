"""Aggregate weight and calories of a food collection."""

from __future__ import annotations

from typing import Iterable

from maxcal.optimizer.models import FoodItem, FoodTotals


def sum_food_vector(foods: Iterable[FoodItem]) -> FoodTotals:
    """Compute the total weight and calories in a food collection.

    Args:
        foods: Food items to total

    Returns:
        FoodTotals(weight, calories); (0.0, 0.0) for an empty collection
    """
    total_weight = 0.0
    total_calories = 0.0
    for food in foods:
        total_weight += food.weight
        total_calories += food.calories
    return FoodTotals(total_weight, total_calories)
