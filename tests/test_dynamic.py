"""Tests for the dynamic programming solver."""

from __future__ import annotations

import numpy as np
import pytest

from maxcal.optimizer.dynamic import build_calorie_table, dynamic_max_calories, table_weight
from maxcal.optimizer.filters import filter_food_vector
from maxcal.optimizer.models import FoodItem, InvalidCapacityError
from maxcal.optimizer.totals import sum_food_vector


def descriptions(foods):
    return [f.description for f in foods]


class TestDynamicTrivialCases:
    """The two-item whole corn / pasta catalog."""

    def test_nothing_fits(self, trivial_foods):
        """Test that no food fits in 3 ounces."""
        assert dynamic_max_calories(trivial_foods, 3) == []

    def test_whole_corn_only(self, trivial_foods):
        """Test that whole corn beats pasta at exactly 10 ounces."""
        assert descriptions(dynamic_max_calories(trivial_foods, 10)) == ["test whole corn"]

    def test_pasta_only(self, trivial_foods):
        """Test that only pasta fits in 9 ounces."""
        assert descriptions(dynamic_max_calories(trivial_foods, 9)) == ["test pasta"]

    def test_both_in_catalog_order(self, trivial_foods):
        """Reconstruction is returned in catalog order."""
        soln = dynamic_max_calories(trivial_foods, 14)
        assert descriptions(soln) == ["test whole corn", "test pasta"]


class TestCalorieTable:
    """Tests for build_calorie_table."""

    def test_shape_and_base_cases(self, trivial_foods):
        """Row 0 and column 0 are zero."""
        K = build_calorie_table(trivial_foods, 14)
        assert K.shape == (3, 15)
        assert np.all(K[0] == 0)
        assert np.all(K[:, 0] == 0)

    def test_values(self, trivial_foods):
        """Spot-check table entries against hand-computed values."""
        K = build_calorie_table(trivial_foods, 14)
        assert K[1, 9] == 0
        assert K[1, 10] == 20
        assert K[2, 4] == 5
        assert K[2, 13] == 20
        assert K[2, 14] == 25

    def test_item_heavier_than_capacity(self):
        """A food heavier than the whole capacity leaves its row unchanged."""
        K = build_calorie_table([FoodItem("anvil", 50, 1000)], 10)
        assert np.all(K[1] == 0)

    def test_table_weight_rounds_up(self):
        """Fractional weights occupy the next whole ounce."""
        assert table_weight(FoodItem("a", 2.01, 1)) == 3
        assert table_weight(FoodItem("b", 4, 1)) == 4


class TestDynamicCorrectness:
    """Optimality and edge-case behavior."""

    def test_sample_catalog(self, sample_foods):
        """The four most calorie-dense foods exactly fill 10 ounces."""
        foods = filter_food_vector(sample_foods, 1, 2500, len(sample_foods))
        soln = dynamic_max_calories(foods, 10)
        assert descriptions(soln) == ["olive oil", "cheddar cheese", "peanut butter", "Idaho bread"]
        assert sum_food_vector(soln) == (10, 940)

    def test_empty_input(self):
        """Test that an empty catalog yields an empty solution."""
        assert dynamic_max_calories([], 100) == []

    def test_zero_capacity(self, trivial_foods):
        """Test that zero capacity yields an empty solution."""
        assert dynamic_max_calories(trivial_foods, 0) == []

    def test_fractional_weights_stay_feasible(self):
        """Rounded-up weights never overfill the real capacity."""
        foods = [FoodItem("a", 2.5, 10), FoodItem("b", 2.5, 10)]
        soln = dynamic_max_calories(foods, 5)
        assert descriptions(soln) == ["a"]
        assert sum_food_vector(soln).weight <= 5

    def test_negative_calories_skipped(self):
        """Foods with negative calories are never chosen."""
        foods = [FoodItem("burnt toast", 1, -5), FoodItem("rice", 7, 215)]
        assert descriptions(dynamic_max_calories(foods, 100)) == ["rice"]

    def test_numpy_integer_capacity(self, trivial_foods):
        """Integer-like numpy capacities are accepted."""
        soln = dynamic_max_calories(trivial_foods, np.int64(14))
        assert len(soln) == 2


class TestDynamicPreconditions:
    """Usage errors fail fast."""

    def test_negative_capacity(self, trivial_foods):
        """Test that a negative capacity is rejected."""
        with pytest.raises(InvalidCapacityError):
            dynamic_max_calories(trivial_foods, -1)

    @pytest.mark.parametrize("capacity", [9.5, "14", None, True])
    def test_non_integer_capacity(self, trivial_foods, capacity):
        """Test that a capacity that is not an integer is rejected."""
        with pytest.raises(InvalidCapacityError):
            dynamic_max_calories(trivial_foods, capacity)
