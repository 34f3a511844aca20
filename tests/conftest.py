"""Pytest fixtures for maxcal tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from maxcal.optimizer.models import FoodItem

SAMPLE_CATALOG = """\
description^weight_ounces^calories
refried spicy beans^9^450
plain water^8^0
grilled chicken breast^6^280
brown rice^7^215
olive oil^1^120
bad weight^abc^100
too^many^fields^here
lentil soup^10^230
zero weight snack^0^90
sourdough loaf^12^900
cheddar cheese^2^230
burnt toast^1^-5
peanut butter^2^190
Idaho bread^5^400
"""


@pytest.fixture
def trivial_foods():
    """Two foods: whole corn (10 oz, 20 kcal) and pasta (4 oz, 5 kcal)."""
    return [
        FoodItem("test whole corn", 10, 20.0),
        FoodItem("test pasta", 4, 5.0),
    ]


@pytest.fixture
def sample_catalog(tmp_path) -> Path:
    """Write a small '^'-delimited catalog with a few malformed rows."""
    path = tmp_path / "food.csv"
    path.write_text(SAMPLE_CATALOG)
    return path


@pytest.fixture
def sample_foods():
    """The valid rows of SAMPLE_CATALOG, in file order."""
    return [
        FoodItem("refried spicy beans", 9, 450),
        FoodItem("plain water", 8, 0),
        FoodItem("grilled chicken breast", 6, 280),
        FoodItem("brown rice", 7, 215),
        FoodItem("olive oil", 1, 120),
        FoodItem("lentil soup", 10, 230),
        FoodItem("sourdough loaf", 12, 900),
        FoodItem("cheddar cheese", 2, 230),
        FoodItem("burnt toast", 1, -5),
        FoodItem("peanut butter", 2, 190),
        FoodItem("Idaho bread", 5, 400),
    ]
