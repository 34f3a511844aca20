"""Food catalog loading."""

from maxcal.data.food_loader import FoodLoader, LoadReport, load_food_database

__all__ = ["FoodLoader", "LoadReport", "load_food_database"]
