"""Data models for food items, optimization requests and results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple, Optional


@dataclass(frozen=True)
class FoodItem:
    """One food item available for purchase.

    Attributes:
        description: Human-readable label, e.g. "spicy chicken breast". Must be non-empty.
        weight: Weight in ounces. Must be positive.
        calories: Calories; expected non-negative but not enforced.
    """

    description: str
    weight: float
    calories: float

    def __post_init__(self) -> None:
        if not self.description:
            raise InvalidFoodItemError("FoodItem.description must be non-empty")
        if not self.weight > 0:
            raise InvalidFoodItemError(
                f"FoodItem[{self.description}] weight must be > 0, got {self.weight}"
            )


# Ordered collection of shared FoodItem references
FoodVector = list[FoodItem]


class FoodTotals(NamedTuple):
    """Total weight and calories of a food collection."""

    weight: float
    calories: float


class SolverType(Enum):
    """Available optimization algorithms."""

    EXHAUSTIVE = "exhaustive"
    DYNAMIC = "dynamic"


@dataclass
class OptimizationRequest:
    """Input specification for a max-calorie run."""

    solver: SolverType = SolverType.DYNAMIC
    max_weight: float = 500.0
    calorie_range: tuple[float, float] = (1.0, 2500.0)
    max_foods: Optional[int] = None  # Filter limit; None keeps every match
    max_dp_capacity: int = 1_000_000


@dataclass
class OptimizationResult:
    """Complete output from a solver run."""

    success: bool
    status: str  # 'optimal', 'empty'
    message: str
    foods: FoodVector
    total_weight: float
    total_calories: float
    capacity: float
    solver_info: dict = field(default_factory=dict)  # solver, candidates, time


@dataclass
class SolverComparison:
    """Side-by-side results of both solvers on the same input."""

    exhaustive: OptimizationResult
    dynamic: OptimizationResult
    calorie_difference: float
    agree: bool


# Custom exceptions


class MaxCalError(Exception):
    """Base exception for maxcal errors."""

    pass


class UsageError(MaxCalError, ValueError):
    """Raised when an operation is called with arguments outside its contract."""

    pass


class InvalidLimitError(UsageError):
    """Raised when a filter limit is not a positive integer."""

    pass


class ExhaustiveSizeError(UsageError):
    """Raised when the exhaustive solver is given too many items."""

    def __init__(self, n_items: int, max_items: int):
        super().__init__(
            f"Exhaustive search requires fewer than {max_items} items, got {n_items}; "
            f"filter the catalog first"
        )
        self.n_items = n_items
        self.max_items = max_items


class InvalidCapacityError(UsageError):
    """Raised when a weight capacity is negative or of the wrong kind."""

    pass


class InvalidFoodItemError(MaxCalError, ValueError):
    """Raised when a food item violates its invariants."""

    pass


class FoodDatabaseError(MaxCalError):
    """Raised when a food catalog cannot be opened or read."""

    pass
