"""Nutrition scoring domain models."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum

NutritionRecord = Mapping[str, object]


class NutrientDimension(StrEnum):
    """Nutrient dimensions understood by the scoring engine."""

    ENERGY = "energy"
    SUGARS = "sugars"
    SATURATED_FAT = "saturatedFat"
    SODIUM = "sodium"
    FIBER = "fiber"
    PROTEIN = "protein"
    FVLN_PERCENTAGE = "fruitsVegetablesNutsPercentage"


class Category(StrEnum):
    """Product category selecting the negative-point ladders."""

    FOOD = "food"
    BEVERAGE = "beverage"


_BEVERAGE_FLAGS = frozenset({"beverage", "drink", "true", "yes", "1"})


def parse_category(value: object) -> Category:
    """Normalize a free-form category flag, defaulting to food."""
    if isinstance(value, Category):
        return value
    if isinstance(value, bool):
        return Category.BEVERAGE if value else Category.FOOD
    if isinstance(value, int | str):
        if str(value).strip().lower() in _BEVERAGE_FLAGS:
            return Category.BEVERAGE
    return Category.FOOD


@dataclass(frozen=True)
class ThresholdLadder:
    """Ascending breakpoints; a quantity scores one point per breakpoint exceeded."""

    breakpoints: tuple[float, ...]

    def __post_init__(self) -> None:
        pairs = zip(self.breakpoints, self.breakpoints[1:], strict=False)
        if any(low >= high for low, high in pairs):
            raise ValueError("Ladder breakpoints must be strictly increasing")

    def points(self, quantity: float) -> int:
        """Count the breakpoints strictly exceeded by the quantity."""
        return sum(1 for breakpoint in self.breakpoints if quantity > breakpoint)

    @property
    def max_points(self) -> int:
        return len(self.breakpoints)


@dataclass(frozen=True)
class PositiveBreakdown:
    """Positive points per component."""

    fvln: int
    fiber: int
    protein: int

    @property
    def total(self) -> int:
        return self.fvln + self.fiber + self.protein


@dataclass(frozen=True)
class ScoreDetails:
    """Point tallies and raw FSA-style score behind a health score."""

    negative_points: int
    positive_points: int
    fsa_score: int

    def to_dict(self) -> dict[str, int]:
        return {
            "negativePoints": self.negative_points,
            "positivePoints": self.positive_points,
            "fsaScore": self.fsa_score,
        }


@dataclass(frozen=True)
class HealthScoreResult:
    """Final 0-100 health score with its calculation details."""

    health_score: int
    details: ScoreDetails

    def to_dict(self) -> dict[str, object]:
        """Return the camelCase wire representation."""
        return {
            "healthScore": self.health_score,
            "calculationDetails": self.details.to_dict(),
        }
