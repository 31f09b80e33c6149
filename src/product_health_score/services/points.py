"""Negative and positive point scoring over nutrition records."""

from collections.abc import Mapping

from product_health_score.domain.nutrition import (
    Category,
    NutrientDimension,
    NutritionRecord,
    PositiveBreakdown,
    ThresholdLadder,
)
from product_health_score.services.normalizer import normalize

CUSTOM_FIELDS_KEY = "customNutritionFields"

# Field paths per dimension, in resolution order. A path descends into nested
# mappings one key at a time.
FIELD_ALIASES: Mapping[NutrientDimension, tuple[tuple[str, ...], ...]] = {
    NutrientDimension.ENERGY: (("energy",),),
    NutrientDimension.SUGARS: (("totalSugars",), ("sugars",)),
    NutrientDimension.SATURATED_FAT: (
        (CUSTOM_FIELDS_KEY, "saturatedFat"),
        ("saturatedFat",),
    ),
    NutrientDimension.SODIUM: (("sodium",),),
    NutrientDimension.FIBER: (("dietaryFiber",), ("fiber",)),
    NutrientDimension.PROTEIN: (("protein",),),
    NutrientDimension.FVLN_PERCENTAGE: (("fruitsVegetablesNuts",),),
}

NEGATIVE_DIMENSIONS = (
    NutrientDimension.ENERGY,
    NutrientDimension.SUGARS,
    NutrientDimension.SATURATED_FAT,
    NutrientDimension.SODIUM,
)

NEGATIVE_LADDERS: Mapping[tuple[NutrientDimension, Category], ThresholdLadder] = {
    (NutrientDimension.ENERGY, Category.FOOD): ThresholdLadder(
        (80, 160, 240, 320, 400, 480, 560, 640, 720, 800)
    ),
    (NutrientDimension.SUGARS, Category.FOOD): ThresholdLadder(
        (4.5, 9.0, 13.5, 18.0, 22.5, 27.0, 31.5, 36.0, 40.5, 45.0)
    ),
    (NutrientDimension.SATURATED_FAT, Category.FOOD): ThresholdLadder(
        (1, 2, 3, 4, 5, 6, 7, 8, 9, 10)
    ),
    (NutrientDimension.SODIUM, Category.FOOD): ThresholdLadder(
        (90, 180, 270, 360, 450, 540, 630, 720, 810, 900)
    ),
    (NutrientDimension.ENERGY, Category.BEVERAGE): ThresholdLadder(
        (7.2, 14.3, 21.5, 28.7, 35.9, 43.0, 50.2, 57.4, 64.5)
    ),
    (NutrientDimension.SUGARS, Category.BEVERAGE): ThresholdLadder(
        (0, 1.5, 3.0, 4.5, 6.0, 7.5, 9.0, 10.5, 12.0, 13.5)
    ),
    (NutrientDimension.SATURATED_FAT, Category.BEVERAGE): ThresholdLadder(
        (0, 0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9, 1.0)
    ),
    (NutrientDimension.SODIUM, Category.BEVERAGE): ThresholdLadder(
        (0, 45, 90, 135, 180, 225, 270, 315, 360, 405)
    ),
}

FIBER_LADDER = ThresholdLadder((0.7, 1.4, 2.1, 2.8, 3.5))
PROTEIN_LADDER = ThresholdLadder((1.6, 3.2, 4.8, 6.4, 8.0))

# (minimum percentage, points), highest band first.
FVLN_BANDS: tuple[tuple[float, int], ...] = ((80, 5), (60, 2), (40, 1))
FVLN_MAX_POINTS = FVLN_BANDS[0][1]


def resolve_field(record: NutritionRecord, dimension: NutrientDimension) -> object:
    """Return the raw value of the first present alias for a dimension."""
    for path in FIELD_ALIASES[dimension]:
        value = _lookup(record, path)
        if _is_present(value):
            return value
    return None


def resolve_quantity(record: NutritionRecord, dimension: NutrientDimension) -> float:
    """Resolve and normalize a dimension from a record."""
    return normalize(resolve_field(record, dimension), dimension)


def score_negative(record: NutritionRecord, category: Category) -> int:
    """Sum ladder points for energy, sugars, saturated fat and sodium."""
    return sum(
        NEGATIVE_LADDERS[dimension, category].points(
            resolve_quantity(record, dimension)
        )
        for dimension in NEGATIVE_DIMENSIONS
    )


def score_positive(record: NutritionRecord) -> PositiveBreakdown:
    """Score produce content, fiber and protein."""
    return PositiveBreakdown(
        fvln=fvln_points(
            resolve_quantity(record, NutrientDimension.FVLN_PERCENTAGE)
        ),
        fiber=FIBER_LADDER.points(resolve_quantity(record, NutrientDimension.FIBER)),
        protein=PROTEIN_LADDER.points(
            resolve_quantity(record, NutrientDimension.PROTEIN)
        ),
    )


def fvln_points(percentage: float) -> int:
    """Return points for the highest produce-content band reached."""
    for minimum, points in FVLN_BANDS:
        if percentage >= minimum:
            return points
    return 0


def _lookup(record: NutritionRecord, path: tuple[str, ...]) -> object:
    current: object = record
    for key in path:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
    return current


def _is_present(value: object) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True
