"""Parsing and unit normalization of raw nutrition label values."""

import math
import re

from product_health_score.domain.nutrition import NutrientDimension

# Leading number (at most one decimal point), optional whitespace, then an
# optional alphabetic or percent unit. Anything after the first pair is ignored.
_QUANTITY_PATTERN = re.compile(r"^(\d+(?:\.\d*)?|\.\d+)\s*([^\W\d_]+|%)?")

_KJ_PER_KCAL = 4.184

_MASS_DIMENSIONS = frozenset(
    {
        NutrientDimension.SUGARS,
        NutrientDimension.SATURATED_FAT,
        NutrientDimension.FIBER,
        NutrientDimension.PROTEIN,
    }
)

_MICROGRAM_UNITS = frozenset({"mcg", "µg", "μg", "ug"})


def parse_quantity(raw_value: object) -> tuple[float, str | None]:
    """Split a raw value into ``(magnitude, unit)``.

    Numbers are returned as-is with no unit. Strings are trimmed and matched
    against a leading ``number[unit]`` pattern; the unit is lower-cased.
    Missing, blank or unparseable values yield ``(0.0, None)``.
    """
    if raw_value is None or isinstance(raw_value, bool):
        return 0.0, None
    if isinstance(raw_value, int | float):
        return _finite_magnitude(raw_value), None

    match = _QUANTITY_PATTERN.match(str(raw_value).strip())
    if not match:
        return 0.0, None
    magnitude = _finite_magnitude(match.group(1))
    unit = match.group(2)
    return magnitude, unit.lower() if unit else None


def _finite_magnitude(value: int | float | str) -> float:
    """Convert to float, mapping overflow and non-finite results to zero."""
    try:
        magnitude = float(value)
    except OverflowError:
        return 0.0
    return magnitude if math.isfinite(magnitude) else 0.0


def normalize(raw_value: object, dimension: NutrientDimension) -> float:
    """Convert a raw value into the canonical unit of its dimension."""
    magnitude, unit = parse_quantity(raw_value)
    return convert(magnitude, unit, dimension)


def convert(magnitude: float, unit: str | None, dimension: NutrientDimension) -> float:
    """Apply the unit conversion for a dimension to a parsed quantity."""
    if dimension is NutrientDimension.ENERGY:
        return magnitude / _KJ_PER_KCAL if unit == "kj" else magnitude
    if dimension is NutrientDimension.SODIUM:
        return magnitude * 1000 if unit == "g" else magnitude
    if dimension is NutrientDimension.FVLN_PERCENTAGE:
        # An unmarked percentage is not trusted.
        return magnitude if unit == "%" else 0.0
    if dimension in _MASS_DIMENSIONS:
        if unit == "mg":
            return magnitude / 1000
        if unit in _MICROGRAM_UNITS:
            return magnitude / 1_000_000
        return magnitude
    return magnitude
