"""Tests for score aggregation and the scoring entry point."""

import pytest

from product_health_score.domain.nutrition import Category, PositiveBreakdown
from product_health_score.services.scoring import (
    aggregate,
    compute_health_score,
    fsa_score,
    rescale,
)
from tests.conftest import SAMPLE_NUTRITION

HEAVY_NEGATIVE = {"energy": "900", "sugars": "50g"}


def test_fsa_score_below_cap_uses_all_positive_points() -> None:
    assert fsa_score(8, PositiveBreakdown(fvln=2, fiber=4, protein=3)) == -1
    assert fsa_score(10, PositiveBreakdown(fvln=0, fiber=0, protein=5)) == 5


def test_fsa_score_at_cap_drops_protein() -> None:
    assert fsa_score(11, PositiveBreakdown(fvln=2, fiber=1, protein=5)) == 8
    assert fsa_score(20, PositiveBreakdown(fvln=1, fiber=1, protein=5)) == 18


def test_fsa_score_at_cap_keeps_protein_with_max_produce() -> None:
    assert fsa_score(20, PositiveBreakdown(fvln=5, fiber=1, protein=5)) == 9


@pytest.mark.parametrize(
    ("raw_score", "expected"),
    [
        (-15, 100),
        (40, 0),
        (-20, 100),
        (55, 0),
        (-1, 75),
        (0, 73),
        (9, 56),
        (18, 40),
        (28, 22),
    ],
)
def test_rescale_maps_inverts_and_clamps(raw_score: int, expected: int) -> None:
    assert rescale(raw_score) == expected


def test_aggregate_builds_details() -> None:
    result = aggregate(8, PositiveBreakdown(fvln=2, fiber=4, protein=3))

    assert result.health_score == 75
    assert result.details.negative_points == 8
    assert result.details.positive_points == 9
    assert result.details.fsa_score == -1


def test_compute_health_score_food_example() -> None:
    result = compute_health_score(SAMPLE_NUTRITION, Category.FOOD)

    assert result.to_dict() == {
        "healthScore": 75,
        "calculationDetails": {
            "negativePoints": 8,
            "positivePoints": 9,
            "fsaScore": -1,
        },
    }


def test_compute_health_score_beverage_example() -> None:
    result = compute_health_score(SAMPLE_NUTRITION, Category.BEVERAGE)

    assert result.health_score == 22
    assert result.details.negative_points == 34
    assert result.details.positive_points == 9
    assert result.details.fsa_score == 28


def test_compute_health_score_empty_record() -> None:
    result = compute_health_score({}, "food")

    assert result.details.negative_points == 0
    assert result.details.positive_points == 0
    assert result.details.fsa_score == 0
    assert result.health_score == 73


def test_cap_rule_excludes_protein_without_max_produce() -> None:
    record = {
        **HEAVY_NEGATIVE,
        "fruitsVegetablesNuts": "50%",
        "fiber": "1",
        "protein": "9g",
    }

    result = compute_health_score(record, Category.FOOD)

    assert result.details.negative_points == 20
    assert result.details.positive_points == 7
    assert result.details.fsa_score == 20 - (1 + 1)
    assert result.health_score == 40


def test_cap_rule_includes_protein_with_max_produce() -> None:
    record = {
        **HEAVY_NEGATIVE,
        "fruitsVegetablesNuts": "85%",
        "fiber": "1",
        "protein": "9g",
    }

    result = compute_health_score(record, Category.FOOD)

    assert result.details.negative_points == 20
    assert result.details.positive_points == 11
    assert result.details.fsa_score == 9
    assert result.health_score == 56


def test_unknown_category_scores_as_food() -> None:
    as_food = compute_health_score(SAMPLE_NUTRITION, Category.FOOD)
    assert compute_health_score(SAMPLE_NUTRITION, "snack") == as_food
    assert compute_health_score(SAMPLE_NUTRITION, None) == as_food


def test_category_flag_accepts_booleans() -> None:
    as_beverage = compute_health_score(SAMPLE_NUTRITION, Category.BEVERAGE)
    assert compute_health_score(SAMPLE_NUTRITION, True) == as_beverage


def test_compute_health_score_is_repeatable() -> None:
    record = dict(SAMPLE_NUTRITION)

    first = compute_health_score(record, Category.BEVERAGE)
    second = compute_health_score(record, Category.BEVERAGE)

    assert first == second
    assert record == SAMPLE_NUTRITION


@pytest.mark.parametrize(
    "record",
    [
        {},
        SAMPLE_NUTRITION,
        {"energy": "99999kcal", "sugars": "1kg", "sodium": "9g", "saturatedFat": "80"},
        {"fruitsVegetablesNuts": "100%", "fiber": "50g", "protein": "90g"},
        {"energy": None, "sugars": "lots", "protein": [], "fiber": {"x": 1}},
        {"energy": 10**400, "sodium": "9" * 400, "protein": -(10**400)},
    ],
)
@pytest.mark.parametrize("category", list(Category))
def test_results_stay_in_range(record, category: Category) -> None:
    result = compute_health_score(record, category)

    assert 0 <= result.health_score <= 100
    assert 0 <= result.details.negative_points <= 40
    assert 0 <= result.details.positive_points <= 15
