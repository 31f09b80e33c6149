"""Aggregate point tallies into a 0-100 health score."""

import logging
import math

from product_health_score.domain.nutrition import (
    Category,
    HealthScoreResult,
    NutritionRecord,
    PositiveBreakdown,
    ScoreDetails,
    parse_category,
)
from product_health_score.services.points import (
    FVLN_MAX_POINTS,
    score_negative,
    score_positive,
)

NEGATIVE_POINTS_CAP = 11
MIN_FSA_SCORE = -15
MAX_FSA_SCORE = 40

_logger = logging.getLogger(__name__)


def fsa_score(negative_points: int, positive: PositiveBreakdown) -> int:
    """Combine tallies, dropping protein once negative points hit the cap.

    Protein still counts when produce content earned the maximum points.
    """
    if negative_points < NEGATIVE_POINTS_CAP or positive.fvln == FVLN_MAX_POINTS:
        return negative_points - positive.total
    return negative_points - (positive.fvln + positive.fiber)


def rescale(raw_score: float) -> int:
    """Map a raw score onto 0-100 where lower raw scores are healthier."""
    scaled = (raw_score - MIN_FSA_SCORE) * 100 / (MAX_FSA_SCORE - MIN_FSA_SCORE)
    clamped = min(max(scaled, 0.0), 100.0)
    # Non-negative, so half-up is half-away-from-zero.
    return math.floor(100 - clamped + 0.5)


def aggregate(negative_points: int, positive: PositiveBreakdown) -> HealthScoreResult:
    """Build the health score result from point tallies."""
    raw_score = fsa_score(negative_points, positive)
    return HealthScoreResult(
        health_score=rescale(raw_score),
        details=ScoreDetails(
            negative_points=negative_points,
            positive_points=positive.total,
            fsa_score=raw_score,
        ),
    )


def compute_health_score(
    record: NutritionRecord, category: object = Category.FOOD
) -> HealthScoreResult:
    """Score a nutrition record for the given category."""
    resolved_category = parse_category(category)
    negative_points = score_negative(record, resolved_category)
    positive = score_positive(record)
    result = aggregate(negative_points, positive)
    _logger.debug(
        "Health score computed: category=%s negative=%s positive=%s fsa=%s score=%s",
        resolved_category,
        negative_points,
        positive.total,
        result.details.fsa_score,
        result.health_score,
    )
    return result
