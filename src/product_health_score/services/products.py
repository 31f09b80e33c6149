"""Product health scoring backed by a product store."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from product_health_score.domain.nutrition import (
    Category,
    HealthScoreResult,
    NutritionRecord,
    parse_category,
)
from product_health_score.domain.products import ProductHealthScore, ProductRecord
from product_health_score.services.scoring import compute_health_score

_logger = logging.getLogger(__name__)


class ProductNotFoundError(LookupError):
    """Raised when a product id has no stored record."""

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product not found: {product_id}")
        self.product_id = product_id


class ProductRepository(Protocol):
    """Persistence interface for products."""

    def get_product(self, product_id: str) -> ProductRecord | None:
        """Return the product, if present."""

    def save_health_score(
        self, product_id: str, result: HealthScoreResult, scored_at: datetime
    ) -> None:
        """Store the computed health score for a product."""


@dataclass
class HealthScoreService:
    """Service that scores stored products and records the result."""

    repository: ProductRepository

    def score_product(
        self, product_id: str, category: object = None
    ) -> ProductHealthScore:
        """Score a stored product and persist the result.

        An explicit ``category`` overrides the flag stored with the product.
        """
        product = self.repository.get_product(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)

        resolved_category = parse_category(
            category if category is not None else product.category
        )
        result = compute_health_score(product.nutrition_info, resolved_category)
        self.repository.save_health_score(
            product_id, result, scored_at=datetime.now(tz=UTC)
        )
        _logger.info(
            "Health score saved: product_id=%s category=%s score=%s",
            product_id,
            resolved_category,
            result.health_score,
        )
        return ProductHealthScore(
            product_id=product_id, category=resolved_category, result=result
        )

    def score_record(
        self, record: NutritionRecord, category: object = None
    ) -> tuple[Category, HealthScoreResult]:
        """Score a nutrition record without touching the store."""
        resolved_category = parse_category(category)
        return resolved_category, compute_health_score(record, resolved_category)
