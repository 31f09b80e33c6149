"""Product domain models."""

from dataclasses import dataclass, field

from product_health_score.domain.nutrition import Category, HealthScoreResult


@dataclass(frozen=True)
class ProductRecord:
    """Stored product with its raw nutrition data."""

    id: str
    nutrition_info: dict[str, object] = field(default_factory=dict)
    category: object = None


@dataclass(frozen=True)
class ProductHealthScore:
    """Health score computed for a stored product."""

    product_id: str
    category: Category
    result: HealthScoreResult
