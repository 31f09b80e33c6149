"""Supabase-backed product repository."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from product_health_score.domain.nutrition import HealthScoreResult
from product_health_score.domain.products import ProductRecord
from product_health_score.services.products import ProductRepository


@dataclass
class SupabaseProductRepository(ProductRepository):
    """Supabase implementation for product reads and score updates."""

    client: Client
    table_name: str = "products"

    def get_product(self, product_id: str) -> ProductRecord | None:
        """Return the product row for an id, if present."""
        response = (
            self.client.table(self.table_name)
            .select("id, nutrition_info, is_beverage, category")
            .eq("id", product_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        nutrition_info = row.get("nutrition_info")
        category = row.get("is_beverage")
        if category is None:
            category = row.get("category")
        return ProductRecord(
            id=str(row["id"]),
            nutrition_info=nutrition_info if isinstance(nutrition_info, dict) else {},
            category=category,
        )

    def save_health_score(
        self, product_id: str, result: HealthScoreResult, scored_at: datetime
    ) -> None:
        """Overwrite the stored health score, details and update timestamp."""
        response = (
            self.client.table(self.table_name)
            .update(
                {
                    "health_score": result.health_score,
                    "health_score_details": result.details.to_dict(),
                    "updated_at": scored_at.isoformat(),
                }
            )
            .eq("id", product_id)
            .execute()
        )
        if not response.data:
            raise RuntimeError(f"Failed to update health score for {product_id}")
