"""Pydantic models for health score requests."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _RequestModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ProductScoreRequest(_RequestModel):
    """Request to score a stored product."""

    product_id: str | int | None = Field(default=None, alias="productId")
    is_beverage: Any = Field(default=None, alias="isBeverage")
    category: str | None = None

    def category_flag(self) -> Any:
        """Return the explicit category flag, if the caller sent one."""
        return self.category if self.category is not None else self.is_beverage


class NutritionScoreRequest(_RequestModel):
    """Request to score a nutrition record directly."""

    nutrition_info: dict[str, object] = Field(
        default_factory=dict, alias="nutritionInfo"
    )
    is_beverage: Any = Field(default=None, alias="isBeverage")
    category: str | None = None

    def category_flag(self) -> Any:
        """Return the explicit category flag, if the caller sent one."""
        return self.category if self.category is not None else self.is_beverage
