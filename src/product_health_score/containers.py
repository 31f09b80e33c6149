"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from product_health_score.adapters.supabase_product_repository import (
    SupabaseProductRepository,
)
from product_health_score.config import Settings
from product_health_score.services.products import HealthScoreService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    health_score_service: HealthScoreService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    product_repository = SupabaseProductRepository(
        supabase_client, table_name=resolved_settings.products_table
    )
    health_score_service = HealthScoreService(product_repository)

    return AppContainer(
        settings=resolved_settings,
        health_score_service=health_score_service,
    )
