"""FastAPI application factory."""

import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from product_health_score.api.models import NutritionScoreRequest, ProductScoreRequest
from product_health_score.app_logging import configure_logging
from product_health_score.config import parse_cors_origins
from product_health_score.containers import AppContainer
from product_health_score.services.products import ProductNotFoundError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Product Health Score")
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_cors_origins(container.settings.cors_allow_origins),
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def invalid_request(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "detail": "Invalid request body",
                "errors": jsonable_encoder(exc.errors()),
            },
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/health-score")
    async def score_product(
        body: ProductScoreRequest, request: Request
    ) -> dict[str, object]:
        """Score a stored product and persist the result."""
        state_container: AppContainer = request.app.state.container
        product_id = str(body.product_id).strip() if body.product_id else ""
        if not product_id:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Product ID is required",
            )
        try:
            scored = state_container.health_score_service.score_product(
                product_id, category=body.category_flag()
            )
        except ProductNotFoundError as exc:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
            ) from exc
        except Exception as exc:
            logger.exception(
                "Health score calculation failed", extra={"product_id": product_id}
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=_format_error(state_container, exc),
            ) from exc
        return {
            "productId": scored.product_id,
            "category": str(scored.category),
            **scored.result.to_dict(),
        }

    @app.post("/health-score/calculate")
    async def calculate(
        body: NutritionScoreRequest, request: Request
    ) -> dict[str, object]:
        """Score a nutrition record without storing it."""
        state_container: AppContainer = request.app.state.container
        try:
            category, result = state_container.health_score_service.score_record(
                body.nutrition_info, category=body.category_flag()
            )
        except Exception as exc:
            logger.exception("Nutrition record scoring failed")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=_format_error(state_container, exc),
            ) from exc
        return {"category": str(category), **result.to_dict()}

    return app


def _format_error(state_container: AppContainer, exc: Exception) -> str:
    """Return a client-facing error message with local debug info."""
    fallback = "Error processing request"
    if state_container.settings.environment == "local":
        detail = f"{type(exc).__name__}: {exc}".strip()
        if detail:
            return f"{fallback} (debug: {detail})"
    return fallback
