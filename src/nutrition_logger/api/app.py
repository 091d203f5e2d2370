"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from nutrition_logger.api.models import (
    CustomIngredientBody,
    DishEstimateBody,
    GoalsBody,
    IngredientEstimateBody,
    LabelImageBody,
    MealPhotoBody,
    ScaleQuantityBody,
    ServingsBody,
)
from nutrition_logger.app_logging import configure_logging
from nutrition_logger.containers import AppContainer
from nutrition_logger.domain.errors import ValidationError
from nutrition_logger.domain.estimation import (
    DishEstimateRequest,
    IngredientEstimateRequest,
    LabelImageRequest,
    MealPhotoRequest,
)
from nutrition_logger.domain.nutrition import Dish, Meal
from nutrition_logger.services.goals import calculate_goals
from nutrition_logger.services.scaling import (
    QuantifiedNutrition,
    rescale_servings,
    resolve_edit,
    scale_by_quantity,
)


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(ValidationError)
    async def validation_error_handler(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        logger.info("Rejected %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/status")
    async def estimation_status(request: Request) -> dict[str, object]:
        """Report whether repeated estimation failures warrant an update."""
        state_container: AppContainer = request.app.state.container
        return _status_payload(state_container)

    @app.post("/status/dismiss")
    async def dismiss_update(request: Request) -> dict[str, object]:
        """Clear the failure streak after the user dismisses the prompt."""
        state_container: AppContainer = request.app.state.container
        state_container.governor.reset()
        return _status_payload(state_container)

    @app.post("/estimate/ingredient")
    async def estimate_ingredient(
        body: IngredientEstimateBody, request: Request
    ) -> dict[str, object]:
        """Estimate nutrition for an ingredient quantity."""
        state_container: AppContainer = request.app.state.container
        nutrition = await state_container.estimation_gateway.estimate_ingredient(
            IngredientEstimateRequest(
                name=body.name, unit=body.unit, quantity=body.quantity
            )
        )
        return asdict(nutrition)

    @app.post("/estimate/dish")
    async def estimate_dish(
        body: DishEstimateBody, request: Request
    ) -> dict[str, object]:
        """Estimate total nutrition for a dish."""
        state_container: AppContainer = request.app.state.container
        nutrition = await state_container.estimation_gateway.estimate_dish(
            DishEstimateRequest(name=body.name, servings=body.servings)
        )
        return asdict(nutrition)

    @app.post("/estimate/label")
    async def extract_label(
        body: LabelImageBody, request: Request
    ) -> dict[str, object]:
        """Extract nutrition from a label photo."""
        state_container: AppContainer = request.app.state.container
        nutrition = await state_container.estimation_gateway.extract_label(
            LabelImageRequest(image_base64=body.image_base64)
        )
        return asdict(nutrition)

    @app.post("/estimate/meal-photo")
    async def estimate_meal_photo(
        body: LabelImageBody, request: Request
    ) -> dict[str, object]:
        """Estimate total calories from a meal photo."""
        state_container: AppContainer = request.app.state.container
        nutrition = await state_container.estimation_gateway.estimate_meal_photo(
            MealPhotoRequest(image_base64=body.image_base64)
        )
        return asdict(nutrition)

    @app.post("/dishes/quick")
    async def quick_dish(body: DishEstimateBody, request: Request) -> dict[str, object]:
        """Create an itemized dish from its name and servings."""
        state_container: AppContainer = request.app.state.container
        dish = await state_container.dish_service.create_quick_dish(
            body.name, body.servings
        )
        return _dish_payload(dish)

    @app.post("/meals/photo")
    async def photo_meal(body: MealPhotoBody, request: Request) -> dict[str, object]:
        """Log a meal from a photo with an estimated calorie total."""
        state_container: AppContainer = request.app.state.container
        meal = await state_container.dish_service.create_photo_meal(
            body.image_base64,
            body.day,
            image_uri=body.image_uri,
            name=body.name,
        )
        return _meal_payload(meal)

    @app.post("/library/ingredients")
    async def add_ingredient(
        body: CustomIngredientBody, request: Request
    ) -> dict[str, object]:
        """Estimate and save a custom catalog ingredient."""
        state_container: AppContainer = request.app.state.container
        ingredient = await state_container.library_service.add_custom_ingredient(
            body.name, body.unit
        )
        return asdict(ingredient)

    @app.get("/library/ingredients")
    async def list_ingredients(request: Request) -> dict[str, object]:
        """List saved catalog ingredients."""
        state_container: AppContainer = request.app.state.container
        return {
            "ingredients": [
                asdict(item)
                for item in state_container.library_service.list_ingredients()
            ]
        }

    @app.post("/scale/quantity")
    async def scale_quantity(body: ScaleQuantityBody) -> dict[str, object]:
        """Settle nutrition for an ingredient quantity edit."""
        original = QuantifiedNutrition(body.quantity, body.nutrition.to_domain())
        if body.candidate is None:
            nutrition = scale_by_quantity(original, body.new_quantity)
        else:
            nutrition = resolve_edit(
                original,
                body.new_quantity,
                body.candidate.to_domain(),
                epsilon=body.epsilon,
            )
        return asdict(nutrition)

    @app.post("/scale/servings")
    async def scale_servings(body: ServingsBody) -> dict[str, object]:
        """Rescale an original ingredient snapshot by a servings multiplier."""
        scaled = rescale_servings(
            [item.to_domain() for item in body.ingredients], body.multiplier
        )
        return {"ingredients": [asdict(item) for item in scaled]}

    @app.post("/goals")
    async def goals(body: GoalsBody) -> dict[str, object]:
        """Calculate daily nutrition goals."""
        return asdict(
            calculate_goals(
                weight=body.weight,
                height=body.height,
                age=body.age,
                gender=body.gender,
                activity_level=body.activity_level,
                goal=body.goal,
            )
        )

    return app


def _status_payload(container: AppContainer) -> dict[str, object]:
    return {
        "update_recommended": container.governor.is_update_recommended(),
        "consecutive_failures": container.governor.consecutive_failures,
    }


def _dish_payload(dish: Dish) -> dict[str, object]:
    return {
        "id": dish.id,
        "name": dish.name,
        "total_calories": dish.total_calories,
        "ingredients": [asdict(item) for item in dish.ingredients],
    }


def _meal_payload(meal: Meal) -> dict[str, object]:
    return {
        "id": meal.id,
        "name": meal.name,
        "day": meal.day.isoformat(),
        "image_uri": meal.image_uri,
        "total_calories": meal.total_calories,
        "ingredients": [asdict(item) for item in meal.ingredients],
        "dishes": [_dish_payload(dish) for dish in meal.dishes],
    }
