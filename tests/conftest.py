"""Shared test fixtures."""

import json
from dataclasses import dataclass, field
from datetime import UTC, datetime

import pytest

from nutrition_logger.adapters.in_memory_library_repository import (
    InMemoryLibraryRepository,
)
from nutrition_logger.config import Settings
from nutrition_logger.containers import AppContainer
from nutrition_logger.domain.nutrition import MealIngredient, NutritionInfo
from nutrition_logger.services.dishes import DishService
from nutrition_logger.services.estimation import EstimationClient, EstimationGateway
from nutrition_logger.services.expander import IngredientTemplateExpander
from nutrition_logger.services.library import LibraryService
from nutrition_logger.services.reliability import ReliabilityGovernor

FIXED_NOW = datetime(2026, 10, 17, 12, 0, tzinfo=UTC)


@dataclass
class FakeEstimationClient(EstimationClient):
    """Fake estimation client returning queued or fixed responses."""

    response: str = field(
        default_factory=lambda: json.dumps(
            {"calories": 500, "protein": 30, "carbs": 40, "fat": 20}
        )
    )
    queued: list[str | Exception] = field(default_factory=list)
    calls: list[dict[str, object]] = field(default_factory=list)

    async def complete(
        self,
        *,
        model: str,
        prompt: str,
        image_data_url: str | None = None,
    ) -> str:
        self.calls.append(
            {"model": model, "prompt": prompt, "image_data_url": image_data_url}
        )
        if self.queued:
            next_item = self.queued.pop(0)
            if isinstance(next_item, Exception):
                raise next_item
            return next_item
        return self.response


def make_ingredient(  # noqa: PLR0913
    ingredient_id: str = "ing-1",
    name: str = "Rice",
    unit: str = "g",
    quantity: float = 100,
    calories: float = 200,
    protein: float | None = 10,
    carbs: float | None = 20,
    fat: float | None = 5,
) -> MealIngredient:
    return MealIngredient(
        id=ingredient_id,
        name=name,
        unit=unit,
        quantity=quantity,
        nutrition=NutritionInfo(
            calories=calories, protein=protein, carbs=carbs, fat=fat
        ),
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(openai_api_key="openai-key", openai_model="test-model")


@pytest.fixture
def estimation_client() -> FakeEstimationClient:
    return FakeEstimationClient()


@pytest.fixture
def governor() -> ReliabilityGovernor:
    return ReliabilityGovernor()


@pytest.fixture
def gateway(
    estimation_client: FakeEstimationClient, governor: ReliabilityGovernor
) -> EstimationGateway:
    return EstimationGateway(
        client=estimation_client, governor=governor, model="test-model"
    )


@pytest.fixture
def container(
    settings: Settings,
    governor: ReliabilityGovernor,
    gateway: EstimationGateway,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        governor=governor,
        estimation_gateway=gateway,
        dish_service=DishService(
            gateway=gateway,
            expander=IngredientTemplateExpander(clock=lambda: FIXED_NOW),
        ),
        library_service=LibraryService(
            repository=InMemoryLibraryRepository(), gateway=gateway
        ),
        close_resources=close_resources,
    )
