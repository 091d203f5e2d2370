"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from nutrition_logger.adapters.in_memory_library_repository import (
    InMemoryLibraryRepository,
)
from nutrition_logger.adapters.openai_estimation_client import OpenAIEstimationClient
from nutrition_logger.config import Settings
from nutrition_logger.services.dishes import DishService
from nutrition_logger.services.estimation import EstimationGateway
from nutrition_logger.services.library import LibraryService
from nutrition_logger.services.reliability import ReliabilityGovernor


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    governor: ReliabilityGovernor
    estimation_gateway: EstimationGateway
    dish_service: DishService
    library_service: LibraryService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    governor = ReliabilityGovernor(
        threshold=resolved_settings.update_failure_threshold
    )
    openai_client = OpenAIEstimationClient.create(
        api_key=resolved_settings.openai_api_key,
        base_url=resolved_settings.openai_base_url,
        timeout_seconds=resolved_settings.openai_timeout_seconds,
    )
    gateway = EstimationGateway(
        client=openai_client,
        governor=governor,
        model=resolved_settings.openai_model,
    )
    dish_service = DishService(gateway=gateway)
    library_service = LibraryService(
        repository=InMemoryLibraryRepository(),
        gateway=gateway,
    )

    async def close_resources() -> None:
        await openai_client.close()

    return AppContainer(
        settings=resolved_settings,
        governor=governor,
        estimation_gateway=gateway,
        dish_service=dish_service,
        library_service=library_service,
        close_resources=close_resources,
    )
