"""Tests for container wiring."""

import asyncio

from nutrition_logger.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.dish_service.gateway is container.estimation_gateway
    assert container.estimation_gateway.governor is container.governor
    assert container.estimation_gateway.model == "test-model"
    asyncio.run(container.close_resources())


def test_failure_threshold_comes_from_settings(settings) -> None:
    settings.update_failure_threshold = 5

    container = build_container(settings)

    assert container.governor.threshold == 5
    asyncio.run(container.close_resources())
