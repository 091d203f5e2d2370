"""ASGI entrypoint for the nutrition logger API."""

from nutrition_logger.api.app import create_app
from nutrition_logger.containers import build_container

app = create_app(build_container())
