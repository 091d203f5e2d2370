"""Nutrition estimation through an external LLM with fallback defaults."""

import base64
import binascii
import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

import pydantic

from nutrition_logger.domain.errors import ParseError
from nutrition_logger.domain.estimation import (
    DishEstimateRequest,
    EstimatedNutrition,
    IngredientEstimateRequest,
    LabelImageRequest,
    MealPhotoRequest,
)
from nutrition_logger.domain.nutrition import NutritionInfo
from nutrition_logger.services.reliability import ReliabilityGovernor
from nutrition_logger.services.response_parser import ParseResult, parse_json_object

INGREDIENT_DEFAULT = NutritionInfo(calories=100, protein=5, carbs=15, fat=3)
DISH_DEFAULT = NutritionInfo(calories=350, protein=15, carbs=30, fat=15)
LABEL_DEFAULT = NutritionInfo(calories=100, protein=0, carbs=0, fat=0)
MEAL_PHOTO_DEFAULT = NutritionInfo(calories=350, protein=0, carbs=0, fat=0)

_JSON_SHAPE = (
    '{ "calories": number, "protein": number, "carbs": number, "fat": number }'
)
_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")

_logger = logging.getLogger(__name__)


class EstimationClient(Protocol):
    """Interface for the text-completion capability behind estimation."""

    async def complete(
        self,
        *,
        model: str,
        prompt: str,
        image_data_url: str | None = None,
    ) -> str:
        """Return the raw model text for a prompt."""


@dataclass
class EstimationGateway:
    """Runs estimation calls and always yields usable nutrition.

    Transport failures, empty responses and unparsable content are absorbed:
    the caller gets the capability default and the failure is reported to
    the reliability governor.
    """

    client: EstimationClient
    governor: ReliabilityGovernor
    model: str

    async def estimate_ingredient(
        self, request: IngredientEstimateRequest
    ) -> NutritionInfo:
        """Estimate nutrition for a quantity of an ingredient."""
        prompt = (
            "Provide the nutritional information (calories, protein in grams, "
            "carbs in grams, fat in grams) for "
            f"{request.quantity:g} {request.unit} of {request.name} "
            f"in JSON format as {_JSON_SHAPE}. Only output the JSON."
        )
        return await self._estimate(
            prompt, default=INGREDIENT_DEFAULT, action="ingredient"
        )

    async def estimate_dish(self, request: DishEstimateRequest) -> NutritionInfo:
        """Estimate total nutrition for servings of a dish."""
        prompt = (
            "Estimate the total nutritional information (calories, protein in "
            "grams, carbs in grams, fat in grams) for "
            f"{request.servings:g} serving(s) of {request.name} "
            f"in JSON format as {_JSON_SHAPE}. Only output the JSON."
        )
        return await self._estimate(prompt, default=DISH_DEFAULT, action="dish")

    async def extract_label(self, request: LabelImageRequest) -> NutritionInfo:
        """Read nutrition values from a photographed nutrition label."""
        prompt = (
            "This is an image of a nutrition label. Extract the nutritional "
            f"information in JSON format: {_JSON_SHAPE}. "
            "Only respond with the JSON, nothing else."
        )
        return await self._estimate(
            prompt,
            default=LABEL_DEFAULT,
            action="label",
            image_data_url=to_data_url(request.image_base64),
        )

    async def estimate_meal_photo(self, request: MealPhotoRequest) -> NutritionInfo:
        """Estimate total calories shown in a meal photo."""
        prompt = (
            "This is a photo of a meal. Estimate the total calorie content in "
            "this image. Only respond with a single number representing calories."
        )
        return await self._estimate(
            prompt,
            default=MEAL_PHOTO_DEFAULT,
            action="meal photo",
            image_data_url=to_data_url(request.image_base64),
            parser=parse_calorie_count,
        )

    async def _estimate(  # noqa: PLR0913
        self,
        prompt: str,
        *,
        default: NutritionInfo,
        action: str,
        image_data_url: str | None = None,
        parser: Callable[[str | None], ParseResult[NutritionInfo]] | None = None,
    ) -> NutritionInfo:
        try:
            raw = await self.client.complete(
                model=self.model, prompt=prompt, image_data_url=image_data_url
            )
            parsed = (parser or parse_nutrition)(raw)
        except Exception:
            _logger.exception("Estimation %s failed; using default", action)
            self.governor.report_failure()
            return default

        if not parsed.ok:
            _logger.warning(
                "Estimation %s response unusable: %s", action, parsed.error
            )
            self.governor.report_failure()
            return default

        self.governor.report_success()
        return parsed.unwrap()


def parse_nutrition(raw: str | None) -> ParseResult[NutritionInfo]:
    """Parse raw model text into nutrition with macros defaulted to zero."""
    result = parse_json_object(raw)
    if not result.ok:
        return ParseResult(error=result.error)
    try:
        estimated = EstimatedNutrition.model_validate(result.unwrap())
    except pydantic.ValidationError as exc:
        return ParseResult(error=ParseError(f"unexpected nutrition payload: {exc}"))
    return ParseResult.success(
        NutritionInfo(
            calories=estimated.calories,
            protein=estimated.protein or 0.0,
            carbs=estimated.carbs or 0.0,
            fat=estimated.fat or 0.0,
        )
    )


def parse_calorie_count(raw: str | None) -> ParseResult[NutritionInfo]:
    """Parse a bare calorie count from the start of the model text."""
    match = _LEADING_INTEGER.match(raw or "")
    if match is None:
        return ParseResult(error=ParseError("no calorie count in response"))
    calories = int(match.group(1))
    if calories < 0:
        return ParseResult(error=ParseError(f"negative calorie count: {calories}"))
    return ParseResult.success(
        NutritionInfo(calories=float(calories), protein=0.0, carbs=0.0, fat=0.0)
    )


def to_data_url(image_base64: str) -> str:
    """Wrap base64 image data in a data URL with a sniffed MIME type."""
    if image_base64.startswith("data:"):
        return image_base64
    try:
        head = base64.b64decode(image_base64[:16], validate=False)
    except (binascii.Error, ValueError):
        head = b""
    return f"data:{_detect_mime_type(head)};base64,{image_base64}"


def _detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    return "image/jpeg"
