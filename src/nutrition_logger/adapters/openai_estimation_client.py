"""OpenAI Responses API client for nutrition estimation."""

from dataclasses import dataclass

import openai
from openai import AsyncOpenAI

from nutrition_logger.domain.errors import TransportError
from nutrition_logger.services.estimation import EstimationClient


@dataclass
class OpenAIEstimationClient(EstimationClient):
    """Estimation client backed by the OpenAI Responses API."""

    client: AsyncOpenAI
    timeout_seconds: float = 30.0

    @classmethod
    def create(
        cls, api_key: str, base_url: str | None = None, timeout_seconds: float = 30.0
    ) -> "OpenAIEstimationClient":
        """Create an OpenAI estimation client."""
        return cls(
            client=AsyncOpenAI(api_key=api_key, base_url=base_url),
            timeout_seconds=timeout_seconds,
        )

    async def complete(
        self,
        *,
        model: str,
        prompt: str,
        image_data_url: str | None = None,
    ) -> str:
        """Send a prompt, optionally with an image, and return the output text."""
        content: list[dict[str, object]] = [{"type": "input_text", "text": prompt}]
        if image_data_url:
            content.append({"type": "input_image", "image_url": image_data_url})
        try:
            response = await self.client.responses.create(
                model=model,
                input=[{"role": "user", "content": content}],
                timeout=self.timeout_seconds,
            )
        except openai.OpenAIError as exc:
            raise TransportError(f"OpenAI request failed: {exc}") from exc
        return response.output_text or ""

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
