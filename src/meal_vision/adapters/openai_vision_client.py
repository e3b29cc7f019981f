"""OpenAI Responses API client for food detection."""

from dataclasses import dataclass

import openai
from openai import AsyncOpenAI

from meal_vision.errors import VisionInferenceError
from meal_vision.services.vision import VisionClient


@dataclass
class OpenAIVisionClient(VisionClient):
    """Vision client backed by the OpenAI Responses API."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAIVisionClient":
        """Create an OpenAI vision client."""
        return cls(client=AsyncOpenAI(api_key=api_key, max_retries=0))

    async def complete(
        self,
        *,
        model: str,
        prompt: str,
        image_data_url: str,
        timeout: float,
    ) -> str:
        """Send the prompt and image, returning the raw response text."""
        request_payload: dict[str, object] = {
            "model": model,
            "input": [
                {
                    "role": "user",
                    "content": [
                        {"type": "input_text", "text": prompt},
                        {"type": "input_image", "image_url": image_data_url},
                    ],
                }
            ],
            "store": False,
            "timeout": timeout,
        }
        try:
            response = await self.client.responses.create(**request_payload)
        except openai.APITimeoutError as exc:
            raise TimeoutError(str(exc)) from exc
        except openai.APIError as exc:
            raise VisionInferenceError(
                "OpenAI request failed", details=f"{type(exc).__name__}: {exc}"
            ) from exc
        return response.output_text or ""

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
