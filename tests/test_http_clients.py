"""Tests for HTTP-based adapters."""

import asyncio

import httpx
import openai
import pytest

from meal_vision.adapters.image_client import HttpxImageClient
from meal_vision.adapters.openai_vision_client import OpenAIVisionClient
from meal_vision.errors import VisionInferenceError

_REQUEST = httpx.Request("POST", "https://api.openai.com/v1/responses")


class _FakeResponses:
    def __init__(self, error: Exception | None = None) -> None:
        self.last_payload: dict[str, object] | None = None
        self.error = error

    async def create(self, **kwargs):  # type: ignore[no-untyped-def]
        self.last_payload = kwargs
        if self.error is not None:
            raise self.error
        return type(
            "Resp",
            (),
            {"output_text": '[{"name": "Rice", "portionGrams": 150}]'},
        )()


class _FakeOpenAI:
    def __init__(self, error: Exception | None = None) -> None:
        self.responses = _FakeResponses(error)


def _complete(client: OpenAIVisionClient) -> str:
    return asyncio.run(
        client.complete(
            model="gpt-4.1-mini",
            prompt="Detect foods",
            image_data_url="data:image/jpeg;base64,ZmFrZQ==",
            timeout=30,
        )
    )


def test_openai_vision_client_returns_text() -> None:
    fake = _FakeOpenAI()
    client = OpenAIVisionClient(client=fake)

    result = _complete(client)

    assert result == '[{"name": "Rice", "portionGrams": 150}]'
    payload = fake.responses.last_payload
    assert payload is not None
    assert payload["model"] == "gpt-4.1-mini"
    assert payload["timeout"] == 30
    assert payload["store"] is False
    content = payload["input"][0]["content"]  # type: ignore[index]
    assert content[0] == {"type": "input_text", "text": "Detect foods"}
    assert content[1]["type"] == "input_image"


def test_openai_vision_client_maps_timeout() -> None:
    client = OpenAIVisionClient(
        client=_FakeOpenAI(error=openai.APITimeoutError(request=_REQUEST))
    )

    with pytest.raises(TimeoutError):
        _complete(client)


def test_openai_vision_client_maps_api_errors() -> None:
    client = OpenAIVisionClient(
        client=_FakeOpenAI(
            error=openai.APIConnectionError(message="down", request=_REQUEST)
        )
    )

    with pytest.raises(VisionInferenceError):
        _complete(client)


def test_image_client_downloads_bytes() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/meal.jpg"
        return httpx.Response(200, content=b"image-bytes")

    transport = httpx.MockTransport(handler)
    client = HttpxImageClient(http_client=httpx.AsyncClient(transport=transport))

    data = asyncio.run(client.download("https://images.test/meal.jpg"))

    assert data == b"image-bytes"


def test_image_client_raises_on_http_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404)

    transport = httpx.MockTransport(handler)
    client = HttpxImageClient(http_client=httpx.AsyncClient(transport=transport))

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(client.download("https://images.test/missing.jpg"))
