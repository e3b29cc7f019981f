"""HTTP image download client."""

from dataclasses import dataclass

import httpx

from meal_vision.services.detection import ImageClient


@dataclass
class HttpxImageClient(ImageClient):
    """Image client using httpx."""

    http_client: httpx.AsyncClient
    timeout_seconds: float = 15.0

    @classmethod
    def create(cls, timeout_seconds: float = 15.0) -> "HttpxImageClient":
        """Create an image client with a managed httpx session."""
        return cls(
            http_client=httpx.AsyncClient(follow_redirects=True),
            timeout_seconds=timeout_seconds,
        )

    async def download(self, url: str) -> bytes:
        """Download image bytes, raising on HTTP errors."""
        response = await self.http_client.get(url, timeout=self.timeout_seconds)
        response.raise_for_status()
        return response.content

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
