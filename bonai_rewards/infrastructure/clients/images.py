"""Logo image HTTP client"""

import httpx

from bonai_rewards.config import settings
from bonai_rewards.domain.exceptions import ImageLoadError


class ImageClient:
    """Client fetching brand logo images"""

    def __init__(self, timeout: float | None = None, transport: httpx.AsyncBaseTransport | None = None):
        self.timeout = timeout or settings.image_timeout_seconds
        self._transport = transport

    async def fetch(self, url: str) -> bytes:
        """
        Download an image and return its bytes.

        Raises:
            ImageLoadError: On timeout, HTTP errors, transport failures, a
                malformed URL, or a response that is not an image
        """
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                response = await client.get(url, follow_redirects=True)
                response.raise_for_status()
            except httpx.TimeoutException as e:
                raise ImageLoadError(f"Image timeout after {self.timeout}s: {url}") from e
            except httpx.HTTPStatusError as e:
                raise ImageLoadError(f"Image error {e.response.status_code}: {url}") from e
            except httpx.RequestError as e:
                raise ImageLoadError(f"Image request failed: {url}") from e
            except httpx.InvalidURL as e:
                raise ImageLoadError(f"Malformed image URL: {url}") from e

        content_type = response.headers.get("content-type", "")
        if not content_type.startswith("image/"):
            raise ImageLoadError(f"Not an image ({content_type or 'no content type'}): {url}")
        return response.content
