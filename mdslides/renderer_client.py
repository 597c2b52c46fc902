"""
Client for the remote renderer service that turns a deck into a .pptx file.
"""
import logging
from typing import Optional

import httpx

from .models import Deck

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 60.0


class RenderError(Exception):
    """The renderer service answered with a non-success status."""

    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Renderer responded with HTTP {status_code}: {body}")


class RendererClient:
    """
    Posts serialized decks to a renderer service.

    Each call is a single blocking request: no retries, no backoff.
    """

    def __init__(
        self,
        url: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Args:
            url: Endpoint receiving ``POST`` requests with the deck as JSON
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.url = url
        self.timeout = timeout
        self.transport = transport

    def render(self, deck: Deck) -> httpx.Response:
        """
        Send *deck* to the renderer.

        Returns:
            The service response on a 2xx status

        Raises:
            RenderError: on any other status
            httpx.HTTPError: when the request itself fails
        """
        logger.info(f"Sending '{deck.filename}' ({len(deck.slides)} slides) to {self.url}")
        with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
            response = client.post(self.url, json=deck.to_dict())

        if not response.is_success:
            logger.error(f"Renderer error for '{deck.filename}': HTTP {response.status_code}")
            raise RenderError(response.status_code, response.text)

        logger.debug(f"Renderer accepted '{deck.filename}' with HTTP {response.status_code}")
        return response
