"""Sender adapter posting payloads over HTTP."""

import logging
from urllib.parse import urlparse

import httpx

from ...ports.sender import SenderPort

logger = logging.getLogger(__name__)

CONTENT_TYPE = "application/json"


class HttpSender(SenderPort):
    """Delivery channel using an HTTP endpoint."""

    def __init__(self, url: str, timeout: float = 30.0) -> None:
        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https"):
            raise ValueError(f"Invalid delivery url scheme: {parsed.scheme}")
        self.url = url
        self.timeout = timeout

    def send(self, payload: bytes) -> bool:
        try:
            response = httpx.post(
                self.url,
                content=payload,
                headers={"Content-Type": CONTENT_TYPE},
                timeout=self.timeout,
            )
        except httpx.HTTPError as e:
            logger.warning(f"Delivery to {self.url} failed: {e}")
            return False

        if not response.is_success:
            logger.warning(f"Delivery rejected by {self.url}: HTTP {response.status_code}")
            return False

        return True
