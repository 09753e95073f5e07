"""ECS container metadata endpoint client.

API Documentation: https://docs.aws.amazon.com/AmazonECS/latest/developerguide/task-metadata-endpoint-v4.html
"""

import logging

import httpx

from integration.exceptions import RemoteCallException
from integration.providers.interfaces import MetadataEndpointClient

log = logging.getLogger(__name__)


class HttpMetadataEndpointClient(MetadataEndpointClient):
    """httpx based client for the link-local task metadata endpoint."""

    def __init__(self, timeout: float = 5.0, transport: httpx.AsyncBaseTransport | None = None):
        self.timeout = timeout
        self._transport = transport

    async def get(self, url: str) -> httpx.Response:
        log.debug(f"GET {url}")
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(url)
                response.raise_for_status()
                return response
        except httpx.HTTPError as e:
            raise RemoteCallException(str(e), operation="GET") from e
