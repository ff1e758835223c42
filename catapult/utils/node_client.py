"""Base client for Catapult node REST interactions."""
import logging
import os
from typing import Any, Dict, Optional

import httpx

from catapult.exceptions import DecodeError, TransportError
from catapult.mapping.decoder import Decoded, T

logger = logging.getLogger(__name__)

NODE_URL_ENV = 'CATAPULT_NODE_URL'


class NodeClient:
    """Base class for clients of a Catapult node's REST API."""

    def __init__(
        self,
        node_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the node client.

        Args:
            node_url: Base URL of the node, defaults to the CATAPULT_NODE_URL environment variable
            timeout: Request timeout in seconds, httpx's default is used when omitted
            http_client: Session to borrow; it is not closed by this client and
                keeps its own timeout, so it cannot be combined with ``timeout``
        """
        if http_client is not None and timeout is not None:
            raise ValueError("timeout cannot be set when http_client is given; configure it on the session")

        if node_url is None:
            node_url = os.environ.get(NODE_URL_ENV)
            if not node_url:
                raise ValueError(f"{NODE_URL_ENV} environment variable is not set")

        self.node_url = node_url.rstrip('/')
        self._owns_client = http_client is None
        if http_client is None:
            client_kwargs: Dict[str, Any] = {}
            if timeout is not None:
                client_kwargs['timeout'] = timeout
            http_client = httpx.AsyncClient(**client_kwargs)
        self._client = http_client

    async def _get(self, path: str) -> Any:
        """Issue a GET against the node and return the parsed JSON body.

        Args:
            path: Path below the node URL, starting with '/'

        Returns:
            The decoded JSON value

        Raises:
            TransportError: If the request fails or the status is not 2xx
            DecodeError: If the body is not valid JSON
        """
        url = self.node_url + path
        logger.debug(f"GET {url}")

        try:
            response = await self._client.get(url)
        except httpx.RequestError as e:
            logger.warning(f"Request to {url} failed: {e}")
            raise TransportError(f"Failed to reach node at {url}: {e}", url=url) from e

        if not response.is_success:
            logger.warning(f"GET {url} returned {response.status_code}")
            raise TransportError(
                f"Node returned HTTP {response.status_code} for {url}: {response.text}",
                url=url,
                status_code=response.status_code,
                body=response.text,
            )

        try:
            return response.json()
        except ValueError as e:
            logger.warning(f"GET {url} returned a body that is not JSON")
            raise DecodeError(
                f"Response from {url} is not valid JSON: {e}",
                payload=response.text,
            ) from e

    def _unwrap(self, result: Decoded[T], path: str) -> T:
        """Return a decoded value, logging the failure before raising it."""
        if not result.ok:
            logger.warning(f"Unexpected response shape from {self.node_url}{path}: {result.error}")
        return result.unwrap()

    async def aclose(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
