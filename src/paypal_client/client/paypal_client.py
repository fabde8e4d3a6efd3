"""Authenticated client for the PayPal REST API.

``AuthenticatedClient`` attaches a bearer token to every request. When PayPal
answers 401 the client forces a new token and resends the request, up to
``max_retries`` times. Every other status, including business-level 4xx and
5xx replies, is returned to the caller unchanged.
"""

import logging
from types import TracebackType
from typing import Any, Self

import httpx

from ..config import PayPalConfig
from ..constants import HTTP_UNAUTHORIZED
from ..errors import RetriesExhaustedError
from .http import create_http_client
from .token_manager import Clock, TokenCache, TokenManager, wall_clock_ms

logger = logging.getLogger("paypal_client.client")


class AuthenticatedClient:
    """PayPal API client with cached client-credentials authentication.

    Example::

        async with AuthenticatedClient(PayPalConfig.from_env()) as client:
            response = await client.get("/v2/checkout/orders/5O190127TN364715T")
    """

    def __init__(
        self,
        config: PayPalConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
        clock: Clock = wall_clock_ms,
    ) -> None:
        """Initialize the client.

        Args:
            config: Credentials, environment selection, timeout, and retry bound.
            http_client: Optional preconfigured transport. When omitted one is
                created from ``config`` and closed by :meth:`aclose`.
            clock: Callable returning the current time in epoch milliseconds.

        """
        self._config = config
        self._owns_http_client = http_client is None
        self._http_client = http_client if http_client is not None else create_http_client(config)
        self._token_manager = TokenManager(config, self._http_client, clock=clock)

    async def __aenter__(self) -> Self:
        """Return the client for async context manager usage."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        """Close the transport when leaving a context manager block."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying transport if this client created it."""
        if self._owns_http_client:
            await self._http_client.aclose()

    @property
    def config(self) -> PayPalConfig:
        """Return the client configuration."""
        return self._config

    @property
    def token_cache(self) -> TokenCache:
        """Return the current token cache."""
        return self._token_manager.cache

    async def generate_token(self) -> TokenCache:
        """Force a new access token, bypassing the cache expiry check."""
        return await self._token_manager.generate_token()

    async def get_token(self) -> str:
        """Return the cached access token, refreshing it when close to expiry."""
        return await self._token_manager.get_token()

    async def request(
        self,
        method: str,
        path: str,
        body: Any | None = None,
        *,
        attempt: int = 0,
    ) -> httpx.Response:
        """Send an authenticated request, re-authenticating on 401.

        Args:
            method: HTTP method to use.
            path: Endpoint path relative to the configured base URL.
            body: Optional JSON-serialisable request body.
            attempt: Number of attempts already spent on this request; must
                not be negative.

        Returns:
            The first response whose status is not 401.

        Raises:
            ValueError: If ``attempt`` is negative.
            RetriesExhaustedError: If the request is still unauthorized after
                ``max_retries`` forced token refreshes.
            AuthError: If fetching a token fails.

        """
        if attempt < 0:
            msg = f"attempt must be >= 0, got {attempt}"
            raise ValueError(msg)
        max_retries = self._config.max_retries
        while attempt <= max_retries:
            token = await self.get_token()
            response = await self._send(method, path, body, token)
            if response.status_code != HTTP_UNAUTHORIZED:
                return response

            logger.warning(
                "%s %s returned 401 (attempt %s of %s); refreshing token.",
                method,
                path,
                attempt + 1,
                max_retries + 1,
            )
            await self.generate_token()
            attempt += 1

        raise RetriesExhaustedError(attempt)

    async def _send(self, method: str, path: str, body: Any | None, token: str) -> httpx.Response:
        headers = {"Authorization": f"Bearer {token}"}
        if body is None:
            return await self._http_client.request(method, path, headers=headers)
        return await self._http_client.request(method, path, json=body, headers=headers)

    async def get(self, path: str) -> httpx.Response:
        """Send a GET request."""
        return await self.request("GET", path)

    async def post(self, path: str, body: Any | None = None) -> httpx.Response:
        """Send a POST request."""
        return await self.request("POST", path, body)

    async def put(self, path: str, body: Any | None = None) -> httpx.Response:
        """Send a PUT request."""
        return await self.request("PUT", path, body)

    async def patch(self, path: str, body: Any | None = None) -> httpx.Response:
        """Send a PATCH request."""
        return await self.request("PATCH", path, body)

    async def delete(self, path: str) -> httpx.Response:
        """Send a DELETE request."""
        return await self.request("DELETE", path)


__all__ = ["AuthenticatedClient"]
