"""Token management utilities for the PayPal REST API."""

import base64
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, TypeAlias

import httpx

from ..config import PayPalConfig
from ..constants import HTTP_OK, OAUTH_TOKEN_PATH, REFRESH_MARGIN_MS
from ..errors import AuthError

logger = logging.getLogger("paypal_client.token_manager")

Clock: TypeAlias = Callable[[], int]


def wall_clock_ms() -> int:
    """Return the current wall-clock time in epoch milliseconds."""
    return int(datetime.now(UTC).timestamp() * 1000)


@dataclass(frozen=True, slots=True)
class TokenCache:
    """Last bearer token issued by the token endpoint.

    An empty ``token`` means no token has been fetched yet. A cache is never
    updated in place; every successful fetch replaces it.
    """

    token: str = ""
    expires_at_ms: int = 0

    @property
    def is_set(self) -> bool:
        """Whether a token has been fetched."""
        return bool(self.token)


class TokenManager:
    """Manage the client-credentials bearer token, refreshing when necessary."""

    def __init__(
        self,
        config: PayPalConfig,
        http_client: httpx.AsyncClient,
        *,
        clock: Clock = wall_clock_ms,
    ) -> None:
        """Initialize the token manager with an empty cache.

        Args:
            config: The resolved PayPal configuration to use for authentication.
            http_client: Transport bound to the PayPal base URL.
            clock: Callable returning the current time in epoch milliseconds.

        """
        self._config = config
        self._http_client = http_client
        self._clock = clock
        self._cache = TokenCache()

    @property
    def cache(self) -> TokenCache:
        """Return the current token cache."""
        return self._cache

    def _basic_credentials(self) -> str:
        raw = f"{self._config.client_id}:{self._config.secret}".encode()
        return base64.b64encode(raw).decode("ascii")

    def _needs_refresh(self) -> bool:
        if not self._cache.is_set:
            return True
        return self._cache.expires_at_ms - REFRESH_MARGIN_MS <= self._clock()

    async def get_token(self) -> str:
        """Return a bearer token, fetching a new one if unset or about to expire.

        Concurrent callers are not serialized: several of them may fetch a
        token at the same time, and the last one to finish wins the cache.
        """
        if self._needs_refresh():
            await self.generate_token()
        else:
            logger.debug("Reusing cached PayPal access token.")
        return self._cache.token

    async def generate_token(self) -> TokenCache:
        """Fetch a new access token and replace the cache.

        Returns:
            The newly stored token cache.

        Raises:
            AuthError: If the token endpoint answers with anything but 200, or
                the 200 body lacks the expected fields. The cache is left
                unchanged in both cases.

        """
        issued_at = self._clock()
        response = await self._request_token()

        if response.status_code != HTTP_OK:
            logger.warning(
                "PayPal token request failed with status %s %s",
                response.status_code,
                response.reason_phrase,
            )
            raise AuthError(response.status_code, response.reason_phrase)

        access_token, expires_in = self._parse_token_response(response)
        self._cache = TokenCache(
            token=access_token,
            expires_at_ms=issued_at + expires_in * 1000,
        )
        logger.debug("Fetched new PayPal access token valid for %s seconds.", expires_in)
        return self._cache

    async def _request_token(self) -> httpx.Response:
        """POST the client-credentials grant to the token endpoint."""
        headers = {
            "Authorization": f"Basic {self._basic_credentials()}",
            "Content-Type": "application/x-www-form-urlencoded",
        }
        return await self._http_client.post(
            OAUTH_TOKEN_PATH,
            content="grant_type=client_credentials",
            headers=headers,
        )

    @staticmethod
    def _parse_token_response(response: httpx.Response) -> tuple[str, int]:
        """Extract ``access_token`` and ``expires_in`` from a 200 response."""
        try:
            data: Any = response.json()
        except ValueError as exc:
            raise AuthError(response.status_code, "Token response is not valid JSON") from exc

        if not isinstance(data, dict):
            raise AuthError(response.status_code, "Token response is not a JSON object")
        access_token = data.get("access_token")
        expires_in = data.get("expires_in")
        if not isinstance(access_token, str) or not access_token:
            raise AuthError(response.status_code, "Token response missing 'access_token' field")
        if isinstance(expires_in, bool) or not isinstance(expires_in, int | float):
            raise AuthError(response.status_code, "Token response missing 'expires_in' field")
        if isinstance(expires_in, float) and not expires_in.is_integer():
            raise AuthError(response.status_code, "Token response 'expires_in' is not a whole number of seconds")
        return access_token, int(expires_in)


__all__ = ["Clock", "TokenCache", "TokenManager", "wall_clock_ms"]
