"""PayPal HTTP transport setup.

Provides the factory that creates an ``httpx.AsyncClient`` with the shared base
URL, timeout, and default headers for a given configuration.
"""

import httpx

from ..config import PayPalConfig

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


def create_http_client(
    config: PayPalConfig,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` bound to the configured PayPal environment.

    Args:
        config: The configuration containing environment selection and timeout.
        transport: Optional transport override (for example ``httpx.MockTransport``).

    Returns:
        An open client; the caller is responsible for closing it.

    """
    timeout = httpx.Timeout(config.timeout_s)
    return httpx.AsyncClient(
        base_url=config.base_url_str,
        timeout=timeout,
        headers=DEFAULT_HEADERS,
        transport=transport,
    )


__all__ = ["DEFAULT_HEADERS", "create_http_client"]
