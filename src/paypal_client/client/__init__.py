"""Client package for the PayPal REST API.

Provides HTTP client setup and token management:
- ``http``: Factory for the configured ``httpx.AsyncClient`` transport
- ``token_manager``: Client-credentials token cache with expiry-based refresh
- ``paypal_client``: Authenticated request client with 401 re-auth retries
"""
