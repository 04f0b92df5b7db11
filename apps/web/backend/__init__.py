"""Ordering API backend - HTTP client and its error types."""

from django.conf import settings

from apps.web.backend.client import SloozeClient
from apps.web.backend.exceptions import (
    BackendAPIError,
    BackendAuthError,
    BackendConnectionError,
    BackendError,
    BackendResponseError,
)


def get_client(token: str | None = None, **kwargs) -> SloozeClient:
    """
    Build an API client from settings.

    This is the main entry point for talking to the ordering API. Use this
    factory rather than instantiating SloozeClient directly.

    Args:
        token: Access token to forward as the session cookie.
        **kwargs: Extra arguments passed to SloozeClient (e.g. http_client).

    Example:
        with get_client(token) as api:
            page = api.list_restaurants(page=1, limit=3)
    """
    kwargs.setdefault("timeout", settings.SLOOZE_API_TIMEOUT)
    kwargs.setdefault("token_cookie", settings.SLOOZE_TOKEN_COOKIE)
    return SloozeClient(settings.SLOOZE_API_URL, token=token, **kwargs)


__all__ = [
    "BackendAPIError",
    "BackendAuthError",
    "BackendConnectionError",
    "BackendError",
    "BackendResponseError",
    "SloozeClient",
    "get_client",
]
