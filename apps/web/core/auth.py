"""
Session helpers - access token and current user for a request.

The ordering API owns authentication. This site only carries the API's
access token in a cookie and asks GET /auth/me who it belongs to.
"""

import logging

from django.conf import settings
from django.http import HttpRequest

from slooze_schemas import UserInfo

from apps.web.backend import BackendError, get_client

logger = logging.getLogger(__name__)

_UNSET = object()


def get_token(request: HttpRequest) -> str | None:
    """Return the API access token carried by the request, if any."""
    return request.COOKIES.get(settings.SLOOZE_TOKEN_COOKIE) or None


def get_current_user(request: HttpRequest) -> UserInfo | None:
    """
    Resolve the logged-in user, calling /auth/me at most once per request.

    Returns None when there is no token or the API does not recognise it.
    """
    cached = getattr(request, "_slooze_user", _UNSET)
    if cached is not _UNSET:
        return cached  # type: ignore[return-value]

    user: UserInfo | None = None
    if get_token(request):
        api = getattr(request, "api", None)
        try:
            if api is not None:
                user = api.me()
            else:
                with get_client(get_token(request)) as client:
                    user = client.me()
        except BackendError as e:
            logger.info("Auth check failed: %s", e.message)
            user = None

    request._slooze_user = user  # type: ignore[attr-defined]
    return user


def is_staff_role(user: UserInfo | None) -> bool:
    """ADMIN and MANAGER users; False for anonymous."""
    return user is not None and user.is_staff_role
