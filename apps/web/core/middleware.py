"""
Request middleware - route protection and per-request API client.
"""

from collections.abc import Callable

from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect

from apps.web.backend import get_client

from .auth import get_token

PROTECTED_PREFIXES = ("/restaurants", "/cart")
AUTH_PREFIX = "/login"


class RouteProtectionMiddleware:
    """
    Redirect based on whether the request carries an access token cookie.

    Rules (checked in order):
    1. "/" goes to restaurants when logged in, login otherwise.
    2. Login pages redirect to restaurants when already logged in.
    3. Restaurant and cart pages redirect to login when logged out.

    Only the cookie's presence is checked; the API decides whether it is valid.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        has_token = get_token(request) is not None
        path = request.path

        if path == "/":
            return redirect("restaurant:list" if has_token else "accounts:login")

        if path.startswith(AUTH_PREFIX) and has_token:
            return redirect("restaurant:list")

        if path.startswith(PROTECTED_PREFIXES) and not has_token:
            return redirect("accounts:login")

        return self.get_response(request)


class APIClientMiddleware:
    """
    Attach an ordering API client to the request as ``request.api``.

    The client forwards the request's access token and is closed once the
    response has been produced.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        api = get_client(get_token(request))
        request.api = api  # type: ignore[attr-defined]
        try:
            return self.get_response(request)
        finally:
            api.close()
