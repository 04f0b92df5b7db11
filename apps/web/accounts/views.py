"""
Accounts views - login and logout against the ordering API.
"""

import logging

from django.conf import settings
from django.contrib import messages
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.views.decorators.http import require_GET, require_http_methods

from apps.web.backend import (
    BackendAPIError,
    BackendAuthError,
    BackendConnectionError,
    BackendError,
)

logger = logging.getLogger(__name__)


@require_http_methods(["GET", "POST"])
def login_view(request: HttpRequest) -> HttpResponse:
    """
    GET/POST /login/

    Login page with email/password form. On success the API's access token
    is stored in our own cookie and the user goes to the restaurant list.
    """
    email = ""

    if request.method == "POST":
        email = request.POST.get("email", "").strip()
        password = request.POST.get("password", "")

        try:
            token = request.api.login(email, password)  # type: ignore[attr-defined]
        except BackendAuthError:
            messages.error(request, "Invalid credentials. Please try again.")
        except BackendConnectionError:
            logger.exception("Login error for %s", email)
            messages.error(request, "Network error. Please check your connection.")
        except BackendError:
            messages.error(request, "Internal server error. Please try later.")
        else:
            messages.success(request, "Login successful!")
            response = redirect("restaurant:list")
            response.set_cookie(
                settings.SLOOZE_TOKEN_COOKIE,
                token,
                max_age=request.api.token_max_age,  # type: ignore[attr-defined]
                httponly=True,
                samesite="Lax",
                secure=settings.SESSION_COOKIE_SECURE,
            )
            return response

    return render(request, "accounts/login.html", {"email": email})


@require_GET
def logout_view(request: HttpRequest) -> HttpResponse:
    """
    GET /logout/

    Ask the API to end the session, then drop the token cookie. A token the
    API no longer accepts (401) is dropped as well.
    """
    try:
        request.api.logout()  # type: ignore[attr-defined]
    except BackendAPIError as e:
        if e.status_code == 401:
            logger.info("Logout with a token the API already expired")
            return _drop_token(redirect("accounts:login"))
        messages.error(request, "Failed to log out. Try again.")
        return redirect("restaurant:list")
    except BackendError:
        logger.exception("Logout error")
        messages.error(request, "Network error while logging out.")
        return redirect("restaurant:list")

    messages.success(request, "Logged out successfully!")
    return _drop_token(redirect("accounts:login"))


def _drop_token(response: HttpResponse) -> HttpResponse:
    response.delete_cookie(settings.SLOOZE_TOKEN_COOKIE, samesite="Lax")
    return response
