"""
Template context processors.
"""

from typing import Any

from django.http import HttpRequest

from .auth import get_current_user, get_token


def navbar(request: HttpRequest) -> dict[str, Any]:
    """
    Navbar state: the current user and which links they may see.

    The navbar is only shown once the API has confirmed the user. The cart
    link is hidden for ADMIN and MANAGER.
    """
    if get_token(request) is None:
        return {"current_user": None, "show_cart_link": False}

    user = get_current_user(request)
    return {
        "current_user": user,
        "show_cart_link": user is not None and not user.is_staff_role,
    }
