"""
Decorators for role-based page gating.
"""

from collections.abc import Callable
from functools import wraps
from typing import Any

from django.contrib import messages
from django.http import HttpRequest
from django.shortcuts import redirect

from slooze_schemas import Role

from .auth import get_current_user

ACCESS_DENIED = "Access denied for this role"


def restrict_roles(*roles: Role) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """
    Decorator that turns away users holding one of ``roles``.

    Denied users get an "Access denied" flash message and land on the
    restaurant list. Users the API cannot identify are let through; the API
    enforces real authorization.

    Usage:
        @restrict_roles(Role.ADMIN, Role.MANAGER)
        def cart_detail(request):
            ...
    """

    def decorator(view_func: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(view_func)
        def wrapper(request: HttpRequest, *args: Any, **kwargs: Any) -> Any:
            user = get_current_user(request)
            if user is not None and user.role in roles:
                messages.error(request, ACCESS_DENIED)
                return redirect("restaurant:list")
            return view_func(request, *args, **kwargs)

        return wrapper

    return decorator
