"""
Restaurant views - browse restaurants and menus, and manage them.

Members browse and add dishes to their cart. ADMIN and MANAGER users add
restaurants and menu items instead; a MANAGER can only add restaurants in
their own country.
"""

import logging
from decimal import Decimal, InvalidOperation

from django.conf import settings
from django.contrib import messages
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.views.decorators.http import require_GET, require_POST

from pydantic import ValidationError as PydanticValidationError
from slooze_schemas import (
    Country,
    MenuItemCreate,
    RestaurantCreate,
    RestaurantPage,
    Role,
)

from apps.web.backend import BackendAPIError, BackendError
from apps.web.core.auth import get_current_user, is_staff_role

logger = logging.getLogger(__name__)

NETWORK_ERROR = "Network error"


def _page_number(value: str | None) -> int:
    try:
        return max(int(value or 1), 1)
    except ValueError:
        return 1


@require_GET
def restaurant_list(request: HttpRequest) -> HttpResponse:
    """
    GET /restaurants/?page=N&menu=<restaurant_id>

    A page of restaurants. When ``menu`` names a restaurant on this page its
    menu is shown alongside the list.
    """
    page = _page_number(request.GET.get("page"))
    user = get_current_user(request)

    try:
        restaurants = request.api.list_restaurants(  # type: ignore[attr-defined]
            page=page, limit=settings.SLOOZE_RESTAURANTS_PAGE_SIZE
        )
    except BackendError:
        logger.exception("Error fetching restaurants (page %d)", page)
        messages.error(request, "Failed to load restaurants")
        restaurants = RestaurantPage()

    selected = None
    menu_id = request.GET.get("menu")
    if menu_id:
        selected = restaurants.get_restaurant(menu_id)

    context = {
        "restaurants": restaurants.data,
        "meta": restaurants.meta,
        "page": page,
        "selected_restaurant": selected,
        "user": user,
        "can_manage": is_staff_role(user),
        "can_order": not is_staff_role(user),
        "can_choose_country": user is not None and user.role == Role.ADMIN,
        "countries": [country.value for country in Country],
    }
    return render(request, "restaurant/list.html", context)


@require_POST
def add_restaurant(request: HttpRequest) -> HttpResponse:
    """
    POST /restaurants/add/

    ADMIN picks the country; MANAGER always adds to their own country.
    """
    user = get_current_user(request)
    if not is_staff_role(user):
        messages.error(request, "Access denied for this role")
        return redirect("restaurant:list")

    name = request.POST.get("name", "").strip()
    if not name:
        messages.error(request, "Restaurant name is required")
        return redirect("restaurant:list")

    country = request.POST.get("country", Country.INDIA.value)
    if user.role == Role.MANAGER:  # type: ignore[union-attr]
        country = user.country.value  # type: ignore[union-attr]

    try:
        body = RestaurantCreate(name=name, country=country)
    except PydanticValidationError:
        messages.error(request, "Failed to add restaurant")
        return redirect("restaurant:list")

    try:
        request.api.create_restaurant(body)  # type: ignore[attr-defined]
    except BackendAPIError:
        messages.error(request, "Failed to add restaurant")
    except BackendError:
        logger.exception("Error adding restaurant %s", name)
        messages.error(request, NETWORK_ERROR)
    else:
        messages.success(request, "Restaurant added!")

    return redirect("restaurant:list")


@require_POST
def add_menu_item(request: HttpRequest, restaurant_id: str) -> HttpResponse:
    """
    POST /restaurants/{restaurant_id}/items/add/

    Add a dish to a restaurant's menu (ADMIN and MANAGER only).
    """
    if not is_staff_role(get_current_user(request)):
        messages.error(request, "Access denied for this role")
        return redirect("restaurant:list")

    try:
        body = MenuItemCreate(
            name=request.POST.get("name", "").strip(),
            price=Decimal(request.POST.get("price", "").strip()),
            restaurant_id=restaurant_id,
        )
    except (InvalidOperation, PydanticValidationError):
        messages.error(request, "Enter a valid item name and price")
        return redirect("restaurant:list")

    try:
        request.api.create_menu_item(body)  # type: ignore[attr-defined]
    except BackendAPIError:
        messages.error(request, "Failed to add menu item")
    except BackendError:
        logger.exception("Error adding menu item to restaurant %s", restaurant_id)
        messages.error(request, NETWORK_ERROR)
    else:
        messages.success(request, "Menu item added!")

    return redirect("restaurant:list")
