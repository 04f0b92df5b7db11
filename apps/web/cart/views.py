"""
Cart views - basket management and checkout.

The cart lives in the session; nothing reaches the API until checkout,
which places the order and hands over to the pay page.
"""

import logging
from urllib.parse import urlencode

from django.conf import settings
from django.contrib import messages
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.urls import reverse
from django.views.decorators.http import require_http_methods, require_POST

from slooze_schemas import OrderCreateRequest, PaymentType, Role

from apps.web.backend import BackendAPIError, BackendError
from apps.web.core.auth import get_current_user, is_staff_role
from apps.web.core.decorators import restrict_roles
from apps.web.orders.services import (
    PaymentDetailsError,
    payment_form_context,
    payment_from_post,
)

from .cart import Cart

logger = logging.getLogger(__name__)

PLACE_ORDER_FAILED = "Failed to place order."


def _restaurants_url(page: int, restaurant_id: str | None = None) -> str:
    query: dict[str, str | int] = {"page": page}
    if restaurant_id:
        query["menu"] = restaurant_id
    return f"{reverse('restaurant:list')}?{urlencode(query)}"


def _positive_int(value: str | None, default: int = 1) -> int:
    try:
        return max(int(value or default), 1)
    except ValueError:
        return default


@require_POST
def add_to_cart(request: HttpRequest) -> HttpResponse:
    """
    POST /cart/add/

    Add a menu item from the restaurant list to the cart. The item is looked
    up on the restaurants page it was picked from so name and price come
    from the API, not the form.
    """
    page = _positive_int(request.POST.get("page"))
    restaurant_id = request.POST.get("restaurant_id", "")
    item_id = request.POST.get("menu_item_id", "")
    qty = _positive_int(request.POST.get("qty"))
    back = _restaurants_url(page, restaurant_id)

    # Staff roles cannot buy; the add button is hidden for them anyway
    if is_staff_role(get_current_user(request)):
        return redirect(back)

    try:
        restaurants = request.api.list_restaurants(  # type: ignore[attr-defined]
            page=page, limit=settings.SLOOZE_RESTAURANTS_PAGE_SIZE
        )
    except BackendError:
        logger.exception("Error fetching restaurants for add-to-cart")
        messages.error(request, "Failed to load restaurants")
        return redirect(back)

    restaurant = restaurants.get_restaurant(restaurant_id)
    menu_item = restaurant.get_menu_item(item_id) if restaurant else None
    if restaurant is None or menu_item is None:
        messages.error(request, "Menu item not found")
        return redirect(back)

    Cart(request.session).add(menu_item, restaurant, qty)
    messages.success(request, f"{qty} × {menu_item.name} added to cart")
    return redirect(back)


@restrict_roles(Role.ADMIN, Role.MANAGER)
@require_http_methods(["GET"])
def cart_detail(request: HttpRequest) -> HttpResponse:
    """
    GET /cart/

    Cart lines with quantity controls, line totals and the cart total.
    """
    cart = Cart(request.session)
    return render(request, "cart/detail.html", {"cart": cart})


@restrict_roles(Role.ADMIN, Role.MANAGER)
@require_POST
def increase_qty(request: HttpRequest, restaurant_id: str, item_id: str) -> HttpResponse:
    Cart(request.session).increase(item_id, restaurant_id)
    return redirect("cart:detail")


@restrict_roles(Role.ADMIN, Role.MANAGER)
@require_POST
def decrease_qty(request: HttpRequest, restaurant_id: str, item_id: str) -> HttpResponse:
    Cart(request.session).decrease(item_id, restaurant_id)
    return redirect("cart:detail")


@restrict_roles(Role.ADMIN, Role.MANAGER)
@require_POST
def remove_item(request: HttpRequest, restaurant_id: str, item_id: str) -> HttpResponse:
    Cart(request.session).remove(item_id, restaurant_id)
    return redirect("cart:detail")


@restrict_roles(Role.ADMIN, Role.MANAGER)
@require_http_methods(["GET", "POST"])
def checkout(request: HttpRequest) -> HttpResponse:
    """
    GET/POST /cart/checkout/

    GET: Payment method form for the current cart.
    POST: Place the order, clear the cart and continue to the pay page.
    """
    cart = Cart(request.session)
    if cart.is_empty:
        messages.error(request, "Your cart is empty!")
        return redirect("cart:detail")

    selected = request.POST.get("payment_type", PaymentType.CASH.value)

    if request.method == "POST":
        try:
            payment = payment_from_post(request.POST)
        except PaymentDetailsError as e:
            messages.error(request, e.message)
        else:
            order_request = OrderCreateRequest(items=cart.order_lines(), payment=payment)
            try:
                order = request.api.create_order(order_request)  # type: ignore[attr-defined]
            except BackendAPIError as e:
                messages.error(request, e.detail or PLACE_ORDER_FAILED)
            except BackendError:
                logger.exception("Error placing order")
                messages.error(request, PLACE_ORDER_FAILED)
            else:
                messages.success(request, "Order placed successfully!")
                cart.clear()
                if order.id:
                    return redirect("orders:pay", order_id=order.id)
                return redirect("orders:list")

    if selected not in PaymentType.__members__:
        selected = PaymentType.CASH.value

    context = {
        "cart": cart,
        "upi_id": request.POST.get("upi_id", ""),
        "card_number": request.POST.get("card_number", ""),
        "bank_name": request.POST.get("bank_name", ""),
        **payment_form_context(selected),
    }
    return render(request, "cart/checkout.html", context)
