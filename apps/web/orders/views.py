"""
Order views - order history, cancellation and payment.

Everyone sees the orders the API returns for them. ADMIN and MANAGER may
cancel pending orders; MEMBERs pay for theirs.
"""

import logging

from django.contrib import messages
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from slooze_schemas import Order, PaymentType

from apps.web.backend import BackendAPIError, BackendError
from apps.web.core.auth import get_current_user, is_staff_role
from apps.web.core.decorators import ACCESS_DENIED

from .services import PaymentDetailsError, payment_form_context, payment_from_post

logger = logging.getLogger(__name__)


@require_GET
def order_list(request: HttpRequest) -> HttpResponse:
    """
    GET /orders/

    All orders visible to the current user, newest first as the API sends them.
    """
    user = get_current_user(request)
    orders: list[Order] = []

    if user is None:
        messages.error(request, "Failed to load user info")
    else:
        try:
            orders = request.api.list_orders()  # type: ignore[attr-defined]
        except BackendAPIError:
            messages.error(request, "Failed to fetch orders")
        except BackendError:
            logger.exception("Error fetching orders")
            messages.error(request, "Something went wrong")

    context = {
        "orders": orders,
        "user": user,
        "can_cancel": is_staff_role(user),
        "can_pay": user is not None and user.is_member,
    }
    return render(request, "orders/list.html", context)


@require_POST
def cancel_order(request: HttpRequest, order_id: str) -> HttpResponse:
    """
    POST /orders/{order_id}/cancel/

    Cancel a pending order (ADMIN and MANAGER only).
    """
    if not is_staff_role(get_current_user(request)):
        messages.error(request, ACCESS_DENIED)
        return redirect("orders:list")

    try:
        request.api.cancel_order(order_id)  # type: ignore[attr-defined]
    except BackendAPIError:
        messages.error(request, "Failed to cancel order")
    except BackendError:
        logger.exception("Error cancelling order %s", order_id)
        messages.error(request, "Error cancelling order")
    else:
        messages.success(request, "Order cancelled successfully")

    return redirect("orders:list")


@require_http_methods(["GET", "POST"])
def pay_order(request: HttpRequest, order_id: str) -> HttpResponse:
    """
    GET/POST /orders/{order_id}/pay/

    GET: Order summary with the payment form while the order is pending.
    POST: Pay with the chosen method, then come back to this page.

    Only MEMBERs pay; anyone the API cannot identify is sent to login.
    """
    user = get_current_user(request)
    if user is None:
        return redirect("accounts:login")
    if not user.is_member:
        messages.error(request, ACCESS_DENIED)
        return redirect("restaurant:list")

    if request.method == "POST":
        return _submit_payment(request, order_id)

    try:
        order = request.api.get_order(order_id)  # type: ignore[attr-defined]
    except BackendAPIError:
        messages.error(request, "Order not found")
        return redirect("orders:list")
    except BackendError:
        logger.exception("Error loading order %s", order_id)
        messages.error(request, "Failed to load order")
        return render(request, "orders/pay.html", {"order": None}, status=502)

    selected = PaymentType.CASH
    if order.payment_method is not None:
        selected = order.payment_method.type

    context = {"order": order, **payment_form_context(selected)}
    return render(request, "orders/pay.html", context)


def _submit_payment(request: HttpRequest, order_id: str) -> HttpResponse:
    try:
        payment = payment_from_post(request.POST)
    except PaymentDetailsError as e:
        messages.error(request, e.message)
        return redirect("orders:pay", order_id=order_id)

    try:
        request.api.pay_order(order_id, payment)  # type: ignore[attr-defined]
    except BackendAPIError as e:
        messages.error(request, e.detail or "Payment failed")
    except BackendError:
        logger.exception("Error paying order %s", order_id)
        messages.error(request, "Something went wrong")
    else:
        messages.success(request, "Payment successful!")

    return redirect("orders:pay", order_id=order_id)
