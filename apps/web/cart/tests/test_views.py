"""
Tests for cart views.
"""

import json
from decimal import Decimal

from django.contrib.messages import get_messages
from django.urls import reverse

import httpx
import pytest

from apps.web.backend.tests.factories import (
    MenuItemPayloadFactory,
    RestaurantPayloadFactory,
    restaurant_page_payload,
)
from apps.web.cart.cart import Cart


def _messages(response) -> list[str]:
    return [str(m) for m in get_messages(response.wsgi_request)]


@pytest.fixture
def restaurants_page(api_mock):
    restaurant = RestaurantPayloadFactory(
        id="r-1",
        name="Spice Route",
        menuItems=[
            MenuItemPayloadFactory(id="m-1", name="Paneer Tikka", price=250),
            MenuItemPayloadFactory(id="m-2", name="Masala Dosa", price=120),
        ],
    )
    return api_mock.get("/restaurants").respond(
        200, json=restaurant_page_payload([restaurant])
    )


def _add(http_client, item_id="m-1", qty="1", restaurant_id="r-1"):
    return http_client.post(
        reverse("cart:add"),
        {
            "menu_item_id": item_id,
            "restaurant_id": restaurant_id,
            "qty": qty,
            "page": "1",
        },
    )


class TestAddToCart:
    """Tests for POST /cart/add/."""

    def test_adds_item_with_api_price(self, http_client, member, restaurants_page):
        response = _add(http_client, qty="2")

        assert response.status_code == 302
        assert response.url == reverse("restaurant:list") + "?page=1&menu=r-1"
        line = Cart(response.wsgi_request.session).get("m-1", "r-1")
        assert line.qty == 2
        assert line.price == Decimal("250")
        assert line.restaurant_name == "Spice Route"
        assert "2 × Paneer Tikka added to cart" in _messages(response)

    def test_adding_twice_accumulates(self, http_client, member, restaurants_page):
        _add(http_client, qty="2")
        response = _add(http_client, qty="3")

        cart = Cart(response.wsgi_request.session)
        assert len(cart) == 1
        assert cart.get("m-1", "r-1").qty == 5

    def test_invalid_quantity_becomes_one(self, http_client, member, restaurants_page):
        response = _add(http_client, qty="zero")

        assert Cart(response.wsgi_request.session).get("m-1", "r-1").qty == 1

    def test_unknown_item(self, http_client, member, restaurants_page):
        response = _add(http_client, item_id="m-404")

        assert Cart(response.wsgi_request.session).is_empty
        assert "Menu item not found" in _messages(response)

    def test_staff_cannot_add(self, http_client, manager, restaurants_page):
        response = _add(http_client)

        assert response.status_code == 302
        assert Cart(response.wsgi_request.session).is_empty
        assert not restaurants_page.called

    def test_requires_token(self, anon_client):
        response = _add(anon_client)

        assert response.url == reverse("accounts:login")


class TestCartDetail:
    """Tests for GET /cart/ and the quantity controls."""

    def test_empty_cart(self, http_client, member):
        response = http_client.get(reverse("cart:detail"))

        assert response.status_code == 200
        assert b"Your cart is empty." in response.content

    def test_shows_lines_and_total(self, http_client, member, restaurants_page):
        _add(http_client, "m-1", qty="2")
        _add(http_client, "m-2", qty="1")

        response = http_client.get(reverse("cart:detail"))

        assert b"Paneer Tikka" in response.content
        assert b"Spice Route" in response.content
        assert "₹500.00".encode() in response.content
        assert "Total: ₹620.00".encode() in response.content

    @pytest.mark.parametrize("role_fixture", ["admin", "manager"])
    def test_staff_roles_are_denied(self, http_client, request, role_fixture):
        request.getfixturevalue(role_fixture)

        response = http_client.get(reverse("cart:detail"))

        assert response.status_code == 302
        assert response.url == reverse("restaurant:list")
        assert "Access denied for this role" in _messages(response)

    def test_increase_decrease_remove(self, http_client, member, restaurants_page):
        _add(http_client, "m-1", qty="2")

        http_client.post(reverse("cart:increase", args=["r-1", "m-1"]))
        response = http_client.post(reverse("cart:decrease", args=["r-1", "m-1"]))
        assert Cart(response.wsgi_request.session).get("m-1", "r-1").qty == 2

        http_client.post(reverse("cart:decrease", args=["r-1", "m-1"]))
        response = http_client.post(reverse("cart:decrease", args=["r-1", "m-1"]))
        assert Cart(response.wsgi_request.session).get("m-1", "r-1").qty == 1

        response = http_client.post(reverse("cart:remove", args=["r-1", "m-1"]))
        assert response.url == reverse("cart:detail")
        assert Cart(response.wsgi_request.session).is_empty

    def test_controls_require_post(self, http_client, member):
        response = http_client.get(reverse("cart:increase", args=["r-1", "m-1"]))
        assert response.status_code == 405


class TestCheckout:
    """Tests for GET/POST /cart/checkout/."""

    def test_empty_cart_cannot_checkout(self, http_client, member):
        response = http_client.get(reverse("cart:checkout"))

        assert response.url == reverse("cart:detail")
        assert "Your cart is empty!" in _messages(response)

    def test_checkout_form(self, http_client, member, restaurants_page):
        _add(http_client, qty="2")

        response = http_client.get(reverse("cart:checkout"))

        assert response.status_code == 200
        assert b"Cash on Delivery" in response.content
        assert b"Net Banking" in response.content

    def test_places_order_and_clears_cart(self, http_client, member, restaurants_page, api_mock):
        route = api_mock.post("/orders").respond(201, json={"id": "order-42"})
        _add(http_client, qty="2")

        response = http_client.post(
            reverse("cart:checkout"),
            {"payment_type": "UPI", "upi_id": "asha@upi"},
        )

        assert response.status_code == 302
        assert response.url == reverse("orders:pay", args=["order-42"])
        assert json.loads(route.calls.last.request.content) == {
            "items": [{"menuItemId": "m-1", "quantity": 2, "restaurantId": "r-1"}],
            "payment": {"type": "UPI", "details": {"upiId": "asha@upi"}},
        }
        assert Cart(response.wsgi_request.session).is_empty
        assert "Order placed successfully!" in _messages(response)

    def test_order_without_id_goes_to_order_list(
        self, http_client, member, restaurants_page, api_mock
    ):
        api_mock.post("/orders").respond(201, json={})
        _add(http_client)

        response = http_client.post(reverse("cart:checkout"), {"payment_type": "CASH"})

        assert response.url == reverse("orders:list")

    def test_missing_payment_detail(self, http_client, member, restaurants_page, api_mock):
        route = api_mock.post("/orders").respond(201, json={"id": "order-42"})
        _add(http_client)

        response = http_client.post(
            reverse("cart:checkout"),
            {"payment_type": "CARD", "card_number": "  "},
        )

        assert response.status_code == 200
        assert not route.called
        assert "Please enter your card number" in _messages(response)
        assert not Cart(response.wsgi_request.session).is_empty

    def test_server_message_is_shown(self, http_client, member, restaurants_page, api_mock):
        api_mock.post("/orders").respond(
            400, json={"message": "Restaurant not in your country"}
        )
        _add(http_client)

        response = http_client.post(reverse("cart:checkout"), {"payment_type": "CASH"})

        assert response.status_code == 200
        assert "Restaurant not in your country" in _messages(response)
        assert not Cart(response.wsgi_request.session).is_empty

    def test_generic_failure_message(self, http_client, member, restaurants_page, api_mock):
        api_mock.post("/orders").mock(side_effect=httpx.ConnectError("refused"))
        _add(http_client)

        response = http_client.post(reverse("cart:checkout"), {"payment_type": "CASH"})

        assert "Failed to place order." in _messages(response)
