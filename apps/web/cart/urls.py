"""
Cart URL routes.
"""

from django.urls import path

from . import views

app_name = "cart"

urlpatterns = [
    path("", views.cart_detail, name="detail"),
    path("add/", views.add_to_cart, name="add"),
    path("checkout/", views.checkout, name="checkout"),
    path(
        "<str:restaurant_id>/<str:item_id>/increase/",
        views.increase_qty,
        name="increase",
    ),
    path(
        "<str:restaurant_id>/<str:item_id>/decrease/",
        views.decrease_qty,
        name="decrease",
    ),
    path(
        "<str:restaurant_id>/<str:item_id>/remove/",
        views.remove_item,
        name="remove",
    ),
]
