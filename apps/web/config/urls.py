"""
URL configuration for the Slooze ordering site.
"""

from django.urls import include, path

urlpatterns = [
    path("", include("apps.web.accounts.urls")),
    path("restaurants/", include("apps.web.restaurant.urls")),
    path("cart/", include("apps.web.cart.urls")),
    path("orders/", include("apps.web.orders.urls")),
]
