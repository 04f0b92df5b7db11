"""Django app configuration for cart module."""

from django.apps import AppConfig


class CartConfig(AppConfig):
    """Cart app configuration."""

    name = "apps.web.cart"
    verbose_name = "Cart"
