"""Django app configuration for orders module."""

from django.apps import AppConfig


class OrdersConfig(AppConfig):
    """Orders app configuration."""

    name = "apps.web.orders"
    verbose_name = "Orders"
