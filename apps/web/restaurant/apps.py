"""Django app configuration for restaurant module."""

from django.apps import AppConfig


class RestaurantConfig(AppConfig):
    """Restaurant app configuration."""

    name = "apps.web.restaurant"
    verbose_name = "Restaurant"
