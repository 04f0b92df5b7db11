"""Django app configuration for accounts module."""

from django.apps import AppConfig


class AccountsConfig(AppConfig):
    """Accounts app configuration."""

    name = "apps.web.accounts"
    verbose_name = "Accounts"
