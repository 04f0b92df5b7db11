from django.apps import AppConfig


class CoreConfig(AppConfig):
    name = "apps.web.core"
    verbose_name = "Core"
