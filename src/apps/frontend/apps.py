from django.apps import AppConfig


class FrontendConfig(AppConfig):
    name = "src.apps.frontend"
    verbose_name = "Frontend"
