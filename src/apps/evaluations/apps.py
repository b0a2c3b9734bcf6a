from django.apps import AppConfig


class EvaluationsConfig(AppConfig):
    name = "src.apps.evaluations"
    verbose_name = "Evaluations"
