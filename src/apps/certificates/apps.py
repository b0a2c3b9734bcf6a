from django.apps import AppConfig


class CertificatesConfig(AppConfig):
    name = "src.apps.certificates"
    verbose_name = "Certificates"
