from django.urls import path

from src.apps.certificates import views

app_name = "certificates"

urlpatterns = [
    path("certificates/", views.my_certificates_view, name="my_certificates"),
]
