from django.urls import path

from src.apps.frontend import views

app_name = "frontend"

urlpatterns = [
    path("", views.index_view, name="index"),
]
