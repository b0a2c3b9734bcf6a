from django.urls import path

from src.apps.evaluations import views

app_name = "evaluations"

urlpatterns = [
    path("", views.explorer_view, name="explorer"),
    path("<str:course_id>/", views.explorer_view, name="explorer_course"),
]
