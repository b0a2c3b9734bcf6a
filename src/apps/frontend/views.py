"""
Frontend views shared by the apps.
"""

from django.shortcuts import redirect


def index_view(request):
    return redirect("evaluations:explorer")
