"""
Public evaluation explorer views.

A full page load runs the course catalogue flow and the selection flow
concurrently. htmx requests (sidebar clicks) only need the detail pane,
so they skip the catalogue and render the partial.
"""

import asyncio

from django.conf import settings
from django.shortcuts import render
from django.views.decorators.cache import never_cache

from src.apps.evaluations.services import EvaluationExplorer


@never_cache
async def explorer_view(request, course_id=None):
    explorer = EvaluationExplorer(api_base_url=settings.LMS_API_BASE_URL)
    context = {"active_page": "evaluations", "explorer": explorer}

    if request.htmx and not request.htmx.history_restore_request:
        await asyncio.gather(explorer.change_course(course_id), explorer.load_questions())
        return render(request, "evaluations/_detail.html", context)

    await asyncio.gather(explorer.mount(), explorer.change_course(course_id))
    return render(request, "evaluations/explorer.html", context)
