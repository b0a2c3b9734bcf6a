"""
Root URL configuration.

- /status/api/             → NinjaExtraAPI (health probe, no auth)
- /student/certificates/   → Certificate gallery (Django templates)
- /evaluations/            → Public evaluation explorer (Django templates)
- /                        → Redirect to the explorer
"""

from django.urls import include, path
from ninja_extra import NinjaExtraAPI

from src.apps.frontend.apis import router as status_router
from src.common.exceptions import configure_exception_handlers

# ── Status API ──────────────────────────────────────────────────────────

api = NinjaExtraAPI(
    title="LMS Views Status API",
    version="1.0.0",
    description="Health of the LMS views service and its upstream API",
    urls_namespace="status_api",
)

configure_exception_handlers(api)

# /status/api/health
api.add_router("/", status_router)

# ── URL patterns ────────────────────────────────────────────────────────

urlpatterns = [
    # APIs
    path("status/api/", api.urls),

    # Student pages (templates)
    path("student/", include("src.apps.certificates.urls")),

    # Public evaluation explorer (templates)
    path("evaluations/", include("src.apps.evaluations.urls")),

    # Frontend — must be last (catch-all paths)
    path("", include("src.apps.frontend.urls")),
]
