"""
Certificate gallery view.

Reads the caller's certificates from the LMS API on every request
(no caching across page loads) and renders the card grid.
"""

from django.conf import settings
from django.shortcuts import render
from django.views.decorators.cache import never_cache

from src.apps.certificates.services import CertificateGallery
from src.common.auth import get_bearer_token


@never_cache
async def my_certificates_view(request):
    gallery = CertificateGallery(token=get_bearer_token(request))
    await gallery.mount()
    return render(request, "certificates/my_certificates.html", {
        "active_page": "certificates",
        "gallery": gallery,
        "courses_url": settings.STUDENT_COURSES_PATH,
    })
