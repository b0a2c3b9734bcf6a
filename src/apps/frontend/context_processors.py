from django.conf import settings


def lms_api(request):
    """Expose the browser-facing LMS API address to every template."""
    return {"LMS_API_BASE_URL": settings.LMS_API_BASE_URL}
