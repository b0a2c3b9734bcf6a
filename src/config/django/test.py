"""
Test settings.

Optimized for speed. No database, plain static storage, fixed LMS API address.
"""

from src.config.django.base import *  # noqa: F401, F403

# ── Speed ───────────────────────────────────────────────────────────────

DEBUG = False
ALLOWED_HOSTS = ["testserver", "localhost"]

# ── Static files (no collectstatic manifest in tests) ───────────────────

STORAGES = {
    "default": {
        "BACKEND": "django.core.files.storage.FileSystemStorage",
    },
    "staticfiles": {
        "BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage",
    },
}

# ── LMS API (never derived from the developer's .env) ───────────────────

LMS_API_BASE_URL = "http://lms.test/api"
LMS_API_FETCH_URL = "http://lms.test/api"
LMS_API_TIMEOUT = 1.0
CERTIFICATE_DETAIL_PATH = "/student/certificate/{course_id}"
STUDENT_COURSES_PATH = "/student/courses"
