"""
Static files and storage configuration.

Static assets (stylesheet, copy-to-clipboard helper) are served by
whitenoise; there are no user uploads.
"""

from src.config.env import BASE_DIR

# ── Static files ────────────────────────────────────────────────────────

STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

STORAGES = {
    "default": {
        "BACKEND": "django.core.files.storage.FileSystemStorage",
    },
    "staticfiles": {
        "BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage",
    },
}
