"""
WSGI entry point, for sync deployments and `manage.py runserver`.

The views are async; under WSGI Django runs them through async_to_sync,
so Flow A and Flow B of a page still overlap within one request.
Production serves src.asgi instead (see gunicorn.conf.py).
"""

import os

from src.config.env import env

from django.core.wsgi import get_wsgi_application

_settings_map = {
    "production": "src.config.django.prod",
    "test": "src.config.django.test",
    "development": "src.config.django.base",
}


os.environ.setdefault(
    "DJANGO_SETTINGS_MODULE",
    _settings_map.get(env.DJANGO_ENV, "src.config.django.base"),
)

application = get_wsgi_application()
