"""
Environment configuration via pydantic_settings.

This is the SINGLE SOURCE OF TRUTH for all environment variables.
Django settings files import from here — they never read os.environ directly.

Usage:
    from src.config.env import env
    env.SECRET_KEY
    env.LMS_API_URL

Environment switching:
    - DJANGO_ENV is read ONCE here to determine the environment.
    - DJANGO_SETTINGS_MODULE is set accordingly in manage.py / wsgi.py / asgi.py.
    - The .env file is loaded automatically.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


BASE_DIR = Path(__file__).resolve().parent.parent.parent  # project root (above src/)


class AppSettings(BaseSettings):
    """
    All environment variables in one place.
    Fields have sensible dev defaults; production overrides via .env.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # ignore env vars not declared here
        case_sensitive=False,
    )

    # ── Environment switch ──────────────────────────────────────────────
    # "development" | "production" | "test"
    DJANGO_ENV: str = Field(default="development")

    # ── Django core ─────────────────────────────────────────────────────
    SECRET_KEY: str = "insecure-dev-key-change-in-production"
    DEBUG: bool = True
    ALLOWED_HOSTS: list[str] = ["localhost", "127.0.0.1"]

    # ── Platform ────────────────────────────────────────────────────────
    # Public host the pages are served on. Its hostname decides the
    # default LMS API address (see src/config/others/lms_api.py).
    PLATFORM_DOMAIN: str = "localhost:8000"
    PLATFORM_SCHEME: str = "http"

    @property
    def PLATFORM_ORIGIN(self) -> str:
        return f"{self.PLATFORM_SCHEME}://{self.PLATFORM_DOMAIN}"

    # ── LMS API ─────────────────────────────────────────────────────────
    # Explicit override. Empty means "derive from PLATFORM_DOMAIN".
    LMS_API_URL: str = ""
    LMS_API_LOCAL_URL: str = "http://localhost:5000/api"
    LMS_API_TIMEOUT: float = 15.0

    # ── Routes owned by the student SPA ─────────────────────────────────
    CERTIFICATE_DETAIL_PATH: str = "/student/certificate/{course_id}"
    STUDENT_COURSES_PATH: str = "/student/courses"

    # ── Gunicorn ────────────────────────────────────────────────────────
    GUNICORN_WORKERS: int = 4
    GUNICORN_BIND: str = "0.0.0.0:8899"

    @field_validator("DJANGO_ENV")
    @classmethod
    def validate_env(cls, v: str) -> str:
        allowed = {"development", "production", "test"}
        if v not in allowed:
            msg = f"DJANGO_ENV must be one of {allowed}, got '{v}'"
            raise ValueError(msg)
        return v

    @field_validator("PLATFORM_SCHEME")
    @classmethod
    def validate_scheme(cls, v: str) -> str:
        if v not in {"http", "https"}:
            msg = f"PLATFORM_SCHEME must be http or https, got '{v}'"
            raise ValueError(msg)
        return v

    @property
    def is_production(self) -> bool:
        return self.DJANGO_ENV == "production"

    @property
    def is_development(self) -> bool:
        return self.DJANGO_ENV == "development"

    @property
    def is_test(self) -> bool:
        return self.DJANGO_ENV == "test"


# ── Singleton ───────────────────────────────────────────────────────────
# Instantiated once at import time. All Django settings files use this.
env = AppSettings()
