"""
LMS API configuration.

The base address is resolved exactly once, here, and injected into the
rest of the project through Django settings.

  LMS_API_BASE_URL  — address shown to (and copied by) the browser
  LMS_API_FETCH_URL — same address, absolute, used for server-side reads
"""

from src.common.api_base import absolute_api_url, host_of, resolve_api_base_url
from src.config.env import env

LMS_API_BASE_URL = resolve_api_base_url(
    override=env.LMS_API_URL,
    host=host_of(env.PLATFORM_DOMAIN),
    local_url=env.LMS_API_LOCAL_URL,
)

LMS_API_FETCH_URL = absolute_api_url(LMS_API_BASE_URL, origin=env.PLATFORM_ORIGIN)

LMS_API_TIMEOUT = env.LMS_API_TIMEOUT

# ── Routes owned by the student SPA (link targets only) ─────────────────

CERTIFICATE_DETAIL_PATH = env.CERTIFICATE_DETAIL_PATH
STUDENT_COURSES_PATH = env.STUDENT_COURSES_PATH
