"""
LMS API base address resolution.

Called once while Django settings load; everything else reads the
resolved values from settings (LMS_API_BASE_URL / LMS_API_FETCH_URL).
"""

from urllib.parse import urljoin, urlsplit

RELATIVE_API_PREFIX = "/api"


def resolve_api_base_url(*, override: str, host: str, local_url: str) -> str:
    """
    Pick the browser-facing LMS API address.

    Precedence:
      1. an explicit override, when non-empty
      2. ``local_url`` when the viewing host is ``localhost``
      3. the relative ``/api`` prefix
    """
    if override:
        return override.rstrip("/")
    if host == "localhost":
        return local_url.rstrip("/")
    return RELATIVE_API_PREFIX


def host_of(domain: str) -> str:
    """Hostname part of a ``host[:port]`` domain string."""
    return urlsplit(f"//{domain}").hostname or ""


def absolute_api_url(base_url: str, *, origin: str) -> str:
    """Make a relative base address absolute against the public origin."""
    if urlsplit(base_url).scheme:
        return base_url
    return urljoin(origin.rstrip("/") + "/", base_url.lstrip("/")).rstrip("/")
