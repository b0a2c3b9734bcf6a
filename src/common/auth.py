"""
Caller identity for LMS API reads.

Tokens are issued by the LMS backend and held by the browser; this module
only lifts them off the incoming request so they can be forwarded.
"""

from django.http import HttpRequest

TOKEN_COOKIE_NAME = "token"


def get_bearer_token(request: HttpRequest) -> str | None:
    """Bearer token from the Authorization header, else the ``token`` cookie."""
    header = request.headers.get("Authorization", "")
    scheme, _, credentials = header.partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    return request.COOKIES.get(TOKEN_COOKIE_NAME) or None
