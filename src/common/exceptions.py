"""
Application exceptions and django-ninja error handlers.

Integrations raise these exceptions; view-state controllers catch them at
the flow boundary, and the JSON API layer turns them into HTTP responses
via ninja's exception handlers.
"""

import structlog
from django.http import HttpRequest, HttpResponse
from ninja import NinjaAPI

logger = structlog.get_logger(__name__)


class ApplicationError(Exception):
    """Base for all application errors."""

    def __init__(self, message: str, extra: dict | None = None):
        super().__init__(message)
        self.message = message
        self.extra = extra or {}


class ExternalServiceError(ApplicationError):
    """The LMS API could not be reached or returned an unusable response."""
    pass


def configure_exception_handlers(api: NinjaAPI) -> None:
    """Register custom exception handlers on a NinjaAPI instance."""

    @api.exception_handler(ExternalServiceError)
    def handle_external_service(request: HttpRequest, exc: ExternalServiceError) -> HttpResponse:
        logger.error("external_service_error", message=exc.message, **exc.extra)
        return api.create_response(
            request,
            {"detail": "An external service is unavailable. Please try again.", **exc.extra},
            status=502,
        )
