"""
Status API endpoints.

Mounted at: /status/api/
No authentication; used by load balancers and uptime checks.
"""

from django.conf import settings
from django.http import HttpRequest
from ninja import Router, Schema

from src.common.exceptions import ExternalServiceError
from src.integrations import lms_api

router = Router(tags=["Status"])


class HealthSchema(Schema):
    status: str
    lms_api: str
    lms_api_base_url: str


@router.get("/health", response=HealthSchema, summary="Service and LMS API health")
def health(request: HttpRequest):
    result = lms_api.health_check()
    if result["status"] != "ok":
        raise ExternalServiceError("LMS API health check failed", extra={"lms_api": result["status"]})
    return {
        "status": "ok",
        "lms_api": result["status"],
        "lms_api_base_url": settings.LMS_API_BASE_URL,
    }
