"""
LMS API integration.

Read-only client for the LMS backend REST API.

Configuration (Django settings):
  LMS_API_FETCH_URL = "http://localhost:5000/api"
  LMS_API_TIMEOUT   = 15.0

API endpoints used:
  GET /certificates/my-certificates   — the caller's certificates (auth)
  GET /evaluations/public/courses     — course catalogue (public)
  GET /evaluations/export/{courseId}  — evaluation export (public)
  GET /evaluations/questions          — evaluation question catalogue (public)

Every failure (transport error, non-2xx status, non-JSON body, payload that
does not match the schema) is raised as ExternalServiceError. Callers do not
get to tell them apart.
"""

from urllib.parse import quote

import requests
import structlog
from django.conf import settings
from pydantic import ValidationError as PayloadError

from src.apps.certificates.schemas import CertificateSchema
from src.apps.evaluations.schemas import (
    CourseSummarySchema,
    EvaluationExportSchema,
    EvaluationQuestionSchema,
)
from src.common.exceptions import ExternalServiceError

logger = structlog.get_logger(__name__)


def get_my_certificates(*, token: str | None) -> list[CertificateSchema]:
    """
    Certificates issued to the caller, newest first (server order).

    Args:
        token: Bearer token of the caller, forwarded as-is.

    Raises:
        ExternalServiceError: If the read fails for any reason.
    """
    payload = _get("/certificates/my-certificates", operation="my_certificates", token=token)
    return _parse_list(payload, CertificateSchema, operation="my_certificates")


def get_public_courses() -> list[CourseSummarySchema]:
    """Active and completed courses with their evaluation counts."""
    payload = _get("/evaluations/public/courses", operation="public_courses")
    return _parse_list(payload, CourseSummarySchema, operation="public_courses")


def get_evaluation_export(*, course_id: str) -> EvaluationExportSchema:
    """Tabular evaluation export of one course."""
    payload = _get(export_path(course_id), operation="evaluation_export")
    if not isinstance(payload, dict):
        _raise_malformed("evaluation_export", "expected an object")
    try:
        return EvaluationExportSchema.from_payload(payload)
    except PayloadError as e:
        _raise_malformed("evaluation_export", str(e))


def get_evaluation_questions() -> list[EvaluationQuestionSchema]:
    """Question catalogue used to label the Q1..Qn export columns."""
    payload = _get("/evaluations/questions", operation="evaluation_questions")
    questions = payload.get("questions") if isinstance(payload, dict) else None
    return _parse_list(questions, EvaluationQuestionSchema, operation="evaluation_questions")


def export_path(course_id: str) -> str:
    return f"/evaluations/export/{quote(course_id, safe='')}"


def health_check() -> dict:
    """
    Check LMS API availability.

    Returns:
        dict with "status" key and the probed URL.
    """
    url = _get_base_url()
    try:
        r = requests.get(url, timeout=_get_timeout())
    except requests.RequestException as e:
        return {"status": "unavailable", "url": url, "error": str(e)}
    if r.ok:
        return {"status": "ok", "url": url}
    return {"status": "unavailable", "url": url, "http_status": r.status_code}


# ── Internal helpers ─────────────────────────────────────────────────────


def _get_base_url() -> str:
    """Get the absolute LMS API base URL from settings."""
    return settings.LMS_API_FETCH_URL.rstrip("/")


def _get_timeout() -> float:
    return getattr(settings, "LMS_API_TIMEOUT", 15.0)


def _get(path: str, *, operation: str, token: str | None = None):
    """
    Send a GET request to the LMS API and return the decoded JSON body.
    """
    endpoint = f"{_get_base_url()}{path}"
    headers = {"Accept": "application/json"}
    if token:
        headers["Authorization"] = f"Bearer {token}"

    logger.info("lms_api_request", operation=operation, endpoint=endpoint)

    try:
        response = requests.get(endpoint, headers=headers, timeout=_get_timeout())
    except requests.RequestException as e:
        logger.error("lms_api_unreachable", operation=operation, error=str(e))
        raise ExternalServiceError(
            f"LMS API {operation} failed: {e}",
            extra={"operation": operation},
        ) from e

    if not response.ok:
        logger.error(
            "lms_api_http_error",
            operation=operation,
            status=response.status_code,
            body=response.text[:500],
        )
        raise ExternalServiceError(
            f"LMS API {operation} failed with HTTP {response.status_code}",
            extra={"operation": operation, "http_status": response.status_code},
        )

    try:
        return response.json()
    except ValueError as e:
        _raise_malformed(operation, f"body is not JSON: {e}")


def _parse_list(payload, schema, *, operation: str) -> list:
    if not isinstance(payload, list):
        _raise_malformed(operation, "expected a list")
    try:
        return [schema.model_validate(item) for item in payload]
    except PayloadError as e:
        _raise_malformed(operation, str(e))


def _raise_malformed(operation: str, reason: str):
    logger.error("lms_api_malformed_payload", operation=operation, reason=reason[:500])
    raise ExternalServiceError(
        f"LMS API {operation} returned an unexpected payload",
        extra={"operation": operation},
    )
