"""
Certificate gallery view state.

One instance per page request. ``mount()`` performs the single read of the
caller's certificates; the template renders whatever state it ended in.
"""

import structlog
from asgiref.sync import sync_to_async
from django.conf import settings

from src.apps.certificates.schemas import CertificateSchema
from src.common.exceptions import ExternalServiceError
from src.common.types import LoadState
from src.integrations import lms_api

logger = structlog.get_logger(__name__)

FETCH_ERROR = "Failed to fetch certificates"


class CertificateGallery:
    def __init__(self, *, token: str | None, api=lms_api):
        self._api = api
        self._token = token
        self.certificates: list[CertificateSchema] = []
        self.loading = True
        self.error = ""

    @property
    def status(self) -> LoadState:
        if self.loading:
            return LoadState.LOADING
        if self.error:
            return LoadState.ERROR
        return LoadState.READY

    @property
    def is_empty(self) -> bool:
        return not self.certificates

    async def mount(self) -> None:
        try:
            fetch = sync_to_async(self._api.get_my_certificates, thread_sensitive=False)
            certificates = await fetch(token=self._token)
        except ExternalServiceError as e:
            logger.warning("certificates_fetch_failed", error=e.message)
            self.error = FETCH_ERROR
        else:
            self.certificates = certificates
            logger.debug("certificates_loaded", count=len(certificates))
        finally:
            self.loading = False

    def cards(self) -> list[tuple[CertificateSchema, str]]:
        return [(certificate, detail_url(certificate)) for certificate in self.certificates]


def detail_url(certificate: CertificateSchema) -> str:
    """Link to the certificate detail page, keyed by the course id."""
    return settings.CERTIFICATE_DETAIL_PATH.format(course_id=certificate.course_id)
