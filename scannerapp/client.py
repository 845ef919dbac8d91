"""
Client for the remote OCR service.

The service takes one multipart POST with the image in a ``document`` part and
answers with an envelope ``{"result": bool, "response": {...}}``.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

import requests
from django.conf import settings

from .exceptions import ServiceRejected, SubmissionFailure
from .states import JPEG_CONTENT_TYPE, OcrResult, SelectedFile

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT_URL = (
    'https://spring-ai-backend-production.up.railway.app/api/webapp/v0/getDocScanned'
)
DOCUMENT_FIELD = 'document'


class OcrServiceClient:
    """Submit images to the OCR service and unwrap its envelope."""

    def __init__(
        self,
        endpoint_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.endpoint_url = endpoint_url or getattr(
            settings, 'DOCSCAN_ENDPOINT_URL', DEFAULT_ENDPOINT_URL
        )
        if timeout is None:
            timeout = getattr(settings, 'DOCSCAN_REQUEST_TIMEOUT', None)
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session or requests.Session()

    def scan(self, image: SelectedFile) -> OcrResult:
        """
        Upload ``image`` and return the OCR payload.

        Raises:
            ServiceRejected: The service replied with a falsy ``result`` flag.
            SubmissionFailure: Transport error, non-2xx status, or a reply
                that is not a JSON envelope.
        """
        files = {DOCUMENT_FIELD: (image.name, image.content, JPEG_CONTENT_TYPE)}

        logger.info("Posting %s (%d bytes) to %s", image.name, len(image.content), self.endpoint_url)
        try:
            response = self.session.post(self.endpoint_url, files=files, timeout=self.timeout)
            response.raise_for_status()
            envelope = response.json()
        except requests.RequestException as e:
            raise SubmissionFailure(f'OCR request failed: {e}') from e
        except ValueError as e:
            raise SubmissionFailure(f'OCR service returned invalid JSON: {e}') from e

        return self.unwrap(envelope)

    def close(self) -> None:
        """Release the HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> 'OcrServiceClient':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @staticmethod
    def unwrap(envelope: Any) -> OcrResult:
        """Return the payload of a successful envelope."""
        if not isinstance(envelope, dict):
            raise SubmissionFailure(f'Malformed OCR envelope: {envelope!r}')
        if not result_flag_set(envelope.get('result')):
            raise ServiceRejected(f'OCR service rejected the document: {envelope!r}')
        return OcrResult.from_payload(envelope.get('response'))


def result_flag_set(value: Any) -> bool:
    """Read the envelope's ``result`` flag with JavaScript truthiness.

    Only ``false``, ``null``, ``0``, ``NaN`` and ``""`` count as unset; empty
    objects and arrays count as set.
    """
    if value is None or value is False:
        return False
    if isinstance(value, (int, float)):
        return value == value and value != 0
    if isinstance(value, str):
        return value != ''
    return True
