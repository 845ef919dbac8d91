"""
Value types for the upload workflow.

``SelectedFile`` is the document the user picked; ``ConvertedImage`` is the
JPEG rendered from the first page of a PDF. The page itself is drawn from a
single ``UiState``: exactly one of ``Idle``, ``Loading``, ``Error`` or
``Result`` at any time.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from .exceptions import InvalidFileType, SubmissionFailure

JPEG_CONTENT_TYPE = 'image/jpeg'
PDF_CONTENT_TYPE = 'application/pdf'
ACCEPTED_CONTENT_TYPES = (JPEG_CONTENT_TYPE, PDF_CONTENT_TYPE)

CONVERTED_FILENAME = 'converted.jpg'


@dataclass(frozen=True)
class SelectedFile:
    """A user-selected document, held in memory."""

    content: bytes
    name: str
    content_type: str

    @classmethod
    def from_upload(cls, upload: Any) -> 'SelectedFile':
        """Build a SelectedFile from an uploaded file object.

        The browser-declared content type is authoritative, the file
        extension is not.

        Raises:
            InvalidFileType: If the content type is not JPEG or PDF.
        """
        content_type = getattr(upload, 'content_type', None)
        if upload is None or content_type not in ACCEPTED_CONTENT_TYPES:
            raise InvalidFileType(f'Rejected content type: {content_type!r}')

        if hasattr(upload, 'seek'):
            upload.seek(0)
        return cls(
            content=upload.read(),
            name=getattr(upload, 'name', '') or '',
            content_type=content_type,
        )

    @property
    def is_pdf(self) -> bool:
        return self.content_type == PDF_CONTENT_TYPE


@dataclass(frozen=True)
class ConvertedImage(SelectedFile):
    """JPEG rendering of page 1 of a PDF."""

    page_count: int = 1


@dataclass(frozen=True)
class OcrResult:
    """The payload returned by the OCR service on success."""

    caption_result: str
    confidence: Union[float, int, str]
    read_result: str

    @classmethod
    def from_payload(cls, payload: Any) -> 'OcrResult':
        """Read the ``response`` object of a service envelope.

        Raises:
            SubmissionFailure: If the payload is not a JSON object.
        """
        if not isinstance(payload, dict):
            raise SubmissionFailure(f'Malformed OCR response: {payload!r}')
        return cls(
            caption_result=payload.get('captionResult', ''),
            confidence=payload.get('confidence', ''),
            read_result=payload.get('readResult', ''),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'captionResult': self.caption_result,
            'confidence': self.confidence,
            'readResult': self.read_result,
        }


class UiState:
    """Base class of the four page states."""

    name = ''

    @property
    def is_terminal(self) -> bool:
        return isinstance(self, (Error, Result))


@dataclass(frozen=True)
class Idle(UiState):
    name = 'idle'


@dataclass(frozen=True)
class Loading(UiState):
    name = 'loading'


@dataclass(frozen=True)
class Error(UiState):
    message: str
    name = 'error'


@dataclass(frozen=True)
class Result(UiState):
    result: OcrResult
    notice: Optional[str] = None
    name = 'result'
