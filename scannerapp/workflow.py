"""
The upload workflow: select a document, convert it if needed, submit it.

One ``UploadWorkflow`` serves one page interaction. It owns the selected file
and the single ``UiState`` the page is drawn from; ``submit`` always leaves
that state in ``Error`` or ``Result``.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from .client import OcrServiceClient
from .exceptions import (
    InvalidFileType,
    NoFileSelected,
    ServiceRejected,
    SubmissionFailure,
)
from .pdf_converter import PdfConverter
from .states import ConvertedImage, Error, Idle, Loading, Result, SelectedFile, UiState

logger = logging.getLogger(__name__)

FIRST_PAGE_NOTICE = 'Only the first page of this {count}-page PDF was scanned.'


class UploadWorkflow:
    """Drive a single document from selection to OCR result."""

    def __init__(
        self,
        client: Optional[OcrServiceClient] = None,
        converter: Optional[PdfConverter] = None,
    ):
        self.client = client or OcrServiceClient()
        self.converter = converter or PdfConverter()
        self.selected: Optional[SelectedFile] = None
        self.state: UiState = Idle()

    def select(self, upload: Any) -> UiState:
        """Store the picked file, or reject it when it is not a JPG or PDF."""
        try:
            self.selected = SelectedFile.from_upload(upload)
        except InvalidFileType as e:
            logger.info("Rejected upload: %s", e)
            self.selected = None
            self.state = Error(InvalidFileType.message)
            return self.state

        self.state = Idle()
        return self.state

    def submit(self) -> UiState:
        """Convert and upload the selected file.

        Returns:
            UiState: ``Result`` on success, ``Error`` otherwise.
        """
        if self.selected is None:
            self.state = Error(NoFileSelected.message)
            return self.state

        self.state = Loading()
        try:
            payload = self.selected
            if payload.is_pdf:
                payload = self.converter.convert(payload)
            result = self.client.scan(payload)
        except ServiceRejected as e:
            logger.warning("Document %s was not processed: %s", self.selected.name, e)
            self.state = Error(ServiceRejected.message)
        except Exception:
            # Conversion, transport and envelope errors all share one message.
            logger.exception("Error processing document %s", self.selected.name)
            self.state = Error(SubmissionFailure.message)
        else:
            self.state = Result(result, notice=self._notice_for(payload))
        finally:
            if isinstance(self.state, Loading):
                self.state = Error(SubmissionFailure.message)

        return self.state

    def run(self, upload: Any) -> UiState:
        """Select ``upload`` and submit it if it was accepted."""
        if upload is None:
            self.selected = None
            return self.submit()
        if isinstance(self.select(upload), Error):
            return self.state
        return self.submit()

    def close(self) -> None:
        """Release the OCR client's connections."""
        self.client.close()

    @staticmethod
    def _notice_for(payload: SelectedFile) -> Optional[str]:
        if isinstance(payload, ConvertedImage) and payload.page_count > 1:
            return FIRST_PAGE_NOTICE.format(count=payload.page_count)
        return None
