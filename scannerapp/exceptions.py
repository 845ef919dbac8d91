"""
Errors raised while selecting, converting and submitting a document.

Each error carries the message shown to the user as its ``message`` class
attribute. The workflow catches all of them at the submission boundary and
turns them into an ``Error`` state.
"""
from __future__ import annotations


class ScannerError(Exception):
    """Base class for document scanner errors."""

    message = 'An error occurred while processing the document.'

    def __init__(self, detail: str | None = None):
        super().__init__(detail or self.message)
        self.detail = detail


class InvalidFileType(ScannerError):
    """The selected file is neither a JPEG image nor a PDF."""

    message = 'Please upload a valid JPG or PDF file.'


class NoFileSelected(ScannerError):
    """A submission was attempted before any file was selected."""

    message = 'Please select a file to upload.'


class ConversionFailure(ScannerError):
    """Rendering or encoding the first PDF page failed."""


class ServiceRejected(ScannerError):
    """The OCR service answered, but flagged the document as not processed."""

    message = 'Failed to process the document.'


class SubmissionFailure(ScannerError):
    """The OCR service could not be reached or returned an unusable reply."""
