"""
PDF to JPEG conversion for the upload workflow.

Only the first page of a PDF is scanned. ``pdfplumber`` opens the document
and reports the page geometry, ``pdf2image`` renders the page through
poppler, and Pillow encodes the bitmap as a JPEG.
"""
from __future__ import annotations

import io
import logging
from typing import Optional, Tuple

import pdfplumber
from django.conf import settings
from pdf2image import convert_from_bytes
from PIL import Image

from .exceptions import ConversionFailure
from .states import CONVERTED_FILENAME, JPEG_CONTENT_TYPE, ConvertedImage, SelectedFile

logger = logging.getLogger(__name__)

RENDER_SCALE = 1.5
JPEG_QUALITY = 90


class PdfConverter:
    """Render the first page of a PDF to a JPEG image."""

    def __init__(
        self,
        renderer_path: Optional[str] = None,
        scale: float = RENDER_SCALE,
        quality: int = JPEG_QUALITY,
    ):
        if renderer_path is None:
            renderer_path = getattr(settings, 'DOCSCAN_RENDERER_WORKER_PATH', None)
        self.renderer_path = renderer_path or None
        self.scale = scale
        self.quality = quality

    def convert(self, selected: SelectedFile) -> ConvertedImage:
        """
        Convert page 1 of ``selected`` to a JPEG.

        Returns:
            ConvertedImage: The encoded page, named ``converted.jpg``.

        Raises:
            ConversionFailure: If the PDF cannot be read, rendered or encoded.
        """
        page_count, viewport = self._read_first_page(selected.content)
        bitmap = self._render_first_page(selected.content, viewport)
        content = self.encode_jpeg(bitmap)

        logger.info(
            "Converted %s (%d page(s)) to a %dx%d JPEG",
            selected.name, page_count, viewport[0], viewport[1],
        )
        return ConvertedImage(
            content=content,
            name=CONVERTED_FILENAME,
            content_type=JPEG_CONTENT_TYPE,
            page_count=page_count,
        )

    def _read_first_page(self, content: bytes) -> Tuple[int, Tuple[int, int]]:
        """Return the page count and the scaled size of page 1."""
        try:
            with pdfplumber.open(io.BytesIO(content)) as pdf:
                if not pdf.pages:
                    raise ConversionFailure('PDF has no pages')
                page = pdf.pages[0]
                viewport = (
                    int(float(page.width) * self.scale),
                    int(float(page.height) * self.scale),
                )
                return len(pdf.pages), viewport
        except ConversionFailure:
            raise
        except Exception as e:
            raise ConversionFailure(f'Could not open PDF: {e}') from e

    def _render_first_page(self, content: bytes, viewport: Tuple[int, int]) -> Image.Image:
        try:
            pages = convert_from_bytes(
                content,
                first_page=1,
                last_page=1,
                size=viewport,
                poppler_path=self.renderer_path,
            )
        except Exception as e:
            raise ConversionFailure(f'Could not render PDF page: {e}') from e

        if not pages:
            raise ConversionFailure('Renderer returned no page')
        return pages[0]

    def encode_jpeg(self, bitmap: Image.Image) -> bytes:
        """Encode a bitmap as JPEG, or raise ConversionFailure."""
        try:
            buffer = io.BytesIO()
            bitmap.convert('RGB').save(buffer, format='JPEG', quality=self.quality)
        except Exception as e:
            raise ConversionFailure(f'Could not encode JPEG: {e}') from e

        data = buffer.getvalue()
        if not data:
            raise ConversionFailure('JPEG encoder produced no data')
        return data
