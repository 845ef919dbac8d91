"""
PDF Conversion Tests
"""
import io
from unittest import mock

import pytest
from PIL import Image

from scannerapp.exceptions import ConversionFailure
from scannerapp.pdf_converter import PdfConverter
from scannerapp.states import ConvertedImage, SelectedFile


def _pdf(content):
    return SelectedFile(content=content, name='scan.pdf', content_type='application/pdf')


class TestConvert:
    """Test rendering page 1 to JPEG"""

    def test_renders_first_page_at_one_and_a_half_scale(self, pdf_bytes, rendered_page):
        converted = PdfConverter().convert(_pdf(pdf_bytes))

        rendered_page.assert_called_once()
        args, kwargs = rendered_page.call_args
        assert args[0] == pdf_bytes
        assert kwargs['first_page'] == 1
        assert kwargs['last_page'] == 1
        assert kwargs['size'] == (300, 150)

        assert isinstance(converted, ConvertedImage)
        assert converted.name == 'converted.jpg'
        assert converted.content_type == 'image/jpeg'
        assert converted.page_count == 1
        assert Image.open(io.BytesIO(converted.content)).format == 'JPEG'

    def test_multi_page_pdf_is_truncated(self, make_pdf, rendered_page):
        converted = PdfConverter().convert(_pdf(make_pdf(pages=3)))

        assert converted.page_count == 3
        assert rendered_page.call_args.kwargs['last_page'] == 1

    def test_passes_renderer_worker_path(self, pdf_bytes, rendered_page):
        PdfConverter(renderer_path='/opt/poppler/bin').convert(_pdf(pdf_bytes))
        assert rendered_page.call_args.kwargs['poppler_path'] == '/opt/poppler/bin'

    def test_renderer_path_from_settings(self, settings):
        settings.DOCSCAN_RENDERER_WORKER_PATH = '/usr/local/poppler'
        assert PdfConverter().renderer_path == '/usr/local/poppler'


class TestConversionFailures:
    """Every failure surfaces as ConversionFailure"""

    def test_corrupt_pdf(self, rendered_page):
        with pytest.raises(ConversionFailure):
            PdfConverter().convert(_pdf(b'%PDF-1.4 this is not a pdf'))
        rendered_page.assert_not_called()

    def test_renderer_error(self, pdf_bytes, rendered_page):
        rendered_page.side_effect = RuntimeError('poppler crashed')
        with pytest.raises(ConversionFailure) as excinfo:
            PdfConverter().convert(_pdf(pdf_bytes))
        assert isinstance(excinfo.value.__cause__, RuntimeError)

    def test_renderer_returns_nothing(self, pdf_bytes, rendered_page):
        rendered_page.return_value = []
        with pytest.raises(ConversionFailure):
            PdfConverter().convert(_pdf(pdf_bytes))

    def test_encoding_error(self):
        bitmap = mock.Mock()
        bitmap.convert.return_value.save.side_effect = OSError('encoder not available')
        with pytest.raises(ConversionFailure):
            PdfConverter().encode_jpeg(bitmap)


def test_encodes_jpeg_at_quality_90():
    bitmap = mock.Mock()
    bitmap.convert.return_value.save.side_effect = lambda buffer, **kwargs: buffer.write(b'jpeg')

    assert PdfConverter().encode_jpeg(bitmap) == b'jpeg'
    bitmap.convert.assert_called_once_with('RGB')
    _, kwargs = bitmap.convert.return_value.save.call_args
    assert kwargs == {'format': 'JPEG', 'quality': 90}
