"""
Test Configuration and Fixtures
"""
import io
from unittest import mock

import pytest
import requests
from django.core.files.uploadedfile import SimpleUploadedFile
from PIL import Image

SUCCESS_ENVELOPE = {
    'result': True,
    'response': {'captionResult': 'A cat', 'confidence': 0.97, 'readResult': 'hello'},
}


@pytest.fixture
def jpeg_bytes():
    """A small JPEG image"""
    buffer = io.BytesIO()
    Image.new('RGB', (40, 30), 'white').save(buffer, format='JPEG')
    return buffer.getvalue()


@pytest.fixture
def make_pdf():
    """Build a PDF whose pages are ``size`` points large"""
    def _make(pages=1, size=(200, 100)):
        images = [Image.new('RGB', size, 'white') for _ in range(pages)]
        buffer = io.BytesIO()
        images[0].save(
            buffer, format='PDF', resolution=72.0,
            save_all=True, append_images=images[1:],
        )
        return buffer.getvalue()
    return _make


@pytest.fixture
def pdf_bytes(make_pdf):
    return make_pdf()


@pytest.fixture
def jpeg_upload(jpeg_bytes):
    return SimpleUploadedFile('photo.jpg', jpeg_bytes, content_type='image/jpeg')


@pytest.fixture
def pdf_upload(pdf_bytes):
    return SimpleUploadedFile('scan.pdf', pdf_bytes, content_type='application/pdf')


def make_response(envelope=None, status_code=200, json_error=None):
    """Build a stand-in for a requests.Response"""
    response = mock.Mock()
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f'{status_code} Server Error')
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = envelope
    return response


@pytest.fixture
def service_post():
    """Patch the HTTP layer; tests set ``return_value`` or ``side_effect``"""
    with mock.patch.object(requests.Session, 'post') as post:
        post.return_value = make_response(SUCCESS_ENVELOPE)
        yield post


@pytest.fixture
def rendered_page():
    """Patch pdf2image so no poppler binaries are needed"""
    with mock.patch('scannerapp.pdf_converter.convert_from_bytes') as convert:
        convert.return_value = [Image.new('RGB', (300, 150), 'white')]
        yield convert


@pytest.fixture
def response_factory():
    return make_response
