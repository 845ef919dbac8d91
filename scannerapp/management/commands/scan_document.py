"""
Scan a local JPG or PDF with the OCR service from the command line.

Usage::

    python manage.py scan_document invoice.pdf
    python manage.py scan_document photo.jpeg --endpoint http://localhost:8080/scan
"""
from __future__ import annotations

import mimetypes
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from scannerapp.client import OcrServiceClient
from scannerapp.states import Error
from scannerapp.workflow import UploadWorkflow


class LocalUpload:
    """Present a file on disk the way an uploaded file looks to the workflow."""

    def __init__(self, path: Path, content_type: str | None):
        self.path = path
        self.name = path.name
        self.content_type = content_type

    def read(self) -> bytes:
        return self.path.read_bytes()


class Command(BaseCommand):
    help = 'Scan a JPG or PDF document with the OCR service and print the result.'

    def add_arguments(self, parser):
        parser.add_argument('path', help='Path to a .jpg, .jpeg or .pdf file')
        parser.add_argument(
            '--content-type',
            dest='content_type',
            help='Declared media type; guessed from the file name when omitted',
        )
        parser.add_argument('--endpoint', help='Override the OCR service URL')

    def handle(self, *args, **options):
        path = Path(options['path'])
        if not path.is_file():
            raise CommandError(f'File not found: {path}')

        content_type = options.get('content_type') or mimetypes.guess_type(path.name)[0]
        workflow = UploadWorkflow(client=OcrServiceClient(endpoint_url=options.get('endpoint')))
        try:
            state = workflow.run(LocalUpload(path, content_type))
        finally:
            workflow.close()

        if isinstance(state, Error):
            raise CommandError(state.message)

        if state.notice:
            self.stdout.write(self.style.WARNING(state.notice))
        self.stdout.write(f'Caption: {state.result.caption_result}')
        self.stdout.write(f'Confidence: {state.result.confidence}')
        self.stdout.write('Extracted Text:')
        self.stdout.write(str(state.result.read_result))
