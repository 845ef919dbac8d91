from __future__ import annotations

from django.apps import AppConfig


class ScannerappConfig(AppConfig):
    """Configuration for the scanner app."""

    name = 'scannerapp'
    verbose_name = 'Document OCR Scanner'
