"""
Application configuration for the scanner app.

The ``scannerapp`` app contains the upload workflow, the PDF converter, the
OCR service client and the views that let users scan a JPG or PDF with a
remote OCR service. It is registered with Django in
``scanner_project/settings.py``.
"""
