"""
Forms for the scanner app.

``UploadDocumentForm`` carries the single ``document`` file field posted by
the upload page and the JSON endpoint. Content type checks are left to the
workflow, so an empty field and a zero-byte file are both valid here. The
workflow reports an empty field as "no file selected".
"""
from __future__ import annotations

from django import forms


class UploadDocumentForm(forms.Form):
    """A form for uploading a single JPG or PDF document."""

    document = forms.FileField(
        label='Upload Document (JPG or PDF):',
        required=False,
        allow_empty_file=True,
        widget=forms.FileInput(attrs={
            'accept': '.jpg,.jpeg,.pdf',
            'class': 'form-control-file',
        }),
    )
