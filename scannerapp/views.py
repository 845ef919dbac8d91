"""
Views for the scanner app.

The upload page posts a single JPG or PDF back to ``upload_document``, which
runs the upload workflow and renders whichever state it ends in. ``scan_api``
runs the same workflow and answers with JSON.
"""
from __future__ import annotations

import logging
from typing import Any, Dict

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import render
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from .exceptions import InvalidFileType
from .forms import UploadDocumentForm
from .states import ACCEPTED_CONTENT_TYPES, Error, Idle, Result, UiState
from .workflow import UploadWorkflow

logger = logging.getLogger(__name__)


def build_workflow() -> UploadWorkflow:
    """Create the workflow serving one request."""
    return UploadWorkflow()


def _run_form(form: UploadDocumentForm) -> tuple[UiState, UploadWorkflow]:
    workflow = build_workflow()
    if not form.is_valid():
        logger.info("Upload form rejected: %s", form.errors.as_json())
    try:
        state = workflow.run(form.cleaned_data.get('document'))
    finally:
        workflow.close()
    return state, workflow


@require_http_methods(["GET", "POST"])
def upload_document(request: HttpRequest) -> HttpResponse:
    """Render the upload form, and scan the document when one is posted.

    Args:
        request: The incoming HTTP request.

    Returns:
        HttpResponse: The upload page drawn from the workflow's final state.
    """
    if request.method == 'POST':
        form = UploadDocumentForm(request.POST, request.FILES)
        state, workflow = _run_form(form)
        selected = workflow.selected
    else:
        form = UploadDocumentForm()
        state, selected = Idle(), None

    context = {
        'form': form,
        'state': state,
        'file_name': selected.name if selected else '',
        'error': state.message if isinstance(state, Error) else None,
        'ocr_result': state.result if isinstance(state, Result) else None,
        'notice': state.notice if isinstance(state, Result) else None,
        'accepted_types': ACCEPTED_CONTENT_TYPES,
        'invalid_type_message': InvalidFileType.message,
    }
    return render(request, 'scannerapp/upload.html', context)


def state_to_dict(state: UiState) -> Dict[str, Any]:
    """Serialize a UI state for the JSON endpoint."""
    return {
        'state': state.name,
        'error': state.message if isinstance(state, Error) else None,
        'result': state.result.to_dict() if isinstance(state, Result) else None,
        'notice': state.notice if isinstance(state, Result) else None,
    }


@csrf_exempt
@require_http_methods(["POST"])
def scan_api(request: HttpRequest) -> JsonResponse:
    """Scan a posted document and return the final state as JSON.

    Returns:
        JsonResponse: 200 with the OCR result, 400 when the file was missing
        or of the wrong type, 502 when conversion or the OCR service failed.
    """
    form = UploadDocumentForm(request.POST, request.FILES)
    state, workflow = _run_form(form)

    if isinstance(state, Result):
        status = 200
    elif workflow.selected is None:
        status = 400
    else:
        status = 502
    return JsonResponse(state_to_dict(state), status=status)
