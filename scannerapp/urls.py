"""
URL configuration for the scanner app.

This module defines the URL patterns for the upload page and the JSON scan
endpoint.
"""
from __future__ import annotations

from django.urls import path

from . import views

urlpatterns = [
    path('', views.upload_document, name='upload_document'),
    path('api/scan/', views.scan_api, name='scan_api'),
]
