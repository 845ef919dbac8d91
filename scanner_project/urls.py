"""
URL configuration for the scanner project.

The ``urlpatterns`` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/4.2/topics/http/urls/

This project delegates the root URL to the ``scannerapp`` application. No
media files are served, since uploaded documents are never stored.
"""
from __future__ import annotations

from django.urls import include, path

urlpatterns = [
    path('', include('scannerapp.urls')),
]
