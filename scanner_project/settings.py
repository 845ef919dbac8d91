"""
Django settings for the scanner project.

Every value that differs between deployments is read from the environment.
The OCR endpoint and the PDF renderer location are configured here rather
than in the workflow:

    DOCSCAN_ENDPOINT_URL          URL the document is posted to.
    DOCSCAN_RENDERER_WORKER_PATH  Directory holding the poppler binaries used
                                  by pdf2image; empty means use ``PATH``.
    DOCSCAN_REQUEST_TIMEOUT       Seconds to wait for the OCR service; empty
                                  means wait indefinitely.
"""
from __future__ import annotations

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'dev-secret-change-in-production')

DEBUG = os.environ.get('DJANGO_DEBUG', '1') in ('1', 'true', 'yes')

ALLOWED_HOSTS = [
    host.strip()
    for host in os.environ.get('DJANGO_ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',')
    if host.strip()
]

INSTALLED_APPS = [
    'django.contrib.staticfiles',
    'scannerapp',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'scanner_project.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
            ],
        },
    },
]

WSGI_APPLICATION = 'scanner_project.wsgi.application'

# Nothing is persisted.
DATABASES = {}

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# Documents are held in memory for the duration of one request.
DATA_UPLOAD_MAX_MEMORY_SIZE = 50 * 1024 * 1024
FILE_UPLOAD_MAX_MEMORY_SIZE = 50 * 1024 * 1024

# OCR service
DOCSCAN_ENDPOINT_URL = os.environ.get(
    'DOCSCAN_ENDPOINT_URL',
    'https://spring-ai-backend-production.up.railway.app/api/webapp/v0/getDocScanned',
)
DOCSCAN_RENDERER_WORKER_PATH = os.environ.get('DOCSCAN_RENDERER_WORKER_PATH') or None
DOCSCAN_REQUEST_TIMEOUT = (
    float(os.environ['DOCSCAN_REQUEST_TIMEOUT'])
    if os.environ.get('DOCSCAN_REQUEST_TIMEOUT')
    else None
)

DOCSCAN_LOG_LEVEL = os.environ.get('DOCSCAN_LOG_LEVEL', 'INFO').upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'standard': {
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            'datefmt': '%Y-%m-%d %H:%M:%S',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'standard',
        },
    },
    'loggers': {
        'scannerapp': {
            'handlers': ['console'],
            'level': DOCSCAN_LOG_LEVEL,
        },
        'django': {
            'handlers': ['console'],
            'level': 'INFO',
        },
    },
}
