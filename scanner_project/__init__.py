"""
Document OCR Scanner Django project package.

This package defines the configuration and settings for the project: URL
routing, WSGI entry point and global settings. The ``scanner_project``
package name is referenced by ``manage.py`` when setting the default
settings module.
"""
