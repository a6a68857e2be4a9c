"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration and logging), ``schemas``
(response models), ``services`` (the greeting counter) and
``api/v1`` (the HTTP routes).
"""

from .main import app  # noqa: F401
