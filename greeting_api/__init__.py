"""
Top‑level package for the Greeting API.

This file makes ``greeting_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``greeting_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
