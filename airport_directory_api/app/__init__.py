"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules: configuration and logging live in ``core``, request and
response models in ``schemas``, the in‑memory airport directory in
``services`` and the HTTP routes under ``api/v1``.
"""

from .main import app  # noqa: F401
