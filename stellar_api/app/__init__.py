"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules.  The catalog and serialization helpers live in ``core``,
response models in ``schemas``, lookups in ``services`` and the HTTP
routes in ``api/v1/endpoints``.
"""

from .main import app  # noqa: F401
