"""
Top‑level package for the Stellar API.

This file makes ``stellar_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``stellar_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
