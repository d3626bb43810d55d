"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Pure domain rules (validation, level derivation and the
listing pipeline) live in ``services`` next to the database-backed
``PlayerService``; HTTP routing lives in ``api/v1/endpoints``.
"""

from .main import app  # noqa: F401
