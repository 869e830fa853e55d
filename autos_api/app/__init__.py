"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Request handlers live in ``api/v1/endpoints``, business
logic in ``services``, payload models in ``schemas`` and shared
infrastructure (settings, logging, database) in ``core``.
"""

from .main import app  # noqa: F401
