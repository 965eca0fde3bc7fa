"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  The card store itself lives in ``core.store``, business
rules in ``services``, request and response models in ``schemas`` and
HTTP routes under ``api/v1/endpoints``.
"""

from .main import app  # noqa: F401
