"""Expose the application factory at package level.

``flask --app identity_service`` discovers :func:`create_app` here.
"""

from __future__ import annotations

from .factory import create_app

__all__ = ["create_app"]
