"""WSGI entrypoint: ``gunicorn -c gunicorn.conf.py identity_service.wsgi:app``."""

from __future__ import annotations

from identity_service import create_app

app = create_app()
