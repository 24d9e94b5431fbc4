"""Flask CLI command creating the identity schema."""

from __future__ import annotations

import logging

import click
from flask import current_app
from flask.cli import with_appcontext
from sqlalchemy import inspect

from identity_service.core.extensions import db

LOGGER = logging.getLogger(__name__)


def _ensure_non_production() -> None:
    """Abort destructive commands when running in production."""
    config = current_app.config
    if not (config.get("DEBUG") or config.get("TESTING")):
        raise click.UsageError("'init-db --drop' is restricted to debug and testing environments.")


@click.command("init-db")
@click.option("--drop", is_flag=True, help="Drop existing tables before creating them.")
@click.option("--yes", is_flag=True, help="Skip the destructive confirmation prompt.")
@with_appcontext
def init_db_command(drop: bool, yes: bool) -> None:
    """Create the ``users`` table (idempotent)."""
    if drop:
        _ensure_non_production()
        if not yes:
            click.confirm("This will DROP the identity tables. Continue?", abort=True)
        LOGGER.info("Dropping database schema...")
        db.session.remove()
        db.drop_all()
    db.create_all()
    tables = sorted(inspect(db.engine).get_table_names())
    click.echo(f"Schema ready: {', '.join(tables) or '(no tables)'}")
