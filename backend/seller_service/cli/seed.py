"""``flask seed`` commands for populating a development database."""

from __future__ import annotations

import logging

import click
from flask import current_app
from flask.cli import with_appcontext
from sqlalchemy.exc import SQLAlchemyError

from seller_service.core.extensions import db
from seller_service.seeds import seed_data

LOGGER = logging.getLogger(__name__)


def _echo_summary(summary: dict[str, dict[str, int]]) -> None:
    click.echo("Seed summary:")
    if not summary:
        click.echo("  (no changes)")
        return
    width = max(len(name) for name in summary)
    for table, counters in sorted(summary.items()):
        click.echo(
            f"  {table.ljust(width)}  created={counters.get('created', 0):>2}"
            f"  existing={counters.get('existing', 0):>2}"
        )


def _refuse_in_production() -> None:
    """Destructive commands only run with DEBUG or TESTING enabled."""
    config = current_app.config
    if not (config.get("DEBUG") or config.get("TESTING")):
        raise click.UsageError("'flask seed fresh' is disabled outside development and testing.")


def _run(verbose: bool) -> None:
    try:
        summary = seed_data.run_all(db, verbose=verbose)
    except SQLAlchemyError as exc:
        db.session.rollback()
        raise click.ClickException(f"Seeding failed: {exc}") from exc
    _echo_summary(summary)


@click.group("seed")
@click.option("--verbose", is_flag=True, help="Log every seeded row.")
@click.pass_context
def seed_cli(ctx: click.Context, verbose: bool) -> None:
    """Demo sellers and products for local development."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    level = logging.DEBUG if verbose else logging.INFO
    logging.getLogger(seed_data.__name__).setLevel(level)


@seed_cli.command("run")
@click.pass_context
@with_appcontext
def run_command(ctx: click.Context) -> None:
    """Insert demo rows that are not present yet (safe to repeat)."""
    _run(bool(ctx.obj.get("verbose", False)))


@seed_cli.command("fresh")
@click.option("--yes", is_flag=True, help="Skip the confirmation prompt.")
@click.pass_context
@with_appcontext
def fresh_command(ctx: click.Context, yes: bool) -> None:
    """Drop and recreate every table, then seed."""
    _refuse_in_production()
    if not yes:
        click.confirm("This drops all seller, product and token tables. Continue?", abort=True)
    LOGGER.info("Recreating database schema")
    db.session.remove()
    db.drop_all()
    db.create_all()
    _run(bool(ctx.obj.get("verbose", False)))
