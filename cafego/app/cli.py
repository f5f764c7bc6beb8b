from __future__ import annotations

import click
from flask import Blueprint

from cafego.app.models import get_products, get_users

cli_bp = Blueprint("cli", __name__, cli_group=None)


@cli_bp.cli.command("products")
def list_products() -> None:
    """Print the catalog, one product per line."""
    for p in get_products():
        click.echo(f"{p.id}\t{p.name}\t{p.price}")


@cli_bp.cli.command("users")
def list_users() -> None:
    """Print the demo users. Passwords are never shown."""
    for u in get_users():
        click.echo(f"{u.id}\t{u.username}")
