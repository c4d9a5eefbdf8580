"""Typer CLI root application."""

import typer

from address_resolver.core.config import get_settings
from address_resolver.core.logging import setup_logging

app = typer.Typer(name="address-resolver", help="Search, confirm and normalize postal addresses")


@app.callback()
def _main_callback() -> None:
    """Initialize logging for all CLI commands."""
    settings = get_settings()
    setup_logging(settings.log_level, log_dir=settings.log_dir)


def _register_subcommands() -> None:
    """Register all CLI commands."""
    from address_resolver.cli.resolve_cmd import confirm, reverse, search

    app.command("search")(search)
    app.command("confirm")(confirm)
    app.command("reverse")(reverse)


_register_subcommands()
