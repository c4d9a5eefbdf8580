"""Allow ``python -m address_resolver``."""

from address_resolver.cli.app import app

app()
