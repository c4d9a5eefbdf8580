"""Address search, confirmation and reverse-geocoding commands."""

import asyncio
from pathlib import Path

import typer

from address_resolver.core.config import get_settings
from address_resolver.lib.dataset import load_store
from address_resolver.lib.geocoder import GeocodingProviderError, get_reverse_geocoder
from address_resolver.lib.resolver import AddressSession, AddressStore, ResolverError
from address_resolver.schemas.address import AddressHandoff, AddressSuggestion


def _open_session(dataset: Path | None, lat: float | None, lon: float | None) -> AddressSession:
    """Load the dataset and start a session, biased when both coordinates are given."""
    path = dataset or Path(get_settings().dataset_path)
    try:
        store, result = load_store(path)
    except ResolverError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    if result.dropped:
        typer.echo(f"Skipped {result.dropped} malformed addresses", err=True)

    session = AddressSession(store)
    if lat is not None and lon is not None:
        try:
            session.set_bias(lat, lon)
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1) from e
    return session


def search(
    query: str = typer.Argument(..., help="Street, city or ZIP prefix"),
    lat: float | None = typer.Option(None, "--lat", help="Bias latitude"),
    lon: float | None = typer.Option(None, "--lon", help="Bias longitude"),
    dataset: Path | None = typer.Option(None, "--dataset", help="Address dataset JSON file"),  # noqa: B008
) -> None:
    """List the nearest addresses starting with QUERY."""
    session = _open_session(dataset, lat, lon)
    results = session.search(query)

    if not results:
        if len(query.strip()) >= 2:
            typer.echo("No addresses found. Try adding a street name.")
        return

    for i, record in enumerate(results, start=1):
        suggestion = AddressSuggestion.from_record(record)
        typer.echo(f"{i}. {suggestion.line1}")
        typer.echo(f"   {suggestion.line2}")


def confirm(
    query: str = typer.Argument(..., help="Street, city or ZIP prefix"),
    pick: int = typer.Option(1, "--pick", min=1, help="1-based position in the result list"),
    unit: str = typer.Option("", "--unit", help="Apartment, suite or unit"),
    line1: str | None = typer.Option(None, "--line1", help="Corrected street line"),
    city: str | None = typer.Option(None, "--city", help="Corrected city"),
    state: str | None = typer.Option(None, "--state", help="Corrected state"),
    zipcode: str | None = typer.Option(None, "--zip", help="Corrected ZIP code"),
    lat: float | None = typer.Option(None, "--lat", help="Bias latitude"),
    lon: float | None = typer.Option(None, "--lon", help="Bias longitude"),
    dataset: Path | None = typer.Option(None, "--dataset", help="Address dataset JSON file"),  # noqa: B008
) -> None:
    """Select a search result, optionally correct it, and print the hand-off JSON."""
    session = _open_session(dataset, lat, lon)
    results = session.search(query)
    if pick > len(results):
        typer.echo(f"Error: only {len(results)} result(s) for {query!r}", err=True)
        raise typer.Exit(code=1)

    session.select(results[pick - 1])

    if any(value is not None for value in (line1, city, state, zipcode)):
        fields = session.begin_edit()
        session.save_edit(
            line1 if line1 is not None else fields.line1,
            city if city is not None else fields.city,
            state if state is not None else fields.state,
            zipcode if zipcode is not None else fields.zip,
        )

    canonical = session.confirm(unit)
    typer.echo(AddressHandoff.from_canonical(canonical).model_dump_json(by_alias=True, indent=2))


def reverse(
    lat: float = typer.Option(..., "--lat", help="Device latitude"),
    lon: float = typer.Option(..., "--lon", help="Device longitude"),
    unit: str = typer.Option("", "--unit", help="Apartment, suite or unit"),
) -> None:
    """Resolve the address at a location and print the hand-off JSON."""
    geocoder = get_reverse_geocoder(get_settings())
    if geocoder is None:
        typer.echo("Error: reverse geocoding is disabled", err=True)
        raise typer.Exit(code=1)

    try:
        record = asyncio.run(geocoder.reverse(lat, lon))
    except GeocodingProviderError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    if record is None:
        typer.echo("No address found at this location.")
        raise typer.Exit(code=1)

    session = AddressSession(AddressStore())
    session.accept_reverse_geocode(record, lat, lon)
    canonical = session.confirm(unit)
    typer.echo(AddressHandoff.from_canonical(canonical).model_dump_json(by_alias=True, indent=2))
