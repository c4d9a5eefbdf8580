"""Unit tests for the search / confirm / reverse CLI commands."""

import json
import re
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
from typer.testing import CliRunner

from address_resolver.cli.app import app
from address_resolver.core.logging import setup_logging
from address_resolver.lib.geocoder import GeocodingProviderError
from address_resolver.lib.resolver import AddressRecord

runner = CliRunner()


def _strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from text."""
    return re.sub(r"\x1b\[[0-9;]*m", "", text)


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep log records out of captured command output."""
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    yield
    setup_logging("INFO")


@pytest.fixture
def dataset(tmp_path: Path, raw_records: list[dict]) -> Path:
    path = tmp_path / "addresses.json"
    path.write_text(json.dumps(raw_records), encoding="utf-8")
    return path


class TestSearchCommand:
    """Tests for ``address-resolver search``."""

    def test_lists_results(self, dataset: Path) -> None:
        result = runner.invoke(app, ["search", "spring", "--dataset", str(dataset)])
        assert result.exit_code == 0
        assert "1. 742 Evergreen Terrace" in result.stdout
        assert "Springfield IL, 62704" in result.stdout
        assert "2. 100 Main Street" in result.stdout

    def test_bias_reorders(self, dataset: Path) -> None:
        result = runner.invoke(
            app, ["search", "spring", "--dataset", str(dataset), "--lat", "39.80", "--lon", "-89.64"]
        )
        assert result.exit_code == 0
        assert "1. 100 Main Street" in result.stdout

    def test_no_results_message(self, dataset: Path) -> None:
        result = runner.invoke(app, ["search", "zzz", "--dataset", str(dataset)])
        assert result.exit_code == 0
        assert "No addresses found" in result.stdout

    def test_out_of_range_record_skipped(self, tmp_path: Path, raw_records: list[dict]) -> None:
        """A record beyond the poles is dropped at load instead of breaking the listing."""
        bad = {"address": {"house_number": "1", "road": "Main Street"}, "lat": "95", "lon": "-89.64"}
        path = tmp_path / "addresses.json"
        path.write_text(json.dumps([bad, *raw_records]), encoding="utf-8")
        result = runner.invoke(app, ["search", "main", "--dataset", str(path)])
        assert result.exit_code == 0
        assert "1. 100 Main Street" in result.stdout
        assert "1 Main Street" not in result.stdout

    def test_short_query_prints_nothing(self, dataset: Path) -> None:
        result = runner.invoke(app, ["search", "z", "--dataset", str(dataset)])
        assert result.exit_code == 0
        assert result.stdout.strip() == ""

    def test_missing_dataset(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["search", "spring", "--dataset", str(tmp_path / "none.json")])
        assert result.exit_code == 1
        assert "not found" in _strip_ansi(result.output)


class TestConfirmCommand:
    """Tests for ``address-resolver confirm``."""

    def test_confirm_with_unit(self, dataset: Path) -> None:
        result = runner.invoke(app, ["confirm", "742 ev", "--unit", "Apt 4", "--dataset", str(dataset)])
        assert result.exit_code == 0
        assert json.loads(result.stdout) == {
            "addressLine1": "742 Evergreen Terrace",
            "addressLine2": "Apt 4",
            "city": "Springfield",
            "state": "IL",
            "zip": "62704",
        }

    def test_confirm_with_edit(self, dataset: Path) -> None:
        result = runner.invoke(
            app,
            ["confirm", "742 ev", "--line1", "100 Main St", "--zip", "62701", "--dataset", str(dataset)],
        )
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["addressLine1"] == "100 Main St"
        assert payload["zip"] == "62701"
        assert payload["city"] == "Springfield"

    def test_pick_out_of_range(self, dataset: Path) -> None:
        result = runner.invoke(app, ["confirm", "deca", "--pick", "3", "--dataset", str(dataset)])
        assert result.exit_code == 1
        assert "only 1 result" in _strip_ansi(result.output)


class TestReverseCommand:
    """Tests for ``address-resolver reverse``."""

    def test_reverse_confirms_address(self) -> None:
        record = AddressRecord(
            latitude=39.799,
            longitude=-89.644,
            house_number="200",
            road="South 2nd Street",
            city="Springfield",
            state="Illinois",
            postcode="62701",
        )
        with patch(
            "address_resolver.lib.geocoder.nominatim.NominatimReverseGeocoder.reverse",
            new_callable=AsyncMock,
            return_value=record,
        ):
            result = runner.invoke(app, ["reverse", "--lat", "39.799", "--lon", "-89.644", "--unit", "Ste 2"])
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["addressLine1"] == "200 South 2nd Street"
        assert payload["addressLine2"] == "Ste 2"

    def test_reverse_no_address(self) -> None:
        with patch(
            "address_resolver.lib.geocoder.nominatim.NominatimReverseGeocoder.reverse",
            new_callable=AsyncMock,
            return_value=None,
        ):
            result = runner.invoke(app, ["reverse", "--lat", "0", "--lon", "0"])
        assert result.exit_code == 1
        assert "No address found" in result.stdout

    def test_reverse_provider_error(self) -> None:
        with patch(
            "address_resolver.lib.geocoder.nominatim.NominatimReverseGeocoder.reverse",
            new_callable=AsyncMock,
            side_effect=GeocodingProviderError("nominatim", "Connection to geocoding provider failed"),
        ):
            result = runner.invoke(app, ["reverse", "--lat", "39.8", "--lon", "-89.6"])
        assert result.exit_code == 1
        assert "Connection to geocoding provider failed" in _strip_ansi(result.output)

    def test_reverse_disabled(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NOMINATIM_ENABLED", "false")
        result = runner.invoke(app, ["reverse", "--lat", "39.8", "--lon", "-89.6"])
        assert result.exit_code == 1
        assert "disabled" in _strip_ansi(result.output)
