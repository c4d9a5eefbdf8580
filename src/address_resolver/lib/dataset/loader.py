"""Static address dataset reader.

Reads the JSON array of geocoder-style records that backs local search
and materializes it into an AddressStore.
"""

import json
from pathlib import Path
from typing import Any

from loguru import logger

from address_resolver.lib.resolver import AddressStore, LoadError, LoadResult


def read_dataset(file_path: Path) -> list[dict[str, Any]]:
    """Read a JSON dataset file.

    Args:
        file_path: Path to a ``.json`` file holding an array of records.

    Returns:
        The raw records, unparsed.

    Raises:
        LoadError: If the file is missing, is not valid JSON, or does not
            hold a JSON array.
    """
    logger.info(f"Reading address dataset: {file_path}")

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        msg = f"Address dataset not found: {file_path}"
        raise LoadError(msg) from e
    except json.JSONDecodeError as e:
        msg = f"Address dataset is not valid JSON: {file_path} ({e.msg} at line {e.lineno})"
        raise LoadError(msg) from e

    if not isinstance(data, list):
        msg = f"Expected a JSON array of addresses, got {type(data).__name__}"
        raise LoadError(msg)

    return data


def load_store(file_path: Path) -> tuple[AddressStore, LoadResult]:
    """Read a dataset file into a new AddressStore.

    Args:
        file_path: Path to the dataset JSON file.

    Returns:
        Tuple of (store, load result with dropped-record count).

    Raises:
        LoadError: If the file cannot be read.
    """
    store = AddressStore()
    result = store.load(read_dataset(file_path))
    if result.dropped:
        logger.warning(f"Dropped {result.dropped} malformed addresses from {file_path.name}")
    return store, result
