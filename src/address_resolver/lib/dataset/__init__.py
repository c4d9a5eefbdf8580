"""Dataset acquisition — read the static address dataset from disk.

Public API:
    - read_dataset: Read a JSON array of raw address records
    - load_store: Read a dataset file into an AddressStore
"""

from address_resolver.lib.dataset.loader import load_store, read_dataset

__all__ = ["load_store", "read_dataset"]
