"""JSON file store: one ``<id>.json`` file per address."""

import json
import logging
import uuid
from pathlib import Path
from typing import Any

from address_converter.exceptions import (
    AddressAlreadyExistsError,
    AddressNotFoundError,
    InvalidFormatError,
    StorageError,
)
from address_converter.models.address import Address
from address_converter.serialization import address_from_dict, address_to_dict
from address_converter.store.base import AddressRepository

logger = logging.getLogger(__name__)


class JsonAddressRepository(AddressRepository):
    """Persist addresses as JSON documents in a directory."""

    def __init__(self, directory: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file store.

        Parameters
        ----------
        directory : str | Path
            Directory holding the address files. Created if missing.
        pretty : bool
            Pretty-print JSON documents.
        """
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)
        self.pretty = pretty

    def save(self, address: Address) -> str:
        path = self._file_path(address.id)
        if path.exists():
            raise AddressAlreadyExistsError(address.id)
        self._write(path, address)
        return address.id

    def fetch(self, address_id: str) -> Address:
        path = self._file_path(address_id)
        try:
            with open(path, encoding="utf-8") as f:
                stored = json.load(f)
        except FileNotFoundError:
            raise AddressNotFoundError(address_id) from None
        except (OSError, json.JSONDecodeError) as e:
            raise StorageError(f"Cannot read address {address_id}: {e}") from e

        try:
            return address_from_dict(stored["address"])
        except (KeyError, TypeError, InvalidFormatError) as e:
            raise StorageError(f"Corrupted address file {path.name}: {e}") from e

    def update(self, address: Address) -> None:
        path = self._file_path(address.id)
        if not path.exists():
            raise AddressNotFoundError(address.id)
        self._write(path, address)

    def delete(self, address_id: str) -> None:
        path = self._file_path(address_id)
        try:
            path.unlink()
        except FileNotFoundError:
            raise AddressNotFoundError(address_id) from None
        logger.debug("Removed %s", path)

    def _file_path(self, address_id: str) -> Path:
        try:
            canonical = str(uuid.UUID(address_id))
        except (ValueError, TypeError, AttributeError):
            raise AddressNotFoundError(address_id) from None
        return self.directory / f"{canonical}.json"

    def _write(self, path: Path, address: Address) -> None:
        stored: dict[str, Any] = {"id": address.id, "address": address_to_dict(address)}
        try:
            with open(path, "w", encoding="utf-8") as f:
                if self.pretty:
                    json.dump(stored, f, indent=2, ensure_ascii=False)
                else:
                    json.dump(stored, f, ensure_ascii=False)
        except OSError as e:
            raise StorageError(f"Cannot write address {address.id}: {e}") from e
        logger.debug("Wrote %s", path)
