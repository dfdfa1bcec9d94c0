"""Request orchestration: decode raw input, convert, dispatch to storage."""

from __future__ import annotations

import json
import logging
from typing import Any, Union

from address_converter.conversion import from_french, from_iso20022, to_french, to_iso20022
from address_converter.exceptions import InvalidFormatError
from address_converter.models.address import Address
from address_converter.models.enums import AddressFormat
from address_converter.models.french import FrenchAddress
from address_converter.models.iso20022 import IsoAddress
from address_converter.serialization import french_address_from_dict, iso_address_from_dict
from address_converter.store.base import AddressRepository

logger = logging.getLogger(__name__)

ConvertedAddress = Union[FrenchAddress, IsoAddress]

# Envelope keys used when the caller does not name the input format.
ENVELOPE_KEYS: dict[str, AddressFormat] = {
    "french_address": AddressFormat.FRENCH,
    "iso_address": AddressFormat.ISO20022,
}


def decode_address(data: Any, fmt: AddressFormat) -> Address:
    """Build a canonical address from a decoded payload in format ``fmt``."""
    if fmt == AddressFormat.FRENCH:
        return from_french(french_address_from_dict(data))
    return from_iso20022(iso_address_from_dict(data))


def encode_address(address: Address, fmt: AddressFormat) -> ConvertedAddress:
    """Convert a canonical address into format ``fmt``."""
    if fmt == AddressFormat.FRENCH:
        return to_french(address)
    return to_iso20022(address)


def unwrap_envelope(data: Any) -> tuple[Any, AddressFormat]:
    """Split ``{"french_address": {...}}`` into the payload and its format.

    Raises
    ------
    InvalidFormatError
        If the payload does not hold exactly one known envelope key.
    """
    if isinstance(data, dict):
        found = [key for key in ENVELOPE_KEYS if key in data]
        if len(found) == 1:
            return data[found[0]], ENVELOPE_KEYS[found[0]]
    raise InvalidFormatError("Invalid input: either iso_address or french_address")


class AddressService:
    """Entry point used by the CLI to convert and manage addresses.

    Parameters
    ----------
    repository : AddressRepository
        Storage backend for canonical addresses.
    """

    def __init__(self, repository: AddressRepository) -> None:
        self.repository = repository

    def address_from(self, raw: str, fmt: AddressFormat | None = None) -> Address:
        """Decode raw JSON text into a canonical address.

        When ``fmt`` is ``None`` the input must be wrapped in a
        ``french_address`` or ``iso_address`` envelope.
        """
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise InvalidFormatError(f"malformed JSON input: {e}") from e

        if fmt is None:
            data, fmt = unwrap_envelope(data)
        return decode_address(data, fmt)

    def convert(
        self,
        raw: str,
        target: AddressFormat,
        source: AddressFormat | None = None,
        save: bool = False,
    ) -> ConvertedAddress:
        """Convert raw input into ``target``, storing it on success if asked."""
        address = self.address_from(raw, source)
        converted = encode_address(address, target)

        # Persist only once the conversion has validated the address.
        if save:
            self.repository.save(address)
            logger.info("Saved address %s", address.id, extra={"address_id": address.id})
        return converted

    def save(self, raw: str, fmt: AddressFormat) -> str:
        """Store a new address and return its id."""
        address = self.address_from(raw, fmt)
        address_id = self.repository.save(address)
        logger.info("Saved address %s (%s input)", address_id, fmt, extra={"address_id": address_id})
        return address_id

    def save_address(self, address: Address) -> str:
        """Store an already built canonical address."""
        address_id = self.repository.save(address)
        logger.info("Saved address %s", address_id, extra={"address_id": address_id})
        return address_id

    def update(self, address_id: str, raw: str, fmt: AddressFormat) -> Address:
        """Replace the content of a stored address, keeping its id."""
        current = self.repository.fetch(address_id)
        revised = current.revise(self.address_from(raw, fmt))
        self.repository.update(revised)
        logger.info("Updated address %s", address_id, extra={"address_id": address_id})
        return revised

    def delete(self, address_id: str) -> None:
        self.repository.delete(address_id)
        logger.info("Deleted address %s", address_id, extra={"address_id": address_id})

    def fetch(self, address_id: str) -> Address:
        return self.repository.fetch(address_id)

    def fetch_format(self, address_id: str, fmt: AddressFormat) -> ConvertedAddress:
        """Fetch a stored address rendered in ``fmt``."""
        return encode_address(self.repository.fetch(address_id), fmt)
