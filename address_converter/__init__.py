"""Postal address conversion between French NF Z10-011 lines and ISO 20022 elements."""

from address_converter.conversion import from_french, from_iso20022, to_french, to_iso20022
from address_converter.models import Address, AddressFormat, AddressKind, Country

__version__ = "0.1.0"

__all__ = [
    "Address",
    "AddressFormat",
    "AddressKind",
    "Country",
    "from_french",
    "from_iso20022",
    "to_french",
    "to_iso20022",
]
