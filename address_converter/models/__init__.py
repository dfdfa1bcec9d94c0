"""Canonical address model and external address representations."""

from address_converter.models.address import (
    Address,
    BusinessRecipient,
    DeliveryPoint,
    IndividualRecipient,
    PostalDetails,
    Recipient,
    Street,
)
from address_converter.models.enums import COUNTRY_REGISTRY, AddressFormat, AddressKind, Country
from address_converter.models.french import BusinessFrenchAddress, FrenchAddress, IndividualFrenchAddress
from address_converter.models.iso20022 import (
    BusinessIsoAddress,
    IndividualIsoAddress,
    IsoAddress,
    IsoPostalAddress,
)

__all__ = [
    "COUNTRY_REGISTRY",
    "Address",
    "AddressFormat",
    "AddressKind",
    "BusinessFrenchAddress",
    "BusinessIsoAddress",
    "BusinessRecipient",
    "Country",
    "DeliveryPoint",
    "FrenchAddress",
    "IndividualFrenchAddress",
    "IndividualIsoAddress",
    "IndividualRecipient",
    "IsoAddress",
    "IsoPostalAddress",
    "PostalDetails",
    "Recipient",
    "Street",
]
