"""Conversion between address dataclasses and JSON-compatible dicts."""

from __future__ import annotations

from dataclasses import MISSING, asdict, fields
from datetime import datetime
from typing import Any

from address_converter.exceptions import InvalidFormatError
from address_converter.models.address import (
    Address,
    BusinessRecipient,
    DeliveryPoint,
    IndividualRecipient,
    PostalDetails,
    Recipient,
    Street,
)
from address_converter.models.enums import AddressKind, Country
from address_converter.models.french import BusinessFrenchAddress, FrenchAddress, IndividualFrenchAddress
from address_converter.models.iso20022 import (
    BusinessIsoAddress,
    IndividualIsoAddress,
    IsoAddress,
    IsoPostalAddress,
)


def to_dict(obj: Any) -> dict[str, Any]:
    """Encode an address dataclass as a JSON-compatible dict.

    Every converted field is a string or ``None``, so ``asdict`` output is
    already JSON-ready. Null fields are kept so each DTO has a fixed shape.
    """
    return asdict(obj)


# ---------------------------------------------------------------------------
# External formats
# ---------------------------------------------------------------------------

def french_address_from_dict(data: Any) -> FrenchAddress:
    """Decode a French address payload.

    The variant is chosen from the payload shape: ``business_name`` means a
    business, ``name`` an individual. Payloads carrying both or neither are
    rejected rather than guessed.

    Raises
    ------
    InvalidFormatError
        If the payload is not an object, is ambiguous, lacks a required key
        or holds a non-string value.
    """
    cls = _select_variant(data, IndividualFrenchAddress, BusinessFrenchAddress, "french address")
    return _build(cls, data, "french address")


def iso_address_from_dict(data: Any) -> IsoAddress:
    """Decode an ISO 20022 address payload (see ``french_address_from_dict``)."""
    cls = _select_variant(data, IndividualIsoAddress, BusinessIsoAddress, "iso20022 address")
    postal_data = data.get("postal_address")
    if not isinstance(postal_data, dict):
        raise InvalidFormatError("iso20022 address: 'postal_address' must be an object")
    postal_address = _build(IsoPostalAddress, postal_data, "iso20022 postal_address")

    if cls is BusinessIsoAddress:
        return BusinessIsoAddress(
            business_name=_string(data, "business_name", "iso20022 address"),
            postal_address=postal_address,
        )
    return IndividualIsoAddress(name=_string(data, "name", "iso20022 address"), postal_address=postal_address)


def _select_variant(data: Any, individual: type, business: type, label: str) -> type:
    if not isinstance(data, dict):
        raise InvalidFormatError(f"{label}: expected a JSON object")
    has_name = "name" in data
    has_business_name = "business_name" in data
    if has_name and has_business_name:
        raise InvalidFormatError(f"{label}: ambiguous payload with both 'name' and 'business_name'")
    if has_business_name:
        return business
    if has_name:
        return individual
    raise InvalidFormatError(f"{label}: expected either 'name' or 'business_name'")


def _build(cls: type, data: dict, label: str) -> Any:
    kwargs = {}
    for f in fields(cls):
        if f.name == "postal_address":
            continue
        value = data.get(f.name)
        if value is None:
            if f.default is MISSING:
                raise InvalidFormatError(f"{label}: missing required field '{f.name}'")
            continue
        if not isinstance(value, str):
            raise InvalidFormatError(f"{label}: field '{f.name}' must be a string")
        kwargs[f.name] = value
    return cls(**kwargs)


def _string(data: dict, key: str, label: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise InvalidFormatError(f"{label}: field '{key}' must be a string")
    return value


# ---------------------------------------------------------------------------
# Canonical address records
# ---------------------------------------------------------------------------

def address_to_dict(address: Address) -> dict[str, Any]:
    """Encode a canonical address as a storable record."""
    recipient = address.recipient
    if isinstance(recipient, BusinessRecipient):
        recipient_data: dict[str, Any] = {
            "type": "business",
            "company_name": recipient.company_name,
            "contact": recipient.contact,
        }
    else:
        recipient_data = {"type": "individual", "name": recipient.name}

    return {
        "id": address.id,
        "updated_at": address.updated_at.isoformat(),
        "kind": address.kind.value,
        "recipient": recipient_data,
        "delivery_point": to_dict(address.delivery_point) if address.delivery_point is not None else None,
        "street": to_dict(address.street) if address.street is not None else None,
        "postal_details": to_dict(address.postal_details),
        "country": str(address.country),
    }


def address_from_dict(data: dict[str, Any]) -> Address:
    """Decode a record produced by ``address_to_dict``.

    Raises
    ------
    InvalidFormatError
        If the record is incomplete or holds unknown values.
    """
    try:
        recipient_data = data["recipient"]
        recipient: Recipient
        if recipient_data["type"] == "business":
            recipient = BusinessRecipient(
                company_name=recipient_data["company_name"],
                contact=recipient_data.get("contact"),
            )
        else:
            recipient = IndividualRecipient(name=recipient_data["name"])

        delivery_data = data.get("delivery_point")
        street_data = data.get("street")
        return Address(
            id=data["id"],
            updated_at=datetime.fromisoformat(data["updated_at"]),
            kind=AddressKind(data["kind"]),
            recipient=recipient,
            delivery_point=DeliveryPoint(**delivery_data) if delivery_data is not None else None,
            street=Street(**street_data) if street_data is not None else None,
            postal_details=PostalDetails(**data["postal_details"]),
            country=Country.parse(data["country"]),
        )
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise InvalidFormatError(f"address record: {e}") from e
