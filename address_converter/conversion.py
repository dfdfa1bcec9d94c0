"""Conversion rules between the canonical address and external formats.

Every function is pure: it reads its input, returns a complete new value
or raises a single ``AddressConversionError``. Nothing is retried and no
partial result is ever returned.
"""

from __future__ import annotations

import logging

from address_converter.exceptions import MissingFieldError
from address_converter.models.address import (
    Address,
    BusinessRecipient,
    DeliveryPoint,
    IndividualRecipient,
    PostalDetails,
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
from address_converter.parsing.french import parse_postal, parse_postbox, parse_street, parse_town_location

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Canonical -> external
# ---------------------------------------------------------------------------

def to_french(address: Address) -> FrenchAddress:
    """Convert a canonical address into the NF Z10-011 line format.

    Parameters
    ----------
    address : Address
        Canonical address.

    Returns
    -------
    FrenchAddress
        ``IndividualFrenchAddress`` or ``BusinessFrenchAddress`` depending
        on ``address.kind``.

    Raises
    ------
    MissingFieldError
        If the recipient name is empty, or a business address has no street.
    """
    delivery_point = address.delivery_point or DeliveryPoint()
    distribution_info = merge_distribution_info(delivery_point.postbox, address.postal_details.town_location)
    postal = str(address.postal_details)

    if address.kind == AddressKind.INDIVIDUAL:
        name = _individual_name(address)
        french: FrenchAddress = IndividualFrenchAddress(
            name=name,
            internal_delivery=delivery_point.internal,
            external_delivery=delivery_point.external,
            street=str(address.street) if address.street is not None else None,
            distribution_info=distribution_info,
            postal=postal,
            country=str(address.country),
        )
    else:
        business_name = _company_name(address)
        if address.street is None:
            raise MissingFieldError("street")
        french = BusinessFrenchAddress(
            business_name=business_name,
            recipient=address.recipient.denomination,
            external_delivery=delivery_point.external,
            street=str(address.street),
            distribution_info=distribution_info,
            postal=postal,
            country=str(address.country),
        )

    logger.debug("Converted address %s to french format", address.id, extra={"address_id": address.id})
    return french


def to_iso20022(address: Address) -> IsoAddress:
    """Convert a canonical address into the ISO 20022 element set.

    Delivery point fields are copied one to one: ISO keeps the postbox and
    the town location apart, so nothing is merged here.
    """
    delivery_point = address.delivery_point or DeliveryPoint()
    street = address.street
    is_business = address.kind == AddressKind.BUSINESS

    postal_address = IsoPostalAddress(
        street_name=street.name if street is not None else None,
        building_number=street.number if street is not None else None,
        floor=delivery_point.external,
        room=delivery_point.internal,
        postbox=delivery_point.postbox,
        department=address.recipient.denomination if is_business else None,
        postcode=address.postal_details.postcode,
        town_name=address.postal_details.town,
        town_location_name=address.postal_details.town_location,
        country=address.country.iso_code,
    )

    if is_business:
        iso: IsoAddress = BusinessIsoAddress(business_name=_company_name(address), postal_address=postal_address)
    else:
        iso = IndividualIsoAddress(name=_individual_name(address), postal_address=postal_address)

    logger.debug("Converted address %s to iso20022 format", address.id, extra={"address_id": address.id})
    return iso


def merge_distribution_info(postbox: str | None, town_location: str | None) -> str | None:
    """Join postbox and town location into one distribution line.

    The postbox comes first so that ``parse_postbox`` can find it again.
    """
    parts = [part for part in (postbox, town_location) if part]
    if not parts:
        return None
    return " ".join(parts)


def _individual_name(address: Address) -> str:
    recipient = address.recipient
    if not isinstance(recipient, IndividualRecipient) or not recipient.name:
        raise MissingFieldError("name")
    return recipient.name


def _company_name(address: Address) -> str:
    recipient = address.recipient
    if not isinstance(recipient, BusinessRecipient) or not recipient.company_name:
        raise MissingFieldError("company_name")
    return recipient.company_name


# ---------------------------------------------------------------------------
# External -> canonical
# ---------------------------------------------------------------------------

def from_french(french: FrenchAddress) -> Address:
    """Build a canonical address from NF Z10-011 lines.

    Parameters
    ----------
    french : FrenchAddress
        Individual or business French address.

    Returns
    -------
    Address
        New address with a fresh identifier and timestamp.

    Raises
    ------
    MissingFieldError
        If the name (or business name) is empty.
    InvalidFormatError
        If the street, postal or country line cannot be parsed.
    """
    if isinstance(french, BusinessFrenchAddress):
        address = _business_from_french(french)
    else:
        address = _individual_from_french(french)

    logger.debug("Built address %s from french format", address.id, extra={"address_id": address.id})
    return address


def _individual_from_french(french: IndividualFrenchAddress) -> Address:
    if not french.name:
        raise MissingFieldError("name")

    street = parse_street(french.street) if french.street is not None else None
    postal_details = parse_postal(french.postal)
    country = Country.parse(french.country)

    delivery_point = None
    if any(v is not None for v in (french.external_delivery, french.internal_delivery, french.distribution_info)):
        delivery_point = DeliveryPoint(
            external=french.external_delivery,
            internal=french.internal_delivery,
            postbox=french.distribution_info,
        )

    return Address.create(
        kind=AddressKind.INDIVIDUAL,
        recipient=IndividualRecipient(name=french.name),
        delivery_point=delivery_point,
        street=street,
        postal_details=postal_details,
        country=country,
    )


def _business_from_french(french: BusinessFrenchAddress) -> Address:
    if not french.business_name:
        raise MissingFieldError("business_name")

    street = parse_street(french.street)
    postal_details = parse_postal(french.postal)
    country = Country.parse(french.country)

    # Best effort: "BP 90432 MONTFERRIER SUR LEZ" splits back, but a postbox
    # that is not a "XX 123" token comes back as a town location.
    postbox = None
    if french.distribution_info is not None:
        postbox = parse_postbox(french.distribution_info)
        postal_details = PostalDetails(
            postcode=postal_details.postcode,
            town=postal_details.town,
            town_location=parse_town_location(french.distribution_info),
        )

    delivery_point = None
    if french.external_delivery is not None or french.distribution_info is not None:
        delivery_point = DeliveryPoint(external=french.external_delivery, postbox=postbox)

    return Address.create(
        kind=AddressKind.BUSINESS,
        recipient=BusinessRecipient(company_name=french.business_name, contact=french.recipient),
        delivery_point=delivery_point,
        street=street,
        postal_details=postal_details,
        country=country,
    )


def from_iso20022(iso: IsoAddress) -> Address:
    """Build a canonical address from ISO 20022 elements.

    An individual address must carry a street name. A business address
    without one gets an empty street name instead.

    Raises
    ------
    MissingFieldError
        If the name, the postcode, the town or (individuals only) the street
        name is empty.
    InvalidFormatError
        If the country is not a registered ISO 3166-1 alpha-2 code.
    """
    postal_address = iso.postal_address
    is_business = isinstance(iso, BusinessIsoAddress)

    if is_business:
        if not iso.business_name:
            raise MissingFieldError("business_name")
        recipient = BusinessRecipient(company_name=iso.business_name, contact=postal_address.department)
        street = Street(name=postal_address.street_name or "", number=postal_address.building_number)
        internal = None
    else:
        if not iso.name:
            raise MissingFieldError("name")
        if not postal_address.street_name:
            raise MissingFieldError("street_name")
        recipient = IndividualRecipient(name=iso.name)
        street = Street(name=postal_address.street_name, number=postal_address.building_number)
        internal = postal_address.room

    if not postal_address.postcode:
        raise MissingFieldError("postcode")
    if not postal_address.town_name:
        raise MissingFieldError("town_name")
    country = Country.from_iso_code(postal_address.country)

    delivery_point = None
    if any(v is not None for v in (postal_address.floor, internal, postal_address.postbox)):
        delivery_point = DeliveryPoint(external=postal_address.floor, internal=internal, postbox=postal_address.postbox)

    address = Address.create(
        kind=AddressKind.BUSINESS if is_business else AddressKind.INDIVIDUAL,
        recipient=recipient,
        delivery_point=delivery_point,
        street=street,
        postal_details=PostalDetails(
            postcode=postal_address.postcode,
            town=postal_address.town_name,
            town_location=postal_address.town_location_name,
        ),
        country=country,
    )
    logger.debug("Built address %s from iso20022 format", address.id, extra={"address_id": address.id})
    return address
