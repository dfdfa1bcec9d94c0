"""Pytest configuration and fixtures."""

import logging

import pytest

from address_converter.models import (
    Address,
    AddressKind,
    BusinessRecipient,
    Country,
    DeliveryPoint,
    IndividualRecipient,
    PostalDetails,
    Street,
)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Undo handler changes made by setup_logging()."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def individual_address() -> Address:
    """Fully populated individual address."""
    return Address.create(
        kind=AddressKind.INDIVIDUAL,
        recipient=IndividualRecipient(name="Monsieur Jean DELHOURME"),
        delivery_point=DeliveryPoint(
            internal="Chez Mireille COPEAU Appartement 2",
            external="Entrée A Bâtiment Jonquille",
            postbox="CAUDOS",
        ),
        street=Street(number="25", name="RUE DE L'EGLISE"),
        postal_details=PostalDetails(postcode="33380", town="MIOS"),
        country=Country.FRANCE,
    )


@pytest.fixture
def minimal_individual_address() -> Address:
    """Individual address without street number or postbox."""
    return Address.create(
        kind=AddressKind.INDIVIDUAL,
        recipient=IndividualRecipient(name="Madame Isabelle RICHARD"),
        delivery_point=DeliveryPoint(external="VILLA BEAU SOLEIL"),
        street=Street(name="LE VILLAGE"),
        postal_details=PostalDetails(postcode="82500", town="AUTERIVE"),
        country=Country.FRANCE,
    )


@pytest.fixture
def business_address() -> Address:
    """Business address with contact, postbox and town location."""
    return Address.create(
        kind=AddressKind.BUSINESS,
        recipient=BusinessRecipient(company_name="Société DUPONT", contact="Mademoiselle Lucie MARTIN"),
        delivery_point=DeliveryPoint(external="Résidence des Capucins Bâtiment Quater", postbox="BP 90432"),
        street=Street(number="56", name="RUE EMILE ZOLA"),
        postal_details=PostalDetails(
            postcode="34092",
            town="MONTPELLIER CEDEX 5",
            town_location="MONTFERRIER SUR LEZ",
        ),
        country=Country.FRANCE,
    )


@pytest.fixture
def french_individual_json() -> str:
    """Individual French address payload."""
    return (
        '{"name": "Monsieur Jean DELHOURME", "street": "25 RUE DE L\'EGLISE", '
        '"postal": "33380 MIOS", "country": "FRANCE"}'
    )


@pytest.fixture
def iso_business_json() -> str:
    """Business ISO 20022 address payload."""
    return """{
        "business_name": "Société DUPONT",
        "postal_address": {
            "street_name": "RUE EMILE ZOLA",
            "building_number": "56",
            "department": "Mademoiselle Lucie MARTIN",
            "postbox": "BP 90432",
            "town_location_name": "MONTFERRIER SUR LEZ",
            "postcode": "34092",
            "town_name": "MONTPELLIER CEDEX 5",
            "country": "FR"
        }
    }"""
