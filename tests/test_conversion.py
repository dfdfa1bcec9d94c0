"""Tests for conversion rules between canonical and external addresses."""

import dataclasses

import pytest

from address_converter.conversion import (
    from_french,
    from_iso20022,
    merge_distribution_info,
    to_french,
    to_iso20022,
)
from address_converter.exceptions import InvalidFormatError, MissingFieldError
from address_converter.models import (
    Address,
    AddressKind,
    BusinessFrenchAddress,
    BusinessIsoAddress,
    BusinessRecipient,
    Country,
    DeliveryPoint,
    IndividualFrenchAddress,
    IndividualIsoAddress,
    IndividualRecipient,
    IsoPostalAddress,
    PostalDetails,
    Street,
)


class TestMergeDistributionInfo:
    """Tests for the postbox / town location merge."""

    def test_both_postbox_first(self) -> None:
        assert merge_distribution_info("BP 90432", "MONTFERRIER SUR LEZ") == "BP 90432 MONTFERRIER SUR LEZ"

    def test_postbox_only(self) -> None:
        assert merge_distribution_info("CAUDOS", None) == "CAUDOS"

    def test_town_location_only(self) -> None:
        assert merge_distribution_info(None, "MONTFERRIER SUR LEZ") == "MONTFERRIER SUR LEZ"

    def test_neither(self) -> None:
        assert merge_distribution_info(None, None) is None


class TestToFrench:
    """Tests for to_french."""

    def test_full_individual(self, individual_address: Address) -> None:
        assert to_french(individual_address) == IndividualFrenchAddress(
            name="Monsieur Jean DELHOURME",
            internal_delivery="Chez Mireille COPEAU Appartement 2",
            external_delivery="Entrée A Bâtiment Jonquille",
            street="25 RUE DE L'EGLISE",
            distribution_info="CAUDOS",
            postal="33380 MIOS",
            country="FRANCE",
        )

    def test_minimal_individual(self, minimal_individual_address: Address) -> None:
        assert to_french(minimal_individual_address) == IndividualFrenchAddress(
            name="Madame Isabelle RICHARD",
            external_delivery="VILLA BEAU SOLEIL",
            street="LE VILLAGE",
            postal="82500 AUTERIVE",
            country="FRANCE",
        )

    def test_individual_without_street(self, individual_address: Address) -> None:
        french = to_french(dataclasses.replace(individual_address, street=None))
        assert french.street is None

    def test_individual_town_location_without_delivery_point(self, minimal_individual_address: Address) -> None:
        address = dataclasses.replace(
            minimal_individual_address,
            delivery_point=None,
            postal_details=PostalDetails(postcode="82500", town="AUTERIVE", town_location="LE BOURG"),
        )
        assert to_french(address).distribution_info == "LE BOURG"

    def test_individual_empty_name(self, individual_address: Address) -> None:
        address = dataclasses.replace(individual_address, recipient=IndividualRecipient(name=""))
        with pytest.raises(MissingFieldError) as exc_info:
            to_french(address)
        assert exc_info.value.field == "name"

    def test_kind_inconsistent_with_recipient(self, business_address: Address) -> None:
        address = dataclasses.replace(business_address, kind=AddressKind.INDIVIDUAL)
        with pytest.raises(MissingFieldError):
            to_french(address)

    def test_business(self, business_address: Address) -> None:
        assert to_french(business_address) == BusinessFrenchAddress(
            business_name="Société DUPONT",
            recipient="Mademoiselle Lucie MARTIN",
            external_delivery="Résidence des Capucins Bâtiment Quater",
            street="56 RUE EMILE ZOLA",
            distribution_info="BP 90432 MONTFERRIER SUR LEZ",
            postal="34092 MONTPELLIER CEDEX 5",
            country="FRANCE",
        )

    def test_business_recipient_is_contact_not_company(self, business_address: Address) -> None:
        address = dataclasses.replace(business_address, recipient=BusinessRecipient(company_name="DURAND SA"))
        french = to_french(address)
        assert french.business_name == "DURAND SA"
        assert french.recipient is None

    def test_business_without_street(self, business_address: Address) -> None:
        with pytest.raises(MissingFieldError) as exc_info:
            to_french(dataclasses.replace(business_address, street=None))
        assert exc_info.value.field == "street"

    def test_business_empty_company_name(self, business_address: Address) -> None:
        address = dataclasses.replace(business_address, recipient=BusinessRecipient(company_name=""))
        with pytest.raises(MissingFieldError) as exc_info:
            to_french(address)
        assert exc_info.value.field == "company_name"

    def test_input_is_not_modified(self, business_address: Address) -> None:
        before = dataclasses.replace(business_address)
        to_french(business_address)
        assert business_address == before


class TestToIso20022:
    """Tests for to_iso20022."""

    def test_full_individual(self, individual_address: Address) -> None:
        assert to_iso20022(individual_address) == IndividualIsoAddress(
            name="Monsieur Jean DELHOURME",
            postal_address=IsoPostalAddress(
                street_name="RUE DE L'EGLISE",
                building_number="25",
                floor="Entrée A Bâtiment Jonquille",
                room="Chez Mireille COPEAU Appartement 2",
                postbox="CAUDOS",
                postcode="33380",
                town_name="MIOS",
                country="FR",
            ),
        )

    def test_minimal_individual(self, minimal_individual_address: Address) -> None:
        iso = to_iso20022(minimal_individual_address)
        assert iso.postal_address == IsoPostalAddress(
            street_name="LE VILLAGE",
            floor="VILLA BEAU SOLEIL",
            postcode="82500",
            town_name="AUTERIVE",
            country="FR",
        )

    def test_individual_without_street(self, individual_address: Address) -> None:
        iso = to_iso20022(dataclasses.replace(individual_address, street=None))
        assert iso.postal_address.street_name is None
        assert iso.postal_address.building_number is None

    def test_individual_has_no_department(self, individual_address: Address) -> None:
        assert to_iso20022(individual_address).postal_address.department is None

    def test_business(self, business_address: Address) -> None:
        assert to_iso20022(business_address) == BusinessIsoAddress(
            business_name="Société DUPONT",
            postal_address=IsoPostalAddress(
                street_name="RUE EMILE ZOLA",
                building_number="56",
                floor="Résidence des Capucins Bâtiment Quater",
                postbox="BP 90432",
                department="Mademoiselle Lucie MARTIN",
                postcode="34092",
                town_name="MONTPELLIER CEDEX 5",
                town_location_name="MONTFERRIER SUR LEZ",
                country="FR",
            ),
        )

    def test_business_without_street_is_allowed(self, business_address: Address) -> None:
        iso = to_iso20022(dataclasses.replace(business_address, street=None))
        assert iso.postal_address.street_name is None

    def test_individual_empty_name(self, individual_address: Address) -> None:
        address = dataclasses.replace(individual_address, recipient=IndividualRecipient(name=""))
        with pytest.raises(MissingFieldError, match="name"):
            to_iso20022(address)

    def test_business_empty_company_name(self, business_address: Address) -> None:
        address = dataclasses.replace(business_address, recipient=BusinessRecipient(company_name="", contact="X"))
        with pytest.raises(MissingFieldError) as exc_info:
            to_iso20022(address)
        assert exc_info.value.field == "company_name"


class TestFromFrench:
    """Tests for from_french."""

    def test_full_individual_to_iso(self) -> None:
        french = IndividualFrenchAddress(
            name="Monsieur Jean DELHOURME",
            street="25 RUE DE L'EGLISE",
            postal="33380 MIOS",
            country="FRANCE",
            distribution_info="CAUDOS",
        )
        iso = to_iso20022(from_french(french))

        assert isinstance(iso, IndividualIsoAddress)
        assert iso.postal_address.street_name == "RUE DE L'EGLISE"
        assert iso.postal_address.building_number == "25"
        assert iso.postal_address.postbox == "CAUDOS"
        assert iso.postal_address.postcode == "33380"
        assert iso.postal_address.town_name == "MIOS"
        assert iso.postal_address.country == "FR"

    def test_individual_fields(self) -> None:
        french = IndividualFrenchAddress(
            name="Madame Isabelle RICHARD",
            internal_delivery="Appartement 2",
            external_delivery="VILLA BEAU SOLEIL",
            street="LE VILLAGE",
            postal="82500 AUTERIVE",
            country="france",
        )
        address = from_french(french)

        assert address.kind == AddressKind.INDIVIDUAL
        assert address.recipient == IndividualRecipient(name="Madame Isabelle RICHARD")
        assert address.street == Street(name="LE VILLAGE")
        assert address.delivery_point == DeliveryPoint(external="VILLA BEAU SOLEIL", internal="Appartement 2")
        assert address.postal_details == PostalDetails(postcode="82500", town="AUTERIVE")
        assert address.country is Country.FRANCE

    def test_individual_without_street_or_delivery(self) -> None:
        address = from_french(IndividualFrenchAddress(name="Monsieur X", postal="33380 MIOS", country="FR"))
        assert address.street is None
        assert address.delivery_point is None

    def test_business(self) -> None:
        french = BusinessFrenchAddress(
            business_name="Société DUPONT",
            recipient="Mademoiselle Lucie MARTIN",
            street="56 RUE EMILE ZOLA",
            distribution_info="BP 90432 MONTFERRIER SUR LEZ",
            postal="34092 MONTPELLIER CEDEX 5",
            country="FRANCE",
        )
        address = from_french(french)

        assert address.kind == AddressKind.BUSINESS
        assert address.recipient == BusinessRecipient(
            company_name="Société DUPONT", contact="Mademoiselle Lucie MARTIN"
        )
        assert address.street == Street(number="56", name="RUE EMILE ZOLA")
        assert address.delivery_point == DeliveryPoint(postbox="BP 90432")
        assert address.postal_details == PostalDetails(
            postcode="34092", town="MONTPELLIER CEDEX 5", town_location="MONTFERRIER SUR LEZ"
        )

    def test_business_town_location_only(self) -> None:
        french = BusinessFrenchAddress(
            business_name="DURAND SA",
            street="RUE DU PORT",
            distribution_info="LE BOURG",
            postal="56000 VANNES",
            country="FRANCE",
        )
        address = from_french(french)
        assert address.delivery_point == DeliveryPoint()
        assert address.postal_details.town_location == "LE BOURG"

    def test_business_empty_distribution_info(self) -> None:
        french = BusinessFrenchAddress(
            business_name="DURAND SA", street="RUE DU PORT", distribution_info=" ", postal="56000 VANNES", country="FR"
        )
        with pytest.raises(InvalidFormatError):
            from_french(french)

    def test_malformed_postal(self) -> None:
        french = IndividualFrenchAddress(name="Monsieur X", postal="MIOS", country="FRANCE")
        with pytest.raises(InvalidFormatError):
            from_french(french)

    def test_malformed_street(self) -> None:
        french = BusinessFrenchAddress(business_name="DURAND SA", street="25", postal="56000 VANNES", country="FR")
        with pytest.raises(InvalidFormatError):
            from_french(french)

    def test_unknown_country(self) -> None:
        french = IndividualFrenchAddress(name="Monsieur X", postal="33380 MIOS", country="BELGIQUE")
        with pytest.raises(InvalidFormatError, match="BELGIQUE"):
            from_french(french)

    def test_empty_name(self) -> None:
        with pytest.raises(MissingFieldError, match="name"):
            from_french(IndividualFrenchAddress(name="", postal="33380 MIOS", country="FRANCE"))

    def test_empty_business_name(self) -> None:
        french = BusinessFrenchAddress(business_name="", street="RUE DU PORT", postal="56000 VANNES", country="FR")
        with pytest.raises(MissingFieldError) as exc_info:
            from_french(french)
        assert exc_info.value.field == "business_name"

    def test_fresh_identity_per_call(self) -> None:
        french = IndividualFrenchAddress(name="Monsieur X", postal="33380 MIOS", country="FRANCE")
        assert from_french(french).id != from_french(french).id


class TestFromIso20022:
    """Tests for from_iso20022."""

    def test_full_business_to_french(self) -> None:
        iso = BusinessIsoAddress(
            business_name="Société DUPONT",
            postal_address=IsoPostalAddress(
                street_name="RUE EMILE ZOLA",
                building_number="56",
                department="Mademoiselle Lucie MARTIN",
                postbox="BP 90432",
                town_location_name="MONTFERRIER SUR LEZ",
                postcode="34092",
                town_name="MONTPELLIER CEDEX 5",
                country="FR",
            ),
        )
        french = to_french(from_iso20022(iso))

        assert french == BusinessFrenchAddress(
            business_name="Société DUPONT",
            recipient="Mademoiselle Lucie MARTIN",
            street="56 RUE EMILE ZOLA",
            distribution_info="BP 90432 MONTFERRIER SUR LEZ",
            postal="34092 MONTPELLIER CEDEX 5",
            country="FRANCE",
        )

    def test_individual_fields(self) -> None:
        iso = IndividualIsoAddress(
            name="Monsieur Jean DELHOURME",
            postal_address=IsoPostalAddress(
                street_name="RUE DE L'EGLISE",
                building_number="25",
                floor="Bâtiment A",
                room="Appartement 2",
                department="ignored",
                postcode="33380",
                town_name="MIOS",
                country="fr",
            ),
        )
        address = from_iso20022(iso)

        assert address.kind == AddressKind.INDIVIDUAL
        assert address.recipient == IndividualRecipient(name="Monsieur Jean DELHOURME")
        assert address.street == Street(number="25", name="RUE DE L'EGLISE")
        assert address.delivery_point == DeliveryPoint(external="Bâtiment A", internal="Appartement 2")
        assert address.country is Country.FRANCE

    def test_individual_requires_street_name(self) -> None:
        iso = IndividualIsoAddress(
            name="Monsieur X",
            postal_address=IsoPostalAddress(postcode="33380", town_name="MIOS", country="FR"),
        )
        with pytest.raises(MissingFieldError) as exc_info:
            from_iso20022(iso)
        assert exc_info.value.field == "street_name"

    def test_business_defaults_missing_street_name(self) -> None:
        iso = BusinessIsoAddress(
            business_name="DURAND SA",
            postal_address=IsoPostalAddress(postcode="56000", town_name="VANNES", country="FR"),
        )
        address = from_iso20022(iso)
        assert address.street == Street(name="")
        assert address.delivery_point is None

    def test_business_ignores_room(self) -> None:
        iso = BusinessIsoAddress(
            business_name="DURAND SA",
            postal_address=IsoPostalAddress(
                street_name="RUE DU PORT", room="Bureau 12", postcode="56000", town_name="VANNES", country="FR"
            ),
        )
        address = from_iso20022(iso)
        assert address.delivery_point is None
        assert address.recipient == BusinessRecipient(company_name="DURAND SA")

    def test_empty_business_name(self) -> None:
        iso = BusinessIsoAddress(
            business_name="",
            postal_address=IsoPostalAddress(street_name="RUE DU PORT", postcode="56000", town_name="VANNES", country="FR"),
        )
        with pytest.raises(MissingFieldError, match="business_name"):
            from_iso20022(iso)

    @pytest.mark.parametrize(("postcode", "town_name", "field"), [("", "VANNES", "postcode"), ("56000", "", "town_name")])
    def test_empty_postal_fields(self, postcode: str, town_name: str, field: str) -> None:
        iso = IndividualIsoAddress(
            name="Monsieur X",
            postal_address=IsoPostalAddress(
                street_name="RUE DU PORT", postcode=postcode, town_name=town_name, country="FR"
            ),
        )
        with pytest.raises(MissingFieldError) as exc_info:
            from_iso20022(iso)
        assert exc_info.value.field == field

    def test_unknown_country(self) -> None:
        iso = IndividualIsoAddress(
            name="Monsieur X",
            postal_address=IsoPostalAddress(street_name="RUE DU PORT", postcode="56000", town_name="VANNES", country="BE"),
        )
        with pytest.raises(InvalidFormatError):
            from_iso20022(iso)

    def test_country_name_is_not_an_iso_code(self) -> None:
        iso = IndividualIsoAddress(
            name="Monsieur X",
            postal_address=IsoPostalAddress(
                street_name="RUE DU PORT", postcode="56000", town_name="VANNES", country="FRANCE"
            ),
        )
        with pytest.raises(InvalidFormatError, match="country code"):
            from_iso20022(iso)


class TestDistributionInfoRoundTrip:
    """Known lossy cases of the distribution line merge/split."""

    def test_business_postbox_and_town_location_survive(self, business_address: Address) -> None:
        restored = from_french(to_french(business_address))
        assert restored.delivery_point.postbox == "BP 90432"
        assert restored.postal_details.town_location == "MONTFERRIER SUR LEZ"

    def test_business_free_text_postbox_becomes_town_location(self, business_address: Address) -> None:
        address = dataclasses.replace(
            business_address,
            delivery_point=DeliveryPoint(postbox="CAUDOS"),
            postal_details=PostalDetails(postcode="34092", town="MONTPELLIER CEDEX 5"),
        )
        restored = from_french(to_french(address))

        assert restored.delivery_point.postbox is None
        assert restored.postal_details.town_location == "CAUDOS"

    def test_individual_town_location_becomes_postbox(self, individual_address: Address) -> None:
        address = dataclasses.replace(
            individual_address,
            delivery_point=DeliveryPoint(postbox="BP 12"),
            postal_details=PostalDetails(postcode="33380", town="MIOS", town_location="CAUDOS"),
        )
        restored = from_french(to_french(address))

        assert restored.delivery_point.postbox == "BP 12 CAUDOS"
        assert restored.postal_details.town_location is None
