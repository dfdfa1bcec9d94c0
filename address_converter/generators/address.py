"""Sample canonical address generation backed by Faker's French locale."""

from __future__ import annotations

from faker import Faker

from address_converter.models.address import (
    Address,
    BusinessRecipient,
    DeliveryPoint,
    IndividualRecipient,
    PostalDetails,
    Street,
)
from address_converter.models.enums import AddressKind, Country

CIVILITIES = ["Monsieur", "Madame", "Mademoiselle"]
NUMBER_SUFFIXES = ["", "", "", "", "BIS", "TER"]
POSTBOX_PREFIXES = ["BP", "CS"]
EXTERNAL_DELIVERY = ["Entrée A Bâtiment Jonquille", "Résidence des Capucins", "VILLA BEAU SOLEIL", "Bâtiment C"]
SERVICES = ["Service achat", "Service comptabilité", "Direction des ressources humaines"]


class AddressFactory:
    """Generate valid canonical French addresses.

    Text is upper-cased the way NF Z10-011 labels are written. Each factory
    owns its Faker instance, so seeded factories are reproducible
    independently of each other.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    business_ratio : float
        Probability that ``generate()`` returns a business address.
    """

    def __init__(self, seed: int | None = None, business_ratio: float = 0.3) -> None:
        self.fake = Faker("fr_FR")
        if seed is not None:
            self.fake.seed_instance(seed)
        self.business_ratio = business_ratio

    def generate(self, kind: AddressKind | None = None) -> Address:
        """Generate an address, optionally of a specific kind.

        Parameters
        ----------
        kind : AddressKind | None
            Address kind. If ``None``, picks based on ``business_ratio``.

        Returns
        -------
        Address
            Generated address.
        """
        if kind is None:
            is_business = self.fake.random.random() < self.business_ratio
            kind = AddressKind.BUSINESS if is_business else AddressKind.INDIVIDUAL

        if kind == AddressKind.BUSINESS:
            return self.generate_business()
        return self.generate_individual()

    def generate_individual(self) -> Address:
        """Generate a private person's address; the street may be absent."""
        fake = self.fake
        name = f"{fake.random_element(CIVILITIES)} {fake.first_name()} {fake.last_name().upper()}"

        street = self._street() if fake.boolean(chance_of_getting_true=85) else None
        delivery_point = None
        if fake.boolean(chance_of_getting_true=50):
            delivery_point = DeliveryPoint(
                external=self._maybe(fake.random_element(EXTERNAL_DELIVERY), 40),
                internal=self._maybe(f"Appartement {fake.random_int(1, 120)}", 40),
                postbox=self._maybe(fake.city().upper(), 20),
            )

        return Address.create(
            kind=AddressKind.INDIVIDUAL,
            recipient=IndividualRecipient(name=name),
            delivery_point=delivery_point,
            street=street,
            postal_details=self._postal_details(town_location=None),
            country=Country.FRANCE,
        )

    def generate_business(self) -> Address:
        """Generate a company address; the street is always present."""
        fake = self.fake
        contact = None
        if fake.boolean(chance_of_getting_true=70):
            contact = fake.random_element(
                [f"{fake.random_element(CIVILITIES)} {fake.first_name()} {fake.last_name().upper()}"] + SERVICES
            )

        postbox = self._maybe(self._postbox(), 50)
        delivery_point = None
        external = self._maybe(fake.random_element(EXTERNAL_DELIVERY), 30)
        if postbox is not None or external is not None:
            delivery_point = DeliveryPoint(external=external, postbox=postbox)

        return Address.create(
            kind=AddressKind.BUSINESS,
            recipient=BusinessRecipient(company_name=fake.company(), contact=contact),
            delivery_point=delivery_point,
            street=self._street(),
            postal_details=self._postal_details(town_location=self._maybe(fake.city().upper(), 30)),
            country=Country.FRANCE,
        )

    def _street(self) -> Street:
        fake = self.fake
        number = None
        if fake.boolean(chance_of_getting_true=80):
            number = f"{fake.random_int(1, 200)}{fake.random_element(NUMBER_SUFFIXES)}"
        return Street(name=fake.street_name().upper(), number=number)

    def _postal_details(self, town_location: str | None) -> PostalDetails:
        return PostalDetails(
            postcode=self.fake.numerify("#####"),
            town=self.fake.city().upper(),
            town_location=town_location,
        )

    def _postbox(self) -> str:
        prefix = self.fake.random_element(POSTBOX_PREFIXES)
        return f"{prefix} {self.fake.random_int(1000, 99999)}"

    def _maybe(self, value: str, chance: int) -> str | None:
        if self.fake.boolean(chance_of_getting_true=chance):
            return value
        return None
