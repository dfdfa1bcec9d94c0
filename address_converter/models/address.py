"""Canonical address model all conversions pivot through."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Union

from address_converter.models.enums import AddressKind, Country


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class IndividualRecipient:
    """A private person (``Monsieur Jean DELHOURME``)."""

    name: str

    @property
    def denomination(self) -> str | None:
        return self.name


@dataclass(frozen=True)
class BusinessRecipient:
    """A company and, optionally, the contact or service inside it.

    Examples::

        Société DUPONT              DURAND SA
        Mademoiselle Lucie MARTIN   Service achat
    """

    company_name: str
    contact: str | None = None

    @property
    def denomination(self) -> str | None:
        # The contact line, never the company name.
        return self.contact


Recipient = Union[IndividualRecipient, BusinessRecipient]


@dataclass(frozen=True)
class DeliveryPoint:
    """Routing detail below the street level."""

    external: str | None = None  # building, residence, entrance
    internal: str | None = None  # apartment, staircase, "chez ..."
    postbox: str | None = None  # BP 90432, CS 1234


@dataclass(frozen=True)
class Street:
    """Street number (``2``, ``2BIS``) and street name (``RUE DE L'EGLISE``)."""

    name: str
    number: str | None = None

    def __str__(self) -> str:
        if self.number:
            return f"{self.number} {self.name}"
        return self.name


@dataclass(frozen=True)
class PostalDetails:
    """Postcode, town and optional secondary locality."""

    postcode: str
    town: str
    town_location: str | None = None

    def __str__(self) -> str:
        return f"{self.postcode} {self.town}"


@dataclass(frozen=True)
class Address:
    """Canonical postal address.

    Instances are immutable. An update is modeled as a new value that keeps
    the identifier of the stored one (see ``revise``).
    """

    kind: AddressKind
    recipient: Recipient
    postal_details: PostalDetails
    country: Country
    delivery_point: DeliveryPoint | None = None
    street: Street | None = None
    id: str = field(default_factory=_new_id)
    updated_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def create(
        cls,
        kind: AddressKind,
        recipient: Recipient,
        postal_details: PostalDetails,
        country: Country,
        delivery_point: DeliveryPoint | None = None,
        street: Street | None = None,
    ) -> Address:
        """Create an address with a fresh identifier and timestamp."""
        return cls(
            kind=kind,
            recipient=recipient,
            postal_details=postal_details,
            country=country,
            delivery_point=delivery_point,
            street=street,
            id=_new_id(),
            updated_at=_utcnow(),
        )

    def revise(self, other: Address) -> Address:
        """Return ``other``'s content under this address's identifier."""
        return replace(other, id=self.id, updated_at=_utcnow())
