"""French NF Z10-011 line-oriented address."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class IndividualFrenchAddress:
    """Address of a private person, one field per label line."""

    name: str  # civility, first name, last name
    postal: str  # "<postcode> <town>"
    country: str
    internal_delivery: str | None = None  # apartment, mailbox, staircase
    external_delivery: str | None = None  # building, residence, entrance
    street: str | None = None
    distribution_info: str | None = None  # hamlet, postbox


@dataclass(frozen=True)
class BusinessFrenchAddress:
    """Address of a company, one field per label line."""

    business_name: str
    street: str
    postal: str  # "<postcode> <town>" or "<CEDEX code> <CEDEX office>"
    country: str
    recipient: str | None = None  # contact person and/or service
    external_delivery: str | None = None
    # Postbox and/or the commune when it differs from the CEDEX office
    distribution_info: str | None = None


FrenchAddress = Union[IndividualFrenchAddress, BusinessFrenchAddress]
