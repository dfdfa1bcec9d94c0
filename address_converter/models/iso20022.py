"""ISO 20022 structured postal address element set."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class IsoPostalAddress:
    """``PostalAddress`` elements, XML tag names in comments."""

    postcode: str  # <PstCd>
    town_name: str  # <TwnNm>
    country: str  # <Ctry>
    street_name: str | None = None  # <StrtNm>
    building_number: str | None = None  # <BldgNb>
    floor: str | None = None  # <Flr>
    room: str | None = None  # <Room>
    postbox: str | None = None  # <PstBx>
    department: str | None = None  # <Dept>
    town_location_name: str | None = None  # <TwnLctnNm>


@dataclass(frozen=True)
class IndividualIsoAddress:
    name: str
    postal_address: IsoPostalAddress


@dataclass(frozen=True)
class BusinessIsoAddress:
    business_name: str
    postal_address: IsoPostalAddress


IsoAddress = Union[IndividualIsoAddress, BusinessIsoAddress]
