"""Enumeration types and the closed country registry."""

from dataclasses import dataclass
from enum import Enum

from address_converter.exceptions import InvalidFormatError


class AddressKind(str, Enum):
    INDIVIDUAL = "INDIVIDUAL"
    BUSINESS = "BUSINESS"


class Country(str, Enum):
    """Countries supported by the converter.

    Each member has exactly one row in ``COUNTRY_REGISTRY``. Adding a
    country means adding a member and its registry row.
    """

    FRANCE = "FRANCE"

    def __str__(self) -> str:
        return self.value

    @property
    def iso_code(self) -> str:
        """ISO 3166-1 alpha-2 code of the country."""
        return COUNTRY_REGISTRY[self].iso_code

    @classmethod
    def parse(cls, text: str) -> "Country":
        """Resolve a country name or alias, ignoring case.

        Parameters
        ----------
        text : str
            Full country name ("France") or ISO alias ("fr").

        Returns
        -------
        Country
            The matching registry member.

        Raises
        ------
        InvalidFormatError
            If the text is not a string or matches no registered country.
        """
        key = _country_key(text)
        for country, entry in COUNTRY_REGISTRY.items():
            if key in entry.aliases:
                return country
        raise InvalidFormatError(f"unsupported country '{text}'")

    @classmethod
    def from_iso_code(cls, code: str) -> "Country":
        """Resolve an ISO 3166-1 alpha-2 code (``"FR"``), ignoring case.

        Full country names are refused: ISO 20022 ``<Ctry>`` only carries
        the two-letter code.
        """
        key = _country_key(code)
        for country, entry in COUNTRY_REGISTRY.items():
            if key == entry.iso_code:
                return country
        raise InvalidFormatError(f"unsupported country code '{code}'")


def _country_key(text: object) -> str:
    if text is None:
        return ""
    if not isinstance(text, str):
        raise InvalidFormatError(f"country must be a string, got {type(text).__name__}")
    return text.strip().upper()


@dataclass(frozen=True)
class CountryEntry:
    """Registry row: accepted spellings and ISO code for a country."""

    iso_code: str
    aliases: frozenset[str]


COUNTRY_REGISTRY: dict[Country, CountryEntry] = {
    Country.FRANCE: CountryEntry(iso_code="FR", aliases=frozenset({"FRANCE", "FR"})),
}


class AddressFormat(str, Enum):
    """External representations an address can be read from or written to."""

    FRENCH = "french"
    ISO20022 = "iso20022"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "AddressFormat":
        """Resolve a format name, ignoring case."""
        try:
            return cls((text or "").strip().lower())
        except ValueError:
            raise InvalidFormatError(
                f"unknown address format '{text}': must be 'french' or 'iso20022'"
            ) from None
