"""Extraction of structured fields from French address lines.

Each rule handles one kind of NF Z10-011 line. Distribution lines mix a
postbox token and a secondary locality without any delimiter, so they are
split positionally: the postbox token, when present, always comes first.
"""

from __future__ import annotations

import re

from address_converter.exceptions import InvalidFormatError
from address_converter.models.address import PostalDetails, Street

# "25 RUE DE L'EGLISE", "2BIS AVENUE FOCH", "LE VILLAGE"
STREET_PATTERN = re.compile(r"(?:(?P<number>[0-9]+[A-Za-z]*)(?:[ \t]+|\Z))?(?P<name>[^\r\n]*)")

# "33380 MIOS", "34092 MONTPELLIER CEDEX 5"
POSTAL_PATTERN = re.compile(r"(?P<postcode>[0-9]{5}) (?P<town>\S(?:[^\r\n]*\S)?)")

# "BP 90432", "CS 1234"
POSTBOX_PATTERN = re.compile(r"^[A-Z]{2}[ \t]+[0-9]+")

POSTAL_GUIDANCE = "expected '<5-digit postcode> <town>', e.g. '33380 MIOS'"


def _require_text(text: str | None, label: str) -> str:
    stripped = (text or "").strip()
    if not stripped:
        raise InvalidFormatError(f"{label} line is empty")
    return stripped


def parse_street(line: str) -> Street:
    """Split a street line into an optional number and a street name.

    Parameters
    ----------
    line : str
        Street line such as ``"25 RUE DE L'EGLISE"`` or ``"LE VILLAGE"``.

    Returns
    -------
    Street
        Parsed street. ``number`` keeps letter suffixes (``"2BIS"``).

    Raises
    ------
    InvalidFormatError
        If the line is empty, spans several lines or has nothing left
        after the number.
    """
    text = _require_text(line, "street")
    match = STREET_PATTERN.fullmatch(text)
    if match is None:
        raise InvalidFormatError(f"street line '{text}' spans several lines")
    name = match.group("name").strip()
    if not name:
        raise InvalidFormatError(f"street line '{text}' has no street name")
    return Street(name=name, number=match.group("number"))


def parse_postal(line: str) -> PostalDetails:
    """Parse a ``"<postcode> <town>"`` line.

    The whole line must match: surrounding blanks, line breaks and
    non-ASCII digits are rejected rather than trimmed away.

    Raises
    ------
    InvalidFormatError
        If the line is not a 5-digit postcode, a space and a town.
    """
    text = line or ""
    match = POSTAL_PATTERN.fullmatch(text)
    if match is None:
        raise InvalidFormatError(f"postal line '{text}': {POSTAL_GUIDANCE}")
    return PostalDetails(postcode=match.group("postcode"), town=match.group("town"))


def parse_postbox(text: str) -> str | None:
    """Return the leading postbox token of a distribution line, if any."""
    text = _require_text(text, "distribution info")
    match = POSTBOX_PATTERN.match(text)
    if match is None:
        return None
    return match.group(0)


def parse_town_location(text: str) -> str | None:
    """Return what follows the optional leading postbox token, if anything."""
    text = _require_text(text, "distribution info")
    remainder = POSTBOX_PATTERN.sub("", text, count=1).strip()
    return remainder or None
