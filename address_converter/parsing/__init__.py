"""Parsers for semi-structured address text."""

from address_converter.parsing.french import parse_postal, parse_postbox, parse_street, parse_town_location

__all__ = ["parse_postal", "parse_postbox", "parse_street", "parse_town_location"]
