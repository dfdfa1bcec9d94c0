"""Sample address generators."""

from address_converter.generators.address import AddressFactory

__all__ = ["AddressFactory"]
