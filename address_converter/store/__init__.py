"""Address repositories."""

from address_converter.store.base import AddressRepository
from address_converter.store.json_file import JsonAddressRepository
from address_converter.store.memory import InMemoryAddressRepository

__all__ = ["AddressRepository", "InMemoryAddressRepository", "JsonAddressRepository"]
