"""Storage contract for canonical addresses."""

from abc import ABC, abstractmethod

from address_converter.models.address import Address


class AddressRepository(ABC):
    """Keyed storage of canonical addresses.

    Implementations raise ``AddressAlreadyExistsError`` when saving a known
    id and ``AddressNotFoundError`` when fetching, updating or deleting an
    unknown one.
    """

    @abstractmethod
    def save(self, address: Address) -> str:
        """Store a new address and return its id."""

    @abstractmethod
    def fetch(self, address_id: str) -> Address:
        """Return the stored address."""

    @abstractmethod
    def update(self, address: Address) -> None:
        """Replace the stored address that has the same id."""

    @abstractmethod
    def delete(self, address_id: str) -> None:
        """Remove the stored address."""
