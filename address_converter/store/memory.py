"""In-memory address store."""

from dataclasses import dataclass, field

from address_converter.exceptions import AddressAlreadyExistsError, AddressNotFoundError
from address_converter.models.address import Address
from address_converter.store.base import AddressRepository


@dataclass
class InMemoryAddressRepository(AddressRepository):
    """Address store backed by a dict, lost when the process exits."""

    addresses: dict[str, Address] = field(default_factory=dict)

    def save(self, address: Address) -> str:
        if address.id in self.addresses:
            raise AddressAlreadyExistsError(address.id)
        self.addresses[address.id] = address
        return address.id

    def fetch(self, address_id: str) -> Address:
        try:
            return self.addresses[address_id]
        except KeyError:
            raise AddressNotFoundError(address_id) from None

    def update(self, address: Address) -> None:
        if address.id not in self.addresses:
            raise AddressNotFoundError(address.id)
        self.addresses[address.id] = address

    def delete(self, address_id: str) -> None:
        if address_id not in self.addresses:
            raise AddressNotFoundError(address_id)
        del self.addresses[address_id]

    def __len__(self) -> int:
        return len(self.addresses)
