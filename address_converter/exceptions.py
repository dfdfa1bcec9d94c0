"""Custom exception hierarchy for address-converter."""


class AddressConverterError(Exception):
    """Base exception for all address-converter errors."""


class AddressConversionError(AddressConverterError):
    """Raised when an address cannot be converted between representations."""


class MissingFieldError(AddressConversionError):
    """Raised when a semantically required field is empty or absent."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Missing required field: {field}")


class InvalidFormatError(AddressConversionError):
    """Raised when text does not match the expected grammar."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Invalid format: {message}")


class RepositoryError(AddressConverterError):
    """Raised when a storage operation fails."""


class AddressNotFoundError(RepositoryError):
    """Raised when a referenced address does not exist."""

    def __init__(self, address_id: str) -> None:
        self.address_id = address_id
        super().__init__(f"Address not found: {address_id}")


class AddressAlreadyExistsError(RepositoryError):
    """Raised when saving an address whose id is already stored."""

    def __init__(self, address_id: str) -> None:
        self.address_id = address_id
        super().__init__(f"Resource already exists: {address_id}")


class StorageError(RepositoryError):
    """Raised when stored data cannot be read or written."""


class ConfigurationError(AddressConverterError):
    """Raised when configuration is invalid or missing."""
