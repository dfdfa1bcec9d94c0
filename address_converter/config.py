"""Configuration management for address-converter."""

from dataclasses import dataclass, field
from pathlib import Path

from address_converter.exceptions import ConfigurationError
from address_converter.store.base import AddressRepository

STORAGE_BACKENDS = ("json", "memory")


@dataclass
class StorageConfig:
    """Address storage configuration."""

    backend: str = "json"
    directory: Path = field(default_factory=lambda: Path("json_storage"))

    def __post_init__(self) -> None:
        if self.backend not in STORAGE_BACKENDS:
            raise ConfigurationError(
                f"Unknown storage backend '{self.backend}' (expected one of {', '.join(STORAGE_BACKENDS)})"
            )
        self.directory = Path(self.directory)

    def build_repository(self, pretty: bool = False) -> AddressRepository:
        """Create the repository this configuration describes."""
        from address_converter.store import InMemoryAddressRepository, JsonAddressRepository

        if self.backend == "memory":
            return InMemoryAddressRepository()
        return JsonAddressRepository(self.directory, pretty=pretty)


@dataclass
class OutputConfig:
    """Output configuration."""

    pretty_json: bool = True


@dataclass
class ConverterConfig:
    """Main configuration for address-converter."""

    storage: StorageConfig = field(default_factory=StorageConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    log_level: str = "INFO"
    log_format: str = "standard"
    seed: int | None = None

    @classmethod
    def from_env(cls) -> "ConverterConfig":
        """Create config from environment variables."""
        import os

        storage = StorageConfig(
            backend=os.getenv("STORAGE_BACKEND", "json").lower(),
            directory=Path(os.getenv("STORAGE_DIR", "./json_storage")),
        )

        output = OutputConfig(
            pretty_json=os.getenv("PRETTY_JSON", "true").lower() == "true",
        )

        seed_str = os.getenv("SEED")
        try:
            seed = int(seed_str) if seed_str else None
        except ValueError:
            raise ConfigurationError(f"SEED must be an integer, got '{seed_str}'") from None

        return cls(
            storage=storage,
            output=output,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
            seed=seed,
        )
