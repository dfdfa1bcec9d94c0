"""Command-line front-end: convert and manage postal addresses.

Examples::

    address-converter save --address '{"name": "Monsieur Jean DELHOURME", ...}' --from-format french
    address-converter fetch 3f0c... --format iso20022
    address-converter convert --address '{"french_address": {...}}' --to-format iso20022
    address-converter generate --count 5 --kind business --format french --seed 42
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from address_converter.config import ConverterConfig, StorageConfig
from address_converter.exceptions import AddressConverterError
from address_converter.generators.address import AddressFactory
from address_converter.logging import setup_logging
from address_converter.models.enums import AddressFormat, AddressKind
from address_converter.serialization import to_dict
from address_converter.service import AddressService, encode_address

logger = logging.getLogger(__name__)

FORMAT_CHOICES = [fmt.value for fmt in AddressFormat]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all subcommands."""
    parser = argparse.ArgumentParser(
        prog="address-converter",
        description="Convert and manage postal addresses (french/iso20022)",
    )
    parser.add_argument(
        "--storage-dir",
        type=Path,
        default=None,
        help="Directory of the JSON address store (default: $STORAGE_DIR or ./json_storage)",
    )
    parser.add_argument(
        "--in-memory",
        action="store_true",
        help="Keep addresses in memory only (nothing is written to disk)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (default: $LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        default=None,
        help="Log format (default: $LOG_FORMAT or standard)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    save = subparsers.add_parser("save", help="Save a new address")
    save.add_argument("--address", required=True, help="JSON-formatted address string")
    save.add_argument("--from-format", required=True, choices=FORMAT_CHOICES, type=str.lower, help="Input format")

    update = subparsers.add_parser("update", help="Update an existing address")
    update.add_argument("id", help="UUID of the address to update")
    update.add_argument("--address", required=True, help="JSON-formatted address string")
    update.add_argument("--from-format", required=True, choices=FORMAT_CHOICES, type=str.lower, help="Input format")

    delete = subparsers.add_parser("delete", help="Delete an address")
    delete.add_argument("id", help="UUID of the address to delete")

    fetch = subparsers.add_parser("fetch", help="Fetch an address in the requested format")
    fetch.add_argument("id", help="UUID of the address to fetch")
    fetch.add_argument("--format", required=True, choices=FORMAT_CHOICES, type=str.lower, help="Output format")

    convert = subparsers.add_parser("convert", help="Convert an address without storing it")
    convert.add_argument("--address", required=True, help="JSON-formatted address string")
    convert.add_argument(
        "--from-format",
        choices=FORMAT_CHOICES,
        type=str.lower,
        default=None,
        help="Input format (omit to read a french_address/iso_address envelope)",
    )
    convert.add_argument("--to-format", required=True, choices=FORMAT_CHOICES, type=str.lower, help="Output format")
    convert.add_argument("--save", action="store_true", help="Also store the address once converted")

    generate = subparsers.add_parser("generate", help="Generate sample addresses")
    generate.add_argument("--count", type=int, default=1, help="Number of addresses (default: 1)")
    generate.add_argument("--kind", choices=["individual", "business"], default=None, help="Address kind")
    generate.add_argument("--format", choices=FORMAT_CHOICES, type=str.lower, default="french", help="Output format")
    generate.add_argument("--seed", type=int, default=None, help="Random seed (default: $SEED)")
    generate.add_argument("--save", action="store_true", help="Also store the generated addresses")

    return parser


def dump_json(obj: Any, pretty: bool = True) -> str:
    """Render a dataclass (or list of them) as JSON text."""
    if isinstance(obj, list):
        data: Any = [to_dict(item) for item in obj]
    else:
        data = to_dict(obj)
    if pretty:
        return json.dumps(data, indent=2, ensure_ascii=False)
    return json.dumps(data, ensure_ascii=False)


def run_command(args: argparse.Namespace, service: AddressService, config: ConverterConfig) -> None:
    """Execute one parsed command, raising on any failure."""
    pretty = config.output.pretty_json

    if args.command == "save":
        address_id = service.save(args.address, AddressFormat.parse(args.from_format))
        print(f"Saved address with ID: {address_id}")

    elif args.command == "update":
        service.update(args.id, args.address, AddressFormat.parse(args.from_format))
        print(f"Updated address with ID: {args.id}")

    elif args.command == "delete":
        service.delete(args.id)
        print(f"Deleted address with ID: {args.id}")

    elif args.command == "fetch":
        converted = service.fetch_format(args.id, AddressFormat.parse(args.format))
        print(dump_json(converted, pretty))

    elif args.command == "convert":
        source = AddressFormat.parse(args.from_format) if args.from_format else None
        converted = service.convert(args.address, AddressFormat.parse(args.to_format), source=source, save=args.save)
        print(dump_json(converted, pretty))

    elif args.command == "generate":
        seed = args.seed if args.seed is not None else config.seed
        factory = AddressFactory(seed=seed)
        kind = AddressKind(args.kind.upper()) if args.kind else None
        fmt = AddressFormat.parse(args.format)

        converted = []
        for _ in range(args.count):
            address = factory.generate(kind)
            converted.append(encode_address(address, fmt))
            if args.save:
                service.save_address(address)
        logger.info("Generated %d sample addresses", args.count)
        print(dump_json(converted, pretty))


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = ConverterConfig.from_env()
        if args.in_memory:
            config.storage = StorageConfig(backend="memory")
        elif args.storage_dir is not None:
            config.storage = StorageConfig(backend="json", directory=args.storage_dir)
        if args.log_level:
            config.log_level = args.log_level
        if args.log_format:
            config.log_format = args.log_format

        setup_logging(config.log_level, config.log_format)
        service = AddressService(config.storage.build_repository(pretty=config.output.pretty_json))
        run_command(args, service, config)
    except AddressConverterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
