"""
Contract Registry CLI - print and check contract lists.

Usage:
    contract-registry list [--format table|json|yaml] [--file PATH]
    contract-registry show NAME [--file PATH]
    contract-registry check [--file PATH]
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

import yaml
from pydantic import ValidationError

from contract_registry.config import RegistryConfig, load_registry
from contract_registry.contracts import dump_registry
from contract_registry.registry import ContractRegistry, ContractRegistryError


logger = logging.getLogger(__name__)


def format_table(registry: ContractRegistry) -> str:
    """Render a registry as a fixed-width text table."""
    headers = ("NAME", "ADDRESS", "LINK")
    rows = [
        (entry.name, entry.address or "-", entry.link or "-")
        for entry in registry
    ]
    widths = [
        max(len(row[i]) for row in [headers] + rows)
        for i in range(len(headers))
    ]

    lines = []
    for row in [headers] + rows:
        lines.append("  ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip())
    return "\n".join(lines)


def _resolve(args: argparse.Namespace, force_validate: bool = False) -> ContractRegistry:
    config = RegistryConfig.from_env()
    if args.file:
        config.source_file = args.file
    if force_validate:
        config.validate_on_load = True
    return load_registry(config)


def _report_failure(e: Exception) -> int:
    logger.warning(f"Registry load failed: {e}")
    print(f" {e}", file=sys.stderr)
    errors = getattr(e, "errors", [])
    if isinstance(errors, list):
        for error in errors:
            print(f"   - {error}", file=sys.stderr)
    return 1


def cmd_list(args: argparse.Namespace) -> int:
    registry = _resolve(args)

    if args.format == "json":
        print(json.dumps(registry.to_list(), indent=2))
    elif args.format == "yaml":
        print(dump_registry(registry), end="")
    else:
        print(format_table(registry))
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    registry = _resolve(args)

    entry = registry.get(args.name)
    if entry is None:
        print(f" Unknown contract: {args.name}", file=sys.stderr)
        print(f" Known contracts: {', '.join(registry.names())}", file=sys.stderr)
        return 1

    print(json.dumps(entry.to_dict(), indent=2))
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    registry = _resolve(args, force_validate=True)
    print(f"OK ({len(registry)} contracts)")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="contract-registry",
        description="Inspect the contract address registry",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (defaults to CONTRACT_REGISTRY_LOG_LEVEL or WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="Print all contracts")
    list_parser.add_argument(
        "--format",
        choices=["table", "json", "yaml"],
        default="table",
        help="Output format",
    )
    list_parser.add_argument("--file", help="Registry YAML file to read")
    list_parser.set_defaults(func=cmd_list)

    show_parser = subparsers.add_parser("show", help="Print one contract by name")
    show_parser.add_argument("name", help="Contract display name")
    show_parser.add_argument("--file", help="Registry YAML file to read")
    show_parser.set_defaults(func=cmd_show)

    check_parser = subparsers.add_parser("check", help="Load and validate a registry")
    check_parser.add_argument("--file", help="Registry YAML file to read")
    check_parser.set_defaults(func=cmd_check)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = args.log_level or RegistryConfig.from_env().log_level
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        return args.func(args)
    except (
        ContractRegistryError,
        ValidationError,
        OSError,
        UnicodeDecodeError,
        yaml.YAMLError,
    ) as e:
        return _report_failure(e)


if __name__ == "__main__":
    sys.exit(main())
