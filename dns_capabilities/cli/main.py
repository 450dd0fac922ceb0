#!/usr/bin/env python3
"""
DNS Provider Capabilities - Command Line Interface

Query which capabilities each registered DNS provider supports.
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from ..core.registry import ProviderRegistry
from ..utils.config import build_registry, config_logger, load_config
from ..utils.validators import parse_capability

console = Console()
logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="DNS Provider Capabilities - Query provider capability registry"
    )

    parser.add_argument(
        "--config",
        "-c",
        default="configs/config.yaml",
        help="Configuration file path (default: configs/config.yaml)",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    check_parser = subparsers.add_parser(
        "check", help="Check whether a provider supports a capability"
    )
    check_parser.add_argument("provider", help="Provider id, e.g. BIND")
    check_parser.add_argument("capability", help="Capability name, e.g. can_use_ptr")

    list_parser = subparsers.add_parser(
        "list", help="List providers, or the capabilities of one provider"
    )
    list_parser.add_argument("provider", nargs="?", help="Provider id")

    args = parser.parse_args(argv)

    config = load_config(args.config)
    config_logger(config, verbose=args.verbose)

    try:
        registry = build_registry(config)

        if args.command == "check":
            supported = check_capability(registry, args.provider, args.capability)
            sys.exit(0 if supported else 1)

        if args.provider:
            show_provider(registry, args.provider)
        else:
            show_providers(registry)
        sys.exit(0)

    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        if args.verbose:
            import traceback

            traceback.print_exc()
        sys.exit(2)


def check_capability(registry: ProviderRegistry, provider_id: str, name: str) -> bool:
    """Print and return whether the provider supports the named capability."""
    capability = parse_capability(name)
    has_capability = registry.has_capability(provider_id, capability)

    if has_capability:
        console.print(f"[green]{provider_id} supports {capability.label}[/green]")
    else:
        console.print(f"[yellow]{provider_id} does not support {capability.label}[/yellow]")

    return has_capability


def show_providers(registry: ProviderRegistry):
    """Display every registered provider with its declared capabilities."""
    table = Table(title="Registered Providers")
    table.add_column("Provider", style="cyan")
    table.add_column("Capabilities", style="white")

    for provider_id in registry.providers():
        capabilities = sorted(registry.capabilities_for(provider_id), key=lambda c: c.value)
        table.add_row(provider_id, ", ".join(c.label for c in capabilities))

    console.print(table)


def show_provider(registry: ProviderRegistry, provider_id: str):
    """Display one provider's capabilities alongside its documentation notes."""
    if provider_id not in registry.providers():
        console.print(f"[yellow]Provider '{provider_id}' is not registered[/yellow]")
        return

    notes = registry.notes_for(provider_id)
    table = Table(title=f"{provider_id} Capabilities")
    table.add_column("Capability", style="cyan")
    table.add_column("Declared", style="magenta")
    table.add_column("Note", style="white")
    table.add_column("Link", style="blue")

    capabilities = registry.capabilities_for(provider_id) | set(notes)
    for capability in sorted(capabilities, key=lambda c: c.value):
        note = notes.get(capability)
        declared = "yes" if registry.has_capability(provider_id, capability) else "no"
        if note is None:
            table.add_row(capability.label, declared, "", "")
            continue

        status = "[green]supported[/green]" if note.has_feature else "[red]unsupported[/red]"
        comment = f"{status} {note.comment}".strip()
        table.add_row(capability.label, declared, comment, note.link)

    console.print(table)


if __name__ == "__main__":
    main()
