#!/usr/bin/env python3
"""BPM contracts CLI - inspect contracts and validate JSON payloads.

Usage:
    # List every contract
    python main.py list

    # Show the default JSON and the declared rules of a contract
    python main.py defaults ProcessCreateVm
    python main.py rules UserCreateVm

    # Validate a JSON payload (use - to read stdin)
    python main.py validate ProcessCreateVm ./payload.json
"""

import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from config import settings
from contracts import CONTRACTS, InputContract, get_contract
from serialization import SerializationError, from_json, to_json
from validation import rule_registry, validate


console = Console()


def _resolve(name: str):
    try:
        return get_contract(name)
    except KeyError:
        raise click.BadParameter(
            f"'{name}'. Run 'list' to see the available contracts.",
            param_hint="NAME",
        )


@click.group()
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Verbose output (debug logging)"
)
def main(verbose: bool):
    """BPM Contracts: records, view models, validation and JSON codec."""
    logging.basicConfig(
        level="DEBUG" if verbose else settings.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


@main.command("list")
def list_contracts():
    """List registered contracts and their kind."""
    table = Table(title="Contracts")
    table.add_column("Name")
    table.add_column("Kind")
    for name, cls in CONTRACTS.items():
        kind = "input" if issubclass(cls, InputContract) else "record"
        table.add_row(name, kind)
    console.print(table)


@main.command()
@click.argument("name")
def defaults(name: str):
    """Print the JSON of a default-constructed contract."""
    cls = _resolve(name)
    click.echo(to_json(cls(), indent=2))


@main.command()
@click.argument("name")
def rules(name: str):
    """Print the validation rules declared on a contract."""
    cls = _resolve(name)
    registry = rule_registry(cls)
    if not registry:
        console.print(f"[dim]{name} declares no rules.[/dim]")
        return

    table = Table(title=f"{name} rules")
    table.add_column("Field")
    table.add_column("Rule")
    table.add_column("Message")
    for field_name, field_rules in registry.items():
        for rule in field_rules:
            table.add_row(field_name, rule.kind.value, rule.format_message(field_name))
    console.print(table)


@main.command("validate")
@click.argument("name")
@click.argument("payload", type=click.File("rb"))
def validate_payload(name: str, payload):
    """Decode PAYLOAD as NAME and run its validation rules."""
    cls = _resolve(name)

    try:
        instance = from_json(cls, payload.read())
    except SerializationError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)

    failures = validate(instance)
    if not failures:
        console.print(f"[green]✓ {name} is valid[/green]")
        return

    console.print(f"[red]✗ {name}: {len(failures)} failure(s)[/red]")
    for failure in failures:
        console.print(f"  - {', '.join(failure.member_names)}: {escape(failure.message)}")
    sys.exit(1)


if __name__ == "__main__":
    main()
