"""Shared helpers for CLI commands."""

import json
from typing import Any, Dict

import click

from ..addressing import Address


def address_to_dict(address: Address) -> Dict[str, Any]:
    return {
        "provider": address.provider,
        "path": address.path,
        "key": address.key,
        "query": {name: list(values) for name, values in address.query.items()},
        "is_uri": address.is_uri,
        "watchable": address.is_watchable(),
    }


def echo_result(result: Dict[str, Any], output_format: str) -> None:
    """Print a result as JSON or as one "name: value" line per entry."""
    if output_format == "json":
        click.echo(json.dumps(result, indent=2))
        return
    for name, value in result.items():
        if isinstance(value, dict):
            click.echo(f"{name}:")
            for sub_name, sub_value in value.items():
                click.echo(f"  {sub_name}: {_text(sub_value)}")
        else:
            click.echo(f"{name}: {_text(value)}")


def _text(value: Any) -> str:
    if value is None:
        return "-"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return ", ".join(str(v) for v in value)
    return str(value)
