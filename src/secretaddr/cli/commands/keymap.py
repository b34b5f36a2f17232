"""Keymap command - show well-known keys mapped by a secret address."""

import sys

import click

from ...addressing import FormatError, KeyMappingError, parse_address
from ...context import pass_context
from ..helpers import echo_result


@click.command()
@click.argument("url")
@click.option(
    "--uri", "is_uri", is_flag=True, help="URL is a bare URI starting with '/'"
)
@pass_context
def keymap(ctx, url, is_uri):
    """Show the keymap of a secret URL as key in secret -> well-known key.

    Examples:
        secretaddr keymap "secret://k8s/tls?keymap=certificate:tls.crt&keymap=private_key:tls.key"
    """
    try:
        mapping = parse_address(url, is_uri=is_uri).well_known_key_map()
    except FormatError as e:
        click.echo(f"Error: Invalid secret address: {e}", err=True)
        sys.exit(1)
    except KeyMappingError as e:
        click.echo(f"Error: Invalid keymap: {e}", err=True)
        sys.exit(1)

    echo_result(
        {secret_key: role.name for secret_key, role in mapping.items()},
        ctx.output_format,
    )
