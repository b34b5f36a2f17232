"""Parse command - show the parts of a secret address."""

import sys

import click

from ...addressing import FormatError, parse_address
from ...context import pass_context
from ..helpers import address_to_dict, echo_result


@click.command()
@click.argument("url")
@click.option(
    "--uri", "is_uri", is_flag=True, help="URL is a bare URI starting with '/'"
)
@pass_context
def parse(ctx, url, is_uri):
    """Parse a secret URL into provider, path, key and query.

    Examples:
        secretaddr parse secret://vault/db/creds:password
        secretaddr parse "secret://k8s/tls?watch&keymap=certificate:tls.crt"
        secretaddr parse --uri /vault/db/creds:password
    """
    try:
        address = parse_address(url, is_uri=is_uri)
    except FormatError as e:
        click.echo(f"Error: Invalid secret address: {e}", err=True)
        sys.exit(1)

    echo_result(address_to_dict(address), ctx.output_format)
