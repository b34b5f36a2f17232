"""Format command - build the canonical URI of a secret."""

import sys

import click

from ...addressing import FormatError, format_uri_and_key_and_params, parse_address
from ...context import pass_context
from ..helpers import address_to_dict, echo_result


@click.command("format")
@click.argument("uri")
@click.option("--key", "-k", help="Key within the secret")
@click.option("--renewable", is_flag=True, help="Append renewable=true")
@click.option(
    "--reload-on-change", is_flag=True, help="Append reloadOnChange=true"
)
@pass_context
def format_cmd(ctx, uri, key, renewable, reload_on_change):
    """Format URI, key and flags as a bare secret URI.

    The result is parsed back to make sure it is a valid address.

    Examples:
        secretaddr format /vault/db/creds --key password --renewable
    """
    formatted = format_uri_and_key_and_params(uri, key, renewable, reload_on_change)
    try:
        address = parse_address(formatted, is_uri=True)
    except FormatError as e:
        click.echo(f"Error: Invalid secret address: {e}", err=True)
        sys.exit(1)

    echo_result({"uri": formatted, **address_to_dict(address)}, ctx.output_format)
