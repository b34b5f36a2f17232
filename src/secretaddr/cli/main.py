"""secretaddr CLI main entry point with global options."""

import logging

import click

from ..context import OUTPUT_FORMATS, SecretAddrContext, resolve_output_format


@click.group()
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    help="Output format (overrides $SECRETADDR_FORMAT, default: json)",
)
@click.option("--verbose", "-v", is_flag=True, help="Log parsing details to stderr")
@click.pass_context
def cli(ctx, output_format, verbose):
    """secretaddr - parse and format secret:// addresses."""
    ctx.ensure_object(SecretAddrContext)

    ctx.obj.output_format = resolve_output_format(output_format)
    ctx.obj.verbose = verbose
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


# Register commands at module level so tests can import cli with commands attached
from .commands.format import format_cmd
from .commands.keymap import keymap
from .commands.parse import parse

cli.add_command(parse)
cli.add_command(format_cmd)
cli.add_command(keymap)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
