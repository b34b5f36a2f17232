"""CLI context for passing state between commands."""

import os
from typing import Optional

import click

OUTPUT_FORMATS = ("json", "text")
DEFAULT_OUTPUT_FORMAT = "json"
FORMAT_ENV_VAR = "SECRETADDR_FORMAT"


def resolve_output_format(format_option: Optional[str]) -> str:
    """Resolve the output format of commands.

    Resolution order:
    1. --format CLI flag
    2. $SECRETADDR_FORMAT environment variable
    3. json

    Raises:
        click.BadParameter: If the environment variable holds an unknown format
    """
    if format_option:
        return format_option

    env_format = os.environ.get(FORMAT_ENV_VAR)
    if env_format:
        env_format = env_format.strip().lower()
        if env_format not in OUTPUT_FORMATS:
            raise click.BadParameter(
                f"${FORMAT_ENV_VAR} must be one of {', '.join(OUTPUT_FORMATS)}, "
                f"got '{env_format}'"
            )
        return env_format

    return DEFAULT_OUTPUT_FORMAT


class SecretAddrContext:
    def __init__(self):
        self.output_format = DEFAULT_OUTPUT_FORMAT
        self.verbose = False


pass_context = click.make_pass_decorator(SecretAddrContext, ensure=True)
