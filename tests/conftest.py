"""Pytest configuration and shared fixtures."""

import pytest
from click.testing import CliRunner

from secretaddr.cli import cli
from secretaddr.context import FORMAT_ENV_VAR


@pytest.fixture(autouse=True)
def clear_format_env(monkeypatch):
    """Make sure $SECRETADDR_FORMAT from the developer shell does not leak into tests."""
    monkeypatch.delenv(FORMAT_ENV_VAR, raising=False)


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args.

    Usage:
        result = invoke(["parse", "secret://vault/db:password"])
        result = invoke(["--format", "text", "keymap", url], env={...})
    """

    def _invoke(args, env=None):
        return cli_runner.invoke(cli, args, env=env)

    return _invoke
