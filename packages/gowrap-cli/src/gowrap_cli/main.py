# SPDX-License-Identifier: MIT
"""CLI entry point for gowrap command."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click

from gowrap_semver import InvalidVersionError

from .config import HOME_ENV_VAR, ConfigError, GowrapConfig, load_config


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[GowrapConfig] = None
        self.verbose: bool = False
        self.home: Optional[Path] = None

    def load_config(self) -> GowrapConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.home)
        return self.config


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_verbose(ctx: Context, message: str) -> None:
    """Print a diagnostic message to stderr when --verbose is set."""
    if ctx.verbose:
        click.secho(message, dim=True, err=True)


@click.group()
@click.version_option(package_name="gowrap-tools")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "--home",
    type=click.Path(file_okay=False, path_type=Path),
    envvar=HOME_ENV_VAR,
    help=f"gowrap home directory (default: ${HOME_ENV_VAR} or ~/.gowrap).",
)
@pass_context
def cli(ctx: Context, verbose: bool, home: Optional[Path]) -> None:
    """Manage locally installed toolchain versions.

    \b
    Examples:
        gowrap versions list
        gowrap versions latest
        gowrap versions current
        gowrap versions sort 2 1.20.1 1.3
    """
    ctx.verbose = verbose
    ctx.home = home


# Import and register commands
from .commands import versions

cli.add_command(versions.versions)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except (ConfigError, InvalidVersionError, FileNotFoundError) as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
