# SPDX-License-Identifier: MIT
"""List and select installed versions."""

from __future__ import annotations

from typing import NoReturn

import click

from gowrap_semver import InvalidVersionError, latest_version

from ..config import ConfigError, GowrapConfig
from ..main import Context, echo_error, echo_info, echo_verbose, pass_context
from ..versions import current_version, installed_versions, print_sorted_versions


def _fail(message: str) -> NoReturn:
    echo_error(message)
    raise SystemExit(1)


def _load_config(ctx: Context) -> GowrapConfig:
    try:
        config = ctx.load_config()
    except ConfigError as e:
        _fail(str(e))
    echo_verbose(ctx, f"Versions directory: {config.versions_dir}")
    return config


def _installed(ctx: Context) -> list[str]:
    config = _load_config(ctx)
    try:
        return installed_versions(config)
    except OSError as e:
        _fail(f"Cannot read versions directory {config.versions_dir}: {e}")


@click.group()
def versions() -> None:
    """List and select installed versions."""


@versions.command("list")
@pass_context
def list_versions(ctx: Context) -> None:
    """Print installed versions, oldest first.

    Every directory under the versions directory must be named after a valid
    version (MAJOR[.MINOR[.PATCH]]); otherwise nothing is printed and the
    command fails.
    """
    found = _installed(ctx)
    if not found:
        echo_verbose(ctx, "No versions installed")
        return

    try:
        print_sorted_versions(found, echo_info)
    except InvalidVersionError as e:
        _fail(str(e))


@versions.command("latest")
@pass_context
def latest(ctx: Context) -> None:
    """Print the newest installed version."""
    found = _installed(ctx)

    try:
        newest = latest_version(found)
    except InvalidVersionError as e:
        _fail(str(e))

    if newest is None:
        _fail("No versions installed")
    echo_info(newest)


@versions.command("current")
@pass_context
def current(ctx: Context) -> None:
    """Print the version in use.

    This is ``default_version`` from config.toml when set, otherwise the
    newest installed version.
    """
    config = _load_config(ctx)

    try:
        selected = current_version(config)
    except (InvalidVersionError, FileNotFoundError) as e:
        _fail(str(e))
    except OSError as e:
        _fail(f"Cannot read versions directory {config.versions_dir}: {e}")

    if selected is None:
        _fail("No versions installed")
    echo_info(selected)


@versions.command("sort")
@click.argument("candidates", nargs=-1, required=True)
def sort_command(candidates: tuple[str, ...]) -> None:
    """Print the given versions, oldest first.

    \b
    Examples:
        gowrap versions sort 2 1.20.1 1.3 1.20.4 1.19.1
    """
    try:
        print_sorted_versions(list(candidates), echo_info)
    except InvalidVersionError as e:
        _fail(str(e))
