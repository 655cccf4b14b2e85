# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Generator

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_home_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a GOWRAP_HOME from the developer's shell out of the tests."""
    monkeypatch.delenv("GOWRAP_HOME", raising=False)


@pytest.fixture
def gowrap_home(tmp_path: Path) -> Generator[Path, None, None]:
    """Create an empty gowrap home directory."""
    home = tmp_path / "gowrap_home"
    home.mkdir()
    yield home


@pytest.fixture
def install_versions(gowrap_home: Path) -> Callable[..., Path]:
    """Return a helper that creates version directories under the home."""

    def _install(*names: str, versions_dir: str = "versions") -> Path:
        root = gowrap_home / versions_dir
        root.mkdir(parents=True, exist_ok=True)
        for name in names:
            (root / name).mkdir()
        return root

    return _install
