# SPDX-License-Identifier: MIT
"""CLI configuration loading from the gowrap home directory."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from gowrap_semver import is_valid_semver


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


HOME_ENV_VAR = "GOWRAP_HOME"
CONFIG_FILENAME = "config.toml"
DEFAULT_VERSIONS_DIR = "versions"


@dataclass
class GowrapConfig:
    """CLI configuration for a gowrap home directory.

    Attributes:
        home: The gowrap home directory
        versions_dir_name: Directory under home holding one subdirectory per installed version
        default_version: Version to use when none is requested (may be empty)
    """

    home: Path
    versions_dir_name: str = DEFAULT_VERSIONS_DIR
    default_version: str = ""

    @property
    def versions_dir(self) -> Path:
        """Return the directory holding installed versions."""
        return self.home / self.versions_dir_name

    @classmethod
    def from_home(cls, home: str | Path) -> "GowrapConfig":
        """Load configuration from ``<home>/config.toml``.

        A missing config file yields the defaults.

        Args:
            home: The gowrap home directory

        Returns:
            GowrapConfig instance

        Raises:
            ConfigError: If the file is invalid or holds invalid values
        """
        home_path = Path(home)
        config_path = home_path / CONFIG_FILENAME

        if not config_path.exists():
            return cls(home=home_path)

        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax in {config_path}: {e}") from e

        return cls.from_dict(data, home_path)

    @classmethod
    def from_dict(cls, data: dict[str, Any], home: Path) -> "GowrapConfig":
        """Create GowrapConfig from a parsed config.toml dictionary.

        Args:
            data: Parsed config.toml as a dictionary
            home: The gowrap home directory

        Returns:
            GowrapConfig instance

        Raises:
            ConfigError: If a value has the wrong type or is invalid
        """
        section = data.get("gowrap", {})
        if not isinstance(section, dict):
            raise ConfigError("[gowrap] must be a table")

        versions_dir_name = section.get("versions_dir", DEFAULT_VERSIONS_DIR)
        if not isinstance(versions_dir_name, str) or not versions_dir_name.strip():
            raise ConfigError("gowrap.versions_dir must be a non-empty string")
        if PurePath(versions_dir_name).is_absolute() or ".." in PurePath(versions_dir_name).parts:
            raise ConfigError(
                f"gowrap.versions_dir must be a path inside the gowrap home: {versions_dir_name}"
            )

        default_version = section.get("default_version", "")
        if not isinstance(default_version, str):
            raise ConfigError("gowrap.default_version must be a string")
        if default_version and not is_valid_semver(default_version):
            raise ConfigError(
                f"gowrap.default_version is not a valid version: {default_version}"
            )

        return cls(
            home=home,
            versions_dir_name=versions_dir_name,
            default_version=default_version,
        )


def default_home() -> Path:
    """Return the gowrap home from the environment, or ``~/.gowrap``."""
    env_home = os.environ.get(HOME_ENV_VAR, "").strip()
    if env_home:
        return Path(env_home).expanduser()
    return Path.home() / ".gowrap"


def load_config(home: Optional[str | Path] = None) -> GowrapConfig:
    """Load CLI configuration for the gowrap home directory.

    Args:
        home: gowrap home directory (defaults to GOWRAP_HOME or ~/.gowrap)

    Returns:
        GowrapConfig instance

    Raises:
        ConfigError: If configuration cannot be loaded
    """
    if home is None:
        home = default_home()

    home_path = Path(home)
    if home_path.exists() and not home_path.is_dir():
        raise ConfigError(f"gowrap home is not a directory: {home_path}")

    return GowrapConfig.from_home(home_path)
