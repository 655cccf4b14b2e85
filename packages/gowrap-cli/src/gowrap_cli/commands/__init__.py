# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import versions

__all__ = ["versions"]
