# SPDX-License-Identifier: MIT
"""Command line tool for managing locally installed toolchain versions."""

__version__ = "0.1.0"
