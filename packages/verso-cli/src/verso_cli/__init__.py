# SPDX-License-Identifier: MIT
"""Command line interface for verso version strings."""

__version__ = "0.1.0"
