# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import check, compare, show, sort

__all__ = ["check", "compare", "show", "sort"]
