"""
Command-line entry points.
"""

from __future__ import annotations

from .parse_text import main, parse_args

__all__ = ["main", "parse_args"]
