#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Runtime settings for the night report parsers.
Loaded from the environment (and a local .env, if present).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import date
from typing import Optional

from dotenv import load_dotenv

from report_exceptions import ConfigError

_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_TRUTHY = ("1", "true", "yes", "on")
_FALSY = ("0", "false", "no", "off", "")


def _parse_bool(name: str, raw: Optional[str]) -> bool:
    value = (raw or "").strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ConfigError(f"{name} must be a boolean, got {raw!r}")


def _parse_reference_date(raw: Optional[str]) -> Optional[date]:
    if not raw or not raw.strip():
        return None
    try:
        return date.fromisoformat(raw.strip())
    except ValueError as exc:
        raise ConfigError(
            f"NIGHTREPORT_REFERENCE_DATE must be YYYY-MM-DD, got {raw!r}"
        ) from exc


@dataclass
class ParserSettings:
    """Centralised configuration for parser runs."""

    log_level: str = "INFO"
    verbose: bool = False
    # Year fallback for date headers without a year; None means today
    reference_date: Optional[date] = None

    def __post_init__(self):
        self.log_level = (self.log_level or "INFO").strip().upper()
        if self.log_level not in _VALID_LOG_LEVELS:
            raise ConfigError(
                f"Unknown log level {self.log_level!r}; "
                f"expected one of {', '.join(_VALID_LOG_LEVELS)}"
            )

    # -----------------------------------------------------------------------
    # ENVIRONMENT LOADERS
    # -----------------------------------------------------------------------

    @classmethod
    def from_env(cls, load_dotenv_file: bool = True) -> "ParserSettings":
        if load_dotenv_file:
            load_dotenv()
        return cls(
            log_level=os.getenv("NIGHTREPORT_LOG_LEVEL", "INFO"),
            verbose=_parse_bool(
                "NIGHTREPORT_VERBOSE", os.getenv("NIGHTREPORT_VERBOSE")),
            reference_date=_parse_reference_date(
                os.getenv("NIGHTREPORT_REFERENCE_DATE")),
        )


def configure_logging(settings: ParserSettings) -> None:
    level = "DEBUG" if settings.verbose else settings.log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler()],
    )


__all__ = [
    "ParserSettings",
    "configure_logging",
]
