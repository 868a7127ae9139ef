#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Run one of the night report parsers over a text file and print JSON.

Usage:
  python cli/parse_text.py report night_report.txt
  python cli/parse_text.py weekly rts_week.txt --reference-date 2025-08-11
  pbpaste | python cli/parse_text.py defects - --diagnostics
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from datetime import date
from pathlib import Path
from typing import Any, Callable, Optional, Sequence

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from config.settings import ParserSettings, configure_logging
from nightreport import (
    DatePlanParser,
    HandoverParser,
    NightReportParser,
    ParseDiagnostics,
    TelegramDefectParser,
)
from report_exceptions import ConfigError, NightReportError, wrap_exception

logger = logging.getLogger("nightreport.cli")

KINDS = ("report", "defects", "handover", "daily", "weekly")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description=__doc__,
                                formatter_class=argparse.RawDescriptionHelpFormatter)
    p.add_argument("kind", choices=KINDS, help="Which message format to parse")
    p.add_argument("path", nargs="?", default="-",
                   help="Input text file, or '-' for stdin (default)")
    p.add_argument("--diagnostics", action="store_true",
                   help="Include skipped lines and warnings in the output")
    p.add_argument("--verbose", action="store_true",
                   help="Debug logging from the parsers")
    p.add_argument("--reference-date", default=None,
                   help="YYYY-MM-DD; year used for RTS headers without one")
    return p.parse_args(argv)


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _build_runner(
    kind: str,
    verbose: bool,
    reference_date: Optional[date],
) -> Callable[[str], tuple[Any, ParseDiagnostics]]:
    if kind == "report":
        return NightReportParser(verbose=verbose).parse_with_diagnostics
    if kind == "defects":
        return TelegramDefectParser(verbose=verbose).parse_with_diagnostics
    if kind == "handover":
        return HandoverParser(verbose=verbose).parse_with_diagnostics
    plan_parser = DatePlanParser(reference_date=reference_date, verbose=verbose)
    if kind == "daily":
        return plan_parser.parse_daily_with_diagnostics
    return plan_parser.parse_weekly_with_diagnostics


def run(args: argparse.Namespace, settings: ParserSettings) -> dict[str, Any]:
    reference_date = settings.reference_date
    if args.reference_date:
        try:
            reference_date = date.fromisoformat(args.reference_date)
        except ValueError as exc:
            raise ConfigError(
                f"--reference-date must be YYYY-MM-DD, got {args.reference_date!r}"
            ) from exc

    verbose = args.verbose or settings.verbose
    text = _read_input(args.path)
    runner = _build_runner(args.kind, verbose, reference_date)
    result, diagnostics = runner(text)

    out: dict[str, Any] = {"kind": args.kind, "result": result}
    if args.diagnostics:
        out["diagnostics"] = asdict(diagnostics)
        out["diagnostics"]["coverage"] = round(diagnostics.coverage, 3)
    return out


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    try:
        settings = ParserSettings.from_env()
        configure_logging(settings)
        out = run(args, settings)
    except (NightReportError, OSError, UnicodeError) as exc:
        error = wrap_exception(exc)
        logger.error("%s: %s", type(error).__name__, error)
        return 2

    print(json.dumps(out, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
