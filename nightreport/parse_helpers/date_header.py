"""
Date header helpers for RTS plan parsing.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date
from typing import Optional, Protocol

from config.constant import MONTHS, TWO_DIGIT_YEAR_BASE, UNPARSED_DATE_LABEL

# Emoji and other decoration are dropped before matching
_STRIP_RE = re.compile(r"[^\w\s()/-]", re.ASCII)
_HEADER_RE = re.compile(r"^(\d{1,2})\s+([A-Za-z]{3,9})(?:\s+(\d{2,4}))?")
_TRAILING_YEAR_RE = re.compile(r"\s+\d{4}$")
_DAY_HEADER_RE = re.compile(
    r"^\s*(\d{1,2})\s+([A-Za-z]{3,9})(?:\s+\d{2,4})?\s*(?:\([^)]+\))?")


@dataclass(frozen=True)
class DateHeader:
    iso: Optional[str]
    label: str


def parse_date_header(
    header: Optional[str],
    reference_date: Optional[date] = None
) -> DateHeader:
    """
    Resolve a header such as "13 Aug 25 (Wed) 🚁" to an ISO date and label.

    Accepts 3-9 letter month names, 2- or 4-digit years, or no year (the
    reference date's year is used; today's when not given). Headers that
    do not resolve keep their text as the label and get ``iso=None``.
    """
    raw = (header or "").strip()
    line = _STRIP_RE.sub("", header or "").strip()
    m = _HEADER_RE.match(line)
    if not m:
        return DateHeader(iso=None, label=raw or UNPARSED_DATE_LABEL)

    day = int(m.group(1))
    month = MONTHS.get(m.group(2).lower())
    if m.group(3):
        year = int(m.group(3))
        if year < 100:
            year += TWO_DIGIT_YEAR_BASE
    else:
        year = (reference_date or date.today()).year

    iso = None
    if month is not None:
        try:
            iso = date(year, month, day).isoformat()
        except ValueError:
            iso = None

    label = _TRAILING_YEAR_RE.sub("", line).strip() or raw
    return DateHeader(iso=iso, label=label)


def is_day_header(line: str) -> bool:
    """True for lines that open a day in a weekly plan ("11 Aug (Mon)")."""
    m = _DAY_HEADER_RE.match(line.strip())
    return bool(m) and m.group(2).lower() in MONTHS


class _DateHeaderBase(Protocol):
    verbose: bool
    logger: logging.Logger
    reference_date: Optional[date]


class _DateHeaderMixin(_DateHeaderBase):

    def _parse_date_header(self, header: str) -> DateHeader:
        parsed = parse_date_header(header, self.reference_date)
        if parsed.iso is None and header.strip():
            self.logger.warning("Could not resolve date header: %s", header.strip())
        elif self.verbose:
            self.logger.debug("Date header %r -> %s", header, parsed.iso)
        return parsed

    def _split_days(self, text: str) -> list[str]:
        """Slice a weekly plan into one chunk per day header, in order."""
        lines = (text or "").replace("\r", "").split("\n")
        starts = [i for i, line in enumerate(lines) if is_day_header(line)]

        blocks = []
        for k, start in enumerate(starts):
            end = starts[k + 1] if k + 1 < len(starts) else len(lines)
            chunk = "\n".join(lines[start:end]).strip()
            if chunk:
                blocks.append(chunk)

        if self.verbose:
            self.logger.debug("Found %s day headers", len(blocks))
        return blocks
