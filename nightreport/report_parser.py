"""
Night Report Parser

Splits a Night Report into one entry per code. Headers look like
"*S2 - GR", "S0  - Major Serv (...)" or "> F2 - S"; the lines under a
header carry Input/ETR fields and bulleted notes.
"""

import re
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from config.constant import CODE_PATTERN
from .diagnostics import ParseDiagnostics
from .status import derive_status_tag
from .types import ReportEntry


class ReportLineKind(Enum):
    HEADER = "header"
    INPUT = "input"
    ETR = "etr"
    NOTE = "note"
    REQUIREMENTS = "requirements"
    OTHER = "other"


@dataclass(frozen=True)
class ReportLine:
    kind: ReportLineKind
    value: str = ""
    code: Optional[str] = None


_HEADER_RE = re.compile(
    rf"^[>*\s-]*\*?\s*({CODE_PATTERN})\s*-\s*(.+)$", re.IGNORECASE)
_INPUT_RE = re.compile(r"^Input:\s*(.+)$", re.IGNORECASE)
_ETR_RE = re.compile(r"^ETR:\s*(.+)$", re.IGNORECASE)
_REQUIREMENTS_RE = re.compile(r"^Requirements$", re.IGNORECASE)


def classify_report_line(line: str) -> ReportLine:
    """
    Classify one trimmed, non-empty Night Report line.

    Header detection comes first, so a bulleted line that carries its own
    "CODE - ..." opens a new entry rather than becoming a note.
    """
    m = _HEADER_RE.match(line)
    if m:
        code = m.group(1).upper()
        return ReportLine(ReportLineKind.HEADER, m.group(2).strip(), code)

    m = _INPUT_RE.match(line)
    if m:
        return ReportLine(ReportLineKind.INPUT, m.group(1).strip())
    m = _ETR_RE.match(line)
    if m:
        return ReportLine(ReportLineKind.ETR, m.group(1).strip())

    if line.startswith(">"):
        return ReportLine(ReportLineKind.NOTE, re.sub(r"^>\s*", "", line))
    if line.startswith("-"):
        return ReportLine(ReportLineKind.NOTE, re.sub(r"^-+\s*", "", line))
    if _REQUIREMENTS_RE.match(line):
        return ReportLine(ReportLineKind.REQUIREMENTS, "Requirements:")

    return ReportLine(ReportLineKind.OTHER, line)


@dataclass
class _ReportScan:
    """Accumulator threaded through the line scan."""
    entries: dict[str, ReportEntry] = field(default_factory=dict)
    current: Optional[str] = None


class NightReportParser:
    """
    Parse Night Report text into a mapping of code -> ReportEntry.

    Single pass, no backtracking. Lines before the first header and
    unrecognised lines under a header are dropped.
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.logger = logging.getLogger(__name__)
        if verbose:
            self.logger.setLevel(logging.DEBUG)

    def parse(self, text: str) -> dict[str, ReportEntry]:
        entries, _ = self.parse_with_diagnostics(text)
        return entries

    def parse_with_diagnostics(
        self,
        text: str
    ) -> tuple[dict[str, ReportEntry], ParseDiagnostics]:
        diagnostics = ParseDiagnostics(parser="report")
        scan = _ReportScan()

        lines = (text or "").replace("\r", "").split("\n")
        for line_no, raw in enumerate(lines, start=1):
            line = raw.strip()
            if not line:
                continue
            diagnostics.lines_seen += 1
            self._consume(scan, line_no, line, diagnostics)

        for entry in scan.entries.values():
            entry["tag"] = derive_status_tag(entry)

        self.logger.info(
            "Parsed %s report entries (%s lines skipped)",
            len(scan.entries),
            len(diagnostics.skipped),
        )
        return scan.entries, diagnostics

    def _consume(
        self,
        scan: _ReportScan,
        line_no: int,
        line: str,
        diagnostics: ParseDiagnostics
    ) -> None:
        classified = classify_report_line(line)

        if classified.kind is ReportLineKind.HEADER:
            code = classified.code or ""
            if code in scan.entries:
                self.logger.debug(
                    "Line %s: %s header repeated, previous entry replaced",
                    line_no, code)
                diagnostics.warn(f"{code} header repeated on line {line_no}")
            scan.entries[code] = {
                "code": code,
                "title": f"{code} - {classified.value}",
                "input": "",
                "etr": "",
                "notes": [],
                "tag": "serviceable",
            }
            scan.current = code
            return

        if scan.current is None:
            self._skip(diagnostics, line_no, line, "before first header")
            return

        entry = scan.entries[scan.current]
        if classified.kind is ReportLineKind.INPUT:
            entry["input"] = classified.value
        elif classified.kind is ReportLineKind.ETR:
            entry["etr"] = classified.value
        elif classified.kind in (ReportLineKind.NOTE, ReportLineKind.REQUIREMENTS):
            entry["notes"].append(classified.value)
        else:
            self._skip(diagnostics, line_no, line,
                       f"unrecognised line under {scan.current}")

    def _skip(
        self,
        diagnostics: ParseDiagnostics,
        line_no: int,
        line: str,
        reason: str
    ) -> None:
        diagnostics.skip(line_no, line, reason)
        if self.verbose:
            self.logger.debug("Line %s skipped (%s): %s", line_no, reason, line)


def parse_report(text: str, verbose: bool = False) -> dict[str, ReportEntry]:
    """Parse a Night Report; see :class:`NightReportParser`."""
    return NightReportParser(verbose=verbose).parse(text)
