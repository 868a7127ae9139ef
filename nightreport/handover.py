"""
HOTO (handover/takeover) parser.

Splits a handover log into "Job Completed", "Outstanding" (grouped by code,
with an optional short tag such as "(MC)") and twelve auxiliary sections.
Sections are opened only by their marker headers; there is no lookahead.

Also provides the tick-and-move helpers used when outstanding items are
signed off and carried over to Job Completed.
"""

from __future__ import annotations

import re
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional

from config.constant import (
    CODE_PATTERN,
    HANDOVER_COMPLETED,
    HANDOVER_EXTRA_SECTIONS,
    HANDOVER_OUTSTANDING,
    HANDOVER_SECTION_HEADERS,
)
from .diagnostics import ParseDiagnostics
from .types import HandoverDocument, HandoverExtra


class HandoverLineKind(Enum):
    HEADER = "header"
    CODE = "code"
    BULLET = "bullet"
    TEXT = "text"


@dataclass(frozen=True)
class HandoverLine:
    kind: HandoverLineKind
    value: str
    section: Optional[str] = None
    code: Optional[str] = None
    tag: Optional[str] = None


_HEADERS = [
    (section, re.compile(pattern, re.IGNORECASE))
    for section, pattern in HANDOVER_SECTION_HEADERS
]
_CODE_LINE_RE = re.compile(
    rf"^({CODE_PATTERN})(?!\d)(?:\s*\(([^)]+)\))?", re.IGNORECASE)
_BULLET_RE = re.compile(r"^[-•>]")
_BULLET_STRIP_RE = re.compile(r"^[-•]\s*")
_ARROW_RE = re.compile(r"^>\s*")


def match_section_header(line: str) -> Optional[str]:
    """Return the section key for a header line, or None."""
    for section, pattern in _HEADERS:
        if pattern.search(line):
            return section
    return None


def classify_handover_line(line: str) -> HandoverLine:
    """Classify one trimmed, non-empty line."""
    section = match_section_header(line)
    if section:
        return HandoverLine(HandoverLineKind.HEADER, line, section=section)

    m = _CODE_LINE_RE.match(line)
    if m:
        tag = m.group(2).strip() if m.group(2) else None
        return HandoverLine(
            HandoverLineKind.CODE, line, code=m.group(1).upper(), tag=tag)

    if _BULLET_RE.match(line):
        clean = _BULLET_STRIP_RE.sub("", line).strip()
        return HandoverLine(HandoverLineKind.BULLET, _ARROW_RE.sub("> ", clean))

    return HandoverLine(HandoverLineKind.TEXT, line)


def empty_handover() -> HandoverDocument:
    extra: HandoverExtra = {key: [] for key in HANDOVER_EXTRA_SECTIONS}  # type: ignore[assignment]
    return {"completed": {}, "outstanding": {}, "extra": extra}


@dataclass
class _HandoverScan:
    """Accumulator threaded through the line scan."""
    document: HandoverDocument = field(default_factory=empty_handover)
    section: Optional[str] = None
    current_code: Optional[str] = None


class HandoverParser:
    """Parse pasted HOTO text into a HandoverDocument."""

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.logger = logging.getLogger(__name__)
        if verbose:
            self.logger.setLevel(logging.DEBUG)

    def parse(self, text: str) -> HandoverDocument:
        document, _ = self.parse_with_diagnostics(text)
        return document

    def parse_with_diagnostics(
        self,
        text: str
    ) -> tuple[HandoverDocument, ParseDiagnostics]:
        diagnostics = ParseDiagnostics(parser="handover")
        scan = _HandoverScan()

        lines = (text or "").replace("\r", "").split("\n")
        for line_no, raw in enumerate(lines, start=1):
            line = raw.strip()
            if not line:
                continue
            diagnostics.lines_seen += 1
            self._consume(scan, line_no, line, diagnostics)

        doc = scan.document
        self.logger.info(
            "Parsed HOTO: %s completed codes, %s outstanding codes, %s extra lines",
            len(doc["completed"]),
            len(doc["outstanding"]),
            sum(len(v) for v in doc["extra"].values()),
        )
        return doc, diagnostics

    def _consume(
        self,
        scan: _HandoverScan,
        line_no: int,
        line: str,
        diagnostics: ParseDiagnostics
    ) -> None:
        classified = classify_handover_line(line)
        doc = scan.document

        if classified.kind is HandoverLineKind.HEADER:
            scan.section = classified.section
            scan.current_code = None
            return

        if scan.section in (HANDOVER_COMPLETED, HANDOVER_OUTSTANDING):
            if classified.kind is HandoverLineKind.CODE:
                code = classified.code or ""
                scan.current_code = code
                if scan.section == HANDOVER_COMPLETED:
                    doc["completed"].setdefault(code, [])
                else:
                    group = doc["outstanding"].setdefault(
                        code, {"tag": "", "items": []})
                    if classified.tag:
                        group["tag"] = classified.tag
                return

            if scan.current_code is None:
                diagnostics.skip(line_no, line, "no open code")
                return

            item = classified.value
            if scan.section == HANDOVER_COMPLETED:
                doc["completed"][scan.current_code].append(item)
            else:
                doc["outstanding"][scan.current_code]["items"].append(item)
            return

        if scan.section is not None:
            clean = _ARROW_RE.sub("", _BULLET_STRIP_RE.sub("", line)).strip()
            doc["extra"][scan.section].append(clean)  # type: ignore[literal-required]
            return

        diagnostics.skip(line_no, line, "before first section header")
        if self.verbose:
            self.logger.debug("Line %s skipped: no section yet", line_no)


def parse_handover(text: str, verbose: bool = False) -> HandoverDocument:
    """Parse HOTO text; see :class:`HandoverParser`."""
    return HandoverParser(verbose=verbose).parse(text)


# ===========================================================================
# TICK / MOVE TO COMPLETED
# ===========================================================================


def tick_key(code: str, item: str) -> str:
    """Key under which an outstanding item's tick is stored."""
    return f"{code}|{item}"


def merge_completed(
    document: HandoverDocument,
    done: Mapping[str, list[str]],
) -> dict[str, list[str]]:
    """Parsed Job Completed items plus items moved from Outstanding."""
    merged = {code: list(items) for code, items in document["completed"].items()}
    for code, items in done.items():
        target = merged.setdefault(code, [])
        for item in items:
            if item not in target:
                target.append(item)
    return merged


@dataclass
class TickMoveResult:
    done: dict[str, list[str]]
    ticks: dict[str, bool]
    moved: int


def move_ticked_to_completed(
    document: HandoverDocument,
    ticks: Mapping[str, bool],
    done: Mapping[str, list[str]],
) -> TickMoveResult:
    """
    Move ticked outstanding items into the done map.

    Returns new ``done`` and ``ticks`` maps (moved ticks cleared) and the
    number of newly moved items. Inputs are left untouched.
    """
    next_done = {code: list(items) for code, items in done.items()}
    cleared: set[str] = set()
    moved = 0

    for code, group in document["outstanding"].items():
        for item in group["items"]:
            key = tick_key(code, item)
            if not ticks.get(key):
                continue
            target = next_done.setdefault(code, [])
            if item not in target:
                target.append(item)
                moved += 1
            cleared.add(key)

    if not moved:
        return TickMoveResult(done=next_done, ticks=dict(ticks), moved=0)

    next_ticks = {k: v for k, v in ticks.items() if k not in cleared}
    return TickMoveResult(done=next_done, ticks=next_ticks, moved=moved)


def is_moved(done: Mapping[str, list[str]], code: str, item: str) -> bool:
    return item in done.get(code, [])
