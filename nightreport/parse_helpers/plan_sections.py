"""
Section scanning helpers for RTS plan parsing.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Optional, Protocol


class PlanSection(Enum):
    """RTS plan sections, in the order they appear in a message."""
    RTS = "rts"
    HEALING = "healing"
    HOT = "hot"
    COLD = "cold"
    OPS = "ops"
    NOTES = "notes"

    @property
    def following(self) -> list["PlanSection"]:
        """Sections that close this one when their keyword appears."""
        members = list(PlanSection)
        return members[members.index(self) + 1:]


SECTION_PATTERNS: dict[PlanSection, re.Pattern] = {
    PlanSection.RTS: re.compile(r"^rts\s*:", re.IGNORECASE),
    PlanSection.HEALING: re.compile(r"^healing\b", re.IGNORECASE),
    PlanSection.HOT: re.compile(r"^hot\b", re.IGNORECASE),
    PlanSection.COLD: re.compile(r"^cold\b", re.IGNORECASE),
    PlanSection.OPS: re.compile(r"^ops\s*brief\b", re.IGNORECASE),
    PlanSection.NOTES: re.compile(r"^notes\b", re.IGNORECASE),
}


def match_section(line: str) -> Optional[PlanSection]:
    """Return the section a keyword line opens, or None."""
    s = line.strip()
    for section, pattern in SECTION_PATTERNS.items():
        if pattern.match(s):
            return section
    return None


class _SectionScanBase(Protocol):
    verbose: bool
    logger: logging.Logger


class _SectionScanMixin(_SectionScanBase):

    def _read_section(
        self,
        lines: list[str],
        start_idx: int,
        section: PlanSection
    ) -> tuple[list[str], int]:
        """
        Collect the lines of *section* starting at *start_idx*.

        Stops at the first line opening a later section. Blank lines are
        kept as "" in the middle and trimmed from the end.

        Returns:
            Tuple of (items, index of the line that stopped the scan)
        """
        closers = section.following
        out: list[str] = []
        i = start_idx
        while i < len(lines):
            s = lines[i].strip()
            if not s:
                out.append("")
                i += 1
                continue
            if match_section(s) in closers:
                break
            out.append(s)
            i += 1

        while out and not out[-1]:
            out.pop()

        if self.verbose:
            self.logger.debug(
                "Section %s: %s lines (lines %s-%s)",
                section.value, len(out), start_idx + 1, i,
            )
        return out, i
