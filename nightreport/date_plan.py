"""
RTS Date Plan Parser

Parses daily and weekly RTS (flying/maintenance schedule) messages into
missions, spares, healing windows and free-text sections.

Daily format: the first line is the date header; mission/spare lines may
follow directly, then optional "RTS:", "Healing", "Hot", "Cold",
"Ops Brief" and "Notes" sections in that order.

Weekly format: several day headers ("11 Aug (Mon)"), each followed by
bare mission lines and optionally the same sections.
"""

import logging
from datetime import date
from typing import Optional

from .diagnostics import ParseDiagnostics
from .parse_helpers.date_header import _DateHeaderMixin, is_day_header
from .parse_helpers.plan_lines import (
    keep_free_text,
    normalise_ops_line,
    parse_healing_line,
    parse_mission_line,
)
from .parse_helpers.plan_sections import PlanSection, _SectionScanMixin, match_section
from .types import DatePlanEntry


class DatePlanParser(_DateHeaderMixin, _SectionScanMixin):
    """
    Extract structured day plans from RTS messages.

    Supports:
    - Daily messages (one date)
    - Weekly messages (one block per date header)
    """

    def __init__(self, reference_date: Optional[date] = None, verbose: bool = False):
        """
        Initialise parser.

        Args:
            reference_date: Supplies the year for headers written without
                one. Defaults to today at parse time.
            verbose: Enable detailed logging
        """
        super().__init__()
        self.reference_date = reference_date
        self.verbose = verbose
        self.logger = logging.getLogger(__name__)
        if verbose:
            self.logger.setLevel(logging.DEBUG)

    # ------------------------------------------------------------------
    # Daily
    # ------------------------------------------------------------------

    def parse_daily(self, text: str) -> DatePlanEntry:
        entry, _ = self.parse_daily_with_diagnostics(text)
        return entry

    def parse_daily_with_diagnostics(
        self,
        text: str
    ) -> tuple[DatePlanEntry, ParseDiagnostics]:
        diagnostics = ParseDiagnostics(parser="rts_daily")
        lines = (text or "").replace("\r", "").split("\n")
        entry = self._parse_day(lines, diagnostics)

        self.logger.info(
            "Parsed RTS day %s: %s missions, %s spares, %s healing",
            entry["date_iso"] or entry["date_label"],
            len(entry["missions"]),
            len(entry["spares"]),
            len(entry["healing"]),
        )
        return entry, diagnostics

    # ------------------------------------------------------------------
    # Weekly
    # ------------------------------------------------------------------

    def parse_weekly(self, text: str) -> list[DatePlanEntry]:
        entries, _ = self.parse_weekly_with_diagnostics(text)
        return entries

    def parse_weekly_with_diagnostics(
        self,
        text: str
    ) -> tuple[list[DatePlanEntry], ParseDiagnostics]:
        diagnostics = ParseDiagnostics(parser="rts_weekly")

        lines = (text or "").replace("\r", "").split("\n")
        for line_no, line in enumerate(lines, start=1):
            if is_day_header(line):
                break
            if line.strip():
                diagnostics.lines_seen += 1
                diagnostics.skip(line_no, line.strip(), "before first date header")

        entries = []
        for chunk in self._split_days(text):
            day_lines = chunk.split("\n")
            header, body = day_lines[0], day_lines[1:]
            # Bare lines under a weekly date header are missions
            if not any(match_section(line) for line in body):
                body = ["RTS:"] + body
            entries.append(self._parse_day([header] + body, diagnostics))

        self.logger.info("Parsed RTS week: %s days", len(entries))
        return entries, diagnostics

    # ------------------------------------------------------------------
    # Shared day scan
    # ------------------------------------------------------------------

    def _parse_day(
        self,
        lines: list[str],
        diagnostics: ParseDiagnostics
    ) -> DatePlanEntry:
        header = self._parse_date_header(lines[0] if lines else "")
        entry: DatePlanEntry = {
            "date_iso": header.iso,
            "date_label": header.label,
            "missions": [],
            "spares": [],
            "healing": [],
            "hot": [],
            "cold": [],
            "ops": [],
            "notes": [],
        }
        if header.iso is None and lines and lines[0].strip():
            diagnostics.warn(f"Unresolved date header: {lines[0].strip()}")

        # Mission/spare lines before the first section keyword
        i = 1
        while i < len(lines) and match_section(lines[i]) is None:
            self._add_plan_line(entry, i + 1, lines[i], diagnostics)
            i += 1

        # Each scan stops on the keyword line of a later section
        while i < len(lines):
            section = match_section(lines[i])
            start = i + 1
            items, i = self._read_section(lines, start, section)
            for offset, item in enumerate(items):
                self._add_section_line(
                    entry, section, start + offset + 1, item, diagnostics)

        return entry

    def _add_plan_line(
        self,
        entry: DatePlanEntry,
        line_no: int,
        line: str,
        diagnostics: ParseDiagnostics
    ) -> None:
        s = line.strip()
        if not s:
            return
        diagnostics.lines_seen += 1
        item = parse_mission_line(s)
        if item is None:
            diagnostics.skip(line_no, s, "not a mission or spare line")
            if self.verbose:
                self.logger.debug("Line %s skipped: %s", line_no, s)
            return
        if item["type"] == "spare":
            entry["spares"].append(item)
        else:
            entry["missions"].append(item)

    def _add_section_line(
        self,
        entry: DatePlanEntry,
        section: PlanSection,
        line_no: int,
        line: str,
        diagnostics: ParseDiagnostics
    ) -> None:
        if section is PlanSection.RTS:
            self._add_plan_line(entry, line_no, line, diagnostics)
            return
        if not line.strip():
            return

        diagnostics.lines_seen += 1
        if section is PlanSection.HEALING:
            entry["healing"].extend(parse_healing_line(line))
        elif section in (PlanSection.HOT, PlanSection.COLD):
            kept = keep_free_text(line)
            if kept is not None:
                entry[section.value].append(kept)  # type: ignore[literal-required]
        elif section is PlanSection.OPS:
            kept = normalise_ops_line(line)
            if kept is not None:
                entry["ops"].append(kept)
        else:
            entry["notes"].append(line.strip())


def parse_rts_daily(
    text: str,
    reference_date: Optional[date] = None,
    verbose: bool = False,
) -> DatePlanEntry:
    """Parse a single-day RTS message; see :class:`DatePlanParser`."""
    return DatePlanParser(reference_date=reference_date, verbose=verbose).parse_daily(text)


def parse_rts_weekly(
    text: str,
    reference_date: Optional[date] = None,
    verbose: bool = False,
) -> list[DatePlanEntry]:
    """Parse a weekly RTS plan; see :class:`DatePlanParser`."""
    return DatePlanParser(reference_date=reference_date, verbose=verbose).parse_weekly(text)
