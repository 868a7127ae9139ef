"""
Telegram defect parser.

Pasted Telegram updates arrive as blank-line separated blocks. A block
holding a bare code ("S3") opens that code's record; the blocks after it,
up to the next bare code, are its message text. Fields are then pulled out
of the combined text independently of each other.
"""

import re
import logging
from typing import Optional

from config.constant import CODE_PATTERN
from .diagnostics import ParseDiagnostics
from .types import DefectRecord


_BLOCK_SPLIT_RE = re.compile(r"\n{2,}")
_CODE_LINE_RE = re.compile(rf"^\s*({CODE_PATTERN})\s*$", re.IGNORECASE | re.MULTILINE)

# Single-line captures
_US_RE = re.compile(r"Date/Time\s*[‘’'\"]?U/S[‘’'\"]?\s*:\s*([^\n]+)", re.IGNORECASE)
_RECT_RE = re.compile(r"\bRect:\s*([^\n]+)", re.IGNORECASE)
_ETR_RE = re.compile(r"\bETR:\s*([^\n]+)", re.IGNORECASE)
_WORKCENTER_RE = re.compile(r"Workcenter:\s*([^\n]+)", re.IGNORECASE)
_PRIME_RE = re.compile(r"Prime Trade:\s*([^\n]+)", re.IGNORECASE)
_SYSTEM_RE = re.compile(r"System:\s*([^\n]+)", re.IGNORECASE)

# Multi-line captures
_DEFECT_RE = re.compile(
    r"\bDefect:\s*([\s\S]*?)(?:\n{1,2}[A-Z][a-z]+:|\n{2,}|\Z)", re.IGNORECASE)
_GR_RE = re.compile(
    r"G/?run requirement:\s*([\s\S]*?)(?:\n{2,}|FCF requirement:|Workcenter:|\Z)",
    re.IGNORECASE,
)
_FCF_RE = re.compile(
    r"FCF requirement:\s*([\s\S]*?)(?:\n{2,}|G/?run requirement:|Workcenter:|\Z)",
    re.IGNORECASE,
)

_RECOVERY_LINE_RE = re.compile(r"^\s*Recovery\s*$", re.IGNORECASE | re.MULTILINE)
_POST_PHASE_RCV_RE = re.compile(r"post\s*phase\s*rcv", re.IGNORECASE)
_BULLET_RE = re.compile(r"^\s*[-•]\s*")


def _first_group(pattern: re.Pattern, text: str) -> str:
    m = pattern.search(text)
    return (m.group(1) if m else "").strip()


def _requirement_lines(pattern: re.Pattern, text: str) -> list[str]:
    m = pattern.search(text)
    if not m:
        return []
    items = [_BULLET_RE.sub("", line).strip() for line in m.group(1).split("\n")]
    return [item for item in items if item]


def extract_defect_fields(code: str, blocks: list[str]) -> DefectRecord:
    """Build a DefectRecord from the raw blocks gathered for one code."""
    combined = "\n\n".join(blocks)

    return {
        "code": code,
        "blocks": list(blocks),
        "us": _first_group(_US_RE, combined),
        "defect": _first_group(_DEFECT_RE, combined),
        "rect": _first_group(_RECT_RE, combined),
        "etr": _first_group(_ETR_RE, combined),
        "recovery": bool(
            _RECOVERY_LINE_RE.search(combined)
            or _POST_PHASE_RCV_RE.search(combined)
        ),
        "gr": _requirement_lines(_GR_RE, combined),
        "fcf": _requirement_lines(_FCF_RE, combined),
        "workcenter": _first_group(_WORKCENTER_RE, combined),
        "prime": _first_group(_PRIME_RE, combined),
        "system": _first_group(_SYSTEM_RE, combined),
    }


def split_blocks(text: str) -> list[str]:
    """Split on runs of blank lines; trimmed, empty blocks dropped."""
    blocks = _BLOCK_SPLIT_RE.split((text or "").replace("\r", ""))
    return [b.strip() for b in blocks if b.strip()]


class TelegramDefectParser:
    """Parse pasted Telegram defect messages into code -> DefectRecord."""

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.logger = logging.getLogger(__name__)
        if verbose:
            self.logger.setLevel(logging.DEBUG)

    def parse(self, text: str) -> dict[str, DefectRecord]:
        records, _ = self.parse_with_diagnostics(text)
        return records

    def parse_with_diagnostics(
        self,
        text: str
    ) -> tuple[dict[str, DefectRecord], ParseDiagnostics]:
        diagnostics = ParseDiagnostics(parser="defects")
        grouped: dict[str, list[str]] = {}
        current: Optional[str] = None

        for block_no, block in enumerate(split_blocks(text), start=1):
            diagnostics.lines_seen += 1
            m = _CODE_LINE_RE.search(block)
            if m:
                current = m.group(1).upper()
                if current in grouped:
                    diagnostics.warn(
                        f"{current} opened again in block {block_no}; earlier blocks replaced")
                # A later code block replaces the earlier one's text
                grouped[current] = []
            if current is None:
                diagnostics.skip(block_no, block, "block before first code")
                if self.verbose:
                    self.logger.debug("Block %s skipped: no code yet", block_no)
                continue
            grouped[current].append(block)

        records = {
            code: extract_defect_fields(code, blocks)
            for code, blocks in grouped.items()
        }

        self.logger.info(
            "Parsed %s defect records from %s blocks",
            len(records),
            diagnostics.lines_seen,
        )
        return records, diagnostics


def parse_telegram_defects(text: str, verbose: bool = False) -> dict[str, DefectRecord]:
    """Parse Telegram defect text; see :class:`TelegramDefectParser`."""
    return TelegramDefectParser(verbose=verbose).parse(text)
