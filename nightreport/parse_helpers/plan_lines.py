"""
Line parsers for the sections of an RTS plan.
"""

from __future__ import annotations

import re
from typing import Optional

from config.constant import CODE_PATTERN, CODELESS_MISSION_KEYWORDS
from ..types import HealingItem, PlanItem

_NIL_RE = re.compile(r"^nil$", re.IGNORECASE)
_NIL_SPARE_RE = re.compile(r"^nil\s*spare", re.IGNORECASE)
# "Spare Window" is a mission slot, not a spare aircraft
_SPARE_WORD_RE = re.compile(r"\bspare\b(?!\s*window)", re.IGNORECASE)
_LEADING_SPARE_RE = re.compile(r"^spare\b", re.IGNORECASE)
_MISSION_RE = re.compile(
    rf"^({CODE_PATTERN})\s*[:\-]?\s*(\d{{3,4}}\s*-\s*\d{{3,4}})?\s*(.*)$",
    re.IGNORECASE,
)
_CODELESS_MISSION_RE = re.compile(
    r"^(?:{})\b".format("|".join(map(re.escape, CODELESS_MISSION_KEYWORDS))),
    re.IGNORECASE,
)
_HEALING_RE = re.compile(rf"^({CODE_PATTERN})\s*:?\s*(.+)$", re.IGNORECASE)
_TIME_RANGE_RE = re.compile(r"(\d{3,4}\s*-\s*\d{3,4})")
_WS_RE = re.compile(r"\s+")


def is_nil(line: str) -> bool:
    return bool(_NIL_RE.match(line.strip()))


def parse_mission_line(line: Optional[str]) -> Optional[PlanItem]:
    """
    Parse one mission/spare line.

    "F3 1130 - 2200 GH"       -> mission F3, "1130-2200 GH"
    "S3 Spare"                -> spare S3, "S3 Spare"
    "S3 TR as Spare by 1530"  -> spare S3, whole line
    "S6 1400-1600 Ferry Spare Window" -> mission S6
    "Nil Spare"               -> spare without a code
    "BMD ..." / "RSD ..."     -> mission without a code
    Blank and "nil" lines, and anything else, give None.
    """
    s = (line or "").strip()
    if not s or is_nil(s):
        return None

    m = _MISSION_RE.match(s)
    if m:
        code = m.group(1).upper()
        time = _WS_RE.sub("", m.group(2) or "")
        rest = (m.group(3) or "").strip()

        if _LEADING_SPARE_RE.match(rest):
            extra = _LEADING_SPARE_RE.sub("", rest).strip()
            label = f"{code} Spare {extra}".strip()
            return {"type": "spare", "code": code, "label": label}
        if _SPARE_WORD_RE.search(s):
            return {"type": "spare", "code": code, "label": s}

        label = " ".join(part for part in (time, rest) if part)
        return {"type": "mission", "code": code, "label": label or code}

    if _NIL_SPARE_RE.match(s):
        return {"type": "spare", "code": None, "label": "Nil Spare"}

    if _CODELESS_MISSION_RE.match(s):
        return {"type": "mission", "code": None, "label": s}

    return None


def parse_healing_line(line: Optional[str]) -> list[HealingItem]:
    """
    Parse one healing line into one record per time range.

    "S2: 1200 - 1300 1500 - 1600 GR" -> S2 "1200-1300", S2 "1500-1600 GR"
    Text after the last range goes on the last record only. Without a
    range the remainder is kept whole; without a code the line is kept
    as a code-less label.
    """
    s = (line or "").strip()
    if not s or is_nil(s):
        return []

    m = _HEALING_RE.match(s)
    if not m:
        return [{"code": None, "label": s}]

    code = m.group(1).upper()
    rhs = m.group(2).strip()

    times: list[str] = []
    last_end = 0
    for tm in _TIME_RANGE_RE.finditer(rhs):
        times.append(_WS_RE.sub("", tm.group(1)))
        last_end = tm.end()

    if not times:
        return [{"code": code, "label": rhs}]

    trailing = rhs[last_end:].strip()
    items: list[HealingItem] = [{"code": code, "label": t} for t in times]
    if trailing:
        items[-1]["label"] = f"{times[-1]} {trailing}"
    return items


def keep_free_text(line: str) -> Optional[str]:
    """Hot/Cold lines: kept verbatim unless blank or "nil"."""
    s = line.strip()
    if not s or is_nil(s):
        return None
    return s


def normalise_ops_line(line: str) -> Optional[str]:
    """Ops Brief lines: semicolons become commas."""
    s = line.strip()
    if not s:
        return None
    return s.replace(";", ",").strip()
