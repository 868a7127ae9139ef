#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Constants for the night report parsers.
"""

from __future__ import annotations

# ===========================================================================
# IDENTIFIER CODES
# ===========================================================================
# Fixed display slots, left to right
PLACEHOLDERS: tuple[int, ...] = (252, 253, 260, 261, 262, 263, 265, 266)

# Inclusive id ranges and the id subtracted to get the code digit
F_ID_RANGE = (251, 259)
F_ID_BASE = 250
S_ID_RANGE = (260, 269)
S_ID_BASE = 260

CODE_PATTERN = r"[FS]\d"

# ===========================================================================
# STATUS TAGS (highest priority first)
# ===========================================================================
STATUS_RECTIFICATION = "rectification"
STATUS_IN_PHASE = "in-phase"
STATUS_RECOVERY = "recovery"
STATUS_SERVICEABLE = "serviceable"
STATUS_PRIORITY = (
    STATUS_RECTIFICATION,
    STATUS_IN_PHASE,
    STATUS_RECOVERY,
    STATUS_SERVICEABLE,
)

# ===========================================================================
# HANDOVER (HOTO) SECTIONS
# ===========================================================================
HANDOVER_COMPLETED = "completed"
HANDOVER_OUTSTANDING = "outstanding"

# Order matters: the 112D/150Hrly projection must be tried before 112D SERV.
HANDOVER_SECTION_HEADERS: list[tuple[str, str]] = [
    (HANDOVER_COMPLETED, r"^🟩\s*Job\s+Completed"),
    (HANDOVER_OUTSTANDING, r"^🟥\s*Outstanding"),
    ("proj14", r"^•\s*14D\s*SERV\s*PROJECTION"),
    ("proj28", r"^•\s*28D\s*SERV\s*PROJECTION"),
    ("proj56", r"^•\s*56D\s*SERV\s*PROJECTION"),
    ("proj112150", r"^•\s*112D/150H?rl?y\s*PROJECTION"),
    ("proj112", r"^•\s*112D\s*SERV\s*PROJECTION"),
    ("proj180", r"^•\s*180D\s*SERV\s*PROJECTION"),
    ("mee", r"^■\s*MEE"),
    ("eoss", r"^■\s*EOSS\s*Status"),
    ("bru", r"^■\s*BRU\s*Status"),
    ("probe", r"^■\s*Probe\s*Status"),
    ("aom", r"^●\s*AOM"),
    ("lessons", r"^●\s*Lesson\s+learnt"),
]

HANDOVER_EXTRA_SECTIONS: tuple[str, ...] = (
    "proj14",
    "proj28",
    "proj56",
    "proj112",
    "proj112150",
    "proj180",
    "mee",
    "eoss",
    "bru",
    "probe",
    "aom",
    "lessons",
)

# ===========================================================================
# DATE PLAN (RTS)
# ===========================================================================
MONTHS: dict[str, int] = {
    "jan": 1, "january": 1,
    "feb": 2, "february": 2,
    "mar": 3, "march": 3,
    "apr": 4, "april": 4,
    "may": 5,
    "jun": 6, "june": 6,
    "jul": 7, "july": 7,
    "aug": 8, "august": 8,
    "sep": 9, "sept": 9, "september": 9,
    "oct": 10, "october": 10,
    "nov": 11, "november": 11,
    "dec": 12, "december": 12,
}

# Two-digit years are read as 20YY
TWO_DIGIT_YEAR_BASE = 2000

UNPARSED_DATE_LABEL = "—"

# Mission-type abbreviations that appear without a code
CODELESS_MISSION_KEYWORDS: tuple[str, ...] = ("BMD", "RSD")

__all__ = [
    "PLACEHOLDERS",
    "F_ID_RANGE",
    "F_ID_BASE",
    "S_ID_RANGE",
    "S_ID_BASE",
    "CODE_PATTERN",
    "STATUS_RECTIFICATION",
    "STATUS_IN_PHASE",
    "STATUS_RECOVERY",
    "STATUS_SERVICEABLE",
    "STATUS_PRIORITY",
    "HANDOVER_COMPLETED",
    "HANDOVER_OUTSTANDING",
    "HANDOVER_SECTION_HEADERS",
    "HANDOVER_EXTRA_SECTIONS",
    "MONTHS",
    "TWO_DIGIT_YEAR_BASE",
    "UNPARSED_DATE_LABEL",
    "CODELESS_MISSION_KEYWORDS",
]
