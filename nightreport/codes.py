"""
Identifier codes.

Equipment is referred to by two-character codes (``F2``, ``S6``). The
dashboard lays them out in fixed numeric slots: 251-259 are the F-class
(``F1``-``F9``) and 260-269 the S-class (``S0``-``S9``).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Mapping, Optional

from config.constant import (
    CODE_PATTERN,
    F_ID_BASE,
    F_ID_RANGE,
    PLACEHOLDERS,
    S_ID_BASE,
    S_ID_RANGE,
)
from .types import ReportEntry

__all__ = [
    "CODE_RE",
    "PlaceholderSlot",
    "code_to_id",
    "id_to_code",
    "is_code",
    "normalise_code",
    "placeholder_codes",
    "placeholder_slots",
]

CODE_RE = re.compile(rf"^\s*({CODE_PATTERN})\s*$", re.IGNORECASE)


def id_to_code(placeholder_id: int) -> str:
    """
    Map a placeholder id to its code.

    252 -> "F2", 260 -> "S0". Ids outside both ranges come back as
    their decimal string.
    """
    if F_ID_RANGE[0] <= placeholder_id <= F_ID_RANGE[1]:
        return f"F{placeholder_id - F_ID_BASE}"
    if S_ID_RANGE[0] <= placeholder_id <= S_ID_RANGE[1]:
        return f"S{placeholder_id - S_ID_BASE}"
    return str(placeholder_id)


def code_to_id(code: Optional[str]) -> Optional[int]:
    """Inverse of :func:`id_to_code` for codes inside the two ranges."""
    norm = normalise_code(code)
    if norm is None:
        return None
    digit = int(norm[1])
    if norm[0] == "F":
        placeholder_id = F_ID_BASE + digit
        if F_ID_RANGE[0] <= placeholder_id <= F_ID_RANGE[1]:
            return placeholder_id
        return None
    return S_ID_BASE + digit


def normalise_code(text: Optional[str]) -> Optional[str]:
    """Return the uppercase code if *text* is exactly one code, else None."""
    if not text:
        return None
    m = CODE_RE.match(text)
    return m.group(1).upper() if m else None


def is_code(text: Optional[str]) -> bool:
    return normalise_code(text) is not None


def placeholder_codes() -> list[str]:
    return [id_to_code(pid) for pid in PLACEHOLDERS]


@dataclass(frozen=True)
class PlaceholderSlot:
    placeholder_id: int
    code: str
    entry: Optional[ReportEntry]


def placeholder_slots(
    entries: Mapping[str, ReportEntry],
    placeholders: tuple[int, ...] = PLACEHOLDERS,
) -> list[PlaceholderSlot]:
    """Pair each display slot with the parsed entry for its code, if any."""
    slots = []
    for pid in placeholders:
        code = id_to_code(pid)
        slots.append(PlaceholderSlot(pid, code, entries.get(code)))
    return slots
