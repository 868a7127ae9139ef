"""
Status classification for Night Report entries.

Priority: rectification > in-phase > recovery > serviceable.
"""

from __future__ import annotations

import re
from typing import Any, Mapping

from config.constant import (
    STATUS_IN_PHASE,
    STATUS_RECOVERY,
    STATUS_RECTIFICATION,
    STATUS_SERVICEABLE,
)
from .types import StatusTag


_DEFECT_RE = re.compile(r"\bdefect:|\brect:|\bgr\b")
# Header only: narrative notes mention "phase" too often
_IN_PHASE_RE = re.compile(r"major serv|phase\b")
_RECOVERY_RE = re.compile(r"post phase rcv|recovery")
_TITLE_DEFECT_RE = re.compile(r"defect:\s*(.*)", re.IGNORECASE)
_NOTE_DEFECT_RE = re.compile(r"^defect:\s*", re.IGNORECASE)


def _lowered(entry: Mapping[str, Any]) -> tuple[str, str]:
    title = str(entry["title"] or "").lower()
    return title, " ".join(entry["notes"] or []).lower()


def derive_status_tag(entry: Mapping[str, Any]) -> StatusTag:
    """Classify an entry from its title and notes; first match wins."""
    title, notes = _lowered(entry)

    if _DEFECT_RE.search(title) or _DEFECT_RE.search(notes):
        return STATUS_RECTIFICATION
    if _IN_PHASE_RE.search(title):
        return STATUS_IN_PHASE
    if _RECOVERY_RE.search(title) or _RECOVERY_RE.search(notes):
        return STATUS_RECOVERY
    return STATUS_SERVICEABLE


def first_defect_line(entry: Mapping[str, Any]) -> str:
    """
    Short preview text for a card.

    The defect text from the title if present, otherwise the first
    ``Defect:`` note, otherwise the title tail after ``CODE - ``.
    """
    title = str(entry["title"] or "")
    m = _TITLE_DEFECT_RE.search(title)
    if m and m.group(1).strip():
        return m.group(1).strip()
    for note in entry["notes"] or []:
        if _NOTE_DEFECT_RE.match(note):
            return _NOTE_DEFECT_RE.sub("", note).strip()
    return " - ".join(title.split(" - ")[1:])
