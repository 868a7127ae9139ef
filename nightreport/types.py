"""
Shared TypedDict contracts for the night report parsers.
"""

from typing import Optional, Literal, TypedDict


StatusTag = Literal["rectification", "in-phase", "recovery", "serviceable"]
PlanItemType = Literal["mission", "spare"]


class ReportEntry(TypedDict):
    """One code's block from a Night Report."""

    code: str
    title: str
    input: str
    etr: str
    notes: list[str]
    tag: StatusTag


class DefectRecord(TypedDict):
    """Fields extracted from the Telegram blocks pasted for one code."""

    code: str
    blocks: list[str]
    us: str
    defect: str
    rect: str
    etr: str
    recovery: bool
    gr: list[str]
    fcf: list[str]
    workcenter: str
    prime: str
    system: str


class OutstandingGroup(TypedDict):
    tag: str
    items: list[str]


class HandoverExtra(TypedDict):
    """Auxiliary HOTO sections, one list per header."""

    proj14: list[str]
    proj28: list[str]
    proj56: list[str]
    proj112: list[str]
    proj112150: list[str]
    proj180: list[str]
    mee: list[str]
    eoss: list[str]
    bru: list[str]
    probe: list[str]
    aom: list[str]
    lessons: list[str]


class HandoverDocument(TypedDict):
    completed: dict[str, list[str]]
    outstanding: dict[str, OutstandingGroup]
    extra: HandoverExtra


class PlanItem(TypedDict):
    """A mission or spare aircraft line from an RTS plan."""

    type: PlanItemType
    code: Optional[str]
    label: str


class HealingItem(TypedDict):
    """A maintenance window; one per time range found on a healing line."""

    code: Optional[str]
    label: str


class DatePlanEntry(TypedDict):
    """One day of an RTS plan."""

    date_iso: Optional[str]
    date_label: str
    missions: list[PlanItem]
    spares: list[PlanItem]
    healing: list[HealingItem]
    hot: list[str]
    cold: list[str]
    ops: list[str]
    notes: list[str]
