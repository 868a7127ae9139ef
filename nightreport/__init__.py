"""
Night report package exports.
"""

from .codes import (
    PlaceholderSlot,
    code_to_id,
    id_to_code,
    is_code,
    normalise_code,
    placeholder_codes,
    placeholder_slots,
)
from .date_plan import DatePlanParser, parse_rts_daily, parse_rts_weekly
from .defects import TelegramDefectParser, parse_telegram_defects
from .diagnostics import ParseDiagnostics, SkippedLine
from .handover import (
    HandoverParser,
    TickMoveResult,
    merge_completed,
    move_ticked_to_completed,
    parse_handover,
    tick_key,
)
from .report_parser import NightReportParser, parse_report
from .status import derive_status_tag, first_defect_line
from .types import (
    DatePlanEntry,
    DefectRecord,
    HandoverDocument,
    HealingItem,
    OutstandingGroup,
    PlanItem,
    ReportEntry,
    StatusTag,
)

__all__ = [
    "DatePlanEntry",
    "DefectRecord",
    "HandoverDocument",
    "HealingItem",
    "OutstandingGroup",
    "PlanItem",
    "ReportEntry",
    "StatusTag",
    "ParseDiagnostics",
    "SkippedLine",
    "PlaceholderSlot",
    "id_to_code",
    "code_to_id",
    "is_code",
    "normalise_code",
    "placeholder_codes",
    "placeholder_slots",
    "derive_status_tag",
    "first_defect_line",
    "NightReportParser",
    "parse_report",
    "TelegramDefectParser",
    "parse_telegram_defects",
    "HandoverParser",
    "parse_handover",
    "tick_key",
    "merge_completed",
    "move_ticked_to_completed",
    "TickMoveResult",
    "DatePlanParser",
    "parse_rts_daily",
    "parse_rts_weekly",
]
