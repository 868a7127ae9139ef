"""
Helpers shared by the RTS date plan parser.
"""

from .date_header import DateHeader, is_day_header, parse_date_header
from .plan_lines import (
    keep_free_text,
    normalise_ops_line,
    parse_healing_line,
    parse_mission_line,
)
from .plan_sections import PlanSection, match_section

__all__ = [
    "DateHeader",
    "PlanSection",
    "is_day_header",
    "keep_free_text",
    "match_section",
    "normalise_ops_line",
    "parse_date_header",
    "parse_healing_line",
    "parse_mission_line",
]
