"""Tests for the Night Report parser."""
from __future__ import annotations

from nightreport.report_parser import (
    NightReportParser,
    ReportLineKind,
    classify_report_line,
    parse_report,
)


NIGHT_REPORT = """Night Report for 13 Aug (Wed)

5 x 'S' Bird
F2, F3, S3, S5, S6

Status 🚁
(* denotes fitted with 'S' EOSS TU)

*S2 - GR
Input: 080825/2200
ETR: 140825/1200

- Defect: Hyd leak at No.2 pump
> Rect: Replace seal
Requirements
- G/R
> Leak check

*S0  - Major Serv (Day 3 of 10)
- Phase inspection ongoing

*F2 - S

*S5 - S
> Post phase rcv
"""


def test_single_entry_scenario():
    text = "S2 - GR\nInput: 080825/2200\n- Defect: leak\n> sub-item"
    entries = parse_report(text)

    assert list(entries) == ["S2"]
    entry = entries["S2"]
    assert entry["code"] == "S2"
    assert entry["title"] == "S2 - GR"
    assert entry["input"] == "080825/2200"
    assert entry["notes"] == ["Defect: leak", "sub-item"]
    assert entry["tag"] == "rectification"


def test_full_report():
    entries = parse_report(NIGHT_REPORT)

    assert list(entries) == ["S2", "S0", "F2", "S5"]

    s2 = entries["S2"]
    assert s2["etr"] == "140825/1200"
    assert s2["notes"] == [
        "Defect: Hyd leak at No.2 pump",
        "Rect: Replace seal",
        "Requirements:",
        "G/R",
        "Leak check",
    ]

    assert entries["S0"]["title"] == "S0 - Major Serv (Day 3 of 10)"
    assert entries["S0"]["tag"] == "in-phase"
    assert entries["F2"]["tag"] == "serviceable"
    assert entries["F2"]["notes"] == []
    assert entries["S5"]["tag"] == "recovery"


def test_codes_are_uppercased():
    entries = parse_report("> *f3 - s\n- all good")
    assert entries["F3"]["title"] == "F3 - s"
    assert entries["F3"]["notes"] == ["all good"]


def test_repeated_header_replaces_entry():
    entries = parse_report("S1 - GR\n- Defect: one\nS1 - S\n- ok")
    assert entries["S1"]["title"] == "S1 - S"
    assert entries["S1"]["notes"] == ["ok"]
    assert entries["S1"]["tag"] == "serviceable"


def test_last_input_and_etr_win():
    entries = parse_report("F3 - GR\nInput: first\nInput: second\nETR: a\netr: b")
    assert entries["F3"]["input"] == "second"
    assert entries["F3"]["etr"] == "b"


def test_unrecognised_lines_are_dropped_and_reported():
    text = "preamble\nS3 - S\nfree text line\n-- double dash note"
    entries, diagnostics = NightReportParser().parse_with_diagnostics(text)

    assert entries["S3"]["notes"] == ["double dash note"]
    assert diagnostics.skipped_texts() == ["preamble", "free text line"]
    assert diagnostics.skipped[0].line_no == 1
    assert diagnostics.lines_seen == 4
    assert diagnostics.coverage == 0.5


def test_classify_report_line_kinds():
    assert classify_report_line("*S2 - GR").kind is ReportLineKind.HEADER
    assert classify_report_line("Input: 1").kind is ReportLineKind.INPUT
    assert classify_report_line("ETR: 2").kind is ReportLineKind.ETR
    assert classify_report_line("> x").kind is ReportLineKind.NOTE
    assert classify_report_line("requirements").kind is ReportLineKind.REQUIREMENTS
    assert classify_report_line("hello").kind is ReportLineKind.OTHER


def test_empty_and_idempotent():
    assert parse_report("") == {}
    assert parse_report(NIGHT_REPORT) == parse_report(NIGHT_REPORT)


def test_crlf_line_endings():
    entries = parse_report("F2 - S\r\n- note\r\n")
    assert entries["F2"]["notes"] == ["note"]
