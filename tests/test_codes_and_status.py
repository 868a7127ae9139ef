"""Tests for identifier codes and status classification."""
from __future__ import annotations

import re

import pytest

from config.constant import PLACEHOLDERS
from nightreport.codes import (
    code_to_id,
    id_to_code,
    normalise_code,
    placeholder_codes,
    placeholder_slots,
)
from nightreport.status import derive_status_tag, first_defect_line


@pytest.mark.parametrize(
    "placeholder_id, expected",
    [(252, "F2"), (253, "F3"), (260, "S0"), (261, "S1"), (265, "S5"), (266, "S6")],
)
def test_id_to_code_known_slots(placeholder_id, expected):
    assert id_to_code(placeholder_id) == expected


def test_every_placeholder_maps_to_a_code():
    for pid in PLACEHOLDERS:
        assert re.fullmatch(r"[FS]\d", id_to_code(pid))
        assert code_to_id(id_to_code(pid)) == pid


def test_out_of_range_ids_pass_through():
    assert id_to_code(250) == "250"
    assert id_to_code(270) == "270"
    assert id_to_code(7) == "7"


def test_code_to_id_rejects_non_codes():
    assert code_to_id("f2") == 252
    assert code_to_id("F0") is None
    assert code_to_id("X1") is None
    assert code_to_id("") is None


def test_normalise_code():
    assert normalise_code(" s3 ") == "S3"
    assert normalise_code("S33") is None
    assert normalise_code(None) is None


def test_placeholder_slots_pair_entries_in_slot_order():
    entry = {"code": "S1", "title": "S1 - S", "input": "", "etr": "",
             "notes": [], "tag": "serviceable"}
    slots = placeholder_slots({"S1": entry})
    assert [s.code for s in slots] == placeholder_codes()
    assert [s.placeholder_id for s in slots] == list(PLACEHOLDERS)
    by_code = {s.code: s.entry for s in slots}
    assert by_code["S1"] is entry
    assert by_code["F2"] is None


def _entry(title: str, notes: list[str] | None = None) -> dict:
    return {"title": title, "notes": notes or []}


def test_defect_dominates_phase():
    assert derive_status_tag(_entry("S0 - Phase Defect: leak")) == "rectification"


def test_in_phase_from_title():
    assert derive_status_tag(_entry("S0 - Major Serv (day 3)")) == "in-phase"
    assert derive_status_tag(_entry("F3 - Phase")) == "in-phase"


def test_phase_in_notes_does_not_mean_in_phase():
    entry = _entry("F2 - S", ["Aircraft came out of phase last week"])
    assert derive_status_tag(entry) == "serviceable"


def test_recovery_from_title_or_notes():
    assert derive_status_tag(_entry("S5 - Recovery")) == "recovery"
    assert derive_status_tag(_entry("S5 - S", ["Post phase rcv"])) == "recovery"


def test_phase_beats_recovery():
    assert derive_status_tag(_entry("S6 - Phase", ["recovery tomorrow"])) == "in-phase"


def test_gr_must_be_a_standalone_word():
    assert derive_status_tag(_entry("S2 - GR")) == "rectification"
    assert derive_status_tag(_entry("S2 - S", ["green light"])) == "serviceable"


def test_default_is_serviceable():
    assert derive_status_tag(_entry("F2 - S")) == "serviceable"
    assert derive_status_tag(_entry("")) == "serviceable"


def test_first_defect_line_prefers_title_then_notes_then_tail():
    assert first_defect_line(_entry("S2 - Defect: hyd leak")) == "hyd leak"
    assert first_defect_line(
        _entry("S2 - GR", ["Rect: replace seal", "Defect: hyd leak"])) == "hyd leak"
    assert first_defect_line(_entry("S0 - Major Serv - day 2")) == "Major Serv - day 2"
