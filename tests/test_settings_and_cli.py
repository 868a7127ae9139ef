"""Tests for environment settings and the parse_text CLI."""
from __future__ import annotations

import json
from datetime import date

import pytest

from cli.parse_text import main, parse_args
from config.settings import ParserSettings
from report_exceptions import ConfigError, InputError, NightReportError, wrap_exception

ENV_VARS = ("NIGHTREPORT_LOG_LEVEL", "NIGHTREPORT_VERBOSE", "NIGHTREPORT_REFERENCE_DATE")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_from_empty_environment():
    settings = ParserSettings.from_env(load_dotenv_file=False)
    assert settings.log_level == "INFO"
    assert settings.verbose is False
    assert settings.reference_date is None


def test_values_from_environment(monkeypatch):
    monkeypatch.setenv("NIGHTREPORT_LOG_LEVEL", "debug")
    monkeypatch.setenv("NIGHTREPORT_VERBOSE", "yes")
    monkeypatch.setenv("NIGHTREPORT_REFERENCE_DATE", "2025-08-11")

    settings = ParserSettings.from_env(load_dotenv_file=False)
    assert settings.log_level == "DEBUG"
    assert settings.verbose is True
    assert settings.reference_date == date(2025, 8, 11)


@pytest.mark.parametrize(
    "name, value",
    [
        ("NIGHTREPORT_LOG_LEVEL", "chatty"),
        ("NIGHTREPORT_VERBOSE", "maybe"),
        ("NIGHTREPORT_REFERENCE_DATE", "13 Aug"),
    ],
)
def test_invalid_environment_raises_config_error(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigError):
        ParserSettings.from_env(load_dotenv_file=False)


def test_wrap_exception():
    err = ConfigError("bad")
    assert wrap_exception(err) is err
    assert isinstance(wrap_exception(FileNotFoundError("x.txt")), InputError)
    assert isinstance(wrap_exception(UnicodeDecodeError("utf-8", b"\xff", 0, 1, "bad")), InputError)
    wrapped = wrap_exception(RuntimeError("boom"))
    assert type(wrapped) is NightReportError
    assert str(wrapped) == "boom"


def test_parse_args_defaults():
    args = parse_args(["handover"])
    assert args.kind == "handover"
    assert args.path == "-"
    assert args.diagnostics is False
    assert args.reference_date is None


def test_cli_prints_report_json(tmp_path, capsys):
    path = tmp_path / "report.txt"
    path.write_text("preamble\nS2 - GR\nInput: 080825/2200\n- Defect: leak\n", encoding="utf-8")

    assert main(["report", str(path), "--diagnostics"]) == 0

    out = json.loads(capsys.readouterr().out)
    assert out["kind"] == "report"
    assert out["result"]["S2"]["tag"] == "rectification"
    assert out["diagnostics"]["parser"] == "report"
    assert out["diagnostics"]["skipped"][0]["text"] == "preamble"


def test_cli_weekly_uses_reference_date(tmp_path, capsys):
    path = tmp_path / "week.txt"
    path.write_text("11 Aug (Mon)\nF2 0900-1100 GH\n", encoding="utf-8")

    assert main(["weekly", str(path), "--reference-date", "2024-01-01"]) == 0

    out = json.loads(capsys.readouterr().out)
    assert out["result"][0]["date_iso"] == "2024-08-11"
    assert "diagnostics" not in out


def test_cli_bad_reference_date_returns_error(tmp_path, capsys):
    path = tmp_path / "day.txt"
    path.write_text("13 Aug\n", encoding="utf-8")

    assert main(["daily", str(path), "--reference-date", "tomorrow"]) == 2
    assert capsys.readouterr().out == ""


def test_cli_missing_file_returns_error(tmp_path, capsys):
    assert main(["defects", str(tmp_path / "missing.txt")]) == 2
    assert capsys.readouterr().out == ""
