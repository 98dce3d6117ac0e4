"""Tests for the command-line decoder entry point."""

from __future__ import annotations

import json
import logging

import pytest

from src import cli


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("QUERY_DUPLICATE_KEYS", raising=False)


def test_demo_schema_success(capsys: pytest.CaptureFixture[str]) -> None:
    code = cli.main(["https://www.example.com/api/endpoint?caseId=4&clientId=7"])
    assert code == 0
    out = capsys.readouterr().out
    assert json.loads(out) == {
        "caseId": 4,
        "clientId": 7,
        "debug": True,
        "type": "DefaultType",
        "typeId": -1,
    }


def test_demo_schema_invalid_number(
        capsys: pytest.CaptureFixture[str], caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.INFO, logger="src.cli"):
        code = cli.main(["https://www.example.com/api/endpoint?caseId=4&clientId=7h2"])
    assert code == 1
    assert capsys.readouterr().out == ""
    assert "code=invalid_number field=clientId" in caplog.text


def test_custom_params_and_duplicates(capsys: pytest.CaptureFixture[str]) -> None:
    code = cli.main(
        [
            "http://h/p?n=1&n=2",
            "--param",
            "n=number",
            "--param",
            "flag=boolean=false",
            "--duplicates",
            "last",
        ]
    )
    assert code == 0
    assert json.loads(capsys.readouterr().out) == {"flag": False, "n": 2}


def test_duplicates_default_from_env(
        monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("QUERY_DUPLICATE_KEYS", "last")
    assert cli.main(["http://h/p?n=1&n=2", "--param", "n=number"]) == 0
    assert json.loads(capsys.readouterr().out) == {"n": 2}


def test_invalid_descriptor_exit_code() -> None:
    assert cli.main(["http://h/p", "--param", "n=integer"]) == 1


def test_malformed_param_argument_is_usage_error() -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["http://h/p", "--param", "no-separator"])
    assert exc_info.value.code == 2


def test_huge_integer_literal_is_decoded(capsys: pytest.CaptureFixture[str]) -> None:
    url = "http://h/p?n=" + "9" * 5000
    assert cli.main([url, "--param", "n=number"]) == 0
    assert json.loads(capsys.readouterr().out) == {"n": float("inf")}


def test_log_level_flag_is_case_insensitive(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["http://h/p?n=1", "--param", "n=number", "--log-level", "debug"]) == 0
    assert json.loads(capsys.readouterr().out) == {"n": 1}


def test_unknown_log_level_flag_is_usage_error() -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["http://h/p?n=1", "--param", "n=number", "--log-level", "chatty"])
    assert exc_info.value.code == 2
