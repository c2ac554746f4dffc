"""Tests for the typer CLI."""

import pytest
from typer.testing import CliRunner

from stackcalc import server
from stackcalc.__main__ import app
from stackcalc.config import Settings

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("STACKCALC_HOST", "STACKCALC_PORT", "STACKCALC_STRICT_DIVISION", "STACKCALC_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


# --- eval ---

def test_eval_prints_result():
    result = runner.invoke(app, ["eval", "(2+3)*4"])
    assert result.exit_code == 0
    assert "20.000000" in result.output


def test_eval_error_exits_nonzero():
    result = runner.invoke(app, ["eval", "((1+2)*3"])
    assert result.exit_code == 1
    assert "There is an error in the brackets" in result.output


def test_eval_strict_division_flag():
    result = runner.invoke(app, ["eval", "1/0", "--strict-division"])
    assert result.exit_code == 1
    assert "Division by zero" in result.output


def test_eval_strict_division_from_env(monkeypatch):
    monkeypatch.setenv("STACKCALC_STRICT_DIVISION", "1")
    result = runner.invoke(app, ["eval", "1/0"])
    assert result.exit_code == 1
    assert "Division by zero" in result.output


def test_eval_lenient_flag_overrides_env(monkeypatch):
    monkeypatch.setenv("STACKCALC_STRICT_DIVISION", "1")
    result = runner.invoke(app, ["eval", "1/0", "--lenient-division"])
    assert result.exit_code == 1
    assert "There is an error in the expression" in result.output


def test_eval_bad_config(monkeypatch):
    monkeypatch.setenv("STACKCALC_PORT", "nope")
    result = runner.invoke(app, ["eval", "2+2"])
    assert result.exit_code == 1
    assert "Configuration error" in result.output


# --- check ---

def test_check_all_passes_ok():
    result = runner.invoke(app, ["check", "1+2"])
    assert result.exit_code == 0
    assert "fail" not in result.output


def test_check_reports_adjacency_only():
    result = runner.invoke(app, ["check", "1--2"])
    assert result.exit_code == 1
    assert result.output.count("fail") == 1
    assert "adjacency" in result.output


# --- serve ---

def test_serve_applies_overrides(monkeypatch):
    captured = {}
    monkeypatch.setattr(server, "serve", lambda settings: captured.setdefault("settings", settings))
    result = runner.invoke(app, ["serve", "--host", "127.0.0.1", "--port", "9090", "--strict-division"])
    assert result.exit_code == 0
    assert captured["settings"] == Settings(host="127.0.0.1", port=9090, strict_division=True)


def test_serve_uses_env_defaults(monkeypatch):
    captured = {}
    monkeypatch.setattr(server, "serve", lambda settings: captured.setdefault("settings", settings))
    monkeypatch.setenv("STACKCALC_PORT", "8181")
    result = runner.invoke(app, ["serve"])
    assert result.exit_code == 0
    assert captured["settings"].port == 8181
    assert captured["settings"].host == "0.0.0.0"
