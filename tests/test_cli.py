"""Tests for CLI entrypoints."""

from __future__ import annotations

from pathlib import Path

import pytest

from glucosa_tool import cli
from glucosa_tool.config import AppConfig


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "configure_logging", lambda _level: None)
    for name in ("GLUCOSA_EXPORT_DIR", "GLUCOSA_TZ", "GLUCOSA_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_build_parser_custom_values() -> None:
    ns = cli.build_parser().parse_args(
        ["--export-dir", "/tmp/out", "--days", "10", "--timezone", "UTC"]
    )
    assert ns.export_dir == "/tmp/out"
    assert ns.days == 10
    assert ns.timezone == "UTC"
    assert ns.log_level is None


def test_main_runs_app_with_config(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, AppConfig] = {}

    def _run_app(config: AppConfig) -> int:
        captured["config"] = config
        return 0

    monkeypatch.setattr(cli, "run_app", _run_app)

    code = cli.main(["--export-dir", "/tmp/out", "--days", "3"])

    assert code == 0
    assert captured["config"].export_dir == Path("/tmp/out")
    assert captured["config"].window_days == 3


def test_main_without_kivy_returns_1(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    def _run_app(_config: AppConfig) -> int:
        raise ImportError("No module named 'kivy'")

    monkeypatch.setattr(cli, "run_app", _run_app)

    assert cli.main([]) == 1
    assert "Kivy" in capsys.readouterr().out


def test_main_rejects_invalid_days(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "run_app", lambda _config: 0)
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--days", "0"])
    assert excinfo.value.code == 2
