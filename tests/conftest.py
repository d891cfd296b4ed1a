from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest
from typer.testing import CliRunner

from screenwatch import clock


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def set_clock(monkeypatch: pytest.MonkeyPatch):
    """Pin the local clock: set_clock(day=date(...), now="HH:MM")."""

    def _set(day: date = date(2026, 10, 17), now: str = "12:00") -> None:
        monkeypatch.setattr(clock, "today", lambda: day)
        monkeypatch.setattr(clock, "now_hhmm", lambda: now)

    _set()
    return _set
