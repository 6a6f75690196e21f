"""Shared pytest fixtures and test helpers for roverctl tests."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from roverctl.config.settings import RoverSettings
from roverctl.services.mission import MissionService
from roverctl.services.telemetry import disable_telemetry

CANONICAL_MISSION = "5 5\n1 2 N\nLMLMLMLMM\n3 3 E\nMMRMMRMRRM\n"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ROVERCTL_* variables from the outer shell out of every test."""
    for name in list(os.environ):
        if name.startswith("ROVERCTL_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Iterator[None]:
    """`-v` enables telemetry for the whole process; switch it off after each test."""
    yield
    disable_telemetry()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Change CWD to an empty temp directory so no roverctl.toml is discovered.

    Use via ``@pytest.mark.usefixtures("workdir")`` on command test classes.
    """
    monkeypatch.chdir(tmp_path)
    yield tmp_path


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_service(tmp_path: Path, **mission: Any) -> MissionService:
    """MissionService whose settings ignore any config outside *tmp_path*."""
    settings = RoverSettings.from_cli(start=tmp_path)
    if mission:
        settings = settings.with_overrides(**mission)
    return MissionService(settings)


def mission_lines(text: str) -> list[str]:
    return text.splitlines()
