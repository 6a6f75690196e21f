"""Tests for RoverSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from roverctl.config.settings import RoverSettings
from roverctl.domain.types import BoundaryPolicy, ErrorMode


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = RoverSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.mission.boundary_policy is BoundaryPolicy.STRICT
        assert settings.mission.error_mode is ErrorMode.FAIL_FAST
        assert settings.grid.plateau() is None

    def test_frozen(self, tmp_path: Path) -> None:
        settings = RoverSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "roverctl.toml"
        toml.write_text('[mission]\nboundary_policy = "wrap"\n[grid]\nmax_x = 9\nmax_y = 9\n')
        settings = RoverSettings.from_cli(start=tmp_path)
        assert settings.config_path == toml
        assert settings.mission.boundary_policy is BoundaryPolicy.WRAP
        assert settings.mission.error_mode is ErrorMode.FAIL_FAST
        assert settings.grid.max_x == 9

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[mission]\nerror_mode = "collect"\n')
        settings = RoverSettings.from_cli(config_path=str(custom), start=tmp_path)
        assert settings.mission.error_mode is ErrorMode.COLLECT
        assert settings.config_path == custom

    def test_missing_explicit_path_uses_defaults(self, tmp_path: Path) -> None:
        settings = RoverSettings.from_cli(config_path=str(tmp_path / "nope.toml"))
        assert settings.config_path is None

    def test_invalid_toml_raises_click_exception(self, tmp_path: Path) -> None:
        (tmp_path / "roverctl.toml").write_text("[mission\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            RoverSettings.from_cli(start=tmp_path)


class TestEnvVars:
    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ROVERCTL_QUIET", "true")
        assert RoverSettings.from_cli(start=tmp_path).quiet is True

    def test_nested_env_var_beats_toml(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "roverctl.toml").write_text('[mission]\nboundary_policy = "wrap"\n')
        monkeypatch.setenv("ROVERCTL_MISSION__BOUNDARY_POLICY", "stop")
        settings = RoverSettings.from_cli(start=tmp_path)
        assert settings.mission.boundary_policy is BoundaryPolicy.STOP


class TestOverrides:
    def test_cli_flags(self, tmp_path: Path) -> None:
        settings = RoverSettings.from_cli(start=tmp_path, json_output=True, verbose=True)
        assert settings.json_output is True
        assert settings.verbose is True

    def test_with_overrides(self, tmp_path: Path) -> None:
        (tmp_path / "roverctl.toml").write_text('[mission]\nboundary_policy = "wrap"\n')
        base = RoverSettings.from_cli(start=tmp_path)
        settings = base.with_overrides(boundary_policy=BoundaryPolicy.IGNORE)
        assert settings.mission.boundary_policy is BoundaryPolicy.IGNORE
        assert base.mission.boundary_policy is BoundaryPolicy.WRAP

    def test_with_no_overrides_returns_self(self, tmp_path: Path) -> None:
        base = RoverSettings.from_cli(start=tmp_path)
        assert base.with_overrides() is base
