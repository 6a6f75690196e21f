"""Tests for the format_result dispatcher and OutputSettings."""

import json

from roverctl.output.formatters import OutputSettings, format_result
from roverctl.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=ServiceError(code="PARSE_ERROR", message=msg))


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        output = format_result(
            _ok("drive", positions=["2 2 E"]), settings=OutputSettings(json_output=True)
        )
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "drive"
        assert data["data"]["positions"] == ["2 2 E"]

    def test_json_mode_error(self) -> None:
        output = format_result(_err("run_mission", "Bad"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"

    def test_json_output_kwarg(self) -> None:
        data = json.loads(format_result(_ok("test", key="val"), json_output=True))
        assert data["ok"] is True

    def test_settings_overrides_kwarg(self) -> None:
        output = format_result(
            _ok("test", key="val"), settings=OutputSettings(json_output=False), json_output=True
        )
        assert not output.startswith("{")


class TestFormatResultQuiet:
    def test_quiet_positions(self) -> None:
        result = _ok("run_mission", positions=["1 3 N", "5 1 E"])
        assert format_result(result, settings=OutputSettings(quiet=True)) == "1 3 N\n5 1 E"

    def test_quiet_success_without_positions(self) -> None:
        result = _ok("validate_mission", rover_count=2)
        assert format_result(result, settings=OutputSettings(quiet=True)) == "OK: validate_mission"

    def test_quiet_error(self) -> None:
        output = format_result(_err("run_mission", "Bad input"), settings=OutputSettings(quiet=True))
        assert output == "ERROR: run_mission — Bad input"


class TestFormatResultDefault:
    def test_positions_are_plain_lines(self) -> None:
        result = _ok("run_mission", positions=["1 3 N", "5 1 E"])
        assert format_result(result) == "1 3 N\n5 1 E"

    def test_default_error(self) -> None:
        assert format_result(_err("run_mission", "Bad")) == "Parse Error: Bad"
