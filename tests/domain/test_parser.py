"""Tests for mission input parsing."""

import pytest

from roverctl.domain.errors import ParseError
from roverctl.domain.models import Plateau, Position
from roverctl.domain.parser import parse_mission, parse_position
from roverctl.domain.types import Command, Heading


def lines(text: str) -> list[str]:
    return text.splitlines()


class TestParseMission:
    def test_canonical(self) -> None:
        mission = parse_mission(lines("5 5\n1 2 N\nLMLMLMLMM\n3 3 E\nMMRMMRMRRM\n"))
        assert mission.plateau == Plateau(max_x=5, max_y=5)
        assert len(mission.plans) == 2
        assert mission.plans[0].start == Position(x=1, y=2, heading=Heading.N)
        assert mission.plans[0].instructions == "LMLMLMLMM"
        assert mission.plans[1].commands[0] is Command.MOVE

    def test_plateau_only(self) -> None:
        mission = parse_mission(["3 4"])
        assert mission.plateau == Plateau(max_x=3, max_y=4)
        assert mission.plans == []

    def test_blank_lines_ignored(self) -> None:
        mission = parse_mission(["", "5 5", "   ", "1 2 N", "", "M", ""])
        assert len(mission.plans) == 1

    def test_extra_whitespace_tolerated(self) -> None:
        mission = parse_mission(["  5   5  ", " 1  2   N ", "  MM  "])
        assert mission.plans[0].start == Position(x=1, y=2, heading=Heading.N)
        assert mission.plans[0].instructions == "MM"

    @pytest.mark.parametrize("raw", [[], [""], ["   ", "\t"]])
    def test_empty_input(self, raw: list[str]) -> None:
        with pytest.raises(ParseError, match="Input cannot be empty"):
            parse_mission(raw)

    @pytest.mark.parametrize("plateau_line", ["5 X", "5", "5 5 5", "a b", "1.5 2", "1_0 2"])
    def test_invalid_plateau(self, plateau_line: str) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_mission([plateau_line])
        assert str(exc_info.value) == f'Plateau line invalid (expected "X Y"): "{plateau_line}"'

    def test_negative_plateau(self) -> None:
        with pytest.raises(ParseError, match="Plateau coordinates must be non-negative: -1 5"):
            parse_mission(["-1 5"])

    def test_unpaired_rover_lines(self) -> None:
        with pytest.raises(ParseError, match="must come in pairs"):
            parse_mission(["5 5", "1 2 N"])

    def test_position_wrong_token_count(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_mission(["5 5", "1 2", "M"])
        assert str(exc_info.value) == 'Rover #1 position invalid (expected "X Y HEADING"): "1 2"'

    def test_position_non_integer(self) -> None:
        with pytest.raises(ParseError, match=r"Rover #2 position invalid"):
            parse_mission(["5 5", "1 2 N", "M", "a 2 N", "M"])

    def test_invalid_heading(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_mission(["5 5", "1 2 Q", "M"])
        assert str(exc_info.value) == 'Rover #1 invalid heading (expected N, E, S, or W): "Q"'

    def test_lowercase_heading_invalid(self) -> None:
        with pytest.raises(ParseError, match="invalid heading"):
            parse_mission(["5 5", "1 2 n", "M"])

    def test_invalid_instructions(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_mission(["5 5", "1 2 N", "LMX"])
        assert str(exc_info.value) == 'Rover #1 invalid instructions (expected only L, R, M): "LMX"'

    def test_start_out_of_bounds(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_mission(["5 5", "6 2 N", "M"])
        assert str(exc_info.value) == "Rover #1 start out of bounds: (6,2) > plateau (5,5)"

    def test_negative_start_out_of_bounds(self) -> None:
        with pytest.raises(ParseError, match="start out of bounds"):
            parse_mission(["5 5", "-1 0 N", "M"])

    def test_fail_fast_reports_first_error_only(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_mission(["5 5", "1 2 Q", "M", "9 9 N", "M"])
        assert exc_info.value.errors == ['Rover #1 invalid heading (expected N, E, S, or W): "Q"']

    def test_collect_reports_every_rover_error(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_mission(["5 5", "1 2 Q", "M", "0 0 N", "M", "9 9 N", "M"], collect=True)
        errors = exc_info.value.errors
        assert len(errors) == 2
        assert errors[0].startswith("Rover #1 invalid heading")
        assert errors[1].startswith("Rover #3 start out of bounds")
        assert str(exc_info.value) == errors[0]

    def test_collect_still_fails_fast_on_plateau(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_mission(["5 X", "1 2 Q", "M"], collect=True)
        assert len(exc_info.value.errors) == 1
        assert "Plateau line invalid" in str(exc_info.value)

    def test_collect_without_errors(self) -> None:
        mission = parse_mission(["5 5", "1 2 N", "M"], collect=True)
        assert len(mission.plans) == 1


class TestParsePosition:
    def test_valid(self) -> None:
        assert parse_position("0 0 N") == Position(x=0, y=0, heading=Heading.N)

    def test_negative_coordinates(self) -> None:
        assert parse_position("-3 +4 W") == Position(x=-3, y=4, heading=Heading.W)

    def test_rover_index_in_message(self) -> None:
        with pytest.raises(ParseError, match=r"^Rover #7 position invalid"):
            parse_position("0 0", rover_index=7)
