"""Tests for hex directions."""
import pytest
from pydantic import BaseModel, ValidationError

from turnmap.directions import (
    DIRECTIONS,
    Direction,
    format_direction,
    opposite,
    parse_direction,
)
from turnmap.errors import InvalidDirectionCode


class TestDirection:
    def test_six_real_directions(self):
        """Test DIRECTIONS holds the six real directions."""
        assert len(DIRECTIONS) == 6
        assert Direction.UNKNOWN not in DIRECTIONS

    def test_codes(self):
        """Test the short codes."""
        expected = {"?", "N", "NE", "SE", "S", "SW", "NW"}
        assert {d.value for d in Direction} == expected

    def test_str_is_code(self):
        """Test str() gives the short code."""
        assert str(Direction.NORTH_WEST) == "NW"


class TestParseDirection:
    @pytest.mark.parametrize("code, expected", [
        ("?", Direction.UNKNOWN),
        ("N", Direction.NORTH),
        ("NE", Direction.NORTH_EAST),
        ("SE", Direction.SOUTH_EAST),
        ("S", Direction.SOUTH),
        ("SW", Direction.SOUTH_WEST),
        ("NW", Direction.NORTH_WEST),
    ])
    def test_valid_codes(self, code, expected):
        """Test each code parses to its Direction."""
        assert parse_direction(code) == expected

    @pytest.mark.parametrize("code", ["", "E", "W", "n", "ne", " N", "N ", "NNE", "North"])
    def test_invalid_codes(self, code):
        """Test codes are exact and case sensitive."""
        with pytest.raises(InvalidDirectionCode):
            parse_direction(code)

    def test_error_keeps_code(self):
        """Test the error carries the bad code."""
        with pytest.raises(InvalidDirectionCode) as exc_info:
            parse_direction("X")
        assert exc_info.value.value == "X"

    def test_error_is_value_error(self):
        """Test direction errors are ValueErrors."""
        with pytest.raises(ValueError):
            parse_direction("X")


class TestFormatDirection:
    def test_format_is_inverse_of_parse(self):
        """Test format and parse round trip every Direction."""
        for d in Direction:
            assert parse_direction(format_direction(d)) == d

    def test_unknown_formats_as_question_mark(self):
        """Test UNKNOWN formats as "?"."""
        assert format_direction(Direction.UNKNOWN) == "?"


class TestOpposite:
    def test_north_south(self):
        """Test N and S are opposites."""
        assert opposite(Direction.NORTH) == Direction.SOUTH
        assert opposite(Direction.SOUTH) == Direction.NORTH

    def test_northeast_southwest(self):
        """Test NE and SW are opposites."""
        assert opposite(Direction.NORTH_EAST) == Direction.SOUTH_WEST

    def test_southeast_northwest(self):
        """Test SE and NW are opposites."""
        assert opposite(Direction.SOUTH_EAST) == Direction.NORTH_WEST

    def test_unknown_is_own_opposite(self):
        """Test UNKNOWN is its own opposite."""
        assert opposite(Direction.UNKNOWN) == Direction.UNKNOWN

    def test_double_opposite(self):
        """Test opposite twice gives the original."""
        for d in Direction:
            assert opposite(opposite(d)) == d

    def test_opposite_is_three_steps_clockwise(self):
        """Test opposites are three steps apart clockwise."""
        for i, d in enumerate(DIRECTIONS):
            assert opposite(d) == DIRECTIONS[(i + 3) % 6]


class Heading(BaseModel):
    direction: Direction


class TestDirectionJson:
    def test_dumps_code(self):
        """Test a Direction field serializes as its short code."""
        assert Heading(direction=Direction.NORTH_EAST).model_dump_json() == '{"direction":"NE"}'

    def test_round_trip(self):
        """Test every Direction survives a JSON round trip."""
        for d in Direction:
            heading = Heading(direction=d)
            assert Heading.model_validate_json(heading.model_dump_json()) == heading

    def test_rejects_unknown_code(self):
        """Test JSON with a code that is not a direction fails validation."""
        with pytest.raises(ValidationError):
            Heading.model_validate_json('{"direction":"E"}')
