"""Tests for the description, move and solution text formats."""

import pytest

from untangle import DescriptionFormatError, Edge, Graph, InvalidEdgeError, RationalPoint
from untangle.codec import (
    Move,
    PointUpdate,
    decode_description,
    decode_solution,
    encode_description,
    encode_move,
    encode_solution,
    parse_move,
    validate_description,
)

# =============================================================================
# Descriptions
# =============================================================================


class TestEncodeDescription:
    """Tests for encode_description."""

    def test_sorted_tokens(self):
        """Tokens come out in (a, b) order whatever the input order."""
        assert encode_description([Edge(2, 3), Edge(1, 0), Edge(0, 3)]) == "0-1,0-3,2-3"

    def test_graph_input(self):
        assert encode_description(Graph(4, [(3, 1), (0, 2)])) == "0-2,1-3"

    def test_empty(self):
        assert encode_description([]) == ""


class TestDecodeDescription:
    """Tests for decode_description."""

    def test_basic(self):
        graph = decode_description("0-1,1-2", 3)
        assert graph == Graph(3, [(0, 1), (1, 2)])

    def test_reversed_token(self):
        """Endpoints may be written either way round."""
        assert decode_description("3-0", 4).edges == (Edge(0, 3),)

    def test_empty(self):
        graph = decode_description("", 4)
        assert graph.n == 4
        assert len(graph) == 0

    def test_re_encodes_identically(self):
        desc = "0-1,0-2,1-3,2-3"
        assert encode_description(decode_description(desc, 4)) == desc

    def test_missing_number(self):
        with pytest.raises(DescriptionFormatError, match="Expected number"):
            decode_description("0-1,,1-2", 3)

    def test_trailing_separator(self):
        with pytest.raises(DescriptionFormatError, match="Expected number"):
            decode_description("0-1,", 3)

    def test_missing_dash(self):
        with pytest.raises(DescriptionFormatError, match="Expected '-' after number"):
            decode_description("0-1,12", 3)

    @pytest.mark.parametrize("desc", ["a-b", "0-", "-1", "0-1-2", "0 - 1", "+1-2"])
    def test_malformed_token(self, desc):
        with pytest.raises(DescriptionFormatError, match="Malformed edge"):
            decode_description(desc, 3)

    def test_out_of_range(self):
        with pytest.raises(DescriptionFormatError, match="Number out of range"):
            decode_description("0-4", 4)

    def test_self_loop(self):
        with pytest.raises(InvalidEdgeError, match="Self-loop"):
            decode_description("1-1", 4)

    def test_duplicate(self):
        """Duplicates are rejected in either direction."""
        with pytest.raises(InvalidEdgeError, match="duplicate edge 0-1"):
            decode_description("0-1,1-0", 4)

    def test_overlong_number(self):
        """Numbers too long for int() are format errors, not ValueErrors."""
        desc = "9" * 5000 + "-1"
        with pytest.raises(DescriptionFormatError):
            decode_description(desc, 4)
        assert isinstance(validate_description(desc, 4), str)


class TestValidateDescription:
    """Tests for validate_description."""

    def test_valid_returns_none(self):
        assert validate_description("0-1,2-3", 4) is None

    def test_invalid_returns_message(self):
        assert validate_description("0-9", 4) == "Number out of range in game description"


# =============================================================================
# Moves
# =============================================================================


class TestParseMove:
    """Tests for parse_move."""

    def test_point_updates(self):
        move = parse_move("P3:120,-4/64;P0:1,1/2", 4)
        assert move == Move(
            solve=False,
            updates=(
                PointUpdate(3, RationalPoint(120, -4, 64)),
                PointUpdate(0, RationalPoint(1, 1, 2)),
            ),
        )

    def test_solve_marker_alone(self):
        assert parse_move("S", 4) == Move(solve=True)

    @pytest.mark.parametrize("text", ["S;P0:1,1/1", "SP0:1,1/1"])
    def test_solve_marker_with_updates(self, text):
        move = parse_move(text, 4)
        assert move.solve
        assert move.updates == (PointUpdate(0, RationalPoint(1, 1, 1)),)

    def test_trailing_separator_tolerated(self):
        move = parse_move("P0:1,1/1;", 4)
        assert len(move.updates) == 1

    def test_empty_move(self):
        assert parse_move("", 4) == Move()

    def test_index_out_of_range(self):
        with pytest.raises(DescriptionFormatError, match="Point index 4 out of range"):
            parse_move("P4:1,1/1", 4)

    def test_overlong_number(self):
        with pytest.raises(DescriptionFormatError):
            parse_move("P" + "1" * 5000 + ":1,1/1", 4)

    def test_zero_denominator(self):
        with pytest.raises(DescriptionFormatError, match="denominator must be positive"):
            parse_move("P0:1,1/0", 4)

    @pytest.mark.parametrize(
        "text",
        [
            "P0:1,1",
            "P0:1/1",
            "X",
            "P0:1,1/1;;P1:1,1/1",
            "P0:1,1/-2",
            "P-1:1,1/1",
            "S;S",
            "P0:1,1/1 ",
            "S;;",
            ";",
            "P0:1,1/1;;",
        ],
    )
    def test_malformed(self, text):
        with pytest.raises(DescriptionFormatError):
            parse_move(text, 4)


class TestEncodeMove:
    """Tests for encode_move."""

    def test_updates(self):
        updates = [PointUpdate(2, RationalPoint(5, 7, 64)), PointUpdate(0, RationalPoint(-1, 0, 1))]
        assert encode_move(updates) == "P2:5,7/64;P0:-1,0/1"

    def test_solve(self):
        assert encode_move([PointUpdate(0, RationalPoint(1, 1, 2))], solve=True) == "S;P0:1,1/2"

    def test_move_encode_parses_back(self):
        move = Move(solve=True, updates=(PointUpdate(1, RationalPoint(3, 4, 8)),))
        assert parse_move(move.encode(), 2) == move


# =============================================================================
# Solution records
# =============================================================================


class TestSolutionRecord:
    """Tests for encode_solution and decode_solution."""

    def test_encode(self):
        points = [RationalPoint(3, 5, 2), RationalPoint(1, 1, 2)]
        assert encode_solution(points) == "S;P0:3,5/2;P1:1,1/2"

    def test_decode(self):
        points = decode_solution("S;P1:1,1/2;P0:3,5/2", 2)
        assert points == [RationalPoint(3, 5, 2), RationalPoint(1, 1, 2)]

    def test_missing_marker(self):
        with pytest.raises(DescriptionFormatError, match="solve marker"):
            decode_solution("P0:3,5/2;P1:1,1/2", 2)

    def test_missing_point(self):
        with pytest.raises(DescriptionFormatError, match="exactly one position"):
            decode_solution("S;P0:3,5/2", 2)

    def test_repeated_point(self):
        with pytest.raises(DescriptionFormatError, match="exactly one position"):
            decode_solution("S;P0:3,5/2;P0:1,1/2", 2)
