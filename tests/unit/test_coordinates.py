"""
Unit Tests for Cell Coordinates
"""
import pytest

from osu_export.coordinates import Coordinate, column_name
from osu_export.errors import InvalidArgumentError


class TestColumnName:
    """Tests for column index to letters conversion."""

    @pytest.mark.parametrize(
        "index, expected",
        [(0, "A"), (1, "B"), (25, "Z"), (26, "AA"), (27, "AB"), (51, "AZ"), (52, "BA"), (701, "ZZ"), (702, "AAA")],
    )
    def test_column_name(self, index, expected):
        assert column_name(index) == expected

    def test_negative_index_rejected(self):
        with pytest.raises(InvalidArgumentError):
            column_name(-1)


class TestCoordinate:
    """Tests for Coordinate."""

    def test_ref(self):
        assert Coordinate(1, 0).ref == "A1"
        assert Coordinate(12, 27).ref == "AB12"

    def test_moves(self):
        c = Coordinate(2, 1)
        assert c.below() == Coordinate(3, 1)
        assert c.below(3).ref == "B5"
        assert c.right().ref == "C2"
