# test_common.py
"""Tests for fixed-column PDB helpers and accumulator models."""
import pytest

from psatm.models.coordinate import Coordinate
from psatm.models.residue import ResidueAccumulator
from psatm.utils.common import (
    format_coordinates, is_atom_record, parse_coordinate_field, replace_columns, residue_key,
    rewrite_pseudoatom_line, strip_line_terminator
)


class TestColumnHelpers:
    """Record detection and column access."""

    def test_is_atom_record(self):
        """Only the exact 'ATOM  ' tag counts."""
        assert is_atom_record("ATOM      1  N   ALA A   1")
        assert not is_atom_record("HETATM    1  O   HOH A   1")
        assert not is_atom_record("ATOMX     1")
        assert not is_atom_record("ATOM")
        assert not is_atom_record("")

    def test_residue_key(self, atom_line):
        """The key is columns 17-26 verbatim."""
        assert residue_key(atom_line(1, "N", "GLY", "C", 1234, 0.0, 0.0, 0.0)) == "GLY C1234"

    def test_replace_columns_width_checked(self):
        """Replacement text must fit the range."""
        assert replace_columns("abcdef", 1, 3, "XY") == "aXYdef"
        with pytest.raises(ValueError):
            replace_columns("abcdef", 1, 3, "XYZ")

    def test_format_coordinates(self):
        """Three right-justified 8.3f fields."""
        assert format_coordinates(1.0, -2.5, 10.1234) == "   1.000  -2.500  10.123"

    def test_strip_line_terminator(self):
        """Exactly one LF or CRLF is removed."""
        assert strip_line_terminator("abc\n") == "abc"
        assert strip_line_terminator("abc\r\n") == "abc"
        assert strip_line_terminator("abc\r\r\n") == "abc\r"
        assert strip_line_terminator("abc\n\n") == "abc\n"
        assert strip_line_terminator("abc  ") == "abc  "

    def test_parse_coordinate_field(self):
        """Padded numbers parse, spaces inside the field are dropped."""
        assert parse_coordinate_field("  -1.500") == -1.5
        assert parse_coordinate_field(" 12. 5  ") == 12.5

    @pytest.mark.parametrize("field", ["   1_000", "1.0\t   ", "\t   1.00", "   abc.d", "        ", "  1.0e\u00a0"])
    def test_parse_coordinate_field_rejects(self, field):
        """Digit separators, tabs, other whitespace and text are not numbers."""
        with pytest.raises(ValueError):
            parse_coordinate_field(field)


class TestRewritePseudoatomLine:
    """Rewrite of a template ATOM line."""

    def test_rewrite(self, atom_line):
        """Only serial, name, coordinates and element change."""
        template = atom_line(42, "N", "TRP", "D", 77, 9.0, 9.0, 9.0, "N")

        new_line = rewrite_pseudoatom_line(template, 3, (1.5, -2.0, 0.25))

        assert len(new_line) == len(template)
        assert new_line[6:11] == "    3"
        assert new_line[12:16] == " X  "
        assert new_line[30:54] == "   1.500  -2.000   0.250"
        assert new_line[76:78] == " X"
        assert new_line[:6] == template[:6]
        assert new_line[16:30] == template[16:30]
        assert new_line[54:76] == template[54:76]
        assert new_line[78:] == template[78:]


class TestAccumulators:
    """Coordinate and residue accumulators."""

    def test_coordinate_center(self):
        """The center is the per-axis mean."""
        coordinate = Coordinate()
        coordinate.add_point(0.0, 0.0, 0.0)
        coordinate.add_point(1.0, 2.0, 3.0)
        coordinate.add_point(2.0, 4.0, 6.0)

        assert coordinate.get_point_count() == 3
        assert coordinate.calculate_geometric_center() == pytest.approx((1.0, 2.0, 3.0))

    def test_empty_coordinate_center_raises(self):
        """An empty set has no center."""
        coordinate = Coordinate()

        assert coordinate.is_empty()
        with pytest.raises(ValueError):
            coordinate.calculate_geometric_center()

    def test_coordinate_center_sums_in_order(self):
        """Points are summed one by one in float32 before dividing."""
        coordinate = Coordinate()
        for x in (962.47, 435.67, 979.546, -181.737, -620.682, -662.922):
            coordinate.add_point(x, 0.0, 0.0)

        x, y, z = coordinate.calculate_geometric_center()

        assert f"{x:8.3f}" == " 152.057"
        assert (y, z) == (0.0, 0.0)

    def test_residue_centroid(self, atom_line):
        """No matched atoms means no centroid."""
        residue = ResidueAccumulator("ALA A   1", atom_line(1, "N", "ALA", "A", 1, 0.0, 0.0, 0.0))

        assert residue.centroid() is None
        residue.add_catalytic_atom(4.0, 2.0, -2.0)
        assert residue.match_count == 1
        assert residue.centroid() == pytest.approx((4.0, 2.0, -2.0))
