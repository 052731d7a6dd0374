#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
PDB Common Utilities

Fixed-column constants and helpers for reading and rewriting ATOM records.
All column ranges are 0-indexed and half-open.
"""

from typing import Tuple


ATOM_RECORD_TAG = "ATOM  "

# PDB column ranges used by the converter
PDB_COLUMNS = {
    "RECORD_TYPE": (0, 6),
    "ATOM_SERIAL": (6, 11),
    "ATOM_NAME": (12, 16),
    "RES_NAME": (17, 20),
    "RESIDUE_KEY": (17, 26),     # residue name + chain ID + sequence number
    "X": (30, 38),
    "Y": (38, 46),
    "Z": (46, 54),
    "COORDINATES": (30, 54),
    "ELEMENT": (76, 78)
}

AXES = ("X", "Y", "Z")

PSEUDOATOM_NAME = " X  "
# Same marker cut to the 2-column element field
PSEUDOATOM_ELEMENT = PSEUDOATOM_NAME[:2]

SERIAL_WIDTH = 5
COORDINATE_WIDTH = 8
COORDINATE_PRECISION = 3


def is_atom_record(line: str) -> bool:
    """
    Check whether a line is an ATOM record.

    HETATM, TER, REMARK and every other record type are not atom records.

    Args:
        line (str): Raw PDB line

    Returns:
        bool: True if the line starts with the ATOM record tag
    """
    return line.startswith(ATOM_RECORD_TAG)


def get_field(line: str, name: str) -> str:
    """
    Get the raw (untrimmed) text of a named PDB column range.

    Args:
        line (str): PDB line
        name (str): Key of PDB_COLUMNS

    Returns:
        str: Column text, shorter than the range if the line is short
    """
    start, end = PDB_COLUMNS[name]
    return line[start:end]


def residue_key(line: str) -> str:
    """Residue grouping key: columns 17-26 taken verbatim."""
    return get_field(line, "RESIDUE_KEY")


def residue_name(line: str) -> str:
    return get_field(line, "RES_NAME").strip()


def atom_name(line: str) -> str:
    return get_field(line, "ATOM_NAME").strip()


def strip_line_terminator(line: str) -> str:
    """Remove one trailing \\n or \\r\\n; any other trailing text is kept."""
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def parse_coordinate_field(field: str) -> float:
    """
    Parse a fixed-width coordinate field.

    Spaces are removed first. Only plain ASCII number text is accepted:
    digit separators ("1_000"), tabs and other whitespace are rejected.

    Args:
        field (str): Raw coordinate columns

    Returns:
        float: Parsed value

    Raises:
        ValueError: If the field is not a number
    """
    text = field.replace(" ", "")
    if "_" in text or not text.isascii() or text != text.strip():
        raise ValueError(f"Invalid coordinate text: '{field}'")
    return float(text)


def replace_columns(line: str, start: int, end: int, text: str) -> str:
    """
    Replace the columns [start, end) of a line with text of the same width.

    Args:
        line (str): Line to modify
        start (int): First column
        end (int): Column after the last one
        text (str): Replacement text, exactly end - start characters

    Returns:
        str: New line

    Raises:
        ValueError: If the replacement does not fit the column range
    """
    if len(text) != end - start:
        raise ValueError(f"Replacement '{text}' does not fit columns {start}-{end}")
    return line[:start] + text + line[end:]


def format_coordinates(x: float, y: float, z: float) -> str:
    """
    Format three coordinates as consecutive 8.3f PDB fields.

    Args:
        x (float): x coordinate
        y (float): y coordinate
        z (float): z coordinate

    Returns:
        str: 24-character coordinate block
    """
    return "".join(f"{c:>{COORDINATE_WIDTH}.{COORDINATE_PRECISION}f}" for c in (x, y, z))


def rewrite_pseudoatom_line(template: str, serial: int, centroid: Tuple[float, float, float]) -> str:
    """
    Turn a residue's template ATOM line into its pseudoatom record.

    Serial number, atom name, coordinates and element columns are replaced;
    every other column of the template is carried through unchanged. Lines
    shorter than the element field are padded with spaces first.

    Args:
        template (str): ATOM line of the residue
        serial (int): 1-based pseudoatom serial number
        centroid (Tuple[float, float, float]): Pseudoatom position

    Returns:
        str: Pseudoatom line, as long as the (padded) template
    """
    new_line = template.ljust(PDB_COLUMNS["ELEMENT"][1])

    # Field overflow (serial > 99999, coordinates wider than 8 columns) is
    # not checked, slicing keeps whatever the format produced
    coord_start, coord_end = PDB_COLUMNS["COORDINATES"]
    new_line = new_line[:coord_start] + format_coordinates(*centroid) + new_line[coord_end:]
    serial_start, serial_end = PDB_COLUMNS["ATOM_SERIAL"]
    new_line = new_line[:serial_start] + f"{serial:>{SERIAL_WIDTH}}" + new_line[serial_end:]
    new_line = replace_columns(new_line, *PDB_COLUMNS["ATOM_NAME"], PSEUDOATOM_NAME)
    new_line = replace_columns(new_line, *PDB_COLUMNS["ELEMENT"], PSEUDOATOM_ELEMENT)
    return new_line
