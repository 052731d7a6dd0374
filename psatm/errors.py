#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pseudoatom Error Types

Exceptions raised by the converter. The CLI catches PseudoatomError,
logs it and exits with status 1.
"""


class PseudoatomError(Exception):
    """Base class for all converter errors."""


class CoordinateParseError(PseudoatomError, ValueError):
    """
    A coordinate field of a catalytic atom is not a number.

    Attributes:
        line_index (int): 0-indexed line number in the input
        axis (str): Axis of the field (X, Y or Z)
        line (str): The offending line
    """
    def __init__(self, line_index: int, axis: str, line: str):
        self.line_index = line_index
        self.axis = axis
        self.line = line
        super().__init__(f"Cannot convert coordinate {axis} from line [ {line_index} ] to float")


class PDBReadError(PseudoatomError):
    """The input PDB file cannot be read."""


class PDBWriteError(PseudoatomError):
    """The output PDB file cannot be created or written."""


class CatalyticTableError(PseudoatomError):
    """A catalytic atom table file is malformed."""
