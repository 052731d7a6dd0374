#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Residue Aggregator Module

Collapses every residue of a PDB file into one pseudoatom placed at the
centroid of the residue's catalytic atoms.

Atom records are grouped by the verbatim text of columns 17-26 (residue
name, chain ID, sequence number). A residue is closed out when the next
ATOM record carries a different key, and once more at the end of the input.
"""

from typing import Iterable, Iterator, List, Optional
from psatm.core.catalytic_atoms import CatalyticAtomTable, DEFAULT_CATALYTIC_TABLE
from psatm.core.statistics import ConversionStatistics
from psatm.errors import CoordinateParseError
from psatm.models.residue import ResidueAccumulator
from psatm.utils.common import (
    AXES, atom_name, get_field, is_atom_record, parse_coordinate_field, residue_key, residue_name,
    rewrite_pseudoatom_line, strip_line_terminator
)
from psatm.utils.logger import Logger


class AggregationResult:
    """
    Output of one aggregation pass.

    Unpacks as ``output_lines, diagnostics``.

    Attributes:
        output_lines (List[str]): Pseudoatom records in residue order
        diagnostics (List[str]): One notice per residue without catalytic atoms
        statistics (ConversionStatistics): Counters of the pass
    """
    def __init__(self, output_lines: List[str], diagnostics: List[str], statistics: ConversionStatistics):
        self.output_lines = output_lines
        self.diagnostics = diagnostics
        self.statistics = statistics

    def __iter__(self) -> Iterator[List[str]]:
        return iter((self.output_lines, self.diagnostics))


class ResidueAggregator:
    """
    Single-pass converter from ATOM lines to pseudoatom lines.

    Attributes:
        table (CatalyticAtomTable): Catalytic atoms per residue type
        logger (Logger): Logger instance for debug logging
    """
    def __init__(self, table: Optional[CatalyticAtomTable] = None, logger: Optional[Logger] = None):
        self.table = table or DEFAULT_CATALYTIC_TABLE
        self.logger = logger or Logger(module_name="aggregator")

    def aggregate(self, lines: Iterable[str]) -> AggregationResult:
        """
        Convert PDB lines to pseudoatom lines.

        Non-ATOM lines are ignored and never break a residue. One trailing
        \\n or \\r\\n is removed before a line is inspected.

        Args:
            lines (Iterable[str]): Lines of the PDB file

        Returns:
            AggregationResult: Pseudoatom lines, diagnostics and statistics

        Raises:
            CoordinateParseError: If a catalytic atom has a non-numeric coordinate
        """
        output_lines: List[str] = []
        diagnostics: List[str] = []
        statistics = ConversionStatistics()
        current: Optional[ResidueAccumulator] = None

        for line_index, raw_line in enumerate(lines):
            statistics.total_lines += 1
            line = strip_line_terminator(raw_line)
            if not is_atom_record(line):
                continue
            statistics.atom_records += 1

            key = residue_key(line)
            if current is None:
                current = ResidueAccumulator(key, line)
                self.logger.debug(f"Opened residue [ {key} ] at line {line_index}")
            elif key != current.key:
                self._close_out(current, output_lines, diagnostics, statistics)
                current = ResidueAccumulator(key, line)
                self.logger.debug(f"Opened residue [ {key} ] at line {line_index}")

            if self.table.is_catalytic(residue_name(line), atom_name(line)):
                x, y, z = self._parse_coordinates(line, line_index)
                current.add_catalytic_atom(x, y, z)
                statistics.catalytic_atoms += 1

        if current is not None:
            self._close_out(current, output_lines, diagnostics, statistics)

        self.logger.debug(
            f"Aggregation finished: {statistics.pseudoatoms} pseudoatoms, "
            f"{len(statistics.unresolved_residues)} unresolved residues"
        )
        return AggregationResult(output_lines, diagnostics, statistics)

    def _parse_coordinates(self, line: str, line_index: int) -> List[float]:
        """
        Parse the X, Y and Z fields of an ATOM line.

        Args:
            line (str): ATOM line
            line_index (int): 0-indexed position of the line in the input

        Returns:
            List[float]: [x, y, z]

        Raises:
            CoordinateParseError: On the first field that is not a number
        """
        coords = []
        for axis in AXES:
            try:
                coords.append(parse_coordinate_field(get_field(line, axis)))
            except ValueError as e:
                raise CoordinateParseError(line_index, axis, line) from e
        return coords

    def _close_out(self, residue: ResidueAccumulator, output_lines: List[str],
                   diagnostics: List[str], statistics: ConversionStatistics) -> None:
        """
        Emit the pseudoatom of a finished residue, or a diagnostic if none of
        its catalytic atoms was found.
        """
        statistics.residues += 1
        centroid = residue.centroid()
        if centroid is None:
            notice = f"Not able to calculate pseudoatom for [ {residue.key} ]"
            diagnostics.append(notice)
            statistics.unresolved_residues.append(residue.key)
            self.logger.debug(notice)
            return

        serial = len(output_lines) + 1
        output_lines.append(rewrite_pseudoatom_line(residue.template, serial, centroid))
        statistics.pseudoatoms += 1
        self.logger.debug(
            f"Closed residue [ {residue.key} ]: {residue.match_count} catalytic atoms, "
            f"centroid ({centroid[0]:.3f}, {centroid[1]:.3f}, {centroid[2]:.3f})"
        )


def aggregate(lines: Iterable[str], table: Optional[CatalyticAtomTable] = None,
              logger: Optional[Logger] = None) -> AggregationResult:
    """
    Convert PDB lines to pseudoatom lines.

    Args:
        lines (Iterable[str]): Lines of the PDB file
        table (CatalyticAtomTable, optional): Catalytic atoms per residue type
        logger (Logger, optional): Logger instance

    Returns:
        AggregationResult: Unpacks as ``output_lines, diagnostics``
    """
    return ResidueAggregator(table, logger).aggregate(lines)
