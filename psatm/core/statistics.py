#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Conversion Statistics Module

Counts what a pseudoatom conversion pass saw and produced.
"""

from typing import Dict, List


class ConversionStatistics:
    """
    Counters filled in by the aggregator during one pass.

    Attributes:
        total_lines (int): Input lines read
        atom_records (int): ATOM records inspected
        catalytic_atoms (int): ATOM records matched as catalytic atoms
        residues (int): Residues closed out
        pseudoatoms (int): Pseudoatom records written
        unresolved_residues (List[str]): Keys of residues without catalytic atoms
    """
    def __init__(self):
        self.total_lines = 0
        self.atom_records = 0
        self.catalytic_atoms = 0
        self.residues = 0
        self.pseudoatoms = 0
        self.unresolved_residues: List[str] = []

    @property
    def skipped_lines(self) -> int:
        return self.total_lines - self.atom_records

    def get_statistics(self) -> Dict[str, int]:
        """
        Summarize the counters.

        Returns:
            Dict[str, int]: Counter name to value
        """
        return {
            'total_lines': self.total_lines,
            'atom_records': self.atom_records,
            'skipped_lines': self.skipped_lines,
            'catalytic_atoms': self.catalytic_atoms,
            'residues': self.residues,
            'pseudoatoms': self.pseudoatoms,
            'unresolved_residues': len(self.unresolved_residues)
        }

    def __repr__(self) -> str:
        return f"ConversionStatistics(residues={self.residues}, pseudoatoms={self.pseudoatoms})"
