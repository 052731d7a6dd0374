#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pseudoatom Converter Package

Collapses the residues of a PDB file into pseudoatoms placed at the centroid
of their catalytic atoms.
"""

from .cli import main_cli
from .core.aggregator import AggregationResult, ResidueAggregator, aggregate
from .core.catalytic_atoms import CatalyticAtomTable, DEFAULT_CATALYTIC_TABLE
from .core.statistics import ConversionStatistics
from .errors import (
    PseudoatomError, CoordinateParseError, PDBReadError, PDBWriteError, CatalyticTableError
)
from .io.reader import PDBReader
from .io.writer import PDBWriter
from .utils.logger import Logger

__all__ = [
    'main_cli',
    'aggregate',
    'AggregationResult',
    'ResidueAggregator',
    'CatalyticAtomTable',
    'DEFAULT_CATALYTIC_TABLE',
    'ConversionStatistics',
    'PseudoatomError',
    'CoordinateParseError',
    'PDBReadError',
    'PDBWriteError',
    'CatalyticTableError',
    'PDBReader',
    'PDBWriter',
    'Logger'
]

__version__ = '1.0.0'
__description__ = 'Convert protein residues to catalytic-atom pseudoatoms'
