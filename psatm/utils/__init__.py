#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Utilities Module

Logging and fixed-column PDB helpers.
"""

from .logger import Logger
from .common import (
    ATOM_RECORD_TAG,
    PDB_COLUMNS,
    is_atom_record,
    residue_key,
    format_coordinates,
    rewrite_pseudoatom_line
)

__all__ = [
    'Logger',
    'ATOM_RECORD_TAG',
    'PDB_COLUMNS',
    'is_atom_record',
    'residue_key',
    'format_coordinates',
    'rewrite_pseudoatom_line'
]
