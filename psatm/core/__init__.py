#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Core Module

Catalytic atom table and the residue to pseudoatom aggregation pass.
"""

from .catalytic_atoms import CATALYTIC_ATOMS, CatalyticAtomTable, DEFAULT_CATALYTIC_TABLE
from .aggregator import AggregationResult, ResidueAggregator, aggregate
from .statistics import ConversionStatistics

__all__ = [
    'CATALYTIC_ATOMS',
    'CatalyticAtomTable',
    'DEFAULT_CATALYTIC_TABLE',
    'AggregationResult',
    'ResidueAggregator',
    'aggregate',
    'ConversionStatistics'
]
