#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pseudoatom Model Package

Provides the coordinate and residue accumulators used during aggregation.
"""

from .coordinate import Coordinate
from .residue import ResidueAccumulator

__all__ = ['Coordinate', 'ResidueAccumulator']
