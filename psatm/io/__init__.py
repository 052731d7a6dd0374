#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from .reader import PDBReader
from .writer import PDBWriter
__all__ = ['PDBReader', 'PDBWriter']
