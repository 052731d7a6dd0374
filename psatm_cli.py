#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pseudoatom Converter Command Line Tool

Converts the residues of a PDB file to pseudoatoms.
"""

import sys
from psatm import main_cli

if __name__ == "__main__":
    exit_code = main_cli()
    sys.exit(exit_code)
