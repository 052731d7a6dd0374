#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pseudoatom Converter Main Application

Main entry point for the pseudoatom converter.
"""

import sys
from psatm.cli import main_cli


if __name__ == "__main__":
    exit_code = main_cli()
    sys.exit(exit_code)
