#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
PDB Writer Module

Handles pseudoatom file writing and the conversion report.
"""

from typing import List, Optional
from psatm.core.statistics import ConversionStatistics
from psatm.errors import PDBWriteError
from psatm.utils.logger import Logger


class PDBWriter:
    """
    Writes pseudoatom lines and reports on a conversion.

    Attributes:
        logger (Logger): Logger instance for debug logging
    """
    def __init__(self, logger: Optional[Logger] = None):
        self.logger = logger or Logger(module_name="writer")

    def write_file(self, lines: List[str], output_path: str) -> None:
        """
        Write lines to a file, each terminated by a newline.

        Args:
            lines (List[str]): Pseudoatom lines
            output_path (str): Path to output PDB file

        Raises:
            PDBWriteError: If the file cannot be created or written
        """
        self.logger.debug(f"Writing {len(lines)} lines to {output_path}")
        try:
            with open(output_path, 'w', encoding='utf-8') as f:
                f.write(self.write_string(lines))
        except PermissionError as e:
            raise PDBWriteError(f"Permission denied for writing to [ {output_path} ]") from e
        except OSError as e:
            raise PDBWriteError(f"Unable to create file at [ {output_path} ]: {e}") from e

    def write_string(self, lines: List[str]) -> str:
        """
        Join lines into file content.

        Args:
            lines (List[str]): Pseudoatom lines

        Returns:
            str: Newline-terminated content, empty for no lines
        """
        return "".join(line + "\n" for line in lines)

    def write_conversion_report(self, statistics: ConversionStatistics, input_path: str,
                                output_path: str) -> None:
        """
        Log a summary of a conversion.

        Args:
            statistics (ConversionStatistics): Counters of the conversion
            input_path (str): Input PDB file
            output_path (str): Output PDB file
        """
        self.logger.section("Pseudoatom Conversion Report")
        self.logger.info(f"Input: {input_path}")
        self.logger.info(f"Output: {output_path}")
        rows = [[key, value] for key, value in statistics.get_statistics().items()]
        self.logger.table(["Counter", "Value"], rows)

        if statistics.unresolved_residues:
            self.logger.section(f"Unresolved Residues ({len(statistics.unresolved_residues)})")
            for key in statistics.unresolved_residues:
                self.logger.warning(f"[ {key} ]", indent=2)
