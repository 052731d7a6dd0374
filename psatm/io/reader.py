#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
PDB Reader Module

Handles PDB file reading.
"""

from typing import List, Optional
from psatm.errors import PDBReadError
from psatm.utils.logger import Logger


class PDBReader:
    """
    Reads the raw lines of a PDB file.

    Attributes:
        logger (Logger): Logger instance for debug logging
    """
    def __init__(self, logger: Optional[Logger] = None):
        self.logger = logger or Logger(module_name="reader")

    def read_lines(self, file_path: str) -> List[str]:
        """
        Read a PDB file into a list of lines without line terminators.

        Only \\n and \\r\\n end a line. Lines that are not valid UTF-8 are
        dropped with a warning; the remaining lines are kept in order.

        Args:
            file_path (str): Path to PDB file

        Returns:
            List[str]: Lines of the file

        Raises:
            PDBReadError: If the file is missing or not readable
        """
        try:
            with open(file_path, 'rb') as f:
                content = f.read()
        except FileNotFoundError as e:
            raise PDBReadError(f"File [ {file_path} ] not found") from e
        except IsADirectoryError as e:
            raise PDBReadError(f"File [ {file_path} ] is a directory") from e
        except PermissionError as e:
            raise PDBReadError(f"Permission denied when reading file [ {file_path} ]") from e
        except OSError as e:
            raise PDBReadError(f"Error reading file [ {file_path} ]: {e}") from e

        raw_lines = content.split(b'\n')
        if raw_lines[-1] == b'':
            raw_lines.pop()

        lines = []
        for line_num, raw_line in enumerate(raw_lines, start=1):
            if raw_line.endswith(b'\r'):
                raw_line = raw_line[:-1]
            try:
                lines.append(raw_line.decode('utf-8'))
            except UnicodeDecodeError as e:
                self.logger.warning(f"Skipping line {line_num} of {file_path}: not valid UTF-8 ({e.reason})")

        self.logger.debug(f"Read {len(lines)} lines from {file_path}")
        return lines
