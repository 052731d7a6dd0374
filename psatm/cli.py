#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pseudoatom CLI Module

Provides the command-line interface of the pseudoatom converter.
"""

import sys
import argparse
import json
import os
from typing import List, Optional
from tqdm import tqdm
from psatm.core.aggregator import ResidueAggregator
from psatm.core.catalytic_atoms import CatalyticAtomTable, DEFAULT_CATALYTIC_TABLE
from psatm.errors import PseudoatomError
from psatm.io.reader import PDBReader
from psatm.io.writer import PDBWriter
from psatm.utils.logger import Logger


USAGE = (
    "NAME\n"
    "\tpsatm - convert residues to pseudoatoms\n"
    "SYNOPSIS\n"
    "\tpsatm [OPTIONS] INFILE OUTFILE\n"
    "DESCRIPTION\n"
    "\tINFILE is the pdbfile containing the data and OUTFILE is the file where the new data should be stored.\n"
    "\tIf INFILE is a directory, every *.pdb file in it is converted into the directory OUTFILE.\n"
    "OPTIONS\n"
    "\t--debug, -d        Enable debug logging\n"
    "\t--log-file PATH    Also write the log to PATH\n"
    "\t--table PATH       JSON file with the catalytic atoms per residue\n"
    "\t--json, -j JSON    JSON parameter string or file path\n"
)


class PseudoatomCLI:
    """
    Command-line interface for the pseudoatom converter.

    Attributes:
        logger (Logger): Logger instance
        reader (PDBReader): PDB file reader
        writer (PDBWriter): Pseudoatom file writer
        aggregator (ResidueAggregator): Residue to pseudoatom converter
    """
    def __init__(self):
        self.logger = None
        self.reader = None
        self.writer = None
        self.aggregator = None

    def parse_arguments(self, args: List[str]) -> dict:
        """
        Parse command-line arguments, applying a JSON config first.

        Args:
            args (List[str]): Command-line arguments

        Returns:
            dict: Parsed arguments as a dictionary

        Raises:
            PseudoatomError: If the JSON config is unreadable, not UTF-8 or not valid JSON
        """
        default_values = {
            'input_file': None,
            'output_file': None,
            'debug': False,
            'log_file': None,
            'table': None
        }

        # Pull the JSON config out before argparse sees the rest
        json_arg = None
        if '--json' in args or '-j' in args:
            json_idx = args.index('--json') if '--json' in args else args.index('-j')
            if json_idx + 1 < len(args):
                json_arg = args[json_idx + 1]
                args = args[:json_idx] + args[json_idx + 2:]

        if json_arg:
            if os.path.isfile(json_arg):
                try:
                    with open(json_arg, 'r', encoding='utf-8') as f:
                        json_data = json.load(f)
                except json.JSONDecodeError as e:
                    raise PseudoatomError(f"Invalid JSON config file {json_arg}: {e}") from e
                except UnicodeDecodeError as e:
                    raise PseudoatomError(f"JSON config file {json_arg} is not valid UTF-8") from e
                except OSError as e:
                    raise PseudoatomError(f"Cannot read JSON config file {json_arg}: {e}") from e
            else:
                try:
                    json_data = json.loads(json_arg)
                except json.JSONDecodeError as e:
                    raise PseudoatomError(f"Invalid JSON string or file path: {json_arg}") from e
            if not isinstance(json_data, dict):
                raise PseudoatomError(f"JSON config must be an object: {json_arg}")

            for key, value in json_data.items():
                if key in default_values:
                    default_values[key] = value

        parser = argparse.ArgumentParser(
            prog='psatm',
            description='Convert residues of a PDB file to pseudoatoms',
            formatter_class=argparse.RawTextHelpFormatter
        )
        parser.add_argument('paths', nargs='*', metavar='PATH', help='Input and output PDB file or directory')
        parser.add_argument('--debug', '-d', action='store_true', default=None, help='Enable debug logging')
        parser.add_argument('--log-file', help='Also write the log to this file')
        parser.add_argument('--table', help='JSON file with the catalytic atoms per residue')

        args_dict = vars(parser.parse_args(args))

        # Exactly INFILE OUTFILE; any other count leaves both unset so run() prints the usage
        paths = args_dict.pop('paths')
        if paths:
            if len(paths) == 2:
                args_dict['input_file'], args_dict['output_file'] = paths
            else:
                default_values['input_file'] = None
                default_values['output_file'] = None
        for key, value in args_dict.items():
            if value is not None:
                default_values[key] = value

        return default_values

    def print_help(self) -> None:
        """
        Print the usage message.
        """
        print(USAGE)

    def run(self, args: List[str]) -> int:
        """
        Run the CLI application.

        Args:
            args (List[str]): Command-line arguments

        Returns:
            int: Exit code (0 for success, 1 for failure)
        """
        self.logger = Logger(False, None, "psatm")
        try:
            parsed_args = self.parse_arguments(args)
        except PseudoatomError as e:
            self.logger.error(str(e))
            return 1

        self.logger = Logger(bool(parsed_args['debug']), parsed_args['log_file'], "psatm")
        if parsed_args['debug']:
            self.logger.log_dict(parsed_args, "Parameters")

        if not parsed_args['input_file'] or not parsed_args['output_file']:
            self.print_help()
            return 1

        try:
            table = self.load_table(parsed_args['table'])
        except PseudoatomError as e:
            self.logger.error(str(e))
            return 1

        self.reader = PDBReader(self.logger.child("reader"))
        self.writer = PDBWriter(self.logger.child("writer"))
        self.aggregator = ResidueAggregator(table, self.logger.child("aggregator"))

        if os.path.isdir(parsed_args['input_file']):
            return self.run_batch(parsed_args['input_file'], parsed_args['output_file'])
        return self.run_convert(parsed_args['input_file'], parsed_args['output_file'])

    def load_table(self, table_path: Optional[str]) -> CatalyticAtomTable:
        """
        Load the catalytic atom table.

        Args:
            table_path (Optional[str]): JSON table file, None for the built-in table

        Returns:
            CatalyticAtomTable: Table to use
        """
        if not table_path:
            return DEFAULT_CATALYTIC_TABLE
        table = CatalyticAtomTable.from_json(table_path)
        self.logger.info(f"Loaded catalytic atoms for {len(table)} residue types from {table_path}")
        return table

    def convert_file(self, input_file: str, output_file: str) -> None:
        """
        Convert one PDB file. Nothing is written if the conversion fails.

        Args:
            input_file (str): Input PDB file
            output_file (str): Output PDB file

        Raises:
            PseudoatomError: On read, parse or write failure
        """
        lines = self.reader.read_lines(input_file)
        result = self.aggregator.aggregate(lines)
        for notice in result.diagnostics:
            self.logger.warning(notice)
        self.writer.write_file(result.output_lines, output_file)
        self.writer.write_conversion_report(result.statistics, input_file, output_file)

    def run_convert(self, input_file: str, output_file: str) -> int:
        """
        Run single-file conversion.

        Args:
            input_file (str): Input PDB file
            output_file (str): Output PDB file

        Returns:
            int: Exit code (0 for success, 1 for failure)
        """
        self.logger.info(f"Converting PDB file: {input_file}")
        try:
            self.convert_file(input_file, output_file)
        except PseudoatomError as e:
            self.logger.error(str(e))
            return 1
        self.logger.info(f"Pseudoatoms written to {output_file}")
        return 0

    def run_batch(self, input_dir: str, output_dir: str) -> int:
        """
        Convert every *.pdb file of a directory into another directory.

        Args:
            input_dir (str): Directory with input PDB files
            output_dir (str): Directory for the output files, created if missing

        Returns:
            int: Exit code (0 if every file converted, 1 otherwise)
        """
        if os.path.realpath(input_dir) == os.path.realpath(output_dir):
            self.logger.error("Input and output directory must differ in batch mode")
            return 1

        pdb_files = sorted(f for f in os.listdir(input_dir)
                           if f.lower().endswith('.pdb') and os.path.isfile(os.path.join(input_dir, f)))
        if not pdb_files:
            self.logger.error(f"No PDB files found in {input_dir}")
            return 1

        try:
            os.makedirs(output_dir, exist_ok=True)
        except OSError as e:
            self.logger.error(f"Unable to create output directory [ {output_dir} ]: {e}")
            return 1

        self.logger.section(f"Batch Conversion ({len(pdb_files)} files)")
        failed = []
        for file_name in tqdm(pdb_files, desc="Converting PDB files"):
            try:
                self.convert_file(os.path.join(input_dir, file_name), os.path.join(output_dir, file_name))
            except PseudoatomError as e:
                self.logger.error(f"{file_name}: {e}")
                failed.append(file_name)

        self.logger.section("Batch Conversion Completed")
        self.logger.info(f"Converted {len(pdb_files) - len(failed)}/{len(pdb_files)} files into {output_dir}")
        if failed:
            self.logger.error(f"Failed files: {', '.join(failed)}")
            return 1
        return 0


def main_cli() -> int:
    """
    Main CLI entry point.

    Returns:
        int: Exit code
    """
    cli = PseudoatomCLI()
    return cli.run(sys.argv[1:])
