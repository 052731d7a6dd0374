#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pseudoatom Logger Utility

Timestamped, colored console logging for the pseudoatom converter with an
optional plain-text log file.
"""

from typing import List, Optional, TextIO
from datetime import datetime
import os
import sys


LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class Logger:
    """
    Console/file logger used by every psatm component.

    Attributes:
        is_debug (bool): Whether DEBUG messages are emitted
        log_file (Optional[str]): Path of the plain-text log file
        module_name (str): Tag printed in front of each message
        stream (TextIO): Console stream, stdout unless given
        use_colors (bool): Whether ANSI colors are written to the console
    """
    def __init__(self, debug: bool = False, log_file: Optional[str] = None, module_name: str = "",
                 stream: Optional[TextIO] = None, use_colors: bool = True):
        self.is_debug = debug
        self.log_file = log_file
        self.module_name = module_name
        self.stream = stream
        self.use_colors = use_colors

        self.colors = {
            "INFO": "\033[94m",    # Blue
            "DEBUG": "\033[90m",   # Gray
            "WARNING": "\033[93m", # Yellow
            "ERROR": "\033[91m",   # Red
            "RESET": "\033[0m"
        }
        self.level_formats = {
            "INFO": "INFO ",
            "DEBUG": "DEBUG",
            "WARNING": "WARN ",
            "ERROR": "ERROR"
        }

    def child(self, module_name: str) -> 'Logger':
        """
        Create a logger sharing this logger's settings under another module tag.

        Args:
            module_name (str): Module tag of the new logger

        Returns:
            Logger: New logger instance
        """
        return Logger(self.is_debug, self.log_file, module_name, self.stream, self.use_colors)

    def is_enabled(self, level: str) -> bool:
        """Return True if messages of the given level are emitted."""
        return level != "DEBUG" or self.is_debug

    def log(self, message: str, level: str = "INFO", indent: int = 0) -> None:
        """
        Log a message with timestamp, level and module tag.

        Args:
            message (str): The message to log
            level (str): Log level (DEBUG, INFO, WARNING, ERROR)
            indent (int): Number of spaces to indent the message
        """
        if level not in LEVELS:
            raise ValueError(f"Unknown log level: {level}")
        if not self.is_enabled(level):
            return

        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        module_part = f"[{self.module_name}] " if self.module_name else ""
        log_message = f"[{timestamp}] [{self.level_formats[level]}] {module_part}{' ' * indent}{message}"

        stream = self.stream or sys.stdout
        if self.use_colors:
            stream.write(f"{self.colors[level]}{log_message}{self.colors['RESET']}\n")
        else:
            stream.write(log_message + "\n")

        # Log file never gets colors
        if self.log_file:
            log_dir = os.path.dirname(self.log_file)
            if log_dir and not os.path.exists(log_dir):
                os.makedirs(log_dir, exist_ok=True)
            with open(self.log_file, "a", encoding="utf-8") as f:
                f.write(log_message + "\n")

    def info(self, message: str, indent: int = 0) -> None:
        self.log(message, "INFO", indent)

    def debug(self, message: str, indent: int = 0) -> None:
        self.log(message, "DEBUG", indent)

    def warning(self, message: str, indent: int = 0) -> None:
        self.log(message, "WARNING", indent)

    def error(self, message: str, indent: int = 0) -> None:
        self.log(message, "ERROR", indent)

    def section(self, title: str) -> None:
        """
        Log a section title.

        Args:
            title (str): The section title
        """
        self.info(f"=== {title} ===")

    def table(self, headers: List[str], rows: List[list], indent: int = 0) -> None:
        """
        Log tabular data with left-justified columns.

        Args:
            headers (List[str]): Table headers
            rows (List[list]): Table rows
            indent (int): Number of spaces to indent the table
        """
        if not headers or not rows:
            return

        widths = [len(h) for h in headers]
        for row in rows:
            for i, col in enumerate(row):
                if i < len(widths):
                    widths[i] = max(widths[i], len(str(col)))

        header_line = " | ".join([h.ljust(w) for h, w in zip(headers, widths)])
        self.info(header_line, indent)
        self.info("-" * (len(header_line) + 2), indent)
        for row in rows:
            self.info(" | ".join([str(col).ljust(w) for col, w in zip(row, widths)]), indent)

    def log_dict(self, data: dict, title: str = "Parameters", indent: int = 0) -> None:
        """
        Log a dictionary under a section title, one key per line.

        Args:
            data (dict): Dictionary to log
            title (str): Section title
            indent (int): Number of spaces to indent
        """
        if not data:
            return

        self.section(title)
        for key, value in data.items():
            if isinstance(value, (list, tuple)):
                value_str = ", ".join(str(v) for v in value)
            else:
                value_str = str(value)
            self.info(f"{key}: {value_str}", indent + 2)
