# test_io.py
"""Tests for PDB reading and pseudoatom writing."""
import io

import pytest

from psatm.core.statistics import ConversionStatistics
from psatm.errors import PDBReadError, PDBWriteError
from psatm.io.reader import PDBReader
from psatm.io.writer import PDBWriter
from psatm.utils.logger import Logger


class TestPDBReader:
    """Reading raw lines."""

    def test_read_lines_strips_terminators(self, tmp_path):
        """LF and CRLF terminators are removed, trailing spaces kept."""
        path = tmp_path / "in.pdb"
        path.write_bytes(b"HEADER  \r\nATOM  line\nEND\n")

        lines = PDBReader().read_lines(str(path))

        assert lines == ["HEADER  ", "ATOM  line", "END"]

    def test_last_line_without_newline(self, tmp_path):
        """A final line without terminator is kept."""
        path = tmp_path / "in.pdb"
        path.write_text("A\nB")

        assert PDBReader().read_lines(str(path)) == ["A", "B"]

    def test_empty_file(self, tmp_path):
        """An empty file has no lines."""
        path = tmp_path / "in.pdb"
        path.write_text("")

        assert PDBReader().read_lines(str(path)) == []

    def test_undecodable_line_is_skipped(self, tmp_path, atom_line):
        """A line that is not UTF-8 is dropped with a warning, the rest is read."""
        path = tmp_path / "in.pdb"
        cb_line = atom_line(1, "CB", "ALA", "A", 1, 1.0, 2.0, 3.0)
        path.write_bytes(b"REMARK   AUTHOR M\xfcller\n" + cb_line.encode() + b"\n")
        stream = io.StringIO()

        lines = PDBReader(Logger(module_name="reader", stream=stream, use_colors=False)).read_lines(str(path))

        assert lines == [cb_line]
        assert "Skipping line 1" in stream.getvalue()

    def test_missing_file(self, tmp_path):
        """A missing file raises PDBReadError naming the path."""
        missing = tmp_path / "missing.pdb"

        with pytest.raises(PDBReadError, match="not found"):
            PDBReader().read_lines(str(missing))

    def test_directory(self, tmp_path):
        """A directory is not readable as a PDB file."""
        with pytest.raises(PDBReadError):
            PDBReader().read_lines(str(tmp_path))


class TestPDBWriter:
    """Writing pseudoatom lines."""

    def test_write_string(self):
        """Every line ends with a newline."""
        assert PDBWriter().write_string(["A", "B"]) == "A\nB\n"
        assert PDBWriter().write_string([]) == ""

    def test_write_file(self, tmp_path):
        """Lines are written one per line."""
        path = tmp_path / "out.pdb"

        PDBWriter().write_file(["ATOM  1", "ATOM  2"], str(path))

        assert path.read_text() == "ATOM  1\nATOM  2\n"

    def test_unwritable_path(self, tmp_path):
        """A path inside a missing directory raises PDBWriteError."""
        path = tmp_path / "missing_dir" / "out.pdb"

        with pytest.raises(PDBWriteError):
            PDBWriter().write_file(["ATOM"], str(path))

    def test_conversion_report(self):
        """The report lists counters and unresolved residues."""
        stream = io.StringIO()
        logger = Logger(stream=stream, use_colors=False, module_name="writer")
        stats = ConversionStatistics()
        stats.residues = 2
        stats.pseudoatoms = 1
        stats.unresolved_residues.append("HOH A   3")

        PDBWriter(logger).write_conversion_report(stats, "in.pdb", "out.pdb")

        output = stream.getvalue()
        assert "=== Pseudoatom Conversion Report ===" in output
        assert "pseudoatoms" in output
        assert "[ HOH A   3 ]" in output
        assert "\033[" not in output


class TestLogger:
    """Logger levels and file output."""

    def test_debug_hidden_unless_debug_mode(self):
        """DEBUG lines are only written in debug mode."""
        stream = io.StringIO()
        Logger(stream=stream, use_colors=False).debug("hidden")
        Logger(debug=True, stream=stream, use_colors=False).debug("shown")

        assert "hidden" not in stream.getvalue()
        assert "[DEBUG] shown" in stream.getvalue()

    def test_log_file_without_colors(self, tmp_path):
        """The log file gets plain lines."""
        log_file = tmp_path / "logs" / "psatm.log"
        logger = Logger(log_file=str(log_file), module_name="psatm", stream=io.StringIO())

        logger.warning("careful")

        content = log_file.read_text()
        assert "[WARN ] [psatm] careful" in content
        assert "\033[" not in content

    def test_child_shares_settings(self):
        """A child logger writes to the same stream under its own tag."""
        stream = io.StringIO()
        parent = Logger(debug=True, stream=stream, use_colors=False, module_name="psatm")

        parent.child("reader").debug("read")

        assert "[reader] read" in stream.getvalue()

    def test_unknown_level(self):
        """Unknown levels are rejected."""
        with pytest.raises(ValueError):
            Logger(stream=io.StringIO()).log("x", "TRACE")
