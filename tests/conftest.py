"""
Shared test configuration for psatm tests.

Adds the repository root to sys.path so `import psatm` works without an
install, and provides a builder for fixed-column ATOM lines.
"""
import sys
import os

import pytest

repo_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if repo_root not in sys.path:
    sys.path.insert(0, repo_root)


def build_atom_line(serial, atom_name, res_name, chain_id, res_seq, x, y, z,
                    element="C", record_type="ATOM", i_code=" ",
                    occupancy=1.0, b_factor=20.0):
    """Build an 80-column PDB record."""
    if len(atom_name) < 4:
        formatted_name = f" {atom_name:<3}"
    else:
        formatted_name = atom_name[:4]
    return (f"{record_type:<6}{serial:5d} {formatted_name} {res_name:>3} {chain_id:1}{res_seq:4d}{i_code:1}   "
            f"{x:8.3f}{y:8.3f}{z:8.3f}{occupancy:6.2f}{b_factor:6.2f}          {element:>2}  ")


@pytest.fixture
def atom_line():
    """Factory for fixed-column ATOM lines."""
    return build_atom_line


@pytest.fixture
def small_pdb_lines():
    """ALA (1 catalytic atom), ASP (2), HOH (none), PHE (6) on chain A."""
    return [
        "HEADER    TEST STRUCTURE",
        build_atom_line(1, "N", "ALA", "A", 1, 0.0, 0.0, 0.0, "N"),
        build_atom_line(2, "CA", "ALA", "A", 1, 0.5, 0.5, 0.5, "C"),
        build_atom_line(3, "CB", "ALA", "A", 1, 1.0, 2.0, 3.0, "C"),
        build_atom_line(4, "N", "ASP", "A", 2, 9.0, 9.0, 9.0, "N"),
        build_atom_line(5, "OD1", "ASP", "A", 2, 0.0, 0.0, 0.0, "O"),
        build_atom_line(6, "OD2", "ASP", "A", 2, 2.0, 0.0, 0.0, "O"),
        build_atom_line(7, "O", "HOH", "A", 3, 5.0, 5.0, 5.0, "O"),
        build_atom_line(8, "N", "PHE", "A", 4, 7.0, 7.0, 7.0, "N"),
        build_atom_line(9, "CG", "PHE", "A", 4, 0.0, 1.0, -1.0, "C"),
        build_atom_line(10, "CD1", "PHE", "A", 4, 1.0, 1.0, -1.0, "C"),
        build_atom_line(11, "CE1", "PHE", "A", 4, 2.0, 1.0, -1.0, "C"),
        build_atom_line(12, "CD2", "PHE", "A", 4, 3.0, 1.0, -1.0, "C"),
        build_atom_line(13, "CE2", "PHE", "A", 4, 4.0, 1.0, -1.0, "C"),
        build_atom_line(14, "CZ", "PHE", "A", 4, 5.0, 1.0, -1.0, "C"),
        "TER      15      PHE A   4",
        "END",
    ]
