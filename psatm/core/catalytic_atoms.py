#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Catalytic Atom Table

Maps residue 3-letter codes to the atoms whose centroid becomes the
residue's pseudoatom.
"""

import json
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Sequence, Tuple
from psatm.errors import CatalyticTableError


CATALYTIC_ATOMS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "ALA": ("CB",),
    "CYS": ("SG",),
    "ASP": ("OD2", "OD1"),
    "GLU": ("OE1", "OE2"),
    "PHE": ("CG", "CD1", "CE1", "CD2", "CE2", "CZ"),
    "GLY": ("CA",),
    "HIS": ("CG", "ND1", "CE1", "NE2", "CD2"),
    "ILE": ("CB", "CG1", "CD1", "CG2"),
    "LYS": ("NZ",),
    "LEU": ("CB", "CG", "CD1", "CD2"),
    "MET": ("SD", "CE"),
    "ASN": ("OD1", "ND2"),
    "PRO": ("N", "CA", "CB", "CG", "CD"),
    "GLN": ("OE1", "NE2"),
    "ARG": ("NE", "CZ", "NH1", "NH2"),
    "SER": ("OG",),
    "THR": ("OG1",),
    "VAL": ("CB", "CG1", "CG2"),
    "TRP": ("CE3", "CZ3", "CH2", "CZ2", "CE2", "NE1", "CD1", "CG", "CD2"),
    "TYR": ("OH",),
})


class CatalyticAtomTable:
    """
    Read-only lookup of catalytic atom names per residue.

    Unknown residue codes (waters, ligands, modified residues) have no
    entry; looking them up is not an error.

    Attributes:
        atoms (Mapping[str, Tuple[str, ...]]): Residue code to ordered atom names
    """
    def __init__(self, atoms: Mapping[str, Sequence[str]] = CATALYTIC_ATOMS):
        self.atoms: Mapping[str, Tuple[str, ...]] = MappingProxyType(
            {res_name: tuple(names) for res_name, names in atoms.items()}
        )

    @classmethod
    def from_json(cls, file_path: str) -> 'CatalyticAtomTable':
        """
        Load a table from a JSON object such as {"ALA": ["CB"], "SER": ["OG"]}.

        Args:
            file_path (str): Path to the JSON file

        Returns:
            CatalyticAtomTable: Loaded table

        Raises:
            CatalyticTableError: If the file is missing or not a valid table
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except OSError as e:
            raise CatalyticTableError(f"Cannot read catalytic atom table '{file_path}': {e}") from e
        except json.JSONDecodeError as e:
            raise CatalyticTableError(f"Invalid JSON in catalytic atom table '{file_path}': {e}") from e

        if not isinstance(data, dict) or not data:
            raise CatalyticTableError(f"Catalytic atom table '{file_path}' must be a non-empty JSON object")

        atoms: Dict[str, Tuple[str, ...]] = {}
        for res_name, names in data.items():
            if (not isinstance(names, list) or not names
                    or not all(isinstance(n, str) and n.strip() for n in names)):
                raise CatalyticTableError(
                    f"Residue '{res_name}' in '{file_path}' needs a non-empty list of atom names"
                )
            atoms[res_name.strip()] = tuple(n.strip() for n in names)
        return cls(atoms)

    def get(self, res_name: str) -> Optional[Tuple[str, ...]]:
        """
        Get the catalytic atoms of a residue type.

        Args:
            res_name (str): Residue 3-letter code, whitespace stripped

        Returns:
            Optional[Tuple[str, ...]]: Atom names, None for unknown residues
        """
        return self.atoms.get(res_name)

    def is_catalytic(self, res_name: str, atom_name: str) -> bool:
        """
        Check whether an atom counts towards its residue's pseudoatom.

        Both names must match exactly; no case folding.

        Args:
            res_name (str): Residue 3-letter code, whitespace stripped
            atom_name (str): Atom name, whitespace stripped

        Returns:
            bool: True if the atom is catalytic
        """
        names = self.atoms.get(res_name)
        return names is not None and atom_name in names

    def residue_names(self) -> Tuple[str, ...]:
        return tuple(self.atoms)

    def __contains__(self, res_name: object) -> bool:
        return res_name in self.atoms

    def __len__(self) -> int:
        return len(self.atoms)

    def __iter__(self) -> Iterator[str]:
        return iter(self.atoms)

    def __repr__(self) -> str:
        return f"CatalyticAtomTable(residues={len(self.atoms)})"


DEFAULT_CATALYTIC_TABLE = CatalyticAtomTable()
