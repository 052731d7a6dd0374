#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Residue Accumulator Model

Defines the ResidueAccumulator class holding the state of the residue that
is currently open during aggregation.
"""

from typing import Optional, Tuple
from psatm.models.coordinate import Coordinate


class ResidueAccumulator:
    """
    State of one open residue.

    Attributes:
        key (str): Residue key (columns 17-26 of its atom records)
        template (str): ATOM line that opened the residue, rewritten on close-out
        coordinates (Coordinate): Positions of the catalytic atoms matched so far
    """
    def __init__(self, key: str, template: str):
        self.key = key
        self.template = template
        self.coordinates = Coordinate()

    def add_catalytic_atom(self, x: float, y: float, z: float) -> None:
        """
        Record the position of a matched catalytic atom.

        Args:
            x (float): x coordinate
            y (float): y coordinate
            z (float): z coordinate
        """
        self.coordinates.add_point(x, y, z)

    @property
    def match_count(self) -> int:
        return self.coordinates.get_point_count()

    def centroid(self) -> Optional[Tuple[float, float, float]]:
        """
        Centroid of the matched catalytic atoms.

        Returns:
            Optional[Tuple[float, float, float]]: Centroid, None if no atom matched
        """
        if self.coordinates.is_empty():
            return None
        return self.coordinates.calculate_geometric_center()

    def __repr__(self) -> str:
        """String representation of the residue"""
        return f"ResidueAccumulator(key='{self.key}', matched={self.match_count})"
