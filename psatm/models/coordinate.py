#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Coordinate Data Model

Defines the Coordinate class that accumulates the 3D positions of a
residue's catalytic atoms.
"""

import torch
from typing import Tuple


class Coordinate:
    """
    Growable set of 3D points stored as a float32 tensor.

    Attributes:
        coordinates (torch.Tensor): Tensor of 3D coordinates (shape: [N, 3])
    """
    def __init__(self):
        self.coordinates: torch.Tensor = torch.empty(0, 3, dtype=torch.float32)

    def add_point(self, x: float, y: float, z: float) -> None:
        """
        Append one point.

        Args:
            x (float): x coordinate
            y (float): y coordinate
            z (float): z coordinate
        """
        point = torch.tensor([[x, y, z]], dtype=torch.float32)
        self.coordinates = torch.cat([self.coordinates, point], dim=0)

    def get_point_count(self) -> int:
        """
        Get the total number of points in the coordinate set.

        Returns:
            int: Total number of points
        """
        return self.coordinates.shape[0]

    def is_empty(self) -> bool:
        return self.get_point_count() == 0

    def calculate_geometric_center(self) -> Tuple[float, float, float]:
        """
        Calculate the per-axis arithmetic mean of the points.

        Points are summed one at a time in float32 and the sum is divided
        by the point count in float32, so results do not depend on the
        reduction order torch would pick for mean().

        Returns:
            Tuple[float, float, float]: Centroid (x, y, z)

        Raises:
            ValueError: If the set holds no points
        """
        if self.is_empty():
            raise ValueError("Cannot calculate the center of an empty coordinate set")
        total = torch.zeros(3, dtype=torch.float32)
        for point in self.coordinates:
            total = total + point
        center = total / torch.tensor(float(self.get_point_count()), dtype=torch.float32)
        return (float(center[0]), float(center[1]), float(center[2]))

    def __repr__(self) -> str:
        """String representation of the coordinate set"""
        return f"Coordinate(points={self.get_point_count()})"
