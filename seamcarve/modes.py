"""
Carving orientations.

A VERTICAL seam has one cell per row and shrinks the width; cost
accumulates row by row. A HORIZONTAL seam has one cell per column and
shrinks the height; cost accumulates column by column. Both share one
implementation by viewing tensors as (traversal, perpendicular).
"""

from enum import Enum

import torch

from .grid import Grid


class CarvingMode(Enum):
    HORIZONTAL = 'horizontal'
    VERTICAL = 'vertical'

    @classmethod
    def parse(cls, direction) -> 'CarvingMode':
        """Accept a CarvingMode or its string value ('vertical'/'horizontal')."""
        if isinstance(direction, cls):
            return direction
        if isinstance(direction, str):
            try:
                return cls(direction.lower())
            except ValueError:
                pass
        raise ValueError(f"Invalid direction: {direction}")


def oriented(tensor: torch.Tensor, mode: CarvingMode) -> torch.Tensor:
    """
    View an (H, W) tensor as (traversal, perpendicular).

    Returns the tensor itself for VERTICAL and its transpose for
    HORIZONTAL. The result shares storage, so writes go through.
    """
    if mode is CarvingMode.VERTICAL:
        return tensor
    return tensor.t()


def perpendicular_size(grid: Grid, mode: CarvingMode) -> int:
    """Size of the dimension a seam removal shrinks."""
    return grid.width if mode is CarvingMode.VERTICAL else grid.height
