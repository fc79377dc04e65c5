"""
Mutable 2D grid container for seam carving.

A grid stores one numeric sample per cell, addressed as (x, y) =
(column, row) with 0-based indices. Storage is a 2D tensor of shape
(height, width) so energy and cost can be computed with vectorised
torch operations.
"""

import torch
from typing import List, Sequence


class GridIndexError(IndexError):
    """Raised on a read or write outside [0, width) x [0, height)."""


class Grid:
    """
    Rectangular grid of numeric values with shrinkable dimensions.

    The underlying tensor is available as ``grid.data`` (H, W). Seam
    removal compacts cells inside ``data`` and then truncates one
    dimension with ``shrink_width`` or ``shrink_height``.
    """

    def __init__(self, width: int, height: int, dtype=torch.int64, device='cpu'):
        if width < 0 or height < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {width}x{height}")
        self.data = torch.zeros(height, width, dtype=dtype, device=device)

    @classmethod
    def from_tensor(cls, tensor: torch.Tensor) -> 'Grid':
        """Wrap a copy of a 2D (H, W) tensor."""
        if tensor.dim() != 2:
            raise ValueError(f"Expected a 2D tensor (H, W), got shape {tuple(tensor.shape)}")
        grid = cls.__new__(cls)
        grid.data = tensor.clone()
        return grid

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence], dtype=torch.int64) -> 'Grid':
        """Build a grid from a list of equal-length rows."""
        if len(rows) == 0:
            return cls(0, 0, dtype=dtype)
        widths = {len(row) for row in rows}
        if len(widths) != 1:
            raise ValueError(f"Rows have unequal lengths: {sorted(widths)}")
        return cls.from_tensor(torch.tensor(rows, dtype=dtype))

    @property
    def width(self) -> int:
        return self.data.shape[1]

    @property
    def height(self) -> int:
        return self.data.shape[0]

    def _check_bounds(self, x: int, y: int):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise GridIndexError(
                f"Cell ({x}, {y}) out of range for {self.width}x{self.height} grid")

    def get(self, x: int, y: int):
        """Return the value at column x, row y."""
        self._check_bounds(x, y)
        return self.data[y, x].item()

    def set(self, x: int, y: int, value):
        """Store value at column x, row y."""
        self._check_bounds(x, y)
        self.data[y, x] = value

    def shrink_width(self, new_width: int):
        """Drop trailing columns so that width == new_width."""
        if not 0 <= new_width <= self.width:
            raise ValueError(f"Cannot shrink width {self.width} to {new_width}")
        self.data = self.data[:, :new_width].contiguous()

    def shrink_height(self, new_height: int):
        """Drop trailing rows so that height == new_height."""
        if not 0 <= new_height <= self.height:
            raise ValueError(f"Cannot shrink height {self.height} to {new_height}")
        self.data = self.data[:new_height, :].contiguous()

    def copy(self) -> 'Grid':
        return Grid.from_tensor(self.data)

    def tolist(self) -> List[list]:
        """Row-major nested list of values."""
        return self.data.tolist()

    def __len__(self):
        return self.width * self.height

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return self.data.shape == other.data.shape and torch.equal(self.data, other.data)

    def __repr__(self):
        return f"Grid(width={self.width}, height={self.height}, dtype={self.data.dtype})"
