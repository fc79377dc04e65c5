"""
Seam tracing and removal.

A seam is returned as a LongTensor with one perpendicular index per
traversal line:
    vertical:   (H,) column index per row
    horizontal: (W,) row index per column

Ties are broken by scan order. The endpoint is the lowest index with
the smallest final cost, and each backward step prefers the
above/left predecessor, then centre, then below/right. This is the
same order in which compute_cost considers predecessors, so the traced
path always follows the values the accumulation produced.
"""

import torch
from typing import Optional, Sequence

from .grid import Grid, GridIndexError
from .modes import CarvingMode, oriented


def _first_min_index(values: Sequence) -> int:
    """Index of the first minimum under a strict '<' scan."""
    best = 0
    for i in range(1, len(values)):
        if values[i] < values[best]:
            best = i
    return best


def _predecessor(line: Sequence, index: int) -> int:
    """
    Choose the predecessor of `index` in the previous cost line.

    Candidates are index-1, index, index+1 in that order; a candidate
    outside the line is absent and never compared.
    """
    best_index: Optional[int] = None
    for candidate in (index - 1, index, index + 1):
        if not 0 <= candidate < len(line):
            continue
        if best_index is None or line[candidate] < line[best_index]:
            best_index = candidate
    return best_index


def find_seam(cost: Grid, direction='vertical') -> torch.Tensor:
    """
    Trace the minimal-cost seam backwards through a cost grid.

    Args:
        cost: Cost grid from compute_cost (H, W)
        direction: 'vertical' or 'horizontal'

    Returns:
        Seam indices - for vertical: (H,) with column index per row
                      for horizontal: (W,) with row index per column
    """
    mode = CarvingMode.parse(direction)
    lines = oriented(cost.data, mode).tolist()
    T = len(lines)
    if T == 0 or len(lines[0]) == 0:
        raise ValueError(f"Cannot trace a seam through an empty {cost.width}x{cost.height} grid")

    seam = torch.zeros(T, dtype=torch.long)
    index = _first_min_index(lines[-1])
    for t in range(T - 1, -1, -1):
        seam[t] = index
        if t > 0:
            index = _predecessor(lines[t - 1], index)

    return seam


def remove_seam(grid: Grid, seam: torch.Tensor, direction='vertical'):
    """
    Remove a seam from a grid in place.

    For every traversal line, cells beyond the seam position shift one
    slot towards it, closing the gap. The stale trailing slot is then
    dropped by shrinking the perpendicular dimension by one.

    Args:
        grid: Grid to modify
        seam: Seam indices, as returned by find_seam
        direction: 'vertical' or 'horizontal'
    """
    mode = CarvingMode.parse(direction)
    view = oriented(grid.data, mode)
    T, P = view.shape

    if len(seam) != T:
        raise ValueError(f"Seam length {len(seam)} does not match grid ({T} lines expected)")

    positions = [int(p) for p in seam]
    for t, pos in enumerate(positions):
        if not 0 <= pos < P:
            raise GridIndexError(f"Seam index {pos} out of range at line {t} (size {P})")

    for t, pos in enumerate(positions):
        view[t, pos:P - 1] = view[t, pos + 1:].clone()

    if mode is CarvingMode.VERTICAL:
        grid.shrink_width(grid.width - 1)
    else:
        grid.shrink_height(grid.height - 1)


def carve_seam(grid: Grid, cost: Grid, direction='vertical') -> torch.Tensor:
    """Find the minimal seam in `cost` and remove it from `grid` in place."""
    if cost.data.shape != grid.data.shape:
        raise ValueError(f"Cost grid {cost.width}x{cost.height} does not match "
                         f"grid {grid.width}x{grid.height}")
    seam = find_seam(cost, direction)
    remove_seam(grid, seam, direction)
    return seam
