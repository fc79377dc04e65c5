"""
Cumulative cost (dynamic programming) for seam carving.

cost[t, p] = energy[t, p] + min(cost[t-1, p-1], cost[t-1, p], cost[t-1, p+1])

indexed as (traversal, perpendicular). Only predecessors that exist
are compared: at the edges of a line the missing neighbour is left
out of the minimum rather than padded with a sentinel.
"""

import torch

from .grid import Grid
from .modes import CarvingMode, oriented


def compute_cost(energy: Grid, direction='vertical') -> Grid:
    """
    Accumulate minimal path cost along the traversal axis.

    Args:
        energy: Energy grid (H, W)
        direction: 'vertical' (row by row) or 'horizontal' (column by column)

    Returns:
        Cost grid with the same dimensions as energy
    """
    mode = CarvingMode.parse(direction)
    M = oriented(energy.data, mode).clone()
    T, P = M.shape

    for t in range(1, T):
        prev = M[t - 1]
        best = prev.clone()
        if P > 1:
            # Come from above-left / above-right, where those exist
            best[1:] = torch.minimum(best[1:], prev[:-1])
            best[:-1] = torch.minimum(best[:-1], prev[1:])
        M[t] += best

    return Grid.from_tensor(oriented(M, mode).contiguous())
