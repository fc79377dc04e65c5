"""
High-level carving functions that orchestrate the seam carving workflow.

Each pass recomputes energy and cost from the current (already carved)
grid and removes exactly one seam. Seams are never precomputed in a
batch, so every removal sees the result of the previous one.
"""

import logging

from .grid import Grid
from .modes import CarvingMode, perpendicular_size
from .energy import compute_energy
from .cost import compute_cost
from .seam import carve_seam
from .pgm import PGMImage

logger = logging.getLogger(__name__)


class SeamCarvingError(ValueError):
    """Base class for carving requests that cannot be fulfilled."""


class OverRemovalError(SeamCarvingError):
    """Raised when more seams are requested than the grid can give up."""


def carve(grid: Grid, n_seams: int, direction='vertical') -> Grid:
    """
    Rectangular seam carving.

    Args:
        grid: Source grid (left untouched)
        n_seams: Number of seams to remove
        direction: 'vertical' (shrinks width) or 'horizontal' (shrinks height)

    Returns:
        Carved copy of the grid

    Raises:
        OverRemovalError: if n_seams would leave the carved dimension empty
    """
    mode = CarvingMode.parse(direction)
    if n_seams < 0:
        raise ValueError(f"n_seams must be non-negative, got {n_seams}")

    size = perpendicular_size(grid, mode)
    if n_seams > 0 and n_seams >= size:
        raise OverRemovalError(
            f"Cannot remove {n_seams} {mode.value} seam(s) from a "
            f"{grid.width}x{grid.height} grid: at most {max(size - 1, 0)} allowed")
    if n_seams > 0 and (grid.width == 0 or grid.height == 0):
        raise SeamCarvingError(
            f"Cannot remove {mode.value} seams from an empty {grid.width}x{grid.height} grid")

    carved = grid.copy()

    for i in range(n_seams):
        energy = compute_energy(carved)
        cost = compute_cost(energy, mode)
        seam = carve_seam(carved, cost, mode)
        logger.debug("Removed %s seam %d/%d at %s, size now %dx%d",
                     mode.value, i + 1, n_seams, seam.tolist(),
                     carved.width, carved.height)

    return carved


def carve_image(image: PGMImage, vertical: int = 0, horizontal: int = 0) -> PGMImage:
    """
    Carve vertical seams, then horizontal seams from the result.

    The header label and max value are carried over unchanged.
    """
    grid = carve(image.grid, vertical, CarvingMode.VERTICAL)
    grid = carve(grid, horizontal, CarvingMode.HORIZONTAL)
    return PGMImage(header=image.header, max_value=image.max_value, grid=grid)
