"""
Content-aware shrinking of grayscale images by seam carving.

Based on "Seam Carving for Content-Aware Image Resizing"
by Avidan & Shamir, 2007.
"""

__version__ = "0.1.0"

from .grid import Grid, GridIndexError
from .modes import CarvingMode
from .energy import compute_energy
from .cost import compute_cost
from .seam import find_seam, remove_seam, carve_seam
from .carving import carve, carve_image, SeamCarvingError, OverRemovalError
from .pgm import PGMImage, PGMFormatError, parse_pgm, format_pgm, load_pgm, save_pgm
from .image_io import load_image, save_image

__all__ = [
    'Grid',
    'GridIndexError',
    'CarvingMode',
    'compute_energy',
    'compute_cost',
    'find_seam',
    'remove_seam',
    'carve_seam',
    'carve',
    'carve_image',
    'SeamCarvingError',
    'OverRemovalError',
    'PGMImage',
    'PGMFormatError',
    'parse_pgm',
    'format_pgm',
    'load_pgm',
    'save_pgm',
    'load_image',
    'save_image',
]
