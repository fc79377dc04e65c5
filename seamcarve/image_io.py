"""Load and save images as grayscale grids."""

from pathlib import Path

import numpy as np
import torch
from PIL import Image

from .grid import Grid
from .pgm import PGMImage, load_pgm, save_pgm


def _is_pgm(path: Path) -> bool:
    return path.suffix.lower() == '.pgm'


def load_image(path) -> PGMImage:
    """Load a plain PGM as-is, or any Pillow-readable image as 8-bit grayscale."""
    path = Path(path)
    if _is_pgm(path):
        return load_pgm(path)

    with Image.open(path) as img:
        img_array = np.array(img.convert('L'), dtype=np.int64)
    grid = Grid.from_tensor(torch.from_numpy(img_array))
    return PGMImage(header='P2', max_value=255, grid=grid)


def save_image(image: PGMImage, path):
    """Save as plain PGM, or via Pillow for any other extension."""
    path = Path(path)
    if _is_pgm(path):
        save_pgm(image, path)
        return

    img_array = image.grid.data.cpu().numpy().astype(np.float64)
    if image.max_value > 0 and image.max_value != 255:
        img_array = img_array * 255.0 / image.max_value
    img_array = img_array.clip(0, 255).astype(np.uint8)
    Image.fromarray(img_array).save(path)
