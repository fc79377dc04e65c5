"""Shared test fixtures for the seamcarve test suite."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import pytest
from seamcarve.grid import Grid


@pytest.fixture
def bright_center():
    """3x3 grid, zero everywhere except a 9 in the middle."""
    return Grid.from_rows([[0, 0, 0],
                           [0, 9, 0],
                           [0, 0, 0]])


@pytest.fixture
def random_grid():
    """Reproducible 8 wide x 6 high grid of 8-bit samples."""
    return make_random_grid(8, 6)


def make_random_grid(width, height, seed=42):
    generator = torch.Generator().manual_seed(seed)
    return Grid.from_tensor(torch.randint(0, 256, (height, width), generator=generator))


def make_pgm_text(rows, header='P2', max_value=255):
    """PGM text with one image row per line."""
    lines = [header, f"{len(rows[0])} {len(rows)}", str(max_value)]
    lines += [' '.join(str(v) for v in row) for row in rows]
    return '\n'.join(lines) + '\n'
