"""Tests for raster image loading and saving."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
import pytest
from PIL import Image
from seamcarve.grid import Grid
from seamcarve.pgm import PGMImage
from seamcarve.image_io import load_image, save_image
from conftest import make_pgm_text


class TestLoadImage:
    def test_png_as_grayscale(self, tmp_path):
        pixels = np.arange(12, dtype=np.uint8).reshape(3, 4) * 20
        path = tmp_path / 'gray.png'
        Image.fromarray(pixels).save(path)

        image = load_image(path)
        assert image.header == 'P2'
        assert image.max_value == 255
        assert (image.width, image.height) == (4, 3)
        assert image.grid.tolist() == pixels.astype(int).tolist()

    def test_rgb_converted(self, tmp_path):
        pixels = np.zeros((2, 2, 3), dtype=np.uint8)
        pixels[..., 1] = 255
        path = tmp_path / 'green.png'
        Image.fromarray(pixels).save(path)

        image = load_image(path)
        assert (image.width, image.height) == (2, 2)
        assert image.grid.get(0, 0) > 0

    def test_pgm_dispatch(self, tmp_path):
        path = tmp_path / 'a.PGM'
        path.write_text(make_pgm_text([[1, 2], [3, 4]], max_value=4))
        image = load_image(path)
        assert image.max_value == 4
        assert image.grid.tolist() == [[1, 2], [3, 4]]

    def test_overwrite_after_load(self, tmp_path):
        """The source file is released once loaded, so it can be replaced in place."""
        path = tmp_path / 'photo.png'
        Image.fromarray(np.full((3, 4), 100, dtype=np.uint8)).save(path)
        image = load_image(path)
        save_image(image, path)
        assert load_image(path).grid == image.grid


class TestSaveImage:
    def test_png_round_trip(self, tmp_path):
        grid = Grid.from_rows([[0, 128, 255], [10, 20, 30]])
        path = tmp_path / 'out.png'
        save_image(PGMImage(header='P2', max_value=255, grid=grid), path)
        assert np.array(Image.open(path)).tolist() == grid.tolist()

    def test_rescales_to_8_bit(self, tmp_path):
        grid = Grid.from_rows([[0, 50, 100]])
        path = tmp_path / 'scaled.png'
        save_image(PGMImage(header='P2', max_value=100, grid=grid), path)
        assert np.array(Image.open(path)).tolist() == [[0, 127, 255]]

    def test_pgm_dispatch(self, tmp_path):
        path = tmp_path / 'out.pgm'
        save_image(PGMImage(header='P2', max_value=255, grid=Grid.from_rows([[3]])), path)
        assert path.read_text().startswith('P2\n# out.pgm\n1 1\n255\n')
