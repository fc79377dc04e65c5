"""
Plain-text grayscale (PGM, "P2") codec.

File layout:
    <magic>              e.g. "P2"
    # optional comments  (any line starting with '#', anywhere)
    <width> <height>
    <max value>
    <samples...>         whitespace separated, row-major

The header label and max value are not interpreted; they are carried
through a load -> carve -> save cycle unchanged.
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional

import torch

from .grid import Grid

SAMPLES_PER_LINE = 15

_NUMBER = re.compile(r'[0-9]+')


class PGMFormatError(ValueError):
    """Raised when PGM text cannot be parsed into an image."""


@dataclass
class PGMImage:
    header: str
    max_value: int
    grid: Grid

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height


def _is_comment(line: str) -> bool:
    return line.startswith('#')


def _next_content_line(lines: Iterator[str], what: str) -> str:
    for line in lines:
        if not _is_comment(line):
            return line
    raise PGMFormatError(f"PGM data ended before the {what} line")


def parse_pgm(text: str) -> PGMImage:
    """
    Parse PGM text.

    Raises:
        PGMFormatError: if the size or max-value line is malformed, or
            there are fewer samples than width * height.
    """
    lines = iter(text.splitlines())

    header = _next_content_line(lines, 'header').strip()

    size = _NUMBER.findall(_next_content_line(lines, 'size'))
    if len(size) != 2:
        raise PGMFormatError(f"PGM dimensions invalid: expected width and height, got {size}")
    width, height = int(size[0]), int(size[1])

    grey = _NUMBER.findall(_next_content_line(lines, 'max value'))
    if len(grey) != 1:
        raise PGMFormatError(f"PGM max value invalid: expected one number, got {grey}")
    max_value = int(grey[0])

    samples: List[int] = []
    for line in lines:
        if _is_comment(line):
            continue
        samples.extend(int(token) for token in _NUMBER.findall(line))

    n = width * height
    if len(samples) < n:
        raise PGMFormatError(
            f"Invalid PGM data: {len(samples)} samples for a {width}x{height} image")

    if n == 0:
        grid = Grid(width, height)
    else:
        grid = Grid.from_tensor(torch.tensor(samples[:n], dtype=torch.int64).view(height, width))
    return PGMImage(header=header, max_value=max_value, grid=grid)


def format_pgm(image: PGMImage, name: Optional[str] = None) -> str:
    """
    Serialize an image to PGM text.

    Every sample is followed by a space, and a newline ends each run of
    SAMPLES_PER_LINE samples. If `name` is given it is written as a
    comment after the header.
    """
    out = [image.header, '\n']
    if name is not None:
        out.append(f"# {name}\n")
    out.append(f"{image.width} {image.height}\n")
    out.append(f"{image.max_value}\n")

    for i, value in enumerate(image.grid.data.flatten().tolist(), start=1):
        out.append(f"{value} ")
        if i % SAMPLES_PER_LINE == 0:
            out.append('\n')

    return ''.join(out)


def load_pgm(path) -> PGMImage:
    return parse_pgm(Path(path).read_text())


def save_pgm(image: PGMImage, path):
    """Write `image` to `path`, recording the file name as a comment."""
    path = Path(path)
    path.write_text(format_pgm(image, name=path.name))
