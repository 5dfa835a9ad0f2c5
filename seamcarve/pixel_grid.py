"""
Pixel grid container.

Pixels are stored channel-first as an int64 tensor of shape (3, H, W) and
addressed as (col, row). Channel values are not clamped.
"""

from typing import NamedTuple, Sequence

import numpy as np
import torch


class Pixel(NamedTuple):
    red: int
    green: int
    blue: int


class PixelGrid:
    """Rectangular, mutable table of RGB pixels.

    The underlying tensor is exposed through ``pixels`` without copying so
    the carver can compact it in place.
    """

    def __init__(self, pixels: torch.Tensor):
        if pixels.dim() != 3 or pixels.shape[0] != 3:
            raise ValueError(f"Expected a (3, H, W) tensor, got shape {tuple(pixels.shape)}")
        if pixels.is_floating_point() or pixels.is_complex():
            raise ValueError(f"Expected integer pixel values, got {pixels.dtype}")
        self.pixels = pixels.to(torch.int64)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Sequence[int]]]) -> 'PixelGrid':
        """
        Build a grid from row-major pixel data.

        Args:
            rows: rows[row][col] is a (red, green, blue) triple

        Returns:
            PixelGrid of width len(rows[0]) and height len(rows)
        """
        height = len(rows)
        width = len(rows[0]) if height else 0

        for r, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Row {r} has {len(row)} pixels, expected {width}")
            for c, pixel in enumerate(row):
                if len(pixel) != 3:
                    raise ValueError(f"Pixel ({c}, {r}) has {len(pixel)} channels, expected 3")

        data = torch.tensor([[list(p) for p in row] for row in rows],
                            dtype=torch.int64).reshape(height, width, 3)
        return cls(data.permute(2, 0, 1).contiguous())

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> 'PixelGrid':
        """Build a grid from an (H, W, 3) integer array."""
        if array.ndim != 3 or array.shape[2] != 3:
            raise ValueError(f"Expected an (H, W, 3) array, got shape {array.shape}")
        data = torch.from_numpy(np.ascontiguousarray(array).astype(np.int64))
        return cls(data.permute(2, 0, 1).contiguous())

    def to_numpy(self) -> np.ndarray:
        """Return the pixels as an (H, W, 3) int64 array."""
        return self.pixels.permute(1, 2, 0).cpu().numpy().copy()

    def width(self) -> int:
        return self.pixels.shape[2]

    def height(self) -> int:
        return self.pixels.shape[1]

    def is_empty(self) -> bool:
        return self.width() == 0 or self.height() == 0

    def get(self, col: int, row: int) -> Pixel:
        # Negative indices would silently wrap in torch
        if not (0 <= col < self.width() and 0 <= row < self.height()):
            raise IndexError(f"Pixel ({col}, {row}) outside {self.width()}x{self.height()} grid")
        r, g, b = self.pixels[:, row, col].tolist()
        return Pixel(r, g, b)

    def clone(self) -> 'PixelGrid':
        return PixelGrid(self.pixels.clone())

    def __repr__(self):
        return f"PixelGrid(width={self.width()}, height={self.height()})"
