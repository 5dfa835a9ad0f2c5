"""
Energy function for seam carving.

Energy is the dual-gradient magnitude of an RGB pixel grid:

    dx = |P(c+1, r) - P(c-1, r)|^2
    dy = |P(c, r+1) - P(c, r-1)|^2
    E(c, r) = sqrt(dx + dy)

Neighbour lookups wrap around the image edges (toroidal boundary), so an
edge pixel is compared against the pixel on the opposite edge.
"""

import torch

from .pixel_grid import Pixel, PixelGrid
from .errors import DegenerateGridError


def squared_delta(p: Pixel, q: Pixel) -> int:
    """Sum of squared per-channel differences between two pixels."""
    dr = p.red - q.red
    dg = p.green - q.green
    db = p.blue - q.blue
    return dr * dr + dg * dg + db * db


def _check_not_empty(grid: PixelGrid):
    if grid.is_empty():
        raise DegenerateGridError(
            f"Energy is undefined on a {grid.width()}x{grid.height()} grid")


def pixel_energy(grid: PixelGrid, col: int, row: int) -> float:
    """
    Energy of a single pixel.

    Args:
        grid: Pixel grid
        col: Column index in [0, width)
        row: Row index in [0, height)

    Returns:
        Non-negative energy value
    """
    _check_not_empty(grid)
    W, H = grid.width(), grid.height()

    dx = squared_delta(grid.get((col + 1) % W, row), grid.get((col - 1) % W, row))
    dy = squared_delta(grid.get(col, (row + 1) % H), grid.get(col, (row - 1) % H))

    # Same int64 -> float64 sqrt path as energy_table so both agree exactly
    return torch.sqrt(torch.tensor(dx + dy, dtype=torch.int64).double()).item()


def energy_table(grid: PixelGrid) -> torch.Tensor:
    """
    Energy of every pixel in the grid.

    Args:
        grid: Pixel grid

    Returns:
        float64 energy map (H, W)
    """
    _check_not_empty(grid)
    pixels = grid.pixels

    # roll(-1)[c] = P[c+1], roll(1)[c] = P[c-1], both modulo the axis length
    diff_x = torch.roll(pixels, shifts=-1, dims=2) - torch.roll(pixels, shifts=1, dims=2)
    diff_y = torch.roll(pixels, shifts=-1, dims=1) - torch.roll(pixels, shifts=1, dims=1)

    dx = (diff_x * diff_x).sum(dim=0)
    dy = (diff_y * diff_y).sum(dim=0)

    return torch.sqrt((dx + dy).double())
