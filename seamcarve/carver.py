"""
SeamCarver: owns a pixel grid and shrinks it one seam at a time.
"""

import logging

import torch

from .pixel_grid import PixelGrid
from .energy import pixel_energy, energy_table
from .seam import SeamLike, check_direction, dp_seam, remove_seam
from .errors import TooManySeamsError

logger = logging.getLogger(__name__)


class SeamCarver:
    """
    Content-aware resizing of a single PixelGrid.

    The carver takes ownership of the grid: later calls always see the
    current, possibly shrunk, image. Energy is recomputed from scratch for
    every seam search.
    """

    def __init__(self, grid: PixelGrid):
        self._grid = grid

    @property
    def grid(self) -> PixelGrid:
        """Current pixel grid. Callers should treat it as read-only."""
        return self._grid

    @property
    def width(self) -> int:
        return self._grid.width()

    @property
    def height(self) -> int:
        return self._grid.height()

    def energy(self, col: int, row: int) -> float:
        return pixel_energy(self._grid, col, row)

    def energy_table(self) -> torch.Tensor:
        """Energy of every pixel of the current grid, shape (H, W)."""
        return energy_table(self._grid)

    def find_seam(self, direction: str = 'vertical') -> torch.Tensor:
        check_direction(direction)
        seam = dp_seam(self.energy_table(), direction=direction)
        logger.debug("Found %s seam on %dx%d grid", direction, self.width, self.height)
        return seam

    def find_vertical_seam(self) -> torch.Tensor:
        """Column index per row, length == height."""
        return self.find_seam('vertical')

    def find_horizontal_seam(self) -> torch.Tensor:
        """Row index per column, length == width."""
        return self.find_seam('horizontal')

    def remove_seam(self, seam: SeamLike, direction: str = 'vertical'):
        # remove_seam validates before it writes, so a rejected seam
        # leaves the grid untouched
        carved = remove_seam(self._grid.pixels, seam, direction=direction)
        # Fresh buffer so the pre-removal storage can be freed
        self._grid.pixels = carved.clone(memory_format=torch.contiguous_format)
        logger.debug("Removed %s seam, grid is now %dx%d", direction, self.width, self.height)

    def remove_vertical_seam(self, seam: SeamLike):
        self.remove_seam(seam, 'vertical')

    def remove_horizontal_seam(self, seam: SeamLike):
        self.remove_seam(seam, 'horizontal')

    def carve(self, n_seams: int, direction: str = 'vertical') -> PixelGrid:
        """
        Remove n_seams seams in the given direction.

        Args:
            n_seams: Number of seams to remove
            direction: 'vertical' (narrower) or 'horizontal' (shorter)

        Returns:
            The carved grid
        """
        check_direction(direction)
        if n_seams < 0:
            raise ValueError(f"n_seams must be non-negative, got {n_seams}")
        available = self.width if direction == 'vertical' else self.height
        if n_seams > available:
            raise TooManySeamsError(
                f"Cannot remove {n_seams} {direction} seams from a {self.width}x{self.height} grid")

        for _ in range(n_seams):
            seam = self.find_seam(direction)
            self.remove_seam(seam, direction)

        logger.debug("Carved %d %s seams", n_seams, direction)
        return self._grid


def carve_image(image: torch.Tensor, n_seams: int,
                direction: str = 'vertical') -> torch.Tensor:
    """
    Traditional rectangular seam carving on an image tensor.

    Args:
        image: Integer image tensor (3, H, W)
        n_seams: Number of seams to remove
        direction: 'vertical' or 'horizontal'

    Returns:
        Carved image; the input is left unchanged
    """
    carver = SeamCarver(PixelGrid(image.clone()))
    return carver.carve(n_seams, direction=direction).pixels
