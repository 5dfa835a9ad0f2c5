"""
Content-aware image resizing by seam carving.

Implements the dual-gradient energy with toroidal wraparound and
minimum-cost seam search by dynamic programming (Avidan & Shamir 2007).
"""

__version__ = "0.1.0"

from .pixel_grid import Pixel, PixelGrid
from .energy import squared_delta, pixel_energy, energy_table
from .seam import cumulative_cost, backtrack_seam, dp_seam, validate_seam, remove_seam
from .carver import SeamCarver, carve_image
from .errors import (CarvingError, DegenerateGridError, SeamMismatchError, InvalidSeamError,
                     TooManySeamsError)

__all__ = [
    'Pixel',
    'PixelGrid',
    'squared_delta',
    'pixel_energy',
    'energy_table',
    'cumulative_cost',
    'backtrack_seam',
    'dp_seam',
    'validate_seam',
    'remove_seam',
    'SeamCarver',
    'carve_image',
    'CarvingError',
    'DegenerateGridError',
    'SeamMismatchError',
    'InvalidSeamError',
    'TooManySeamsError',
]
