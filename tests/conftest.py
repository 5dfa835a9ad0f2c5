"""Shared test fixtures for the seamcarve test suite."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import pytest
from seamcarve.pixel_grid import PixelGrid

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


@pytest.fixture
def uniform_grid():
    """3x3 grid where every pixel has the same colour."""
    return PixelGrid.from_rows([[(10, 20, 30)] * 3 for _ in range(3)])


@pytest.fixture
def bright_corner_2x2():
    """2x2 grid, white at (0, 0), black elsewhere."""
    return PixelGrid.from_rows([[WHITE, BLACK],
                                [BLACK, BLACK]])


@pytest.fixture
def bright_corner_3x3():
    """3x3 grid, white at (0, 0), black elsewhere."""
    return PixelGrid.from_rows([[WHITE, BLACK, BLACK],
                                [BLACK, BLACK, BLACK],
                                [BLACK, BLACK, BLACK]])


def make_random_grid(H, W, seed=42):
    """Random 8-bit RGB grid of the given size."""
    torch.manual_seed(seed)
    return PixelGrid(torch.randint(0, 256, (3, H, W), dtype=torch.int64))


def make_column_index_grid(H, W):
    """Every pixel's red channel holds its column index, green its row index."""
    cols = torch.arange(W).unsqueeze(0).expand(H, W)
    rows = torch.arange(H).unsqueeze(1).expand(H, W)
    return PixelGrid(torch.stack([cols, rows, torch.zeros(H, W, dtype=torch.int64)]).clone())
