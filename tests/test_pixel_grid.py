"""Tests for the pixel grid container."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
import torch
import pytest
from seamcarve.pixel_grid import Pixel, PixelGrid


class TestConstruction:
    def test_from_rows_dimensions(self):
        """Width is the row length, height the number of rows."""
        grid = PixelGrid.from_rows([[(0, 0, 0)] * 4 for _ in range(2)])
        assert grid.width() == 4
        assert grid.height() == 2
        assert grid.pixels.shape == (3, 2, 4)

    def test_from_rows_addressing(self):
        """get(col, row) reads rows[row][col]."""
        grid = PixelGrid.from_rows([[(1, 2, 3), (4, 5, 6)],
                                    [(7, 8, 9), (10, 11, 12)]])
        assert grid.get(1, 0) == Pixel(4, 5, 6)
        assert grid.get(0, 1) == Pixel(7, 8, 9)
        assert grid.get(1, 1).blue == 12

    def test_ragged_rows_rejected(self):
        """A non-rectangular table is rejected."""
        with pytest.raises(ValueError):
            PixelGrid.from_rows([[(0, 0, 0), (0, 0, 0)], [(0, 0, 0)]])

    def test_wrong_channel_count_rejected(self):
        with pytest.raises(ValueError):
            PixelGrid.from_rows([[(0, 0)]])

    def test_rejects_bad_tensor_shape(self):
        with pytest.raises(ValueError):
            PixelGrid(torch.zeros(4, 2, 2, dtype=torch.int64))

    def test_rejects_float_tensor(self):
        with pytest.raises(ValueError):
            PixelGrid(torch.rand(3, 2, 2))

    def test_values_not_clamped(self):
        """Channels outside [0, 255] are stored as given."""
        grid = PixelGrid.from_rows([[(-5, 300, 1000)]])
        assert grid.get(0, 0) == Pixel(-5, 300, 1000)

    def test_tensor_is_shared(self):
        """Wrapping an int64 tensor does not copy it."""
        data = torch.zeros(3, 2, 2, dtype=torch.int64)
        grid = PixelGrid(data)
        data[0, 1, 1] = 99
        assert grid.get(1, 1).red == 99


class TestAccess:
    def test_out_of_bounds_raises(self):
        grid = PixelGrid.from_rows([[(0, 0, 0)] * 3 for _ in range(2)])
        with pytest.raises(IndexError):
            grid.get(3, 0)
        with pytest.raises(IndexError):
            grid.get(0, -1)

    def test_empty_grid(self):
        grid = PixelGrid(torch.zeros(3, 4, 0, dtype=torch.int64))
        assert grid.width() == 0
        assert grid.height() == 4
        assert grid.is_empty()

    def test_clone_is_independent(self):
        grid = PixelGrid.from_rows([[(1, 1, 1)]])
        copy = grid.clone()
        copy.pixels[0, 0, 0] = 7
        assert grid.get(0, 0) == Pixel(1, 1, 1)


class TestNumpyBridge:
    def test_roundtrip_preserves_layout(self):
        """(H, W, 3) arrays map onto get(col, row) and back."""
        array = np.arange(2 * 3 * 3, dtype=np.uint8).reshape(2, 3, 3)
        grid = PixelGrid.from_numpy(array)
        assert grid.width() == 3
        assert grid.height() == 2
        assert grid.get(2, 1) == Pixel(*array[1, 2].tolist())
        np.testing.assert_array_equal(grid.to_numpy(), array.astype(np.int64))

    def test_rejects_grayscale(self):
        with pytest.raises(ValueError):
            PixelGrid.from_numpy(np.zeros((4, 4), dtype=np.uint8))
