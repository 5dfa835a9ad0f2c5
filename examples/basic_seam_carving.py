"""
Basic seam carving example.

Loads an RGB image, removes vertical and/or horizontal seams one at a time
and saves the result, optionally with the first seam drawn in red.

Usage:
    python basic_seam_carving.py input.jpg output.png --seams 50
    python basic_seam_carving.py input.jpg output.png --seams 20 --direction horizontal
"""

import argparse
import logging
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
import torch
from PIL import Image

from seamcarve import PixelGrid, SeamCarver


def load_image(path: str) -> PixelGrid:
    """Load image as an integer pixel grid."""
    img = Image.open(path).convert('RGB')
    return PixelGrid.from_numpy(np.array(img, dtype=np.uint8))


def save_image(grid: PixelGrid, path: str):
    """Save pixel grid as image."""
    img_array = grid.to_numpy().clip(0, 255).astype(np.uint8)
    Image.fromarray(img_array).save(path)
    print(f"Saved: {path}")


def visualize_seam(grid: PixelGrid, seam: torch.Tensor,
                   direction: str = 'vertical') -> PixelGrid:
    """Copy of the grid with the seam painted red."""
    vis = grid.clone()
    red = torch.tensor([255, 0, 0], dtype=torch.int64)

    if direction == 'vertical':
        for i, col in enumerate(seam.tolist()):
            vis.pixels[:, i, col] = red
    else:
        for j, row in enumerate(seam.tolist()):
            vis.pixels[:, row, j] = red

    return vis


def main():
    parser = argparse.ArgumentParser(description="Remove low-energy seams from an image")
    parser.add_argument('input')
    parser.add_argument('output')
    parser.add_argument('--seams', type=int, default=50)
    parser.add_argument('--direction', choices=['vertical', 'horizontal'], default='vertical')
    parser.add_argument('--show-seam', metavar='PATH',
                        help="also save the input with its first seam marked")
    parser.add_argument('--verbose', action='store_true')
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(name)s: %(message)s")

    print("Loading image...")
    grid = load_image(args.input)
    print(f"Original size: {grid.width()}x{grid.height()}")

    carver = SeamCarver(grid)

    if args.show_seam:
        seam = carver.find_seam(args.direction)
        save_image(visualize_seam(carver.grid, seam, args.direction), args.show_seam)

    print(f"\nRemoving {args.seams} {args.direction} seams...")
    carver.carve(args.seams, direction=args.direction)
    print(f"Carved size: {carver.width}x{carver.height}")

    save_image(carver.grid, args.output)


if __name__ == '__main__':
    main()
