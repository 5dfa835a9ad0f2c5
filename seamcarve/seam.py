"""
Seam computation and removal.

A vertical seam holds one column index per row; a horizontal seam holds one
row index per column. Both directions run the same dynamic program: the
horizontal case is the vertical one applied to the transposed energy map, so
the tie-breaking rules are shared.
"""

import numbers

import torch
from typing import List, Sequence, Union

from .errors import DegenerateGridError, InvalidSeamError, SeamMismatchError

DIRECTIONS = ('vertical', 'horizontal')

SeamLike = Union[torch.Tensor, Sequence[int]]


def check_direction(direction: str):
    if direction not in DIRECTIONS:
        raise ValueError(f"Invalid direction: {direction}")


def cumulative_cost(energy: torch.Tensor) -> torch.Tensor:
    """
    Minimum cumulative energy of any connected path ending at each pixel,
    accumulated top to bottom.

    Args:
        energy: Energy map (H, W)

    Returns:
        Cost table (H, W) with cost[0] == energy[0]
    """
    H, W = energy.shape
    M = energy.clone()

    for i in range(1, H):
        M_prev = M[i - 1]
        # Out-of-range neighbours never win the minimum
        M_left = torch.full((W,), float('inf'), device=energy.device, dtype=energy.dtype)
        M_left[1:] = M_prev[:-1]
        M_right = torch.full((W,), float('inf'), device=energy.device, dtype=energy.dtype)
        M_right[:-1] = M_prev[1:]

        M[i] = energy[i] + torch.minimum(torch.minimum(M_left, M_prev), M_right)

    return M


def backtrack_seam(cost: torch.Tensor) -> torch.Tensor:
    """
    Recover the minimum-cost vertical seam from a cumulative cost table.

    The seam ends at the first minimum of the last row. Walking upwards:
      - at the first or last column, step sideways only if the parent
        straight above is strictly more expensive than the one alternative;
      - in the interior, take the lower-index parent if it equals the
        minimum of the three, else the higher-index parent if it does,
        else stay in the same column.

    Args:
        cost: Cost table (H, W) from cumulative_cost

    Returns:
        Seam (H,) with one column index per row
    """
    H, W = cost.shape
    rows = cost.tolist()
    seam = [0] * H

    # torch.argmin returns the first minimal index on ties
    j = int(torch.argmin(cost[-1]).item())
    seam[H - 1] = j

    for i in range(H - 1, 0, -1):
        prev = rows[i - 1]
        if W == 1:
            j = 0
        elif j == 0:
            if prev[j] > prev[j + 1]:
                j += 1
        elif j == W - 1:
            if prev[j] > prev[j - 1]:
                j -= 1
        else:
            parent = min(prev[j - 1], prev[j], prev[j + 1])
            if prev[j - 1] == parent:
                j -= 1
            elif prev[j + 1] == parent:
                j += 1
        seam[i - 1] = j

    return torch.tensor(seam, dtype=torch.long, device=cost.device)


def dp_seam(energy: torch.Tensor, direction: str = 'vertical') -> torch.Tensor:
    """
    Compute the optimal (minimum total energy) seam by dynamic programming.

    Args:
        energy: Energy map (H, W)
        direction: 'vertical' or 'horizontal'

    Returns:
        Seam indices - for vertical: (H,) with column index per row
                      for horizontal: (W,) with row index per column
    """
    check_direction(direction)
    if energy.numel() == 0:
        raise DegenerateGridError(f"Cannot find a seam in an empty {tuple(energy.shape)} map")

    if direction == 'horizontal':
        energy = energy.t()

    return backtrack_seam(cumulative_cost(energy))


def validate_seam(seam: SeamLike, height: int, width: int,
                  direction: str = 'vertical') -> List[int]:
    """
    Check a seam against the current grid size before it is applied.

    Returns:
        Seam as a list of ints
    """
    check_direction(direction)
    if height == 0 or width == 0:
        raise DegenerateGridError(f"Cannot remove a seam from a {width}x{height} grid")

    if isinstance(seam, torch.Tensor):
        if seam.is_floating_point() or seam.is_complex() or seam.dtype == torch.bool:
            raise InvalidSeamError(f"Seam tensor must hold integers, got {seam.dtype}")
        indices = seam.flatten().tolist()
    else:
        indices = list(seam)
        for k, v in enumerate(indices):
            if isinstance(v, bool) or not isinstance(v, numbers.Integral):
                raise InvalidSeamError(f"Seam index {v!r} at position {k} is not an integer")
        indices = [int(v) for v in indices]

    length, limit = (height, width) if direction == 'vertical' else (width, height)
    if len(indices) != length:
        raise SeamMismatchError(
            f"{direction.capitalize()} seam has length {len(indices)}, expected {length}")

    for k, idx in enumerate(indices):
        if not 0 <= idx < limit:
            raise InvalidSeamError(f"Seam index {idx} at position {k} outside [0, {limit})")
        if k > 0 and abs(idx - indices[k - 1]) > 1:
            raise InvalidSeamError(
                f"Seam jumps from {indices[k - 1]} to {idx} at position {k}")

    return indices


def remove_seam(image: torch.Tensor, seam: SeamLike,
                direction: str = 'vertical') -> torch.Tensor:
    """
    Remove a seam by shifting the pixels after it one step towards it and
    dropping the trailing slot. The input tensor is overwritten.

    Args:
        image: Image tensor (C, H, W)
        seam: Seam indices, validated against the image size
        direction: 'vertical' or 'horizontal'

    Returns:
        View of the compacted image, (C, H, W - 1) or (C, H - 1, W)
    """
    C, H, W = image.shape
    indices = validate_seam(seam, H, W, direction)

    if direction == 'vertical':
        for i, col in enumerate(indices):
            image[:, i, col:W - 1] = image[:, i, col + 1:W].clone()
        return image[:, :, :W - 1]

    for j, row in enumerate(indices):
        image[:, row:H - 1, j] = image[:, row + 1:H, j].clone()
    return image[:, :H - 1, :]
