"""
Seam computation and removal.

A seam is found with dynamic programming over the dual-gradient energy:
the cumulative cost table is filled row by row, then the cheapest path is
traced back from the bottom row. Removal shifts pixels inside the active
region of the backing grid; nothing is reallocated.
"""

import logging
from typing import Tuple

import torch

from .axis import AxisAccessor
from .energy import dual_gradient_energy

logger = logging.getLogger(__name__)


def neighbor_bounds(width: int, device=None) -> Tuple[torch.Tensor, torch.Tensor]:
    """
    Inclusive column range a seam may come from, for every column.

    Interior columns see {x-1, x, x+1}; the border columns only see two
    candidates ({0, 1} and {width-2, width-1}) and seams never wrap around.
    A single column sees only itself.

    Used by both the cost relaxation and the backtrace so they always agree.

    Args:
        width: Number of columns
        device: torch device for the returned tensors

    Returns:
        (lo, hi) long tensors of shape (width,)
    """
    x = torch.arange(width, dtype=torch.long, device=device)
    lo = (x - 1).clamp(min=0)
    hi = (x + 1).clamp(max=width - 1)
    return lo, hi


def cumulative_cost(energy: torch.Tensor) -> torch.Tensor:
    """
    Minimum total energy of any seam reaching each pixel from the top row.

    Rows depend on the row above, so they are processed sequentially; all
    pixels of one row are relaxed at once.

    Args:
        energy: Energy map (H, W)

    Returns:
        Cumulative cost table (H, W)
    """
    H, W = energy.shape
    lo, hi = neighbor_bounds(W, device=energy.device)

    cost = torch.empty_like(energy)
    cost[0] = energy[0]

    for y in range(1, H):
        prev = cost[y - 1]
        # lo/hi repeat x at the borders, so this is a 2-way min there
        best = torch.minimum(torch.minimum(prev[lo], prev), prev[hi])
        cost[y] = energy[y] + best

    return cost


def find_seam(cost: torch.Tensor) -> torch.Tensor:
    """
    Trace the minimum-cost seam back from the bottom row.

    Ties are broken towards the lowest column index, both for the starting
    column and at every step up.

    Args:
        cost: Cumulative cost table (H, W) from cumulative_cost

    Returns:
        Seam indices (H,) with the column of the seam in each row
    """
    H, W = cost.shape
    lo, hi = neighbor_bounds(W)

    seam = torch.zeros(H, dtype=torch.long)
    # torch.argmin returns the first minimal index
    x = torch.argmin(cost[H - 1]).item()
    seam[H - 1] = x

    for y in range(H - 2, -1, -1):
        left, right = lo[x].item(), hi[x].item()
        candidates = cost[y, left:right + 1]
        assert candidates.numel() > 0, f"Empty neighbour window at ({x}, {y})"
        x = left + torch.argmin(candidates).item()
        seam[y] = x

    return seam


def remove_seam(image: torch.Tensor, width: int, height: int,
                direction: str = 'vertical') -> torch.Tensor:
    """
    Find and remove one minimum-energy seam, in place.

    The energy is recomputed from the current active region on every call.
    Pixels right of (or below) the seam shift one step towards it; the
    caller is expected to shrink its tracked width (or height) by one.

    Args:
        image: Backing pixel grid (C, H, W), modified in place
        width: Active size along the reduced axis
        height: Active size along the other axis
        direction: 'vertical' (reduce width) or 'horizontal' (reduce height)

    Returns:
        Removed seam (height,) in logical coordinates
    """
    accessor = AxisAccessor(image, width, height, direction)

    energy = dual_gradient_energy(accessor.view())
    cost = cumulative_cost(energy)
    seam = find_seam(cost)

    for y in range(height - 1, -1, -1):
        accessor.shift_left(seam[y].item(), y)

    logger.debug("Removed %s seam (active %dx%d), total cost %.3f",
                 direction, width, height, cost[height - 1, seam[height - 1]].item())
    return seam
