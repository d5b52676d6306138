"""
Energy function for seam carving.

The energy function determines which pixels are "important".
Low-energy seams are preferred for removal.

We use the dual-gradient energy: the color difference between the two
horizontal neighbours plus the color difference between the two vertical
neighbours, combined as a Euclidean norm over all channels.
"""

from typing import Tuple

import torch


def _gradient_pairs(n: int, device=None) -> Tuple[torch.Tensor, torch.Tensor]:
    """
    Indices of the two neighbours compared at every position of an axis.

    Positions are clamped to [1, n-2], so border pixels reuse the gradient
    of their nearest interior neighbour. Axes shorter than 3 compare the
    first and last element (a length-1 axis has no gradient).
    """
    if n < 3:
        before = torch.zeros(n, dtype=torch.long, device=device)
        after = torch.full((n,), n - 1, dtype=torch.long, device=device)
        return before, after

    center = torch.arange(n, device=device).clamp(1, n - 2)
    return center - 1, center + 1


def dual_gradient_energy(image: torch.Tensor) -> torch.Tensor:
    """
    Compute the dual-gradient energy of an image.

    E(x, y) = sqrt(||I(xd-1, y) - I(xd+1, y)||^2 + ||I(x, yd-1) - I(x, yd+1)||^2)

    where xd and yd are x and y clamped away from the image border.
    Computation is done in float64 so 8-bit inputs give exact squared sums.

    Args:
        image: Image tensor (C, H, W) or grayscale (H, W)

    Returns:
        Energy map (H, W), float64
    """
    if image.dim() == 2:
        image = image.unsqueeze(0)

    img = image.to(torch.float64)
    _, H, W = img.shape

    left, right = _gradient_pairs(W, device=img.device)
    up, down = _gradient_pairs(H, device=img.device)

    delta_x = img[:, :, right] - img[:, :, left]
    delta_y = img[:, down, :] - img[:, up, :]

    energy = torch.sqrt((delta_x ** 2).sum(dim=0) + (delta_y ** 2).sum(dim=0))
    return energy
