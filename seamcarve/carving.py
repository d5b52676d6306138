"""
High-level carving functions that drive repeated seam removal.
"""

import logging
import numbers
from pathlib import Path
from typing import Union

import torch

from .errors import UsageError
from .io import load_image, save_image
from .seam import remove_seam

logger = logging.getLogger(__name__)


def _check_count(name: str, value, limit: int):
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise UsageError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise UsageError(f"{name} must be non-negative, got {value}")
    if value >= limit:
        raise UsageError(
            f"{name}={value} would leave nothing of a dimension of size {limit}")


def carve_image(image: torch.Tensor, reduce_width_by: int = 0,
                reduce_height_by: int = 0) -> torch.Tensor:
    """
    Content-aware shrink of an image by seam carving.

    Removes reduce_width_by vertical seams, then reduce_height_by horizontal
    seams. Seams are removed in place on a private copy of the image;
    removed pixels pile up on the right and bottom, and the final crop keeps
    the top-left active region.

    Args:
        image: Image tensor (C, H, W) or (H, W). Not modified.
        reduce_width_by: Number of columns to remove
        reduce_height_by: Number of rows to remove

    Returns:
        Carved image (C, H - reduce_height_by, W - reduce_width_by)
    """
    if image.dim() not in (2, 3):
        raise UsageError(f"Expected a (C, H, W) or (H, W) image, got shape {tuple(image.shape)}")

    if image.dim() == 2:
        image = image.unsqueeze(0)
        squeeze_output = True
    else:
        squeeze_output = False

    C, H, W = image.shape
    if C == 0 or H == 0 or W == 0:
        raise UsageError(f"Image is empty: shape {tuple(image.shape)}")

    _check_count('reduce_width_by', reduce_width_by, W)
    _check_count('reduce_height_by', reduce_height_by, H)

    logger.info("Carving %dx%d image to %dx%d", W, H,
                W - reduce_width_by, H - reduce_height_by)

    carved = image.clone()
    width, height = W, H

    for _ in range(reduce_width_by):
        remove_seam(carved, width, height, direction='vertical')
        width -= 1

    for _ in range(reduce_height_by):
        remove_seam(carved, height, width, direction='horizontal')
        height -= 1

    result = carved[:, :height, :width].contiguous()

    if squeeze_output:
        result = result.squeeze(0)

    return result


def resize_file(input_path: Union[str, Path], output_path: Union[str, Path],
                reduce_width_by: int = 0, reduce_height_by: int = 0,
                device='cpu') -> torch.Tensor:
    """
    Decode an image file, carve it and write the result.

    The output file is written only once carving has finished.

    Args:
        input_path: Image to read
        output_path: Destination; the format follows the suffix (PNG by default)
        reduce_width_by: Number of columns to remove
        reduce_height_by: Number of rows to remove
        device: torch device to carve on

    Returns:
        The carved image tensor (3, H', W')
    """
    image = load_image(input_path, device=device)
    carved = carve_image(image, reduce_width_by, reduce_height_by)
    save_image(carved, output_path)
    logger.info("Wrote %s (%dx%d)", output_path, carved.shape[-1], carved.shape[-2])
    return carved
