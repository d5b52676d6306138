"""
Axis-aware access to the active region of a pixel grid.

Width and height reduction share one algorithm. Instead of transposing the
pixel data for height reduction, the accessor swaps the meaning of the
coordinates: logical x always runs along the axis being reduced and logical
y along the other one.
"""

from typing import Tuple

import torch

DIRECTIONS = ('vertical', 'horizontal')


class AxisAccessor:
    """
    Logical view of the active region of an image tensor.

    Args:
        image: Backing pixel grid (C, H, W). Mutated in place by shift_left.
        width: Active size along the reduced axis
        height: Active size along the other axis
        direction: 'vertical' to remove vertical seams (reduce width),
                   'horizontal' to remove horizontal seams (reduce height)
    """

    def __init__(self, image: torch.Tensor, width: int, height: int,
                 direction: str = 'vertical'):
        if direction not in DIRECTIONS:
            raise ValueError(f"Invalid direction: {direction}")
        if image.dim() != 3:
            raise ValueError(f"Expected a (C, H, W) tensor, got shape {tuple(image.shape)}")
        if width < 1 or height < 1:
            raise ValueError(f"Active region must be at least 1x1, got {width}x{height}")

        _, H, W = image.shape
        phys_w, phys_h = (width, height) if direction == 'vertical' else (height, width)
        if phys_w > W or phys_h > H:
            raise ValueError(
                f"Active region {phys_w}x{phys_h} exceeds image size {W}x{H}")

        self.image = image
        self.width = width
        self.height = height
        self.direction = direction

    @property
    def transposed(self) -> bool:
        return self.direction == 'horizontal'

    def sample(self, x: int, y: int) -> Tuple[int, int]:
        """Map logical (x, y) to physical (x, y) grid coordinates."""
        if self.transposed:
            return y, x
        return x, y

    def pixel(self, x: int, y: int) -> torch.Tensor:
        """Channel values at logical position (x, y)."""
        px, py = self.sample(x, y)
        return self.image[:, py, px]

    def view(self) -> torch.Tensor:
        """
        Active region in logical orientation, shape (C, height, width).

        For the horizontal direction this is a transposed view, so no pixel
        data is copied and writes go straight to the backing grid.
        """
        if self.transposed:
            return self.image[:, :self.width, :self.height].transpose(1, 2)
        return self.image[:, :self.height, :self.width]

    def shift_left(self, x: int, y: int):
        """
        Remove the pixel at logical (x, y) from its line.

        Every pixel after x on logical line y moves one step towards x. The
        last active pixel of the line keeps its old value; it falls outside
        the active region once the caller shrinks the width.
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise ValueError(f"Position ({x}, {y}) outside active region "
                             f"{self.width}x{self.height}")
        line = self.view()[:, y, :]
        # Source and destination overlap
        line[:, x:self.width - 1] = line[:, x + 1:self.width].clone()
