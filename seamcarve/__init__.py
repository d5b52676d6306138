"""
Content-aware image shrinking by seam carving.

Repeatedly removes the connected path of pixels with the lowest
dual-gradient energy until the image reaches the requested size.
"""

__version__ = "0.1.0"

from .axis import AxisAccessor
from .energy import dual_gradient_energy
from .seam import neighbor_bounds, cumulative_cost, find_seam, remove_seam
from .carving import carve_image, resize_file
from .io import load_image, save_image
from .errors import SeamCarvingError, UsageError, ImageIOError

__all__ = [
    'AxisAccessor',
    'dual_gradient_energy',
    'neighbor_bounds',
    'cumulative_cost',
    'find_seam',
    'remove_seam',
    'carve_image',
    'resize_file',
    'load_image',
    'save_image',
    'SeamCarvingError',
    'UsageError',
    'ImageIOError',
]
