"""
Image decoding and encoding.

Images travel through the library as (C, H, W) uint8 tensors.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Union

import numpy as np
import torch
from PIL import Image, UnidentifiedImageError

from .errors import ImageIOError

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = 'PNG'


def load_image(path: Union[str, Path], device='cpu') -> torch.Tensor:
    """
    Load an image file as a (3, H, W) uint8 tensor. Alpha is dropped.

    Raises:
        ImageIOError: missing, unreadable or undecodable file
    """
    path = Path(path)
    try:
        with Image.open(path) as img:
            img_array = np.array(img.convert('RGB'), dtype=np.uint8)
    except FileNotFoundError as ex:
        raise ImageIOError(f"Input not found: {path}") from ex
    except UnidentifiedImageError as ex:
        raise ImageIOError(f"Unsupported or corrupt image: {path}") from ex
    except Image.DecompressionBombError as ex:
        raise ImageIOError(f"Image too large to decode safely: {path}") from ex
    except OSError as ex:
        raise ImageIOError(f"Failed to read image '{path}': {ex}") from ex

    img_tensor = torch.from_numpy(img_array).permute(2, 0, 1).contiguous().to(device)
    logger.debug("Loaded %s: %d x %d", path, img_tensor.shape[2], img_tensor.shape[1])
    return img_tensor


def _output_format(path: Path) -> str:
    return Image.registered_extensions().get(path.suffix.lower(), DEFAULT_FORMAT)


def _default_file_mode() -> int:
    # os.umask can only be read by setting it
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def save_image(tensor: torch.Tensor, path: Union[str, Path]):
    """
    Save a (C, H, W) or (H, W) uint8 tensor as an image.

    The image is encoded into a temporary file next to the destination and
    renamed into place, so a failure never leaves a partial output behind.

    Raises:
        ImageIOError: the destination could not be written
    """
    path = Path(path)

    if tensor.dim() == 3:
        img_array = tensor.permute(1, 2, 0).cpu().numpy()
        if img_array.shape[2] == 1:
            img_array = img_array[:, :, 0]
    else:
        img_array = tensor.cpu().numpy()
    img = Image.fromarray(img_array.clip(0, 255).astype(np.uint8))

    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(dir=path.parent, prefix=f".{path.name}.",
                                         suffix='.tmp', delete=False) as fh:
            tmp_name = fh.name
            img.save(fh, format=_output_format(path))
        # NamedTemporaryFile creates 0600; give the result the usual mode
        os.chmod(tmp_name, _default_file_mode())
        os.replace(tmp_name, path)
    except (OSError, ValueError) as ex:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise ImageIOError(f"Failed to write image '{path}': {ex}") from ex

    logger.debug("Saved %s", path)
