import logging
import os
from typing import Union

import numpy as np
import numpy.typing as npt
from PIL import Image

from totemology.errors import InvalidInputError, ResourceError

# Type aliases for clarity
UInt8Array = npt.NDArray[np.uint8]
PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_IMAGE_FORMAT = "PNG"

logger = logging.getLogger(__name__)


def grid_to_image(grid: UInt8Array) -> Image.Image:
    """
    Wrap a 2D uint8 intensity grid (rows x columns) as a grayscale image.
    An empty grid gives a zero-sized image of the same shape.
    """
    if grid.ndim != 2:
        raise InvalidInputError(f"Expected a 2D grid, got shape {grid.shape}")
    height, width = grid.shape
    if grid.size == 0:
        return Image.new("L", (width, height))
    return Image.fromarray(np.ascontiguousarray(grid, dtype=np.uint8))


def save_image(
    image: Image.Image,
    path: PathLike,
    image_format: str = DEFAULT_IMAGE_FORMAT,
) -> None:
    """
    Persist ``image`` at ``path``. The file handle is closed even if encoding fails,
    and a partially written file is removed so no truncated image is left behind.
    Open or write failures surface as ResourceError with the OSError chained.
    """
    width, height = image.size
    if width == 0 or height == 0:
        raise ResourceError(f"Cannot encode an empty {width}x{height} image to {path}")
    try:
        f = open(path, "wb")
    except OSError as err:
        raise ResourceError(f"Failed to open {path} for writing: {err}") from err
    try:
        with f:
            image.save(f, format=image_format)
    except OSError as err:
        os.remove(path)
        raise ResourceError(f"Failed to write image to {path}: {err}") from err
    logger.debug("Wrote %dx%d image to %s", width, height, path)
