from typing import Sequence

import numpy as np
from PIL import Image

from totemology.errors import InvalidInputError
from totemology.totem import Totem
from totemology.utils.image import PathLike, UInt8Array, grid_to_image, save_image


DEFAULT_ON = 255
DEFAULT_OFF = 0


def grid_height(row: Sequence[int]) -> int:
    """
    Image height for ``row``: the bit length of its middle entry.
    """
    return row[(len(row) - 1) // 2].bit_length()


def validate_row(row: Sequence[int]) -> None:
    if len(row) == 0:
        raise InvalidInputError("Cannot render an empty row")
    negatives = [x for x, value in enumerate(row) if value < 0]
    if negatives:
        raise InvalidInputError(f"Cannot render negative values at columns {negatives}")


def render_grid(
    row: Sequence[int], on: int = DEFAULT_ON, off: int = DEFAULT_OFF
) -> UInt8Array:
    """
    Bit-plane grid of ``row``: column x holds the binary digits of row[x],
    least significant bit at the bottom. Shape is (height, len(row)).

    The height follows the middle entry, so bits of wider columns at or above
    that height are clipped.
    """
    validate_row(row)
    width, height = len(row), grid_height(row)
    grid: UInt8Array = np.full((height, width), off, dtype=np.uint8)

    for x, number in enumerate(row):
        for y in range(min(number.bit_length(), height)):
            if (number >> y) & 1:
                grid[height - y - 1, x] = on

    return grid


def render(totem: Totem, on: int = DEFAULT_ON, off: int = DEFAULT_OFF) -> Image.Image:
    """
    Renders the totem's current row as a grayscale PIL Image.
    """
    return grid_to_image(render_grid(totem.row, on=on, off=off))


def write_image(
    totem: Totem,
    path: PathLike,
    on: int = DEFAULT_ON,
    off: int = DEFAULT_OFF,
) -> None:
    save_image(render(totem, on=on, off=off), path)


class BitplaneRenderer:
    on: int
    off: int

    def __init__(self, on: int = DEFAULT_ON, off: int = DEFAULT_OFF):
        self.on = on
        self.off = off

    def render(self, totem: Totem) -> Image.Image:
        return render(totem, on=self.on, off=self.off)

    def write(self, totem: Totem, path: PathLike) -> None:
        write_image(totem, path, on=self.on, off=self.off)
