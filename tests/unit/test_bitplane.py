# tests/unit/test_bitplane.py

from typing import List

import numpy as np
import pytest
from pyrsistent import pvector

from totemology.errors import InvalidInputError
from totemology.grow import grow_face, grow_missile
from totemology.renderer.bitplane import (
    BitplaneRenderer,
    grid_height,
    render,
    render_grid,
)
from totemology.totem import Totem, new_totem
from tests.test_utils import grow_n


def test_single_entry_row() -> None:
    grid = render_grid([1])
    assert grid.shape == (1, 1)
    assert grid.tolist() == [[255]]


def test_pascal_row_grid() -> None:
    grid = render_grid([1, 2, 1])
    assert grid.shape == (2, 3)
    assert grid.dtype == np.uint8
    # Top row is the highest bit.
    assert grid.tolist() == [
        [0, 255, 0],
        [255, 0, 255],
    ]


def test_column_holds_binary_digits() -> None:
    grid = render_grid([1, 0b101101, 1])
    column = [int(bit == 255) for bit in grid[:, 1]]
    assert column == [1, 0, 1, 1, 0, 1]


@pytest.mark.parametrize(
    "row, height",
    [
        ([1], 1),
        ([1, 2, 1], 2),
        ([1, 2, 4, 1], 2),  # left middle for even widths
        ([1, 11, 11, 1], 4),
        ([0], 0),
        ([1, 2**100, 1], 101),
    ],
)
def test_height_follows_middle(row: List[int], height: int) -> None:
    assert grid_height(row) == height
    assert render_grid(row).shape == (height, len(row))


def test_wider_columns_are_clipped() -> None:
    grid = render_grid([7, 1, 4])
    assert grid.shape == (1, 3)
    # Only bit 0 fits: 7 -> on, 1 -> on, 4 -> off.
    assert grid.tolist() == [[255, 255, 0]]


def test_custom_intensities() -> None:
    grid = render_grid([1, 2, 1], on=200, off=10)
    assert grid.tolist() == [
        [10, 200, 10],
        [200, 10, 200],
    ]


def test_rendering_is_idempotent() -> None:
    totem = grow_n(grow_missile, 20)
    assert np.array_equal(render_grid(totem.row), render_grid(totem.row))


def test_zero_height_grid() -> None:
    grid = render_grid([0, 0])
    assert grid.shape == (0, 2)


def test_empty_row_is_rejected() -> None:
    with pytest.raises(InvalidInputError, match="empty row"):
        render_grid([])


def test_negative_values_are_rejected() -> None:
    with pytest.raises(InvalidInputError, match="negative"):
        render_grid([1, -2, 1])


def test_invalid_input_is_value_error() -> None:
    with pytest.raises(ValueError):
        render_grid(pvector([]))


def test_render_returns_grayscale_image() -> None:
    totem = grow_n(grow_face, 2)
    image = render(totem)
    assert image.mode == "L"
    assert image.size == (3, 2)
    assert np.array_equal(np.array(image), render_grid(totem.row))


def test_renderer_object_uses_intensities() -> None:
    renderer = BitplaneRenderer(on=128, off=0)
    image = renderer.render(new_totem())
    assert np.array(image).tolist() == [[128]]


def test_big_middle_column() -> None:
    totem = grow_n(grow_face, 100)
    grid = render_grid(totem.row)
    assert grid.shape == (totem.middle.bit_length(), 101)
    middle = totem.row[50]
    expected = [(middle >> y) & 1 for y in reversed(range(grid.shape[0]))]
    assert [int(v == 255) for v in grid[:, 50]] == expected


def test_render_accepts_totem_rows() -> None:
    totem = Totem(row=pvector([1, 4, 1]), count=3)
    assert render_grid(totem.row).tolist() == [
        [0, 255, 0],
        [0, 0, 0],
        [255, 0, 255],
    ]
