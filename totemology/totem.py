"""Core immutable :class:`Totem` value object.

A totem is one generation of a triangle expansion: an ordered row of
arbitrary-precision integers plus the step counter that the recurrence
formulas read. Growth functions (see :mod:`totemology.grow`) are pure: they
take a previous ``Totem`` and return a *new* one whose row is one element
longer. Nothing is mutated in place, so a driver may keep older generations
around or branch a totem into different families.

Design notes:

* The row is a persistent vector (``pyrsistent.PVector``) of plain Python
  ``int`` values, which are unbounded. Missile and face rows resemble
  binomial coefficients and leave the 64-bit range long before step 70.
* ``count`` starts at 1 and always equals ``len(row)``.
"""

from dataclasses import dataclass

from pyrsistent import pvector
from pyrsistent.typing import PVector

from totemology.types import Step


@dataclass(frozen=True)
class Totem:
    """Immutable growth state.

    Attributes:
        row (PVector[int]): Current generation of the triangle, left to right.
        count (Step): Number of rows produced so far (1 for a fresh totem).
    """

    row: PVector[int] = pvector([1])
    count: Step = 1

    @property
    def width(self) -> int:
        """Number of entries in the current row."""
        return len(self.row)

    @property
    def middle(self) -> int:
        """Middle entry of the row (left of centre for even widths)."""
        return self.row[(len(self.row) - 1) // 2]

    def __str__(self) -> str:
        return " ".join(str(value) for value in self.row)


def new_totem() -> Totem:
    """Return a fresh totem with ``row == [1]`` and ``count == 1``."""
    return Totem(row=pvector([1]), count=1)
