"""Common type aliases and enumerations.

``CoefficientFn`` is the central extension point of the growth engine: every
recurrence family is described by two of them plus a boundary value (see
:mod:`totemology.rules`).
"""

from enum import StrEnum, auto
from typing import Callable

Step = int
Index = int

CoefficientFn = Callable[[Step, Index], int]


class Family(StrEnum):
    """Named recurrence families (each produces a recognisable totem shape)."""

    MISSILE = auto()
    ARROW = auto()
    FACE = auto()
    ROCKET = auto()
    BODY = auto()
    BEING = auto()
