"""totemology
=================================

Totem pole images from triangle recurrences (generalisations of Euler's
Number Triangle). A :class:`Totem` holds a row of arbitrary-precision
integers; the ``grow_*`` functions expand it by one entry per step and the
renderer draws every entry as a column of its binary digits::

    from totemology import new_totem, grow_missile, write_image

    totem = new_totem()
    for i in range(50):
        write_image(totem, f"{i}.png")
        totem = grow_missile(totem)
"""

from .errors import InvalidInputError, ResourceError
from .grow import (
    grow,
    grow_arrow,
    grow_being,
    grow_body,
    grow_face,
    grow_family,
    grow_missile,
    grow_rocket,
)
from .renderer.bitplane import BitplaneRenderer, render, render_grid, write_image
from .rules import (
    RULE_REGISTRY,
    GrowthRule,
    arrow_rule,
    being_rule,
    body_rule,
    face_rule,
    missile_rule,
    rocket_rule,
)
from .totem import Totem, new_totem
from .types import CoefficientFn, Family

__all__ = [
    "BitplaneRenderer",
    "CoefficientFn",
    "Family",
    "GrowthRule",
    "InvalidInputError",
    "RULE_REGISTRY",
    "ResourceError",
    "Totem",
    "arrow_rule",
    "being_rule",
    "body_rule",
    "face_rule",
    "grow",
    "grow_arrow",
    "grow_being",
    "grow_body",
    "grow_face",
    "grow_family",
    "grow_missile",
    "grow_rocket",
    "missile_rule",
    "new_totem",
    "render",
    "render_grid",
    "rocket_rule",
    "write_image",
]
