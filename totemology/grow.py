"""Growth reducer.

:func:`grow` is the only transition for a :class:`totemology.totem.Totem`. It
applies one :class:`totemology.rules.GrowthRule` to the current row and
returns a *new* totem one element wider with ``count`` bumped by one.

The ``grow_<family>`` helpers exist so callers can alternate families
without building rules by hand; :func:`grow_family` dispatches on a
:class:`totemology.types.Family` tag.
"""

from typing import Union

from pyrsistent import pvector

from totemology.rules import (
    RULE_REGISTRY,
    GrowthRule,
    arrow_rule,
    being_rule,
    body_rule,
    face_rule,
    missile_rule,
    rocket_rule,
)
from totemology.totem import Totem
from totemology.types import Family


def grow(totem: Totem, rule: GrowthRule) -> Totem:
    """Advance ``totem`` by one generation using ``rule``.

    Args:
        totem (Totem): Previous generation.
        rule (GrowthRule): Coefficients and boundary for the new row.

    Returns:
        Totem: New generation with ``len(row) + 1`` entries and ``count + 1``.
            When the previous row has a single entry there is no interior, so
            the result is ``[boundary, boundary]``.
    """
    row = totem.row
    t = totem.count
    interior = [
        row[x - 1] * rule.coeff_left(t, x) + row[x] * rule.coeff_right(t, x)
        for x in range(1, len(row))
    ]
    next_row = pvector([rule.boundary, *interior, rule.boundary])
    return Totem(row=next_row, count=t + 1)


def grow_missile(totem: Totem) -> Totem:
    return grow(totem, missile_rule())


def grow_arrow(totem: Totem) -> Totem:
    return grow(totem, arrow_rule())


def grow_face(totem: Totem) -> Totem:
    return grow(totem, face_rule())


def grow_rocket(totem: Totem, mod: int) -> Totem:
    return grow(totem, rocket_rule(mod))


def grow_body(totem: Totem, mod: int) -> Totem:
    return grow(totem, body_rule(mod))


def grow_being(totem: Totem, a: int, b: int) -> Totem:
    return grow(totem, being_rule(a, b))


def grow_family(totem: Totem, family: Union[Family, str], *params: int) -> Totem:
    """Grow ``totem`` with the rule registered for ``family``.

    Args:
        totem (Totem): Previous generation.
        family (Family | str): Family tag or its string value (``"rocket"``).
        *params (int): Family parameters, in table order.

    Returns:
        Totem: Next generation.

    Raises:
        ValueError: If ``family`` is not a known family.
    """
    try:
        rule_fn = RULE_REGISTRY[Family(family)]
    except ValueError:
        raise ValueError(f"Unknown growth family: {family!r}") from None
    return grow(totem, rule_fn(*params))
