"""Built-in growth rules.

Every family shares the same recurrence over the previous row ``row`` of
length ``n`` and the step ``t`` read *before* it is incremented::

    next[x] = row[x - 1] * coeff_left(t, x) + row[x] * coeff_right(t, x)

for ``1 <= x <= n - 1``, with ``next[0]`` and ``next[n]`` set to the rule's
boundary value. A :class:`GrowthRule` bundles the two coefficient functions
and the boundary; the constructors below build one per family.

Contract (``CoefficientFn``):

* Receives ``(t, x)`` and returns an ``int``.
* Must be pure; the same rule value can be reused across many steps and
  totems.

Families may be mixed freely from one step to the next. The state carries
over regardless of which rule produced the previous row.
"""

from dataclasses import dataclass
from typing import Callable, Dict

from totemology.types import CoefficientFn, Family


@dataclass(frozen=True)
class GrowthRule:
    """One linear triangle recurrence.

    Attributes:
        coeff_left (CoefficientFn): Weight applied to ``row[x - 1]``.
        coeff_right (CoefficientFn): Weight applied to ``row[x]``.
        boundary (int): Value written at both ends of every new row.
    """

    coeff_left: CoefficientFn
    coeff_right: CoefficientFn
    boundary: int = 1


def missile_rule() -> GrowthRule:
    """Euler's number triangle. Totems look like missiles."""
    return GrowthRule(
        coeff_left=lambda t, x: t - x + 1,
        coeff_right=lambda t, x: x + 1,
    )


def arrow_rule() -> GrowthRule:
    """Both neighbours weighted by the step. Totems look like arrows."""
    return GrowthRule(
        coeff_left=lambda t, x: t,
        coeff_right=lambda t, x: t,
    )


def face_rule() -> GrowthRule:
    """Pascal's triangle; faces show up in the low bits."""
    return GrowthRule(
        coeff_left=lambda t, x: 1,
        coeff_right=lambda t, x: 1,
    )


def rocket_rule(mod: int) -> GrowthRule:
    """Euler's triangle shifted by ``mod``. Totems resemble rockets."""
    return GrowthRule(
        coeff_left=lambda t, x: t - x + mod,
        coeff_right=lambda t, x: x + mod,
    )


def body_rule(mod: int) -> GrowthRule:
    """Pascal's triangle scaled by ``mod`` per step. Shapes resemble bodies."""
    return GrowthRule(
        coeff_left=lambda t, x: mod,
        coeff_right=lambda t, x: mod,
    )


def being_rule(a: int, b: int) -> GrowthRule:
    """Neighbours weighted by ``b`` with both ends pinned to ``a``."""
    return GrowthRule(
        coeff_left=lambda t, x: b,
        coeff_right=lambda t, x: b,
        boundary=a,
    )


RULE_REGISTRY: Dict[Family, Callable[..., GrowthRule]] = {
    Family.MISSILE: missile_rule,
    Family.ARROW: arrow_rule,
    Family.FACE: face_rule,
    Family.ROCKET: rocket_rule,
    Family.BODY: body_rule,
    Family.BEING: being_rule,
}
"""Registry of family tags to rule constructors.

Constructors take the family's parameters positionally (``mod`` for rocket
and body, ``a, b`` for being, nothing for the rest).
"""
