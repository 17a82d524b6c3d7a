"""Example driver: a numbered PNG per generation.

Writes ``0.png`` for the fresh totem, grows it once, writes ``1.png`` and so
on, which gives a frame sequence of the evolving triangle.
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

from totemology.grow import grow_family
from totemology.renderer.bitplane import BitplaneRenderer
from totemology.totem import new_totem
from totemology.types import Family

DEFAULT_STEPS = 50

logger = logging.getLogger(__name__)


def generate(
    out_dir: Union[str, Path],
    steps: int = DEFAULT_STEPS,
    family: Union[Family, str] = Family.MISSILE,
    params: Sequence[int] = (),
    renderer: Optional[BitplaneRenderer] = None,
) -> List[Path]:
    """Render ``steps`` generations of one family into ``out_dir``.

    Args:
        out_dir (str | Path): Target directory, created if missing.
        steps (int): Number of images to write.
        family (Family | str): Growth family applied after every image.
        params (Sequence[int]): Family parameters (``mod`` or ``a, b``).
        renderer (BitplaneRenderer | None): Custom intensities; defaults to
            white-on-black.

    Returns:
        List[Path]: Written image paths in generation order.

    Raises:
        ResourceError: If an image cannot be written.
    """
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    renderer = renderer or BitplaneRenderer()

    totem = new_totem()
    paths: List[Path] = []
    for i in range(steps):
        path = out / f"{i}.png"
        renderer.write(totem, path)
        paths.append(path)
        logger.debug(
            "Step %d: width=%d middle bits=%d",
            i,
            totem.width,
            totem.middle.bit_length(),
        )
        totem = grow_family(totem, family, *params)

    logger.info("Wrote %d %s totem images to %s", len(paths), Family(family), out)
    return paths
