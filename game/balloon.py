"""Balloon targets and the random layout generator."""

import random
from dataclasses import dataclass
from typing import List

from .constants import (
    BALLOON_MARGIN_X,
    BALLOON_TOP_FRACTION, BALLOON_BAND_FRACTION, BALLOON_COLORS
)


@dataclass
class Balloon:
    """A static balloon target. Position is fixed for its lifetime."""
    x: float
    y: float
    color: str


def spawn_balloons(count: int, viewport_width: float, viewport_height: float,
                   rng=random) -> List[Balloon]:
    """
    Generate a fresh random layout of balloons.

    Balloons may overlap; nothing is carried over from a previous layout.

    Args:
        count: Number of balloons to create
        viewport_width: Width of the play area
        viewport_height: Height of the play area
        rng: Source of randomness providing random() and choice()

    Returns:
        List of new Balloon objects
    """
    if count < 0:
        raise ValueError(f"balloon count must be >= 0, got {count}")

    balloons = []
    for _ in range(count):
        x = rng.random() * (viewport_width - 2 * BALLOON_MARGIN_X) + BALLOON_MARGIN_X
        y = (rng.random() * viewport_height * BALLOON_BAND_FRACTION
             + viewport_height * BALLOON_TOP_FRACTION)
        color = rng.choice(BALLOON_COLORS)
        balloons.append(Balloon(x, y, color))
    return balloons
