"""Hit testing between the falling arrow and the balloons."""

from typing import List, Tuple

from .balloon import Balloon
from .constants import BALLOON_WIDTH, BALLOON_HEIGHT, POINTS_BALLOON_POP


def is_hit(balloon: Balloon, arrow_x: float, arrow_y: float) -> bool:
    """
    Check whether the arrow tip overlaps a balloon.

    Tests against the balloon's bounding box rather than the ellipse itself.
    """
    dx = abs(arrow_x - balloon.x)
    dy = abs(arrow_y - balloon.y)
    return dx < BALLOON_WIDTH / 2 and dy < BALLOON_HEIGHT / 2


def resolve_hits(balloons: List[Balloon], arrow_x: float,
                 arrow_y: float) -> Tuple[List[Balloon], List[Balloon]]:
    """
    Split balloons into those that survive and those popped by the arrow.

    Every overlapping balloon pops, so one arrow can take out several
    balloons stacked on top of each other.

    Returns:
        (remaining, popped), both keeping the original order
    """
    remaining = []
    popped = []
    for balloon in balloons:
        if is_hit(balloon, arrow_x, arrow_y):
            popped.append(balloon)
        else:
            remaining.append(balloon)
    return remaining, popped


def score_for(popped: List[Balloon]) -> int:
    """Points earned for a batch of popped balloons."""
    return POINTS_BALLOON_POP * len(popped)
