"""
Routing of shots to targets.

A single fire event affects at most one target: targets are tested in
spawn order and the first whose hit-box contains the point is hit.
"""

from typing import Iterable, Optional

from models import Point2D
from games.AlienWave.game.target import Target
from wavecore.logging import get_logger

log = get_logger('collision')


class CollisionRouter:
    """Delivers each shot to the first target it hits.

    Examples:
        >>> router = CollisionRouter()
        >>> router.route(Point2D(x=0.0, y=0.0), [], now=0.0) is None
        True
    """

    def route(self, point: Point2D, targets: Iterable[Target], now: float) -> Optional[Target]:
        """Hit the first target under ``point``.

        Args:
            point: Shot position in playfield coordinates
            targets: Candidates in spawn order
            now: Current time in milliseconds

        Returns:
            The target that was hit, or None on a miss
        """
        for target in targets:
            if target.check_hit(point):
                target.hit(now)
                log.debug("Shot at (%.1f, %.1f) hit target %d", point.x, point.y, target.handle)
                return target
        log.trace("Shot at (%.1f, %.1f) missed", point.x, point.y)
        return None
