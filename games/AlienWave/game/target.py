"""
Target class for Alien Waves.

A target is one wandering alien: it seeks random points inside the
playfield, idles when it arrives, and plays a fixed-length death animation
once hit. Lifecycle only ever moves forward: ALIVE -> DYING -> REMOVED.
"""

import math
import random
from typing import Optional

import pygame

from models import (
    AnimationState,
    Lifecycle,
    Point2D,
    Rectangle,
    Resolution,
    TargetConfig,
)
from games.AlienWave.config import Colors
from games.AlienWave.game.animation import AnimationPlayer, frame_source_rect
from games.AlienWave.game.scheduler import EventScheduler
from wavecore.logging import get_logger

log = get_logger('target')

MIN_DYING_ALPHA = 0.3


class Target:
    """A single spawned alien.

    Position is the top-left corner of the square footprint and always
    stays within ``[0, width - footprint] x [0, height - footprint]``.

    Every time-dependent method takes ``now`` (milliseconds, same clock as
    the wave controller) so the owner decides what time it is.

    Attributes:
        handle: Identity, unique for the controller that spawned it
        lifecycle: ALIVE, DYING or REMOVED
        dying_since: Time the target was hit, None until then

    Examples:
        >>> config = TargetConfig()
        >>> field = Resolution(width=800, height=600)
        >>> target = Target(1, Point2D(x=10, y=10), Point2D(x=10, y=10), field, config)
        >>> target.check_hit(Point2D(x=5.0, y=5.0))
        True
        >>> target.hit(now=0.0)
        True
        >>> target.lifecycle
        <Lifecycle.DYING: 'dying'>
    """

    def __init__(
        self,
        handle: int,
        position: Point2D,
        goal: Point2D,
        playfield: Resolution,
        config: TargetConfig,
        rng: Optional[random.Random] = None,
        scheduler: Optional[EventScheduler] = None,
    ):
        self.handle = handle
        self._config = config
        self._playfield = playfield
        self._rng = rng or random.Random()
        self._scheduler = scheduler

        self._x = position.x
        self._y = position.y
        self._goal_x = goal.x
        self._goal_y = goal.y
        self._clamp()

        self.lifecycle = Lifecycle.ALIVE
        self.dying_since: Optional[float] = None
        self.animation = AnimationPlayer(AnimationState.MOVING, speed=config.animation_speed)
        self.retarget_interval_ms = self._rng.uniform(
            config.retarget_min_ms, config.retarget_max_ms
        )

    @classmethod
    def spawn(
        cls,
        handle: int,
        playfield: Resolution,
        config: TargetConfig,
        now: float,
        rng: Optional[random.Random] = None,
        scheduler: Optional[EventScheduler] = None,
    ) -> 'Target':
        """Create a target at a random in-bounds point heading for another one.

        If a scheduler is given, the periodic re-target trigger is armed.
        """
        rng = rng or random.Random()
        position = _random_point(rng, playfield, config.footprint)
        goal = _random_point(rng, playfield, config.footprint)
        target = cls(handle, position, goal, playfield, config, rng=rng, scheduler=scheduler)
        target._arm_retarget(now)
        return target

    # ------------------------------------------------------------------
    # Read-only views

    @property
    def position(self) -> Point2D:
        return Point2D(x=self._x, y=self._y)

    @property
    def goal(self) -> Point2D:
        return Point2D(x=self._goal_x, y=self._goal_y)

    @property
    def footprint(self) -> float:
        return self._config.footprint

    @property
    def is_alive(self) -> bool:
        """True while the target can still be hit."""
        return self.lifecycle == Lifecycle.ALIVE

    @property
    def is_dying(self) -> bool:
        return self.lifecycle == Lifecycle.DYING

    @property
    def is_live(self) -> bool:
        """True while the target counts toward the wave (alive or dying)."""
        return self.lifecycle != Lifecycle.REMOVED

    @property
    def animation_state(self) -> AnimationState:
        return self.animation.state

    @property
    def frame_index(self) -> int:
        return self.animation.frame_index

    @property
    def hit_box(self) -> Rectangle:
        """Square footprint grown by the hit margin on all sides."""
        return Rectangle(
            x=self._x, y=self._y, width=self.footprint, height=self.footprint
        ).expanded(self._config.hit_margin)

    def alpha(self, now: float) -> float:
        """Opacity hint: fades from 1.0 toward 0.3 over the death animation."""
        if self.dying_since is None:
            return 1.0
        elapsed = now - self.dying_since
        return max(MIN_DYING_ALPHA, 1.0 - elapsed / self._config.dying_duration_ms)

    # ------------------------------------------------------------------
    # Simulation

    def update(self, now: float) -> None:
        """Advance one tick: death expiry, seeking, clamping and animation."""
        if self.lifecycle == Lifecycle.REMOVED:
            return

        if self.lifecycle == Lifecycle.DYING:
            if now - self.dying_since >= self._config.dying_duration_ms:
                self.lifecycle = Lifecycle.REMOVED
                self._release()
                log.debug("Target %d expired", self.handle)
                return
        else:
            self._seek()

        self._clamp()
        self.animation.tick()

    def request_new_goal(self) -> bool:
        """Pick a fresh motion goal. Ignored unless the target is alive.

        Returns:
            True if a new goal was chosen
        """
        if not self.is_alive:
            return False
        goal = _random_point(self._rng, self._playfield, self.footprint)
        self._goal_x = goal.x
        self._goal_y = goal.y
        self.animation.set_state(AnimationState.MOVING)
        return True

    def check_hit(self, point: Point2D) -> bool:
        """Test a shot against the hit-box. Only alive targets can be hit."""
        if not self.is_alive:
            return False
        return self.hit_box.contains_point(point)

    def hit(self, now: float) -> bool:
        """Start dying. No-op unless the target is alive.

        Returns:
            True if the target transitioned to DYING
        """
        if not self.is_alive:
            return False
        self.lifecycle = Lifecycle.DYING
        self.dying_since = now
        self.animation.set_state(AnimationState.DYING)
        self._release()
        log.debug("Target %d hit at %s", self.handle, self.position)
        return True

    def destroy(self) -> None:
        """Release the re-target trigger and mark the target removed. Idempotent."""
        self._release()
        self.lifecycle = Lifecycle.REMOVED

    def rebase(self, delta: float) -> None:
        """Shift the death timestamp after a pause of ``delta`` ms."""
        if self.dying_since is not None:
            self.dying_since += delta

    # ------------------------------------------------------------------
    # Internals

    def _seek(self) -> None:
        dx = self._goal_x - self._x
        dy = self._goal_y - self._y
        distance = math.hypot(dx, dy)

        if distance > self._config.arrival_epsilon:
            self._x += (dx / distance) * self._config.speed
            self._y += (dy / distance) * self._config.speed
        else:
            self.animation.set_state(AnimationState.IDLE)

    def _clamp(self) -> None:
        max_x = max(0.0, self._playfield.width - self.footprint)
        max_y = max(0.0, self._playfield.height - self.footprint)
        self._x = max(0.0, min(max_x, self._x))
        self._y = max(0.0, min(max_y, self._y))

    def _arm_retarget(self, now: float) -> None:
        if self._scheduler is not None:
            self._scheduler.schedule(now + self.retarget_interval_ms, self.handle, _retarget)

    def _release(self) -> None:
        if self._scheduler is not None:
            self._scheduler.cancel(self.handle)

    # ------------------------------------------------------------------
    # Rendering

    def render(
        self,
        screen: pygame.Surface,
        now: float,
        sprite_sheet: Optional[pygame.Surface] = None,
    ) -> None:
        """Draw the target.

        With a sprite sheet the current animation frame is blitted scaled to
        the footprint; without one a tinted square stands in for it. A frame
        index outside the sheet is logged and the draw is skipped.
        """
        if not self.is_live:
            return

        source = frame_source_rect(self.frame_index)
        if source is None:
            log.warning("Frame index out of range: %d (target %d)", self.frame_index, self.handle)
            return

        size = max(1, int(self.footprint))
        if sprite_sheet is not None:
            frame = sprite_sheet.subsurface(
                pygame.Rect(int(source.x), int(source.y), int(source.width), int(source.height))
            )
            image = pygame.transform.scale(frame, (size, size))
        else:
            image = pygame.Surface((size, size), pygame.SRCALPHA)
            image.fill(_STATE_COLORS[self.animation_state])

        image.set_alpha(int(self.alpha(now) * 255))
        screen.blit(image, (int(self._x), int(self._y)))

    def __str__(self) -> str:
        """String representation for debugging."""
        return (f"Target(#{self.handle}, pos=({self._x:.1f}, {self._y:.1f}), "
                f"{self.lifecycle.value}, anim={self.animation_state.value})")

    def __repr__(self) -> str:
        """String representation for debugging."""
        return self.__str__()


_STATE_COLORS = {
    AnimationState.IDLE: Colors.TARGET_IDLE,
    AnimationState.MOVING: Colors.TARGET_MOVING,
    AnimationState.DYING: Colors.TARGET_DYING,
}


def _random_point(rng: random.Random, playfield: Resolution, footprint: float) -> Point2D:
    """Uniform random top-left corner that keeps the footprint on screen."""
    return Point2D(
        x=rng.uniform(0.0, max(0.0, playfield.width - footprint)),
        y=rng.uniform(0.0, max(0.0, playfield.height - footprint)),
    )


def _retarget(target: Target, now: float) -> None:
    """Periodic re-target effect; re-arms itself while the target is alive."""
    if target.request_new_goal():
        target._arm_retarget(now)
