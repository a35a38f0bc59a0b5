"""
WaveController for Alien Waves.

Owns the wave number, the live targets and the per-wave countdown, and runs
the wave state machine:

    ACTIVE --(all targets gone)--> SUCCEEDED --(continue)--> ACTIVE (next wave)
    ACTIVE --(all targets gone, last wave)--> CLEARED
    ACTIVE --(countdown expired, targets left)--> FAILED

FAILED and CLEARED are terminal until reset(). The failure check always
runs before the success check within a tick.
"""

import itertools
import random
from typing import Dict, List, Optional

from models import (
    Lifecycle,
    Resolution,
    TargetConfig,
    WaveConfig,
    WaveOutcome,
    WaveStatus,
)
from games.AlienWave.game.scheduler import EventScheduler
from games.AlienWave.game.spawn_policy import SpawnPolicy
from games.AlienWave.game.target import Target
from wavecore.logging import get_logger

log = get_logger('wave')


class WaveController:
    """Wave progression and target ownership.

    All methods take ``now`` in milliseconds from the session clock.

    Attributes:
        wave_number: Current wave, 1-based, capped at total_waves
        wave_size: Targets spawned for the current wave
        time_budget_ms: Countdown of the current wave
        wave_started_at: Start of the countdown (rebased across pauses)
        spawned: True once the current wave's batch exists
        outcome: Current WaveOutcome

    Examples:
        >>> wave = WaveController(WaveConfig(), TargetConfig(), Resolution(width=800, height=600))
        >>> wave.start(now=0.0)
        >>> wave.update(now=16.0)
        >>> len(wave.targets)
        4
    """

    def __init__(
        self,
        wave_config: WaveConfig,
        target_config: TargetConfig,
        playfield: Resolution,
        rng: Optional[random.Random] = None,
    ):
        self._policy = SpawnPolicy(wave_config)
        self._target_config = target_config
        self._playfield = playfield
        self._rng = rng or random.Random()
        self._scheduler = EventScheduler()
        self._handles = itertools.count(1)

        self._targets: List[Target] = []
        self._index: Dict[int, Target] = {}
        self._paused_at: Optional[float] = None
        self._elapsed_at_pause = 0.0

        self.wave_number = 1
        self.wave_size = self._policy.wave_size(1)
        self.time_budget_ms = self._policy.time_budget_ms(1)
        self.wave_started_at = 0.0
        self.spawned = False
        self.outcome = WaveOutcome.ACTIVE

    # ------------------------------------------------------------------
    # Views

    @property
    def policy(self) -> SpawnPolicy:
        return self._policy

    @property
    def total_waves(self) -> int:
        return self._policy.total_waves

    @property
    def targets(self) -> List[Target]:
        """Live targets in spawn order."""
        return self._targets

    @property
    def scheduler(self) -> EventScheduler:
        return self._scheduler

    @property
    def live_count(self) -> int:
        """Targets alive or dying."""
        return sum(1 for t in self._targets if t.is_live)

    @property
    def active_count(self) -> int:
        """Targets alive and not dying."""
        return sum(1 for t in self._targets if t.is_alive)

    @property
    def is_paused(self) -> bool:
        return self._paused_at is not None

    def lookup(self, handle: int) -> Optional[Target]:
        """Resolve a handle to its live target."""
        return self._index.get(handle)

    def elapsed_ms(self, now: float) -> float:
        """Countdown time consumed so far, frozen while paused."""
        if self._paused_at is not None:
            return self._elapsed_at_pause
        return now - self.wave_started_at

    def time_remaining_ms(self, now: float) -> float:
        return max(0.0, self.time_budget_ms - self.elapsed_ms(now))

    def render_now(self, now: float) -> float:
        """Time to draw targets at: the pause instant while paused, else ``now``."""
        if self._paused_at is not None:
            return self._paused_at
        return now

    def status(self, now: float) -> WaveStatus:
        return WaveStatus(
            wave_number=self.wave_number,
            total_waves=self.total_waves,
            wave_size=self.wave_size,
            time_budget_ms=self.time_budget_ms,
            time_remaining_ms=self.time_remaining_ms(now),
            outcome=self.outcome,
            active_count=self.active_count,
        )

    # ------------------------------------------------------------------
    # Lifecycle

    def start(self, now: float) -> None:
        """Start the countdown of the current wave."""
        self.wave_started_at = now
        self._paused_at = None
        log.info("Wave %d/%d started: %d targets, %.1fs",
                 self.wave_number, self.total_waves, self.wave_size,
                 self.time_budget_ms / 1000)

    def reset(self, now: float) -> None:
        """Back to wave 1 with no targets and a fresh countdown."""
        self._destroy_all()
        self.wave_number = 1
        self.wave_size = self._policy.wave_size(1)
        self.time_budget_ms = self._policy.time_budget_ms(1)
        self.spawned = False
        self.outcome = WaveOutcome.ACTIVE
        log.info("Waves reset")
        self.start(now)

    def update(self, now: float) -> None:
        """Run one simulation tick.

        Order: due timers, target updates, reaping, spawning, then the
        failure check followed by the success check. Does nothing unless
        the wave is ACTIVE and not paused.
        """
        if self.outcome != WaveOutcome.ACTIVE or self.is_paused:
            return

        self._scheduler.run_due(now, self.lookup)

        for target in self._targets:
            target.update(now)

        self._reap()
        self.spawn_wave(now)
        self._check_status(now)

    def spawn_wave(self, now: float) -> int:
        """Create the wave's batch if nothing is live and it was not spawned yet.

        Returns:
            Number of targets created (0 when the batch already exists)
        """
        if self.outcome != WaveOutcome.ACTIVE or self.spawned or self.live_count > 0:
            return 0

        for _ in range(self.wave_size):
            target = Target.spawn(
                next(self._handles),
                self._playfield,
                self._target_config,
                now,
                rng=self._rng,
                scheduler=self._scheduler,
            )
            self._targets.append(target)
            self._index[target.handle] = target
        self.spawned = True
        log.debug("Wave %d spawned %d targets", self.wave_number, self.wave_size)
        return self.wave_size

    def continue_wave(self, now: float) -> bool:
        """Advance from SUCCEEDED to the next wave's ACTIVE state.

        Returns:
            True if a new wave started, False if the wave had not succeeded
        """
        if self.outcome != WaveOutcome.SUCCEEDED:
            log.debug("continue_wave ignored while %s", self.outcome.value)
            return False

        self.wave_number = min(self.wave_number + 1, self.total_waves)
        self.wave_size += self._policy.increment
        self.time_budget_ms = self._policy.time_budget_ms(self.wave_number)
        self.spawned = False
        self.outcome = WaveOutcome.ACTIVE
        self.start(now)
        return True

    def pause(self, now: float) -> None:
        """Freeze the countdown, targets and timers."""
        if self._paused_at is not None:
            return
        self._elapsed_at_pause = now - self.wave_started_at
        self._paused_at = now

    def resume(self, now: float) -> None:
        """Unfreeze, preserving the remaining countdown exactly."""
        if self._paused_at is None:
            return
        paused_for = now - self._paused_at
        self.wave_started_at = now - self._elapsed_at_pause
        self._scheduler.shift(paused_for)
        for target in self._targets:
            target.rebase(paused_for)
        self._paused_at = None
        log.debug("Resumed after %.0fms", paused_for)

    # ------------------------------------------------------------------
    # Internals

    def _reap(self) -> None:
        """Destroy and drop targets that reached REMOVED."""
        kept = []
        for target in self._targets:
            if target.lifecycle == Lifecycle.REMOVED:
                target.destroy()
                self._index.pop(target.handle, None)
            else:
                kept.append(target)
        self._targets = kept

    def _check_status(self, now: float) -> None:
        live = self.live_count

        if self.elapsed_ms(now) >= self.time_budget_ms and live > 0:
            self.outcome = WaveOutcome.FAILED
            self._destroy_all()
            log.info("Wave %d failed: time's up with %d targets left", self.wave_number, live)
            return

        if self.spawned and live == 0:
            if self.wave_number < self.total_waves:
                self.outcome = WaveOutcome.SUCCEEDED
                log.info("Wave %d complete", self.wave_number)
            else:
                self.outcome = WaveOutcome.CLEARED
                log.info("All %d waves cleared", self.total_waves)

    def _destroy_all(self) -> None:
        for target in self._targets:
            target.destroy()
        self._targets = []
        self._index.clear()
        self._scheduler.clear()
