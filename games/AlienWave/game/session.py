"""
GameSession - the top-level mode state machine.

The session is the single object the driver threads through the game: it
owns the WaveController (which owns the targets), the CollisionRouter and
the last known pointer position. Targets and waves only update while the
mode is PLAYING.

Transitions:
    MENU    --start-->          PLAYING
    PLAYING --toggle_pause-->   PAUSED --toggle_pause--> PLAYING
    PLAYING --wave FAILED-->    OVER
    PLAYING --wave CLEARED-->   VICTORY
    OVER / VICTORY / PAUSED --restart--> PLAYING (wave 1)
"""

import random
from typing import Callable, Optional

from models import (
    GameConfig,
    InputAction,
    Point2D,
    Resolution,
    SessionMode,
    SessionSnapshot,
    WaveOutcome,
)
from games.AlienWave.game.collision import CollisionRouter
from games.AlienWave.game.scheduler import monotonic_ms
from games.AlienWave.game.target import Target
from games.AlienWave.game.wave import WaveController
from wavecore.logging import get_logger

log = get_logger('session')

RESTARTABLE_MODES = (SessionMode.OVER, SessionMode.VICTORY, SessionMode.PAUSED)


class GameSession:
    """One run of the game from the start menu to game over or victory.

    Args:
        config: Validated game configuration
        playfield: Playfield size in pixels
        clock: Millisecond clock used when an action is given no explicit time
        rng: Random source for spawn positions and motion goals

    Examples:
        >>> session = GameSession(GameConfig(), Resolution(width=800, height=600))
        >>> session.mode
        <SessionMode.MENU: 'menu'>
        >>> session.start(now=0.0)
        True
        >>> session.mode
        <SessionMode.PLAYING: 'playing'>
    """

    def __init__(
        self,
        config: GameConfig,
        playfield: Resolution,
        clock: Callable[[], float] = monotonic_ms,
        rng: Optional[random.Random] = None,
    ):
        self.config = config
        self.playfield = playfield
        self._clock = clock
        self.wave = WaveController(config.wave, config.target, playfield, rng=rng)
        self.router = CollisionRouter()
        self.mode = SessionMode.MENU
        self.previous_mode = SessionMode.MENU
        self.pointer = Point2D(x=playfield.width / 2, y=playfield.height / 2)

    def _now(self, now: Optional[float]) -> float:
        return self._clock() if now is None else now

    def _set_mode(self, mode: SessionMode, reason: str) -> None:
        if self.mode != SessionMode.MENU:
            self.previous_mode = self.mode
        log.info("Mode %s -> %s (%s)", self.mode.value, mode.value, reason)
        self.mode = mode

    @property
    def is_playing(self) -> bool:
        return self.mode == SessionMode.PLAYING

    @property
    def awaiting_continue(self) -> bool:
        """True when the current wave is done and the next one waits for continue."""
        return self.is_playing and self.wave.outcome == WaveOutcome.SUCCEEDED

    # ------------------------------------------------------------------
    # Actions

    def start(self, now: Optional[float] = None) -> bool:
        """Leave the menu and start the countdown of wave 1."""
        if self.mode != SessionMode.MENU:
            log.debug("start ignored in %s", self.mode.value)
            return False
        self.wave.start(self._now(now))
        self._set_mode(SessionMode.PLAYING, "start")
        return True

    def toggle_pause(self, now: Optional[float] = None) -> bool:
        """Pause while playing, resume while paused."""
        now = self._now(now)
        if self.mode == SessionMode.PLAYING:
            self.wave.pause(now)
            self._set_mode(SessionMode.PAUSED, "pause")
            return True
        if self.mode == SessionMode.PAUSED:
            self.wave.resume(now)
            self._set_mode(SessionMode.PLAYING, "resume")
            return True
        log.debug("toggle_pause ignored in %s", self.mode.value)
        return False

    def restart(self, now: Optional[float] = None) -> bool:
        """Start over from wave 1, destroying every live target."""
        if self.mode not in RESTARTABLE_MODES:
            log.debug("restart ignored in %s", self.mode.value)
            return False
        self.wave.reset(self._now(now))
        self._set_mode(SessionMode.PLAYING, "restart")
        return True

    def continue_wave(self, now: Optional[float] = None) -> bool:
        """Begin the next wave after a wave succeeded."""
        if not self.is_playing:
            log.debug("continue_wave ignored in %s", self.mode.value)
            return False
        return self.wave.continue_wave(self._now(now))

    def handle_action(self, action: InputAction, now: Optional[float] = None) -> bool:
        """Dispatch a named action.

        Returns:
            True if the action changed anything
        """
        handlers = {
            InputAction.START: self.start,
            InputAction.TOGGLE_PAUSE: self.toggle_pause,
            InputAction.RESTART: self.restart,
            InputAction.CONTINUE_WAVE: self.continue_wave,
        }
        return handlers[action](now)

    def fire(self, point: Point2D, now: Optional[float] = None) -> Optional[Target]:
        """Shoot at ``point``. Only registers while playing.

        Returns:
            The target that was hit, or None
        """
        if not self.is_playing:
            return None
        return self.router.route(point, self.wave.targets, self._now(now))

    def move_pointer(self, point: Point2D) -> None:
        """Record the latest pointer position (crosshair only)."""
        self.pointer = point

    # ------------------------------------------------------------------
    # Tick

    def update(self, now: Optional[float] = None) -> None:
        """Run one tick of the simulation if playing, then follow wave outcomes."""
        if not self.is_playing:
            return
        self.wave.update(self._now(now))

        outcome = self.wave.outcome
        if not outcome.is_terminal:
            return
        if outcome == WaveOutcome.FAILED:
            self._set_mode(SessionMode.OVER, "wave failed")
        else:
            self._set_mode(SessionMode.VICTORY, "all waves cleared")

    def snapshot(self) -> SessionSnapshot:
        """Summary for a save/load facade."""
        return SessionSnapshot(
            mode=self.mode,
            wave_number=self.wave.wave_number,
            wave_size=self.wave.wave_size,
            live_count=self.wave.live_count,
        )
