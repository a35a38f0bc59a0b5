"""
Input manager for Alien Waves.

Drains the mouse source once per frame and turns each pointer event into
a GameSession call. What a click means depends on the session mode: it
starts the game from the menu, restarts after game over or victory,
continues after a finished wave, and otherwise fires.
"""

from typing import Optional

from models import InputKind, SessionMode
from games.AlienWave.game.session import GameSession
from games.AlienWave.game.target import Target
from games.AlienWave.input.input_event import InputEvent
from games.AlienWave.input.sources.mouse import MouseInputSource
from wavecore.logging import get_logger

log = get_logger('input')

RESTART_ON_CLICK = (SessionMode.OVER, SessionMode.VICTORY)


class InputManager:
    """Routes pointer input to a game session.

    Attributes:
        session: Session receiving the calls
        source: Mouse source the events are read from
        last_shot_at: Time of the last click that fired, None before the first

    Examples:
        >>> from models import GameConfig, Resolution
        >>> session = GameSession(GameConfig(), Resolution(width=800, height=600))
        >>> manager = InputManager(session)
        >>> manager.process(now=0.0)
        0
    """

    def __init__(self, session: GameSession, source: Optional[MouseInputSource] = None):
        self.session = session
        self.source = source if source is not None else MouseInputSource()
        self.last_shot_at: Optional[float] = None

    def process(self, now: float) -> int:
        """Collect this frame's mouse input and route every event.

        Returns:
            Number of events handled
        """
        self.source.update()
        events = self.source.poll_events()
        for event in events:
            self.handle_event(event, now)
        return len(events)

    def handle_event(self, event: InputEvent, now: float) -> Optional[Target]:
        """Route one event to the session.

        Returns:
            The target hit by a shot, or None
        """
        if event.kind == InputKind.POINTER:
            self.session.move_pointer(event.position)
            return None

        mode = self.session.mode
        if mode == SessionMode.MENU:
            self.session.start(now)
        elif mode in RESTART_ON_CLICK:
            self.session.restart(now)
        elif self.session.awaiting_continue:
            self.session.continue_wave(now)
        elif mode == SessionMode.PLAYING:
            self.session.move_pointer(event.position)
            self.last_shot_at = now
            return self.session.fire(event.position, now)
        else:
            log.trace("Click ignored in %s", mode.value)
        return None

    def shot_progress(self, now: float, duration: float) -> Optional[float]:
        """Fraction of the shot ring animation elapsed, None once it is over."""
        if self.last_shot_at is None:
            return None
        elapsed = now - self.last_shot_at
        if elapsed < 0 or elapsed >= duration:
            return None
        return elapsed / duration
