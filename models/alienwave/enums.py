"""
AlienWave-specific enumerations.

These enums define the closed state sets of the wave engine: session modes,
wave outcomes, target lifecycle and animation, and input kinds.
"""

from enum import Enum


class SessionMode(str, Enum):
    """Top-level modes of a game session.

    Attributes:
        MENU: Start screen, nothing simulates
        PLAYING: Waves and targets update every tick
        PAUSED: Simulation frozen, targets kept
        OVER: A wave timed out with targets remaining
        VICTORY: Every wave was cleared
    """
    MENU = "menu"
    PLAYING = "playing"
    PAUSED = "paused"
    OVER = "over"
    VICTORY = "victory"


class WaveOutcome(str, Enum):
    """Result classification of the current wave.

    Attributes:
        ACTIVE: Countdown running
        SUCCEEDED: All targets eliminated, waiting for continue
        FAILED: Countdown expired with targets remaining (terminal)
        CLEARED: Final wave eliminated (terminal)
    """
    ACTIVE = "active"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CLEARED = "cleared"

    @property
    def is_terminal(self) -> bool:
        return self in (WaveOutcome.FAILED, WaveOutcome.CLEARED)


class Lifecycle(str, Enum):
    """Lifecycle of a single target. Progresses strictly forward.

    Attributes:
        ALIVE: Moving around, can be hit
        DYING: Hit, playing its death animation
        REMOVED: Expired, holds no resources (terminal)
    """
    ALIVE = "alive"
    DYING = "dying"
    REMOVED = "removed"


class AnimationState(str, Enum):
    """Animation variants a target can display."""
    IDLE = "idle"
    MOVING = "moving"
    DYING = "dying"


class InputKind(str, Enum):
    """Kinds of pointer input.

    Attributes:
        FIRE: A discrete shot at a point
        POINTER: Continuous pointer position update
    """
    FIRE = "fire"
    POINTER = "pointer"


class InputAction(str, Enum):
    """Discrete named actions accepted by a game session."""
    START = "start"
    TOGGLE_PAUSE = "toggle_pause"
    RESTART = "restart"
    CONTINUE_WAVE = "continue_wave"
