"""
AlienWave-specific models package.

This package contains the enums, read-only views, and configuration models
of the alien wave shooter.
"""

from .enums import (
    SessionMode,
    WaveOutcome,
    Lifecycle,
    AnimationState,
    InputKind,
    InputAction,
)

from .models import (
    AnimationSpec,
    WaveStatus,
    SessionSnapshot,
)

from .game_config import (
    GameConfig,
    WaveConfig,
    TargetConfig,
)

__all__ = [
    # Enums
    "SessionMode",
    "WaveOutcome",
    "Lifecycle",
    "AnimationState",
    "InputKind",
    "InputAction",
    # Views
    "AnimationSpec",
    "WaveStatus",
    "SessionSnapshot",
    # Configuration models
    "GameConfig",
    "WaveConfig",
    "TargetConfig",
]
