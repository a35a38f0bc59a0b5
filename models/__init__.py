"""
Unified models library for Alien Waves.

This package provides all Pydantic data models used across the game:
- Primitives: Basic geometric types (Point2D, Resolution, Rectangle)
- AlienWave: Enums, views and configuration of the wave engine

Usage:
    >>> from models import Point2D, Resolution
    >>> from models.alienwave import WaveConfig, SessionMode
"""

from .primitives import (
    Point2D,
    Resolution,
    Rectangle,
)

from .alienwave import (
    SessionMode,
    WaveOutcome,
    Lifecycle,
    AnimationState,
    InputKind,
    InputAction,
    AnimationSpec,
    WaveStatus,
    SessionSnapshot,
    GameConfig,
    WaveConfig,
    TargetConfig,
)

__all__ = [
    # Primitives
    "Point2D",
    "Resolution",
    "Rectangle",
    # AlienWave
    "SessionMode",
    "WaveOutcome",
    "Lifecycle",
    "AnimationState",
    "InputKind",
    "InputAction",
    "AnimationSpec",
    "WaveStatus",
    "SessionSnapshot",
    "GameConfig",
    "WaveConfig",
    "TargetConfig",
]
