"""
AlienWave-specific data models.

Read-only views the wave engine hands to the presentation layer and to a
save/load facade, plus the animation table entry type.
"""

from typing import Tuple
from pydantic import BaseModel, Field, field_validator, computed_field, ConfigDict

from .enums import SessionMode, WaveOutcome


class AnimationSpec(BaseModel):
    """One entry of the animation catalog.

    Attributes:
        frames: Ordered sprite sheet frame indices, cycled while the state is shown
        rate: Ticks each frame is held at animation speed 1.0

    Examples:
        >>> spec = AnimationSpec(frames=(2, 3, 4), rate=20)
        >>> spec.frame_count
        3
    """
    frames: Tuple[int, ...] = Field(min_length=1)
    rate: int = Field(gt=0)

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def frame_count(self) -> int:
        return len(self.frames)


class WaveStatus(BaseModel):
    """Snapshot of the wave controller for HUD rendering.

    Attributes:
        wave_number: Current wave (1-based)
        total_waves: Number of waves in a run
        wave_size: Targets spawned for the current wave
        time_budget_ms: Countdown length of the current wave
        time_remaining_ms: Milliseconds left on the countdown (never negative)
        outcome: Current wave outcome
        active_count: Targets alive and not dying
    """
    wave_number: int = Field(ge=1)
    total_waves: int = Field(ge=2)
    wave_size: int = Field(ge=0)
    time_budget_ms: float = Field(gt=0)
    time_remaining_ms: float
    outcome: WaveOutcome
    active_count: int = Field(ge=0)

    @field_validator('time_remaining_ms')
    @classmethod
    def validate_remaining(cls, v: float) -> float:
        """Validate remaining time is non-negative."""
        if v < 0:
            raise ValueError(f'Remaining time must be non-negative, got {v}')
        return v

    @computed_field
    @property
    def progress(self) -> float:
        """Fraction of the countdown still remaining, in [0, 1]."""
        return max(0.0, min(1.0, self.time_remaining_ms / self.time_budget_ms))

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return (f"WaveStatus(wave={self.wave_number}/{self.total_waves}, "
                f"size={self.wave_size}, left={self.time_remaining_ms / 1000:.1f}s, "
                f"outcome={self.outcome.value})")


class SessionSnapshot(BaseModel):
    """Minimal session summary for a save/load facade.

    Attributes:
        mode: Session mode when the snapshot was taken
        wave_number: Current wave
        wave_size: Targets in the current wave
        live_count: Targets alive or dying
    """
    mode: SessionMode
    wave_number: int = Field(ge=1)
    wave_size: int = Field(ge=0)
    live_count: int = Field(ge=0)

    model_config = ConfigDict(frozen=True)
