"""
Input event model for Alien Waves.

This module defines the InputEvent Pydantic model that represents any
coordinate-based input: a shot (FIRE) or a pointer position update (POINTER).
"""

from pydantic import BaseModel, field_validator, ConfigDict
from models import Point2D, InputKind


class InputEvent(BaseModel):
    """Immutable input event from any source.

    Attributes:
        position: Playfield position of the input
        timestamp: Time of the event (seconds, from monotonic clock)
        kind: FIRE for a shot, POINTER for pointer movement

    Examples:
        >>> import time
        >>> event = InputEvent(
        ...     position=Point2D(x=100.0, y=200.0),
        ...     timestamp=time.monotonic(),
        ...     kind=InputKind.FIRE
        ... )
        >>> event.is_fire
        True
    """
    position: Point2D
    timestamp: float
    kind: InputKind

    @field_validator('timestamp')
    @classmethod
    def validate_timestamp(cls, v: float) -> float:
        """Validate timestamp is non-negative.

        Raises:
            ValueError: If timestamp is negative
        """
        if v < 0:
            raise ValueError(f'Timestamp must be non-negative, got {v}')
        return v

    @property
    def is_fire(self) -> bool:
        return self.kind == InputKind.FIRE

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return (f"InputEvent(pos=({self.position.x:.2f}, {self.position.y:.2f}), "
                f"t={self.timestamp:.3f}, kind={self.kind.value})")
