"""
Animation catalog and frame player for targets.

The catalog maps each AnimationState to an ordered frame sequence on the
alien sprite sheet and a per-state frame rate (ticks per frame).
"""

from typing import Dict, Optional

from models import AnimationSpec, AnimationState, Rectangle
from games.AlienWave.config import SPRITE_FRAME_SIZE, SPRITE_FRAME_COUNT


ANIMATIONS: Dict[AnimationState, AnimationSpec] = {
    AnimationState.IDLE: AnimationSpec(frames=(0, 1), rate=40),
    AnimationState.MOVING: AnimationSpec(frames=(2, 3, 4), rate=20),
    AnimationState.DYING: AnimationSpec(frames=(8, 9, 10), rate=10),
}

# Sheet rows hold 2, 3, 3 and 3 frames
_SHEET_ROWS = ((0, 1), (2, 3, 4), (5, 6, 7), (8, 9, 10))


def frame_source_rect(frame_index: int) -> Optional[Rectangle]:
    """Locate a frame on the sprite sheet.

    Args:
        frame_index: Sprite sheet frame index

    Returns:
        Source rectangle in sheet pixels, or None if the index is out of range

    Examples:
        >>> rect = frame_source_rect(3)
        >>> (rect.x, rect.y)
        (200.0, 200.0)
        >>> frame_source_rect(11) is None
        True
    """
    if not 0 <= frame_index < SPRITE_FRAME_COUNT:
        return None
    for row, frames in enumerate(_SHEET_ROWS):
        if frame_index in frames:
            col = frames.index(frame_index)
            return Rectangle(
                x=float(col * SPRITE_FRAME_SIZE),
                y=float(row * SPRITE_FRAME_SIZE),
                width=float(SPRITE_FRAME_SIZE),
                height=float(SPRITE_FRAME_SIZE),
            )
    return None


class AnimationPlayer:
    """Tick-driven cursor over the animation catalog.

    Attributes:
        state: Animation currently shown
        frame: Position within the current animation's frame sequence
        speed: Multiplier applied to every frame rate

    Examples:
        >>> player = AnimationPlayer(AnimationState.MOVING)
        >>> for _ in range(20):
        ...     player.tick()
        >>> player.frame_index
        3
    """

    def __init__(self, state: AnimationState = AnimationState.IDLE, speed: float = 1.0):
        self.state = state
        self.speed = speed
        self.frame = 0
        self._ticks = 0

    @property
    def spec(self) -> AnimationSpec:
        return ANIMATIONS[self.state]

    @property
    def frame_index(self) -> int:
        """Sprite sheet frame currently shown."""
        return self.spec.frames[self.frame]

    def set_state(self, state: AnimationState) -> None:
        """Switch animation, restarting it. Re-selecting the current state is a no-op."""
        if state == self.state:
            return
        self.state = state
        self.frame = 0
        self._ticks = 0

    def tick(self) -> None:
        """Advance one simulation tick, wrapping at the end of the cycle."""
        spec = self.spec
        self._ticks += 1
        if self._ticks >= spec.rate / self.speed:
            self.frame = (self.frame + 1) % spec.frame_count
            self._ticks = 0
