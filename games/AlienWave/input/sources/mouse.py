"""
Mouse input source for Alien Waves.

Converts pygame mouse events into InputEvent models: left clicks become
FIRE events and mouse motion becomes POINTER events.
"""

import time
from typing import List
import pygame
from models import Point2D, InputKind
from games.AlienWave.input.input_event import InputEvent

MOUSE_EVENT_TYPES = (pygame.MOUSEBUTTONDOWN, pygame.MOUSEMOTION)


class MouseInputSource:
    """Mouse-based input source using pygame events.

    Only mouse events are taken off the pygame queue; everything else is
    left for the engine.

    Examples:
        >>> source = MouseInputSource()
        >>> source.poll_events()
        []
    """

    def __init__(self):
        self._event_queue: List[InputEvent] = []

    def poll_events(self) -> List[InputEvent]:
        """Return collected events, oldest first, and clear the queue."""
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def update(self) -> None:
        """Convert pending pygame mouse events into InputEvents."""
        for event in pygame.event.get(MOUSE_EVENT_TYPES):
            if event.type == pygame.MOUSEBUTTONDOWN:
                if event.button != 1:  # Left mouse button only
                    continue
                kind = InputKind.FIRE
            else:
                kind = InputKind.POINTER

            pos_x, pos_y = event.pos
            self._event_queue.append(InputEvent(
                position=Point2D(x=float(pos_x), y=float(pos_y)),
                timestamp=time.monotonic(),
                kind=kind,
            ))
