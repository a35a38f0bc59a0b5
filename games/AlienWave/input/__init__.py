"""Alien Waves input: events, the mouse source and the input manager."""
from games.AlienWave.input.input_event import InputEvent
from games.AlienWave.input.input_manager import InputManager
from games.AlienWave.input.sources import MouseInputSource

__all__ = [
    'InputEvent',
    'InputManager',
    'MouseInputSource',
]
