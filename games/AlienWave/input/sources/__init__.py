"""Input source implementations."""

from games.AlienWave.input.sources.mouse import MouseInputSource

__all__ = [
    'MouseInputSource',
]
