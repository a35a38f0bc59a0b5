"""
Alien Waves support package.

Process-wide helpers shared by the game and its tooling.
See wavecore.logging for the logging system.
"""

from wavecore.logging import get_logger, configure_logging

__all__ = ['get_logger', 'configure_logging']
