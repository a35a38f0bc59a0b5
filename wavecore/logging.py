"""
Alien Waves Logging System

Provides consistent per-module logging for the game engine and its
simulation core. Each module gets a named logger whose level can be set
globally or per module.

Usage:
    from wavecore.logging import get_logger

    log = get_logger('wave')
    log.debug("Spawning batch")
    log.info("Wave %d started", 3)

Configuration:
    Environment variables:
        WAVECORE_LOG_LEVEL=DEBUG      # Global default level
        WAVECORE_LOG_WAVE=DEBUG       # Module-specific level
        WAVECORE_LOG_TARGET=TRACE

    Or programmatically:
        from wavecore.logging import configure_logging
        configure_logging(level='DEBUG', modules={'target': 'INFO'})
"""

import os
import time
from enum import IntEnum
from functools import lru_cache
from typing import Any, Dict, Optional


class LogLevel(IntEnum):
    """Log levels matching Python's logging module."""
    TRACE = 5      # Even more verbose than DEBUG
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100      # Disable logging


ENV_PREFIX = 'WAVECORE_LOG_'

# Global configuration
_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
    'timestamps': False,
}


def _format_message(module: str, level: str, msg: str) -> str:
    """Format a log line."""
    if _config['timestamps']:
        stamp = time.strftime("%H:%M:%S")
        return f"{stamp} [{level}] {module}: {msg}"
    return f"[{level}] {module}: {msg}"


def _level_from_string(level_str: str) -> LogLevel:
    """Convert string to LogLevel, defaulting to INFO for unknown names."""
    level_map = {
        'TRACE': LogLevel.TRACE,
        'DEBUG': LogLevel.DEBUG,
        'INFO': LogLevel.INFO,
        'WARNING': LogLevel.WARNING,
        'WARN': LogLevel.WARNING,
        'ERROR': LogLevel.ERROR,
        'CRITICAL': LogLevel.CRITICAL,
        'OFF': LogLevel.OFF,
        'NONE': LogLevel.OFF,
    }
    return level_map.get(level_str.upper(), LogLevel.INFO)


def _module_key(module: str) -> str:
    return module.lower().replace('.', '_').replace('/', '_')


def configure_logging(
    level: Optional[str] = None,
    modules: Optional[Dict[str, str]] = None,
    timestamps: Optional[bool] = None,
) -> None:
    """
    Configure logging programmatically.

    Args:
        level: Default log level ('TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'OFF')
        modules: Per-module levels, e.g. {'wave': 'DEBUG', 'target': 'WARNING'}
        timestamps: Prefix each line with wall-clock time
    """
    if level is not None:
        _config['default_level'] = _level_from_string(level)

    if modules:
        for module, mod_level in modules.items():
            _config['module_levels'][_module_key(module)] = _level_from_string(mod_level)

    if timestamps is not None:
        _config['timestamps'] = timestamps


def reset_logging() -> None:
    """Restore defaults and re-read the environment."""
    _config['default_level'] = LogLevel.INFO
    _config['module_levels'] = {}
    _config['timestamps'] = False
    _load_env_config()


def _load_env_config() -> None:
    """Load configuration from environment variables."""
    if os.environ.get('WAVECORE_LOG_LEVEL'):
        _config['default_level'] = _level_from_string(os.environ['WAVECORE_LOG_LEVEL'])

    # Module-specific levels (WAVECORE_LOG_WAVE=DEBUG -> wave: DEBUG)
    for key, value in os.environ.items():
        if key.startswith(ENV_PREFIX) and key != 'WAVECORE_LOG_LEVEL':
            module_name = key[len(ENV_PREFIX):].lower()
            _config['module_levels'][module_name] = _level_from_string(value)


# Load env config on import
_load_env_config()


class GameLogger:
    """
    Logger for a specific module.

    Messages use %-style formatting with positional args, like the
    standard library logger.
    """

    def __init__(self, module: str):
        self.module = module
        self._module_key = _module_key(module)

    @property
    def level(self) -> LogLevel:
        """Get effective log level for this module."""
        if self._module_key in _config['module_levels']:
            return _config['module_levels'][self._module_key]
        return _config['default_level']

    def is_enabled_for(self, level: LogLevel) -> bool:
        """Check if message at given level should be logged."""
        return level >= self.level

    def _log(self, level: LogLevel, level_name: str, msg: str, *args) -> None:
        """Internal log method."""
        if not self.is_enabled_for(level):
            return

        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"

        print(_format_message(self.module, level_name, msg))

    def trace(self, msg: str, *args) -> None:
        """Log at TRACE level (very verbose)."""
        self._log(LogLevel.TRACE, 'TRACE', msg, *args)

    def debug(self, msg: str, *args) -> None:
        """Log at DEBUG level."""
        self._log(LogLevel.DEBUG, 'DEBUG', msg, *args)

    def info(self, msg: str, *args) -> None:
        """Log at INFO level."""
        self._log(LogLevel.INFO, 'INFO', msg, *args)

    def warning(self, msg: str, *args) -> None:
        """Log at WARNING level."""
        self._log(LogLevel.WARNING, 'WARN', msg, *args)

    def error(self, msg: str, *args) -> None:
        """Log at ERROR level."""
        self._log(LogLevel.ERROR, 'ERROR', msg, *args)


@lru_cache(maxsize=None)
def get_logger(module: str) -> GameLogger:
    """
    Get a logger for a module.

    Loggers are cached, so calling get_logger('foo') multiple times
    returns the same instance.

    Args:
        module: Module name (e.g., 'wave', 'session', 'engine')

    Returns:
        GameLogger instance for the module
    """
    return GameLogger(module)
