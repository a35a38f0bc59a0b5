"""
Entry point for Alien Waves.

Run the game:
    python -m games.AlienWave.main
    python -m games.AlienWave.main --config sprint --resolution 1920x1080
    python -m games.AlienWave.main --sprites assets/aliens.png
"""

import argparse
import sys

import pygame
import yaml

from models import Resolution
from games.AlienWave.config import DEFAULT_CONFIG_ID
from games.AlienWave.engine import GameEngine
from games.AlienWave.game.config_loader import GameConfigLoader
from wavecore.logging import configure_logging, get_logger

log = get_logger('main')


def build_parser() -> argparse.ArgumentParser:
    loader = GameConfigLoader()
    parser = argparse.ArgumentParser(
        description='Alien Waves - clear every wave before the countdown runs out',
    )
    parser.add_argument(
        '--config', '-c',
        default=DEFAULT_CONFIG_ID,
        choices=loader.list_available() or None,
        help='Game config (modes/<name>.yaml)',
    )
    parser.add_argument(
        '--resolution', '-r',
        type=Resolution.parse,
        default=None,
        help='Window size as WIDTHxHEIGHT (default from config.py)',
    )
    parser.add_argument(
        '--sprites', '-s',
        default=None,
        help='Alien sprite sheet image (default: tinted squares)',
    )
    parser.add_argument(
        '--log-level',
        default=None,
        choices=['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'OFF'],
        help='Default log level',
    )
    return parser


def main(argv=None) -> int:
    """Parse arguments, load the config and run the game."""
    args = build_parser().parse_args(argv)
    if args.log_level:
        configure_logging(level=args.log_level)

    try:
        game_config = GameConfigLoader().load(args.config)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        log.error("Could not load config '%s': %s", args.config, e)
        return 1
    log.info("Loaded config '%s' (%d waves)", game_config.id, game_config.wave.total_waves)

    try:
        engine = GameEngine(game_config, resolution=args.resolution, sprite_sheet_path=args.sprites)
    except (FileNotFoundError, ValueError) as e:
        log.error("%s", e)
        pygame.quit()
        return 1
    try:
        engine.run()
    finally:
        # Ensure pygame quits cleanly
        engine.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
