"""
Game Config Loader - YAML configuration loading with Pydantic validation.

Discovers game configs in the modes/ directory, parses them with PyYAML
and validates them with the GameConfig model.

Examples:
    >>> loader = GameConfigLoader()
    >>> config = loader.load("classic")
    >>> config.wave.total_waves
    20
    >>> loader.list_available()
    ['classic', 'sprint']
"""

from pathlib import Path
from typing import List, Optional
import yaml
from pydantic import ValidationError

from models import GameConfig

DEFAULT_MODES_DIR = Path(__file__).resolve().parent.parent / "modes"


class GameConfigLoader:
    """Loads and validates game configurations from YAML files.

    Attributes:
        modes_dir: Path to the directory containing config YAML files
    """

    def __init__(self, modes_dir: Optional[Path] = None):
        """Initialize the loader.

        Args:
            modes_dir: Optional custom path to the configs directory.
                      Defaults to the modes/ directory shipped with the game.
        """
        self.modes_dir = Path(modes_dir) if modes_dir is not None else DEFAULT_MODES_DIR

    def load(self, config_id: str) -> GameConfig:
        """Load and validate a game configuration.

        Args:
            config_id: Config ID (file name without .yaml extension)

        Returns:
            Validated GameConfig instance

        Raises:
            FileNotFoundError: If the YAML file doesn't exist
            ValueError: If the YAML content fails validation
            yaml.YAMLError: If the YAML syntax is malformed
        """
        return self.load_file(self.modes_dir / f"{config_id}.yaml")

    def load_file(self, yaml_path: Path) -> GameConfig:
        """Load and validate a configuration from an explicit path."""
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(
                f"Game config '{yaml_path.stem}' not found. "
                f"Expected file: {yaml_path}"
            )

        try:
            with open(yaml_path, 'r') as f:
                config_dict = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise yaml.YAMLError(
                f"Failed to parse YAML file '{yaml_path}': {e}"
            )

        try:
            return GameConfig.model_validate(config_dict)
        except ValidationError as e:
            raise ValueError(
                f"Invalid game configuration in '{yaml_path}':\n{e}"
            ) from e

    def list_available(self) -> List[str]:
        """List config IDs found in the modes directory, sorted."""
        if not self.modes_dir.exists():
            return []
        return sorted(f.stem for f in self.modes_dir.glob("*.yaml"))

    def exists(self, config_id: str) -> bool:
        return (self.modes_dir / f"{config_id}.yaml").exists()
