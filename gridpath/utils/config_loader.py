"""
Configuration loader for the grid pathfinder.
Loads the demonstration worlds from YAML and validates them into WorldConfig models.
"""

import logging
import yaml
from pathlib import Path
from typing import Dict, Any, List, Optional

from config.schemas import WorldConfig
from config.settings import WORLDS_FILE

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path(__file__).resolve().parents[2] / "config"

class ConfigLoader:
    """load worlds yaml file and hand out validated world configs"""

    def __init__(self, config_dir=DEFAULT_CONFIG_DIR, worlds_file: str = WORLDS_FILE):
        self.config_dir = Path(config_dir)
        self.worlds_file = worlds_file

    def load_raw_worlds(self) -> Dict[str, Any]:
        """load the worlds yaml file as a plain dict"""
        config_file = self.config_dir / self.worlds_file

        if not config_file.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_file}")

        with open(config_file, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f) or {}

        if not isinstance(config, dict):
            raise ValueError(f"{config_file} must map world names to world definitions")

        logger.debug(f"Loaded {len(config)} worlds from {config_file}")
        return config

    def load_worlds(self) -> Dict[str, WorldConfig]:
        """load and validate every world"""
        return {
            name: WorldConfig.model_validate({**(entry or {}), "name": name})
            for name, entry in self.load_raw_worlds().items()
        }

    def load_world(self, name: str) -> WorldConfig:
        """load a single world by name"""
        raw = self.load_raw_worlds()
        if name not in raw:
            raise KeyError(f"Unknown world '{name}'. Available: {', '.join(sorted(raw))}")
        return WorldConfig.model_validate({**(raw[name] or {}), "name": name})

    def list_worlds(self) -> List[str]:
        return sorted(self.load_raw_worlds())

# global config loader instance
_config_loader: Optional[ConfigLoader] = None

def get_config_loader() -> ConfigLoader:
    """get global config loader instance"""
    global _config_loader
    if _config_loader is None:
        _config_loader = ConfigLoader()
    return _config_loader

def load_world_config(name: str) -> WorldConfig:
    """convenient function - load one world"""
    return get_config_loader().load_world(name)
