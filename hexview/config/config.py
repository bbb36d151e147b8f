# hexview/config/config.py
"""Configuration manager with YAML override support."""

import copy
import logging
import os
from pathlib import Path
from typing import Dict, Any, Optional

import yaml

from . import defaults

logger = logging.getLogger(__name__)

CONFIG_FILE_NAMES = ('hexview.yml', 'config.yml')


class Config:
    """Configuration manager with YAML override support."""

    def __init__(self, config_file: Optional[Path] = None):
        self.settings = self.load_defaults()

        if config_file is None:
            env_file = os.environ.get('HEXVIEW_CONFIG')
            if env_file:
                config_file = Path(env_file)

        if config_file is not None:
            # An explicit file must load; a broken one is a startup error
            self._load_yaml_config(Path(config_file))
            logger.info(f"Loaded configuration from {config_file}")
        elif self._is_test_mode():
            logger.debug("Test mode detected - ignoring discovered config files")
        else:
            discovered = self._find_config_file()
            if discovered is not None:
                try:
                    self._load_yaml_config(discovered)
                    logger.info(f"Loaded configuration from {discovered}")
                except (OSError, yaml.YAMLError) as e:
                    logger.warning(f"Config file loading failed: {e} - using defaults")
            else:
                logger.debug("No config file found - using defaults only")
    
    def _find_config_file(self) -> Optional[Path]:
        """Find a config file in the usual locations."""
        project_root = Path(defaults.PROJECT_ROOT)
        
        potential_locations = []
        for name in CONFIG_FILE_NAMES:
            potential_locations.extend([
                project_root / name,
                project_root / 'config' / name,
                Path.cwd() / name,
            ])
        potential_locations.append(Path.home() / '.hexview' / 'config.yml')
        
        for location in potential_locations:
            if location.exists() and location.is_file():
                return location
                
        return None
    
    def _is_test_mode(self) -> bool:
        """Detect if we're running under pytest or an explicit test flag."""
        return (
            os.environ.get('FORCE_TEST_MODE', 'false').lower() == 'true' or
            os.environ.get('PYTEST_CURRENT_TEST') is not None
        )
    
    def load_defaults(self) -> Dict[str, Any]:
        """Load default configuration settings."""
        return {
            'cells': copy.deepcopy(defaults.CELLS),
            'logging': defaults.LOGGING.copy(),
        }
    
    def _load_yaml_config(self, config_file: Path):
        """Load and merge configuration from a YAML file."""
        with open(config_file, 'r') as file:
            yaml_config = yaml.safe_load(file)
            if yaml_config:
                self._deep_merge(self.settings, yaml_config)
    
    def _deep_merge(self, base: dict, override: dict):
        """Deep merge override into base dictionary."""
        for key, value in override.items():
            if isinstance(value, dict) and key in base and isinstance(base[key], dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value
    
    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value using dot notation."""
        keys = key.split(".")
        value = self.settings

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value
    
    @property
    def cells(self) -> Dict[str, Any]:
        return self.settings['cells']
    
    @property
    def logging(self) -> Dict[str, Any]:
        return self.settings['logging']


# Global configuration instance
config = Config()
