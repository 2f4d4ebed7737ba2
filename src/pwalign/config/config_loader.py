"""
Configuration loader for pwalign.
"""

import copy
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger('pwalign')

DEFAULT_CONFIG_PATH = Path(__file__).parent / "default_config.yaml"


class ConfigLoader:
    """Loads and manages configuration from YAML files."""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self.config = {}
        self.load_config()

    def load_config(self):
        """Load configuration from YAML file, falling back to built-in defaults."""
        try:
            with open(self.config_path, 'r') as f:
                loaded = yaml.safe_load(f)
        except FileNotFoundError:
            logger.warning(f"Config file {self.config_path} not found. Using defaults.")
            self.config = self._get_default_config()
            return
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {self.config_path}: {e}") from e

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Invalid YAML format in {self.config_path}")

        self.config = _merge(self._get_default_config(), loaded)

    def _get_default_config(self) -> Dict[str, Any]:
        """Return default configuration if YAML file is not found."""
        return {
            'alignment': {
                'method': 'clustalw',
            },
            'scoring': {
                'matrix': {
                    'alphabet': 'ACGT',
                    'match': 1.0,
                    'mismatch': -1.0,
                },
                'gap_opening': 10.0,
                'gap_extension': 0.1,
            },
            'limits': {
                'max_cells': 25_000_000,
            },
            'pipeline': {
                'num_workers': 1,
                'undefined_distance': None,
            },
            'logging': {
                'level': 'INFO',
                'file': None,
            },
        }

    def get_alignment_params(self) -> Dict[str, Any]:
        """Get alignment parameters."""
        return self.config.get('alignment', {})

    def get_scoring_params(self) -> Dict[str, Any]:
        """Get scoring parameters."""
        return self.config.get('scoring', {})

    def get_limits_params(self) -> Dict[str, Any]:
        """Get size limits."""
        return self.config.get('limits', {})

    def get_pipeline_params(self) -> Dict[str, Any]:
        """Get distance matrix pipeline parameters."""
        return self.config.get('pipeline', {})

    def get_logging_params(self) -> Dict[str, Any]:
        """Get logging parameters."""
        return self.config.get('logging', {})


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


# Global config instance
config_loader = None


def get_config() -> ConfigLoader:
    """Get the global config loader instance."""
    global config_loader
    if config_loader is None:
        config_loader = ConfigLoader()
    return config_loader


def reload_config(config_path: Optional[str] = None) -> ConfigLoader:
    """Reload configuration from file."""
    global config_loader
    if config_path:
        config_loader = ConfigLoader(config_path)
    else:
        get_config().load_config()
    return config_loader
