"""Configuration management for the search engine.

This module provides Hydra-based configuration loading with runtime
overrides, and converts the ``search`` section into a SearchConfig.
"""

from .config_manager import (
    ConfigManager, load_config, load_search_config, search_config_from_omegaconf
)
from .validators import validate_config, ConfigValidationError

__all__ = [
    'ConfigManager',
    'load_config',
    'load_search_config',
    'search_config_from_omegaconf',
    'validate_config',
    'ConfigValidationError'
]
