"""Configuration manager using Hydra for hierarchical configuration."""

import logging
from typing import Any, Optional, Union
from pathlib import Path
from omegaconf import DictConfig, OmegaConf
from hydra import compose, initialize_config_dir
from hydra.core.global_hydra import GlobalHydra

from statesearch.search.engine import SearchConfig
from .validators import validate_config

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages configuration loading and validation using Hydra."""

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        """Initialize configuration manager.

        Args:
            config_dir: Path to configuration directory. If None, uses default.
        """
        if config_dir is None:
            # conf/ ships inside the statesearch package
            config_dir = Path(__file__).parent.parent / "conf"

        self.config_dir = Path(config_dir).resolve()
        self.config: Optional[DictConfig] = None

        if not self.config_dir.exists():
            raise FileNotFoundError(f"Configuration directory not found: {self.config_dir}")

        logger.info(f"Configuration manager initialized with config_dir: {self.config_dir}")

    def load_config(self,
                    config_name: str = "config",
                    overrides: Optional[list] = None,
                    validate: bool = True) -> DictConfig:
        """Load configuration with optional overrides.

        Args:
            config_name: Name of the main config file (without .yaml)
            overrides: List of configuration overrides, e.g.
                ``["search.max_nodes_expanded=100"]``
            validate: Whether to validate the configuration

        Returns:
            Loaded and validated configuration
        """
        GlobalHydra.instance().clear()

        try:
            with initialize_config_dir(config_dir=str(self.config_dir), version_base=None):
                cfg = compose(config_name=config_name, overrides=overrides or [])

                if validate:
                    validate_config(cfg)

                self.config = cfg

                logger.info(f"Configuration loaded successfully: {config_name}")
                if overrides:
                    logger.info(f"Applied overrides: {overrides}")

                return cfg

        except Exception as e:
            logger.error(f"Failed to load configuration: {e}")
            raise

    def get_parameter(self, key: str, default: Any = None) -> Any:
        """Get a specific parameter from configuration.

        Args:
            key: Parameter key (supports dot notation, e.g., 'search.max_depth')
            default: Default value if key not found

        Returns:
            Parameter value or default
        """
        if self.config is None:
            raise RuntimeError("No configuration loaded. Call load_config() first.")

        return OmegaConf.select(self.config, key, default=default)

    def get_search_config(self) -> SearchConfig:
        """Build a SearchConfig from the loaded ``search`` section."""
        if self.config is None:
            raise RuntimeError("No configuration loaded. Call load_config() first.")
        return search_config_from_omegaconf(self.config)


def search_config_from_omegaconf(config: DictConfig) -> SearchConfig:
    """Build a SearchConfig from the ``search`` section of a configuration.

    Missing keys and null values leave the corresponding limit unbounded.
    """
    search_cfg = config.get('search', None) or {}
    values = {}
    for key in ('max_nodes_expanded', 'max_depth', 'max_computation_time'):
        value = search_cfg.get(key, None)
        if value is not None:
            values[key] = value
    return SearchConfig(**values)


def load_config(config_name: str = "config",
                overrides: Optional[list] = None,
                config_dir: Optional[Union[str, Path]] = None,
                validate: bool = True) -> DictConfig:
    """Load configuration using a fresh config manager.

    Args:
        config_name: Name of the main config file
        overrides: List of configuration overrides
        config_dir: Path to configuration directory
        validate: Whether to validate the configuration

    Returns:
        Loaded configuration
    """
    manager = ConfigManager(config_dir)
    return manager.load_config(config_name, overrides, validate)


def load_search_config(config_name: str = "config",
                       overrides: Optional[list] = None,
                       config_dir: Optional[Union[str, Path]] = None) -> SearchConfig:
    """Load and validate configuration, returning only the search limits."""
    return search_config_from_omegaconf(load_config(config_name, overrides, config_dir))

