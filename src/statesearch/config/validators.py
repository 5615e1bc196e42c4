"""Configuration validation for the search engine."""

import logging
from omegaconf import DictConfig

logger = logging.getLogger(__name__)

SUPPORTED_ALGORITHMS = ('breadth_first', 'depth_first', 'iterative_depth', 'astar')


class ConfigValidationError(Exception):
    """Exception raised when configuration validation fails."""
    pass


def validate_config(config: DictConfig) -> None:
    """Validate the complete configuration.

    Args:
        config: Configuration to validate

    Raises:
        ConfigValidationError: If validation fails
    """
    try:
        validate_search_config(config.get('search', {}))

        logger.info("Configuration validation passed")

    except Exception as e:
        raise ConfigValidationError(f"Configuration validation failed: {e}")


def validate_search_config(search_config: DictConfig) -> None:
    """Validate search configuration section.

    Args:
        search_config: Search configuration section
    """
    if not search_config:
        return

    algorithm = search_config.get('algorithm', 'breadth_first')
    if algorithm not in SUPPORTED_ALGORITHMS:
        raise ConfigValidationError(
            f"algorithm must be one of {SUPPORTED_ALGORITHMS}, got {algorithm}"
        )

    for key in ['max_nodes_expanded', 'max_depth']:
        value = search_config.get(key, None)
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ConfigValidationError(
                f"{key} must be null or a non-negative integer, got {value}"
            )

    timeout = search_config.get('max_computation_time', None)
    if timeout is not None:
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ConfigValidationError(
                f"max_computation_time must be null or a positive number, got {timeout}"
            )

