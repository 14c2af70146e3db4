"""
Configuration loading and validation utilities.

Provides functions to load YAML configs and validate them against Pydantic schemas.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from classic_algos.config.schemas import AppConfig
from classic_algos.data.structures import Graph, KnapsackInstance
from classic_algos.types import PathLike
from classic_algos.utils.error_handler import ConfigurationError


def load_config(config_path: PathLike) -> AppConfig:
    """
    Load and validate run configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated AppConfig object

    Raises:
        ConfigurationError: If file not found, invalid YAML, or validation fails

    Example:
        >>> config = load_config("configs/sample.yaml")
        >>> print(config.knapsack.capacity)
    """
    config_file = Path(config_path)

    if not config_file.exists():
        raise ConfigurationError(
            f"Configuration file not found: {config_path}",
            suggestion="Check the path or omit --config to use the embedded samples.",
        )

    try:
        with open(config_file) as f:
            config_dict = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML in config file: {config_path}",
            suggestion=f"Fix YAML syntax error: {e}",
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Failed to read config file: {config_path}",
            suggestion=f"Error: {e}",
        ) from e

    if config_dict is None:
        # An empty file means "all defaults"
        config_dict = {}

    if not isinstance(config_dict, dict):
        raise ConfigurationError(
            f"Configuration must be a mapping, got {type(config_dict).__name__}: {config_path}",
            suggestion="Use top-level keys such as 'logging', 'mst' and 'knapsack'.",
        )

    try:
        config = AppConfig(**config_dict)
    except ValidationError as e:
        errors = []
        for error in e.errors():
            loc = " -> ".join(str(x) for x in error["loc"])
            msg = error["msg"]
            errors.append(f"  - {loc}: {msg}")

        error_msg = "\n".join(errors)
        raise ConfigurationError(
            f"Configuration validation failed for {config_path}:\n{error_msg}",
            suggestion="Fix the configuration errors listed above.",
        ) from e

    return config


def validate_config_file(config_path: PathLike) -> tuple[bool, str]:
    """
    Validate config file without raising exceptions.

    Returns:
        Tuple of (is_valid, message)
    """
    try:
        load_config(config_path)
        return True, f"✓ Configuration is valid: {config_path}"
    except ConfigurationError as e:
        return False, f"✗ {e.message}"


def config_to_dict(config: AppConfig) -> dict[str, Any]:
    """Convert AppConfig to a plain dictionary."""
    return config.model_dump(mode="json")


def save_config(config: AppConfig, output_path: PathLike) -> None:
    """
    Save AppConfig to YAML file.

    Example:
        >>> save_config(AppConfig(), "configs/sample.yaml")
    """
    output_file = Path(output_path)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    config_dict = config_to_dict(config)

    with open(output_file, "w") as f:
        yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False, indent=2)


def build_graph(config: AppConfig) -> Graph:
    """Instantiate the graph described by ``config.mst``."""
    return Graph(config.mst.vertices, config.mst.edges)


def build_knapsack(config: AppConfig) -> KnapsackInstance:
    """Instantiate the knapsack instance described by ``config.knapsack``."""
    return KnapsackInstance(
        weights=config.knapsack.weights,
        values=config.knapsack.values,
        capacity=config.knapsack.capacity,
    )
