"""
Configuration management and validation.

Provides Pydantic schemas and utilities for loading and validating
run configurations.
"""

from classic_algos.config.loader import (
    build_graph,
    build_knapsack,
    load_config,
    save_config,
    validate_config_file,
)
from classic_algos.config.schemas import AppConfig, KnapsackConfig, LoggingConfig, MSTConfig

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "MSTConfig",
    "KnapsackConfig",
    "load_config",
    "save_config",
    "validate_config_file",
    "build_graph",
    "build_knapsack",
]
