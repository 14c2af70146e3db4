"""Logging and error handling helpers."""

from classic_algos.utils.error_handler import (
    ClassicAlgosError,
    ConfigurationError,
    ValidationError,
    handle_cli_errors,
    require_non_negative_int,
)
from classic_algos.utils.logger import (
    get_logger,
    log_experiment_config,
    log_metrics,
    setup_logger,
)

__all__ = [
    "setup_logger",
    "get_logger",
    "log_experiment_config",
    "log_metrics",
    "ClassicAlgosError",
    "ConfigurationError",
    "ValidationError",
    "handle_cli_errors",
    "require_non_negative_int",
]
