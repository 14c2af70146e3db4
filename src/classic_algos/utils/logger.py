"""
Structured logging configuration for the algorithm runners.

Provides centralized logging setup with file handlers, console output,
and a shared format. Console output goes to stderr so that the result
lines printed on stdout stay machine-readable.
"""

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(
    name: str = "classic_algos",
    log_file: Path | None = None,
    level: int = logging.INFO,
    console_output: bool = True,
) -> logging.Logger:
    """
    Configure and return a logger with file and/or console handlers.

    Args:
        name: Logger name (typically "classic_algos" so child modules inherit it)
        log_file: Path to log file (if None, only console logging)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console_output: If True, also log to console (stderr)

    Returns:
        Configured logger instance

    Example:
        >>> from classic_algos.utils.logger import setup_logger
        >>> logger = setup_logger(level=logging.DEBUG)
        >>> logger.debug("Sorting edges")
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates; file handlers hold open descriptors
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    logger.propagate = False

    return logger


def get_logger(name: str = "classic_algos") -> logging.Logger:
    """
    Get a module logger.

    Loggers under the ``classic_algos`` namespace are returned untouched so
    they inherit whatever ``setup_logger`` configured on the package logger.
    Any other name without handlers gets a basic console setup.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Processing instance")
    """
    logger = logging.getLogger(name)

    if name.startswith("classic_algos"):
        return logger

    if not logger.handlers:
        logger = setup_logger(name, log_file=None, console_output=True)

    return logger


def log_experiment_config(
    logger: logging.Logger, config: dict, title: str = "Run Configuration"
) -> None:
    """
    Log a configuration dictionary in a structured block.

    Example:
        >>> log_experiment_config(logger, {"vertices": 5, "edges": 7}, "MST")
    """
    logger.info("=" * 60)
    logger.info(f"{title:^60}")
    logger.info("=" * 60)

    for key, value in sorted(config.items()):
        logger.info(f"  {key:.<30} {value}")

    logger.info("=" * 60)


def log_metrics(
    logger: logging.Logger, metrics: dict, prefix: str = "", precision: int = 4
) -> None:
    """
    Log metrics in a formatted way.

    Args:
        logger: Logger instance
        metrics: Dictionary of metric name -> value
        prefix: Prefix string (e.g., "MST |")
        precision: Number of decimal places for float formatting
    """
    metric_strs = []
    for name, value in metrics.items():
        if isinstance(value, float):
            metric_strs.append(f"{name}: {value:.{precision}f}")
        else:
            metric_strs.append(f"{name}: {value}")

    message = " | ".join(metric_strs)
    if prefix:
        message = f"{prefix} {message}"

    logger.info(message)
