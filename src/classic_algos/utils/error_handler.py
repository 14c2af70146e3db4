"""
Error handling utilities for the classic-algos CLI.

Provides custom exception classes and decorators for handling errors
with informative messages and actionable suggestions.
"""

import functools
import numbers
import sys
import traceback
from collections.abc import Callable
from typing import Any, TypeVar

import click

# Type variable for decorators
F = TypeVar("F", bound=Callable[..., Any])


# ============================================================================
# Custom Exception Hierarchy
# ============================================================================


class ClassicAlgosError(Exception):
    """Base exception for classic-algos errors."""

    def __init__(self, message: str, suggestion: str | None = None) -> None:
        """
        Initialize error with message and optional suggestion.

        Args:
            message: Error description
            suggestion: Actionable suggestion for fixing the error
        """
        self.message = message
        self.suggestion = suggestion
        super().__init__(message)

    def format_error(self) -> str:
        """Format error message with suggestion."""
        parts = [f"Error: {self.message}"]
        if self.suggestion:
            parts.append(f"Suggestion: {self.suggestion}")
        return "\n".join(parts)


class ConfigurationError(ClassicAlgosError):
    """Error related to configuration files or parameters."""

    pass


class ValidationError(ClassicAlgosError):
    """Error related to input validation."""

    pass


# ============================================================================
# Error Handlers
# ============================================================================


def format_exception_info(exc: Exception, show_traceback: bool = False) -> str:
    """
    Format exception information for display.

    Args:
        exc: The exception to format
        show_traceback: Whether to include full traceback

    Returns:
        Formatted error string
    """
    if isinstance(exc, ClassicAlgosError):
        return exc.format_error()
    elif show_traceback:
        return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    else:
        error_type = type(exc).__name__
        return f"Error ({error_type}): {str(exc)}"


def handle_cli_errors(
    debug_flag_name: str = "debug",
) -> Callable[[F], F]:
    """
    Decorator for CLI commands to handle errors gracefully.

    Args:
        debug_flag_name: Name of the debug flag in the command signature

    Returns:
        Decorator function

    Example:
        >>> @click.command()
        >>> @click.option("--debug", is_flag=True)
        >>> @handle_cli_errors()
        >>> def mst(debug):
        ...     pass
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            debug_mode = kwargs.get(debug_flag_name, False)

            try:
                return func(*args, **kwargs)

            except ClassicAlgosError as e:
                click.secho(e.format_error(), fg="red", err=True)
                if debug_mode:
                    click.secho("\nFull traceback:", fg="yellow", err=True)
                    traceback.print_exc()
                sys.exit(1)

            except KeyboardInterrupt:
                click.secho("\n\nOperation cancelled by user.", fg="yellow", err=True)
                sys.exit(130)  # Standard exit code for SIGINT

            except Exception as e:
                if debug_mode:
                    click.secho("Unexpected error occurred:", fg="red", err=True)
                    traceback.print_exc()
                else:
                    click.secho(format_exception_info(e), fg="red", err=True)
                    click.secho(
                        "\nTip: Run with --debug flag to see full traceback", fg="yellow", err=True
                    )
                sys.exit(1)

        return wrapper  # type: ignore

    return decorator


# ============================================================================
# Validation Utilities
# ============================================================================


def require_non_negative_int(value: int, name: str) -> int:
    """
    Validate that value is a non-negative integer.

    Args:
        value: Value to validate
        name: Parameter name for error messages

    Returns:
        Validated value

    Raises:
        ValidationError: If value is not an int or is negative
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name} must be an integer, got: {value!r}",
            suggestion=f"Provide a whole number for {name}.",
        )
    if value < 0:
        raise ValidationError(
            f"{name} must be non-negative, got: {value}",
            suggestion=f"Provide a value >= 0 for {name}.",
        )
    return int(value)
