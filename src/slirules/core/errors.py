"""
Unified error handling for slirules.

Every error raised while loading SLO specs or generating rules derives from
``SliRulesError`` and carries an exit code used by the CLI.

Exit Codes:
- 0: Success
- 10: Configuration error (bad query template, bad SLO definition)
- 12: Validation error (malformed spec file)
- 127: Unknown/internal error
- 130: Cancelled
"""

from __future__ import annotations

import functools
import sys
import traceback
from enum import IntEnum
from typing import Any, Callable, TypeVar

import structlog

logger = structlog.get_logger()


class ExitCode(IntEnum):
    """Standardized exit codes for CLI commands."""

    SUCCESS = 0
    CONFIG_ERROR = 10
    VALIDATION_ERROR = 12
    UNKNOWN_ERROR = 127
    CANCELLED = 130


class SliRulesError(Exception):
    """Base exception for slirules errors with exit code support."""

    exit_code: ExitCode = ExitCode.UNKNOWN_ERROR
    show_traceback: bool = False

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(SliRulesError):
    """Raised when an SLO definition cannot be turned into rules."""

    exit_code = ExitCode.CONFIG_ERROR


class ValidationError(SliRulesError):
    """Raised for validation failures."""

    exit_code = ExitCode.VALIDATION_ERROR


class TemplateError(ConfigurationError):
    """Base class for query template failures."""


class TemplateParseError(TemplateError):
    """The query text is not a syntactically valid template."""


class TemplateRenderError(TemplateError):
    """Rendering referenced a placeholder with no value."""


class SLIRuleBuildError(ConfigurationError):
    """A single-window SLI rule could not be built."""


class SLIRuleGenerationError(ConfigurationError):
    """Generating the SLI rules of an SLO failed for one of its windows."""


class GenerationCancelledError(SliRulesError):
    """Rule generation was cancelled or ran past its deadline."""

    exit_code = ExitCode.CANCELLED


class SpecLoadError(ValidationError):
    """Raised when an SLO spec file cannot be loaded."""


# Type variable for decorated functions
F = TypeVar("F", bound=Callable[..., int])


def main_with_error_handling(
    *,
    show_traceback: bool = False,
    log_errors: bool = True,
) -> Callable[[F], F]:
    """
    Decorator for CLI commands that provides unified error handling.

    Args:
        show_traceback: If True, show full traceback for unexpected errors
        log_errors: If True, log errors to structlog

    Exit codes:
        - SliRulesError subclasses: Uses the error's exit_code
        - KeyboardInterrupt: Returns 130 (standard for SIGINT)
        - Other exceptions: Returns 127 (unknown error)
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> int:
            try:
                return func(*args, **kwargs)
            except SliRulesError as e:
                if log_errors:
                    logger.error(
                        "command_error",
                        error_type=type(e).__name__,
                        message=e.message,
                        exit_code=e.exit_code,
                        **e.details,
                    )
                _print_error(format_error_message(e))
                if e.show_traceback or show_traceback:
                    traceback.print_exc(file=sys.stderr)
                return e.exit_code
            except KeyboardInterrupt:
                if log_errors:
                    logger.info("command_interrupted")
                return ExitCode.CANCELLED
            except Exception as e:
                if log_errors:
                    logger.error(
                        "unexpected_error",
                        error_type=type(e).__name__,
                        message=str(e),
                        exit_code=ExitCode.UNKNOWN_ERROR,
                    )
                if show_traceback:
                    traceback.print_exc(file=sys.stderr)
                return ExitCode.UNKNOWN_ERROR

        return wrapper  # type: ignore[return-value]

    return decorator


def format_error_message(error: SliRulesError) -> str:
    """Format an error message for display to users."""
    msg = error.message
    if error.details:
        detail_str = ", ".join(f"{k}={v}" for k, v in error.details.items())
        msg = f"{msg} ({detail_str})"
    return msg


def _print_error(message: str) -> None:
    from slirules.cli.ux import error as print_error

    print_error(message)
