"""Utility modules for dfasim."""

from dfasim.utils.logging import configure_logging, get_logger
from dfasim.utils.result import (
    ConfigError,
    Err,
    ExitCode,
    Ok,
    ReadError,
    Result,
    ResultError,
)

__all__ = [
    # Logging
    "configure_logging",
    "get_logger",
    # Result
    "Ok",
    "Err",
    "Result",
    "ResultError",
    "ReadError",
    "ConfigError",
    "ExitCode",
]
