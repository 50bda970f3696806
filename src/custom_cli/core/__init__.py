"""
Core primitives for custom-cli: error taxonomy and settings.
"""

from custom_cli.core.errors import (
    CliError,
    ErrorCategory,
    FileOpenError,
    UsageError,
)

__all__ = [
    "CliError",
    "ErrorCategory",
    "FileOpenError",
    "UsageError",
]
