"""
Error types for tokensmith file loading, configuration, and generation.

Token *content* never raises: the parser skips what it cannot decode. These
errors cover the boundary (files, config) and programming errors (formats).
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class TokensmithError(Exception):
    """Base exception for all tokensmith errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class TokenFileError(TokensmithError):
    """
    Raised when an uploaded token file is rejected before parsing.

    Examples:
    - File does not have a .json extension
    - File cannot be read
    - Invalid JSON syntax
    - Top-level JSON value is not an object
    """

    pass


class ConfigError(TokensmithError):
    """
    Raised when tokensmith.toml or [tool.tokensmith] is invalid.

    Examples:
    - Malformed TOML
    - Unknown default format
    - Wrong value type for a setting
    """

    pass


class UnknownFormatError(TokensmithError, ValueError):
    """
    Raised when generation is requested for a format outside OutputFormat.

    Format identifiers always come from the closed enum, so this signals a
    programming error rather than bad user input.
    """

    pass


@dataclass
class ErrorContext:
    """
    Location information for an error inside a source file.

    Attributes:
        file: Path to the file where the error occurred
        line: Optional line number (1-indexed)
        column: Optional column number (1-indexed)
        snippet: Optional source line showing the error location
    """

    file: Path
    line: int | None = None
    column: int | None = None
    snippet: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "tokens.json:10:5"
        """
        location = str(self.file)
        if self.line is not None:
            location += f":{self.line}"
            if self.column is not None:
                location += f":{self.column}"

        if self.snippet is not None and self.line is not None:
            return f"{location}\n{self._format_snippet()}"
        return location

    def _format_snippet(self) -> str:
        """Format the offending line with its number and an error marker."""
        prefix = f"{self.line:4d} | "
        formatted = [prefix + (self.snippet or "")]
        if self.column is not None:
            formatted.append(" " * (len(prefix) + self.column - 1) + "^^^")
        return "\n".join(formatted)


def make_token_file_error(
    message: str,
    file: Path | None = None,
    line: int | None = None,
    column: int | None = None,
    snippet: str | None = None,
) -> TokenFileError:
    """
    Helper to create a TokenFileError with optional context.

    Args:
        message: Error description
        file: Optional token file path
        line: Optional line number
        column: Optional column number
        snippet: Optional offending source line

    Returns:
        TokenFileError with context if a file was given
    """
    if file is not None:
        context = ErrorContext(file=file, line=line, column=column, snippet=snippet)
        return TokenFileError(message, context)
    return TokenFileError(message)
