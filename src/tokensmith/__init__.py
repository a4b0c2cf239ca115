"""
tokensmith - Figma design tokens to styling-system theme files.

Parse a Figma token export once into a NormalizedTokens model, then render it
into any of the supported output formats.
"""

from ._version import __version__
from .core.errors import ConfigError, TokenFileError, TokensmithError, UnknownFormatError
from .core.ir import NormalizedTokens, OutputFormat
from .core.parser import parse_figma_tokens
from .generators import FORMAT_INFO, GeneratorResult, generate

__all__ = [
    "FORMAT_INFO",
    "ConfigError",
    "GeneratorResult",
    "NormalizedTokens",
    "OutputFormat",
    "TokenFileError",
    "TokensmithError",
    "UnknownFormatError",
    "__version__",
    "generate",
    "parse_figma_tokens",
]
