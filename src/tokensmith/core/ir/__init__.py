"""
Intermediate representation for parsed design tokens.
"""

from .tokens import (
    ColorTree,
    GradientStop,
    GradientToken,
    NormalizedTokens,
    Number,
    OutputFormat,
    TypographyToken,
    normalize_number,
)

__all__ = [
    "ColorTree",
    "GradientStop",
    "GradientToken",
    "NormalizedTokens",
    "Number",
    "OutputFormat",
    "TypographyToken",
    "normalize_number",
]
