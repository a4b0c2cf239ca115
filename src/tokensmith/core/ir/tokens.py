"""
Normalized token IR types.

The parser produces a NormalizedTokens instance once per token file; every
generator consumes it read-only. Models are frozen so a format change always
re-derives output from the same immutable model.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# A color tree maps kebab-case keys to hex strings or nested color trees.
ColorTree = dict[str, Any]

Number = int | float


def normalize_number(value: Number) -> Number:
    """Collapse integral floats (``16.0``) to ints so output renders ``16``."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


# =============================================================================
# Enums
# =============================================================================


class OutputFormat(StrEnum):
    """Closed set of generation targets."""

    TAILWIND = "tailwind"
    CSS_VARIABLES = "css-variables"
    SCSS = "scss"
    EMOTION = "emotion"
    STYLED_COMPONENTS = "styled-components"
    VANILLA_EXTRACT = "vanilla-extract"
    PANDA_CSS = "panda-css"


# =============================================================================
# Typography
# =============================================================================


class TypographyToken(BaseModel):
    """One text style: the payload of a ``custom-fontStyle`` leaf."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    font_family: str
    font_size: Number
    font_weight: Number
    line_height: Number
    letter_spacing: Number = 0

    @field_validator("letter_spacing", mode="before")
    @classmethod
    def _default_letter_spacing(cls, value: Any) -> Any:
        # absent, null, "" and 0 all mean "no letter spacing"
        return value or 0

    @field_validator("font_size", "font_weight", "line_height", "letter_spacing")
    @classmethod
    def _normalize(cls, value: Number) -> Number:
        return normalize_number(value)

    def to_json_dict(self) -> dict[str, Any]:
        """camelCase projection used inside generated theme modules.

        ``letterSpacing`` is only present when non-zero.
        """
        data = self.model_dump(by_alias=True)
        if not self.letter_spacing:
            data.pop("letterSpacing")
        return data


# =============================================================================
# Gradients
# =============================================================================


class GradientStop(BaseModel):
    """A single color stop; position is in the 0..1 range."""

    model_config = ConfigDict(frozen=True)

    position: Number
    color: str

    @field_validator("position")
    @classmethod
    def _normalize(cls, value: Number) -> Number:
        return normalize_number(value)


class GradientToken(BaseModel):
    """A gradient definition with stops in their source order."""

    model_config = ConfigDict(frozen=True)

    type: str
    rotation: Number
    stops: tuple[GradientStop, ...] = ()

    @field_validator("rotation")
    @classmethod
    def _normalize(cls, value: Number) -> Number:
        return normalize_number(value)


# =============================================================================
# Normalized model
# =============================================================================


class NormalizedTokens(BaseModel):
    """
    The parser's output and the sole input to every generator.

    Attributes:
        colors: Nested kebab-case tree whose leaves are hex strings
        typography: device -> locale -> style name -> TypographyToken
        gradients: category -> name -> GradientToken, or None when absent

    Freezing blocks attribute assignment only. The trees are plain dicts so
    they serialize directly; treat them as read-only. Generators never modify
    them.
    """

    model_config = ConfigDict(frozen=True)

    colors: ColorTree = Field(default_factory=dict)
    typography: dict[str, dict[str, dict[str, TypographyToken]]] = Field(default_factory=dict)
    gradients: dict[str, dict[str, GradientToken]] | None = None

    @field_validator("typography", mode="before")
    @classmethod
    def _prune_empty_typography(cls, value: Any) -> Any:
        # locales without styles and devices without locales carry nothing
        if not isinstance(value, Mapping):
            return value
        pruned: dict[str, Any] = {}
        for device, locales in value.items():
            if isinstance(locales, Mapping):
                locales = {
                    locale: styles
                    for locale, styles in locales.items()
                    if not (isinstance(styles, Mapping) and not styles)
                }
                if not locales:
                    continue
            pruned[device] = locales
        return pruned

    @property
    def has_typography(self) -> bool:
        return any(True for _ in self.iter_typography())

    @property
    def has_gradients(self) -> bool:
        return any(True for _ in self.iter_gradients())

    def iter_typography(self) -> Iterator[tuple[str, str, str, TypographyToken]]:
        """Yield ``(device, locale, style_name, token)`` in model order."""
        for device, locales in self.typography.items():
            for locale, styles in locales.items():
                for style_name, token in styles.items():
                    yield device, locale, style_name, token

    def iter_gradients(self) -> Iterator[tuple[str, str, GradientToken]]:
        """Yield ``(category, name, token)`` in model order."""
        for category, gradients in (self.gradients or {}).items():
            for name, token in gradients.items():
                yield category, name, token

    def typography_json(self) -> dict[str, Any]:
        """Typography tree with camelCase style records, for JSON embedding."""
        return {
            device: {
                locale: {name: token.to_json_dict() for name, token in styles.items()}
                for locale, styles in locales.items()
            }
            for device, locales in self.typography.items()
        }

    def font_families(self) -> list[str]:
        """Distinct font families in order of first occurrence."""
        return list(dict.fromkeys(token.font_family for *_, token in self.iter_typography()))

    def font_sizes(self) -> list[Number]:
        """Distinct font sizes, ascending."""
        return sorted({token.font_size for *_, token in self.iter_typography()})

    def line_heights(self) -> list[Number]:
        """Distinct line heights, ascending."""
        return sorted({token.line_height for *_, token in self.iter_typography()})
