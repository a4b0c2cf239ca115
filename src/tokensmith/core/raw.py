"""
Total decoder for raw design-token nodes.

A raw export is an untrusted JSON tree. Every node decodes to exactly one of
the tagged variants below; nothing here raises on token content. Unrecognized
or invalid leaves decode to ``Skipped`` so callers drop them explicitly.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .ir import GradientStop, GradientToken, Number, TypographyToken

COLOR_TYPE = "color"
TYPOGRAPHY_TYPE = "custom-fontStyle"
GRADIENT_TYPE = "custom-gradient"

_OPAQUE_HEX8 = re.compile(r"^(#?[0-9a-fA-F]{6})[fF]{2}$")


def clean_hex_color(color: str) -> str:
    """
    Strip an opaque alpha channel from an 8-digit hex color.

    ``#3366FFff`` becomes ``#3366FF``; any other value is returned unchanged.
    """
    match = _OPAQUE_HEX8.match(color)
    if match:
        return match.group(1)
    return color


# =============================================================================
# Variants
# =============================================================================


@dataclass(frozen=True)
class ColorLeaf:
    """A ``color`` leaf; value is already alpha-cleaned."""

    value: str


@dataclass(frozen=True)
class TypographyLeaf:
    """A ``custom-fontStyle`` leaf."""

    token: TypographyToken


@dataclass(frozen=True)
class GradientLeaf:
    """A ``custom-gradient`` leaf."""

    token: GradientToken


@dataclass(frozen=True)
class Interior:
    """A grouping node; children are still undecoded."""

    children: Mapping[str, Any]


@dataclass(frozen=True)
class Skipped:
    """A node that carries no usable token."""

    reason: str


RawNode = ColorLeaf | TypographyLeaf | GradientLeaf | Interior | Skipped


class _GradientPayload(BaseModel):
    """Shape of a ``custom-gradient`` value as exported by the plugin."""

    model_config = ConfigDict(populate_by_name=True)

    gradient_type: str = Field(alias="gradientType")
    rotation: Number
    stops: list[GradientStop]


# =============================================================================
# Decoding
# =============================================================================


def is_tagged(node: Any) -> bool:
    """True when ``node`` looks like a leaf: a string ``type`` plus a ``value``."""
    return isinstance(node, Mapping) and isinstance(node.get("type"), str) and "value" in node


def decode_node(node: Any) -> RawNode:
    """
    Decode one raw node into a tagged variant.

    Args:
        node: Any JSON value from the export.

    Returns:
        The decoded variant. Never raises.
    """
    if not isinstance(node, Mapping):
        return Skipped(f"expected an object, got {type(node).__name__}")

    if not is_tagged(node):
        return Interior(node)

    tag = node["type"]
    payload = node["value"]

    if tag == COLOR_TYPE:
        if not isinstance(payload, str):
            return Skipped("color value is not a string")
        return ColorLeaf(clean_hex_color(payload))

    if tag == TYPOGRAPHY_TYPE:
        if not isinstance(payload, Mapping):
            return Skipped("font style value is not an object")
        try:
            return TypographyLeaf(TypographyToken.model_validate(dict(payload)))
        except ValidationError as e:
            return Skipped(f"invalid font style: {e.error_count()} error(s)")

    if tag == GRADIENT_TYPE:
        if not isinstance(payload, Mapping):
            return Skipped("gradient value is not an object")
        try:
            parsed = _GradientPayload.model_validate(dict(payload))
        except ValidationError as e:
            return Skipped(f"invalid gradient: {e.error_count()} error(s)")
        return GradientLeaf(
            GradientToken(type=parsed.gradient_type, rotation=parsed.rotation, stops=parsed.stops)
        )

    return Skipped(f"unsupported token type {tag!r}")
