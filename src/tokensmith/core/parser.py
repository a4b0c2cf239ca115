"""
Figma Design Tokens export parser.

Flattens the loosely-typed export into a NormalizedTokens model. Only the
top-level ``color``, ``font`` and ``gradient`` keys are read; anything else is
ignored so newer plugin versions keep working. Invalid leaves are dropped at
the smallest possible scope and logged at DEBUG.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .ir import ColorTree, GradientToken, NormalizedTokens, TypographyToken
from .raw import ColorLeaf, GradientLeaf, Interior, Skipped, TypographyLeaf, decode_node
from .strings import to_kebab_case
from .tree import deep_merge, set_nested

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "default"
DEFAULT_GRADIENT_CATEGORY = "default"

TypographyTree = dict[str, dict[str, dict[str, TypographyToken]]]
GradientTree = dict[str, dict[str, GradientToken]]


def parse_figma_tokens(raw: Mapping[str, Any]) -> NormalizedTokens:
    """
    Parse a Figma Design Tokens export.

    Args:
        raw: The already-decoded JSON object.

    Returns:
        NormalizedTokens. ``gradients`` is None unless the export has a
        ``gradient`` section.
    """
    colors: ColorTree = {}
    typography: TypographyTree = {}
    gradients: GradientTree | None = None

    color_section = raw.get("color")
    if isinstance(color_section, Mapping):
        colors = parse_colors(color_section)

    font_section = raw.get("font")
    if isinstance(font_section, Mapping):
        typography = parse_typography(font_section)

    gradient_section = raw.get("gradient")
    if isinstance(gradient_section, Mapping):
        gradients = parse_gradients(gradient_section)

    ignored = [key for key in raw if key not in ("color", "font", "gradient")]
    if ignored:
        logger.debug("Ignoring top-level sections: %s", ", ".join(ignored))

    tokens = NormalizedTokens(colors=colors, typography=typography, gradients=gradients)
    logger.debug(
        "Parsed tokens: %d typography styles, %d gradients",
        sum(1 for _ in tokens.iter_typography()),
        sum(1 for _ in tokens.iter_gradients()),
    )
    return tokens


def _key_path(prefix: str, key: str) -> str:
    return f"{prefix}-{key}" if prefix else key


def _split_key(joined: str) -> list[str]:
    return [segment for segment in to_kebab_case(joined).split("-") if segment]


# =============================================================================
# Colors
# =============================================================================


def parse_colors(section: Mapping[str, Any], prefix: str = "") -> ColorTree:
    """
    Parse a color sub-tree into a nested kebab-case tree.

    Each key path is hyphen-joined, kebab-cased and re-split, so
    ``primary.skyblueBase`` lands at ``primary -> skyblue -> base``. Nested
    groups are parsed recursively and deep-merged into the result.
    """
    result: ColorTree = {}

    for key, value in section.items():
        current = _key_path(prefix, key)
        node = decode_node(value)

        if isinstance(node, ColorLeaf):
            keys = _split_key(current)
            if not keys:
                logger.debug("Skipping color %r: key normalizes to nothing", current)
                continue
            set_nested(result, keys, node.value)
        elif isinstance(node, Interior):
            deep_merge(result, parse_colors(node.children, current))
        elif isinstance(node, Skipped):
            logger.debug("Skipping color node %r: %s", current, node.reason)
        else:
            logger.debug("Skipping non-color token %r in color section", current)

    return result


# =============================================================================
# Typography
# =============================================================================


def parse_typography(section: Mapping[str, Any]) -> TypographyTree:
    """
    Parse ``font`` into a uniform device -> locale -> style tree.

    A device whose children are style leaves directly (no locale level) gets
    them lifted under a ``default`` locale. Locales and devices left without
    any valid style are dropped.
    """
    result: TypographyTree = {}

    for device, device_value in section.items():
        if not isinstance(device_value, Mapping):
            logger.debug("Skipping font device %r: not an object", device)
            continue

        locales: dict[str, dict[str, TypographyToken]] = {}
        for locale, locale_value in device_value.items():
            node = decode_node(locale_value)

            if isinstance(node, TypographyLeaf):
                locales.setdefault(DEFAULT_LOCALE, {})[locale] = node.token
                continue

            if not isinstance(node, Interior):
                logger.debug("Skipping font node %s.%s", device, locale)
                continue

            styles = locales.setdefault(locale, {})
            for style_name, style_value in node.children.items():
                style = decode_node(style_value)
                if isinstance(style, TypographyLeaf):
                    styles[style_name] = style.token
                else:
                    logger.debug("Skipping font style %s.%s.%s", device, locale, style_name)

        locales = {name: styles for name, styles in locales.items() if styles}
        if locales:
            result[device] = locales

    return result


# =============================================================================
# Gradients
# =============================================================================


def parse_gradients(section: Mapping[str, Any]) -> GradientTree:
    """
    Parse ``gradient`` into category -> name -> GradientToken.

    The kebab-cased key path is split on hyphens: the last segment is the
    name and the rest is the category, or ``default`` when there is no rest.
    """
    result: GradientTree = {}

    def visit(group: Mapping[str, Any], prefix: str) -> None:
        for key, value in group.items():
            current = _key_path(prefix, key)
            node = decode_node(value)

            if isinstance(node, GradientLeaf):
                parts = _split_key(current)
                if not parts:
                    logger.debug("Skipping gradient %r: key normalizes to nothing", current)
                    continue
                category = "-".join(parts[:-1]) or DEFAULT_GRADIENT_CATEGORY
                result.setdefault(category, {})[parts[-1]] = node.token
            elif isinstance(node, Interior):
                visit(node.children, current)
            else:
                logger.debug("Skipping gradient node %r", current)

    visit(section, "")
    return result
