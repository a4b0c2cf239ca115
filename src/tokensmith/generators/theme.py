"""
Shared pieces of the CSS-in-JS theme generators (Emotion, styled-components).

Both serialize the model near-verbatim as a ``theme`` constant and differ in
how they package the per-style blocks.
"""

from ..core.ir import NormalizedTokens
from ..core.strings import font_family_compact
from ..core.tree import to_literal
from .base import first_color_path, js_path


def font_family_values(tokens: NormalizedTokens) -> dict[str, str]:
    """Compact family key -> CSS font stack."""
    return {
        font_family_compact(family): f"'{family}', sans-serif" for family in tokens.font_families()
    }


def theme_constant(tokens: NormalizedTokens) -> str:
    """``export const theme = {...} as const;`` plus the Theme type."""
    colors = to_literal(tokens.colors, base_indent="  ")
    typography = to_literal(tokens.typography_json(), base_indent="  ")
    font_family = to_literal(font_family_values(tokens), base_indent="  ")
    return (
        "export const theme = {\n"
        f"  colors: {colors},\n"
        "\n"
        f"  typography: {typography},\n"
        "\n"
        f"  fontFamily: {font_family},\n"
        "} as const;\n"
        "\n"
        "export type Theme = typeof theme;\n"
    )


def color_usage_lines(tokens: NormalizedTokens, property_name: str = "color") -> list[str]:
    """Example declaration reading the first color from the theme."""
    path = first_color_path(tokens)
    if path is None:
        return []
    return [f"  {property_name}: ${{({{ theme }}) => theme.colors{js_path(path)}}};"]


def default_font_family_expression(tokens: NormalizedTokens) -> str:
    """Expression for the body font: first family in the theme, else sans-serif."""
    families = font_family_values(tokens)
    if not families:
        return "'sans-serif'"
    first_key = next(iter(families))
    return f"theme.fontFamily{js_path([first_key])} || 'sans-serif'"
