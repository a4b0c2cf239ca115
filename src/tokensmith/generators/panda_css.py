"""
Panda CSS generator.

Every token is wrapped as a ``{value: ...}`` record. Font sizes and line
heights are deduplicated and sorted ascending before being keyed by value;
text styles mirror the device -> locale -> style tree.
"""

from typing import Any

from ..core.ir import OutputFormat, TypographyToken
from ..core.strings import font_family_slug, format_number
from ..core.tree import map_leaves, to_literal, walk_leaves
from .base import Generator, GeneratorResult, banner, px

FONT_WEIGHTS = {"regular": "400", "medium": "500", "bold": "700"}

_POSTCSS = """
module.exports = {
  plugins: {
    '@pandacss/dev/postcss': {},
  },
};
"""


def text_style(token: TypographyToken) -> dict[str, Any]:
    """Panda text-style record; letterSpacing only when non-zero."""
    value: dict[str, Any] = {
        "fontFamily": f"{token.font_family}, sans-serif",
        "fontSize": px(token.font_size),
        "fontWeight": token.font_weight,
        "lineHeight": px(token.line_height),
    }
    if token.letter_spacing:
        value["letterSpacing"] = px(token.letter_spacing)
    return {"value": value}


class PandaCSSGenerator(Generator):
    """panda.config.ts, example.tsx and postcss.config.cjs."""

    format = OutputFormat.PANDA_CSS

    def generate(self) -> list[GeneratorResult]:
        return [
            self._result("panda.config.ts", "typescript", self._config_file()),
            self._result("example.tsx", "typescript", self._example_file()),
            self._result(
                "postcss.config.cjs",
                "javascript",
                banner("PostCSS Configuration for Panda CSS", editable=True) + _POSTCSS,
            ),
        ]

    # -------------------------------------------------------------------------
    # Token groups
    # -------------------------------------------------------------------------

    def color_tokens(self) -> dict[str, Any]:
        return map_leaves(self.tokens.colors, lambda hex_value: {"value": hex_value})

    def font_tokens(self) -> dict[str, dict[str, str]]:
        return {
            font_family_slug(family): {"value": f"{family}, sans-serif"}
            for family in self.tokens.font_families()
        }

    def font_size_tokens(self) -> dict[str, dict[str, str]]:
        return {format_number(size): {"value": px(size)} for size in self.tokens.font_sizes()}

    def line_height_tokens(self) -> dict[str, dict[str, str]]:
        return {format_number(h): {"value": px(h)} for h in self.tokens.line_heights()}

    def text_styles(self) -> dict[str, Any]:
        styles: dict[str, Any] = {}
        for device, locale, style_name, token in self.tokens.iter_typography():
            styles.setdefault(device, {}).setdefault(locale, {})[style_name] = text_style(token)
        return styles

    # -------------------------------------------------------------------------
    # Files
    # -------------------------------------------------------------------------

    def _config_file(self) -> str:
        token_lines = [f"        colors: {to_literal(self.color_tokens(), base_indent=' ' * 8)},"]
        extend_lines: list[str] = []
        if self.tokens.has_typography:
            token_lines += [
                "",
                f"        fonts: {to_literal(self.font_tokens(), base_indent=' ' * 8)},",
                "",
                f"        fontSizes: {to_literal(self.font_size_tokens(), base_indent=' ' * 8)},",
                "",
                f"        fontWeights: {to_literal(map_leaves(FONT_WEIGHTS, lambda w: {'value': w}), base_indent=' ' * 8)},",
                "",
                f"        lineHeights: {to_literal(self.line_height_tokens(), base_indent=' ' * 8)},",
            ]
            extend_lines = [
                "",
                "      // Text styles (typography presets)",
                f"      textStyles: {to_literal(self.text_styles(), base_indent=' ' * 6)},",
            ]

        return (
            banner("Panda CSS Configuration")
            + "\n"
            + "import { defineConfig } from '@pandacss/dev';\n"
            + "\n"
            + "export default defineConfig({\n"
            + "  include: ['./src/**/*.{js,jsx,ts,tsx}'],\n"
            + "\n"
            + "  exclude: [],\n"
            + "\n"
            + "  preflight: true,\n"
            + "\n"
            + "  theme: {\n"
            + "    extend: {\n"
            + "      tokens: {\n"
            + "\n".join(token_lines)
            + "\n"
            + "      },\n"
            + "\n".join(extend_lines)
            + ("\n" if extend_lines else "")
            + "    },\n"
            + "  },\n"
            + "\n"
            + "  outdir: 'styled-system',\n"
            + "});\n"
        )

    def _example_file(self) -> str:
        color_paths = [".".join(path) for path, _ in walk_leaves(self.tokens.colors)]
        card = ["        p: '4',", "        rounded: 'lg',"]
        if color_paths:
            card = [f"        color: '{color_paths[0]}',", *card]

        heading: list[str] = []
        if self.tokens.has_typography:
            device, locale, style_name, _ = next(self.tokens.iter_typography())
            heading = [
                "      <h2",
                "        className={css({",
                f"          textStyle: '{device}.{locale}.{style_name}',",
                "          mb: '2',",
                "        })}",
                "      >",
                "        Title",
                "      </h2>",
            ]

        lines = [
            "// 1. Run codegen first",
            "// npx panda codegen",
            "",
            "// 2. Use in components",
            "import { css } from '../styled-system/css';",
            "import { container, stack } from '../styled-system/patterns';",
            "",
            "export function Card() {",
            "  return (",
            "    <div",
            "      className={css({",
            *card,
            "      })}",
            "    >",
            *heading,
            "    </div>",
            "  );",
            "}",
            "",
            "// 3. Patterns",
            "export function Layout() {",
            "  return (",
            "    <div className={container({ maxW: '1200px' })}>",
            "      <div className={stack({ gap: '4' })}>{/* content */}</div>",
            "    </div>",
            "  );",
            "}",
        ]
        return banner("Panda CSS Usage Example", editable=True) + "\n" + "\n".join(lines) + "\n"
