"""
Tailwind CSS generator.

Emits the raw color tree as a typed constant, the typography tree, and a
tailwind.config.ts that extends the theme with both.
"""

from ..core.ir import OutputFormat
from ..core.strings import font_family_slug
from ..core.tree import to_literal
from .base import Generator, GeneratorResult, banner


class TailwindGenerator(Generator):
    """colors.ts, typography.ts and tailwind.config.ts."""

    format = OutputFormat.TAILWIND

    def generate(self) -> list[GeneratorResult]:
        results = [self._result("colors.ts", "typescript", self._colors_file())]
        if self.tokens.has_typography:
            results.append(self._result("typography.ts", "typescript", self._typography_file()))
        results.append(self._result("tailwind.config.ts", "typescript", self._config_file()))
        return results

    def _colors_file(self) -> str:
        return (
            banner("Design Token Colors")
            + "\n"
            + f"export const colors = {to_literal(self.tokens.colors)} as const;\n"
            + "\n"
            + "export type ColorToken = typeof colors;\n"
        )

    def _typography_file(self) -> str:
        return (
            banner("Design Token Typography")
            + "\n"
            + f"export const typography = {to_literal(self.tokens.typography_json())} as const;\n"
            + "\n"
            + "export type TypographyToken = typeof typography;\n"
            + "\n"
            + "export type DeviceType = keyof typeof typography;\n"
            + "export type LocaleType<D extends DeviceType> = keyof typeof typography[D];\n"
        )

    def font_family_map(self) -> dict[str, list[str]]:
        return {
            font_family_slug(family): [family, "sans-serif"]
            for family in self.tokens.font_families()
        }

    def _config_file(self) -> str:
        font_family = to_literal(self.font_family_map(), base_indent="      ")
        return (
            banner("Tailwind CSS Configuration")
            + "\n"
            + "import type { Config } from 'tailwindcss';\n"
            + "import { colors } from './colors';\n"
            + "\n"
            + "const config: Config = {\n"
            + "  content: [\n"
            + "    './src/**/*.{js,ts,jsx,tsx,mdx}',\n"
            + "    './app/**/*.{js,ts,jsx,tsx,mdx}',\n"
            + "  ],\n"
            + "  theme: {\n"
            + "    extend: {\n"
            + "      colors,\n"
            + f"      fontFamily: {font_family},\n"
            + "    },\n"
            + "  },\n"
            + "  plugins: [],\n"
            + "};\n"
            + "\n"
            + "export default config;\n"
        )
