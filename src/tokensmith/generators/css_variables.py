"""
Native CSS custom properties generator.

A single tokens.css: every color leaf becomes ``--color-<path>``, font
families and gradients become variables too, and each text style becomes a
``.typo-<device>-<locale>-<style>`` utility class.
"""

import logging

from ..core.ir import OutputFormat
from ..core.strings import to_kebab_case
from ..core.tree import walk_leaves
from .base import Generator, GeneratorResult, banner, css_declarations, gradient_css

logger = logging.getLogger(__name__)


class CSSVariablesGenerator(Generator):
    """tokens.css."""

    format = OutputFormat.CSS_VARIABLES

    def generate(self) -> list[GeneratorResult]:
        return [self._result("tokens.css", "css", self._stylesheet())]

    def color_variables(self) -> list[str]:
        return [
            f"  --color-{to_kebab_case('-'.join(path))}: {value};"
            for path, value in walk_leaves(self.tokens.colors)
        ]

    def _stylesheet(self) -> str:
        lines = [":root {", "  /* ========== COLORS ========== */"]
        lines.extend(self.color_variables())

        if self.tokens.has_typography:
            lines.append("")
            lines.append("  /* ========== FONT FAMILIES ========== */")
            for family in self.tokens.font_families():
                lines.append(f"  --font-family-{to_kebab_case(family)}: '{family}', sans-serif;")

        if self.tokens.has_gradients:
            lines.append("")
            lines.append("  /* ========== GRADIENTS ========== */")
            for category, name, token in self.tokens.iter_gradients():
                lines.append(f"  --gradient-{category}-{name}: {gradient_css(token)};")

        lines.append("}")
        css = banner("Design Token CSS Variables") + "\n" + "\n".join(lines) + "\n"

        if self.tokens.has_typography:
            css += "\n/* ========== TYPOGRAPHY CLASSES ========== */\n"
            css += self._typography_classes()

        return css

    def _typography_classes(self) -> str:
        blocks: list[str] = []
        current_device = None
        for device, locale, style_name, token in self.tokens.iter_typography():
            if device != current_device:
                blocks.append(f"\n/* {device.upper()} */\n")
                current_device = device
            body = "\n".join(css_declarations(token))
            blocks.append(f".typo-{device}-{locale}-{style_name} {{\n{body}\n}}\n\n")
        logger.debug("Emitted %d typography classes", sum(1 for _ in self.tokens.iter_typography()))
        return "".join(blocks)
