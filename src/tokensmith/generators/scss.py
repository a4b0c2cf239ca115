"""
SCSS generator.

Colors are emitted twice: as flat ``$color-*`` variables and as one nested
``$colors`` map mirroring the model tree. Each text style becomes a mixin.
"""

from ..core.ir import OutputFormat
from ..core.strings import format_number, to_kebab_case
from ..core.tree import render_nested, walk_leaves
from .base import Generator, GeneratorResult, css_declarations, gradient_css, line_banner, px

FONT_WEIGHTS = {"regular": 400, "medium": 500, "bold": 700}


class SCSSGenerator(Generator):
    """_colors.scss, _typography.scss and the _index.scss entry point."""

    format = OutputFormat.SCSS

    def generate(self) -> list[GeneratorResult]:
        results = [self._result("_colors.scss", "scss", self._colors_partial())]
        if self.tokens.has_typography:
            results.append(self._result("_typography.scss", "scss", self._typography_partial()))
        results.append(self._result("_index.scss", "scss", self._index(results)))
        return results

    # -------------------------------------------------------------------------
    # Colors
    # -------------------------------------------------------------------------

    def _colors_partial(self) -> str:
        lines = [
            f"$color-{to_kebab_case('-'.join(path))}: {value};"
            for path, value in walk_leaves(self.tokens.colors)
        ]

        if self.tokens.has_gradients:
            lines.append("")
            lines.append("// Gradients")
            for category, name, token in self.tokens.iter_gradients():
                lines.append(f"$gradient-{category}-{name}: {gradient_css(token)};")

        lines.append("")
        lines.append("// Color Map for programmatic access")
        lines.extend(self.color_map())
        return line_banner("Design Token Colors") + "\n" + "\n".join(lines) + "\n"

    def color_map(self) -> list[str]:
        """The ``$colors`` Sass map, one line per entry."""
        if not self.tokens.colors:
            return ["$colors: ();"]

        body = render_nested(
            self.tokens.colors,
            leaf=lambda key, value, last: f"'{key}': {value}{'' if last else ','}",
            open_scope=lambda key: f"'{key}': (",
            close_scope=lambda last: ")" if last else "),",
            depth=1,
        )
        return ["$colors: (", *body, ");"]

    # -------------------------------------------------------------------------
    # Typography
    # -------------------------------------------------------------------------

    def _typography_partial(self) -> str:
        lines = ["// Font Families"]
        for family in self.tokens.font_families():
            lines.append(f"$font-family-{to_kebab_case(family)}: '{family}', sans-serif;")

        lines.append("")
        lines.append("// Font Sizes")
        for size in self.tokens.font_sizes():
            lines.append(f"$font-size-{format_number(size).replace('.', '_')}: {px(size)};")

        lines.append("")
        lines.append("// Font Weights")
        for name, weight in FONT_WEIGHTS.items():
            lines.append(f"$font-weight-{name}: {weight};")

        lines.append("")
        lines.append("// Typography Mixins")
        for device, locale, style_name, token in self.tokens.iter_typography():
            lines.append(f"@mixin typo-{device}-{locale}-{style_name} {{")
            lines.extend(css_declarations(token))
            lines.append("}")
            lines.append("")

        return line_banner("Design Token Typography") + "\n" + "\n".join(lines)

    def _index(self, partials: list[GeneratorResult]) -> str:
        forwards = [f"@forward '{p.filename[1:].removesuffix('.scss')}';" for p in partials]
        return line_banner("Design Tokens") + "\n" + "\n".join(forwards) + "\n"
